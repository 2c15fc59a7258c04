"""Play session data model."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Session:
    """One sitting at the table.

    At most one session is active at a time; the campaign's
    ``current_session`` points at it. Ending a session stamps ``ended_at``.
    """

    id: str
    summary: str
    started_at: datetime
    created_at: datetime
    updated_at: datetime
    ended_at: datetime | None = None  # None while the session is running
    entry_ids: list[str] = field(default_factory=list)  # Journal entries logged during the session
    is_active: bool = True

    def __post_init__(self):
        """Validate session data after initialization."""
        if not self.id:
            raise ValueError("Session id cannot be empty")
        if self.ended_at is not None and self.ended_at < self.started_at:
            raise ValueError(f"Session {self.id} ends before it starts")
