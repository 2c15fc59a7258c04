"""Journal log entry data model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class LogEntryType(str, Enum):
    NOTE = "note"
    ROLL = "roll"
    TRAVEL = "travel"
    DAMAGE = "damage"
    REWARD = "reward"
    ENCOUNTER = "encounter"
    MISSION_UPDATE = "mission_update"


@dataclass
class LogEntry:
    """A single journal entry.

    ``data`` holds type-specific plain values (ints, strings, lists) so the
    entry serializes verbatim.
    """

    id: str
    timestamp: datetime
    type: LogEntryType
    data: dict[str, Any] = field(default_factory=dict)
    entity_ids: list[str] = field(default_factory=list)  # Related rolls, sectors, missions
    session_id: str | None = None
    note: str | None = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Log entry id cannot be empty")
        self.type = LogEntryType(self.type)
