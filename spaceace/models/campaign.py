"""Campaign state container."""

from dataclasses import dataclass, field

from ..utils.rng import GameRNG
from .log_entry import LogEntry
from .mission import Mission
from .roll import Roll
from .sector import Sector
from .session import Session


@dataclass
class Campaign:
    """Client-side state for one campaign.

    Holds the galaxy map, the roll history, the journal, play sessions and
    missions. All engine operations mutate a single Campaign in place; the
    surrounding application is the only writer. The RNG drives procedural
    generation only, dice use their own source (see ``DiceEngine``).
    """

    seed: int  # RNG seed for galaxy generation
    sectors: dict[str, Sector] = field(default_factory=dict)  # Sector ID -> Sector
    current_sector: str | None = None  # Sector the crew is in
    rolls: dict[str, Roll] = field(default_factory=dict)  # Roll ID -> Roll
    roll_history: list[str] = field(
        default_factory=list
    )  # Roll IDs, most recent first, capped at ROLL_HISTORY_LIMIT
    log_entries: dict[str, LogEntry] = field(default_factory=dict)  # Entry ID -> LogEntry
    sessions: dict[str, Session] = field(default_factory=dict)  # Session ID -> Session
    current_session: str | None = None  # Active session, if any
    missions: dict[str, Mission] = field(default_factory=dict)  # Mission ID -> Mission
    auto_log_rolls: bool = True  # Append a journal entry for every roll
    rng: GameRNG | None = None  # Seeded RNG instance

    def __post_init__(self):
        """Initialize RNG if not provided."""
        if self.rng is None:
            self.rng = GameRNG(self.seed)
        if self.current_sector is not None and self.current_sector not in self.sectors:
            raise ValueError(f"Invalid current_sector: {self.current_sector} (no such sector)")
        if self.current_session is not None and self.current_session not in self.sessions:
            raise ValueError(f"Invalid current_session: {self.current_session} (no such session)")
        missing = [roll_id for roll_id in self.roll_history if roll_id not in self.rolls]
        if missing:
            raise ValueError(f"Roll history references unknown rolls: {missing}")
