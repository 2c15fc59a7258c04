"""Dice roll data model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class DieType(str, Enum):
    """Supported dice."""

    D20 = "d20"
    D6 = "d6"

    @property
    def sides(self) -> int:
        return 20 if self is DieType.D20 else 6


class RollMode(str, Enum):
    """How many dice are rolled and which one counts."""

    NORMAL = "normal"
    ADVANTAGE = "advantage"  # roll twice, keep the higher
    DISADVANTAGE = "disadvantage"  # roll twice, keep the lower


@dataclass
class Roll:
    """A recorded dice roll.

    Rolls are immutable once created except for the note and the
    session/mission/encounter links.
    """

    id: str
    die_type: DieType
    result: int  # Final total with modifiers applied
    mode: RollMode
    timestamp: datetime
    modifiers: list[int] = field(default_factory=list)
    results: list[int] | None = None  # Both dice, advantage/disadvantage only
    note: str | None = None
    session_id: str | None = None
    mission_id: str | None = None
    encounter_id: str | None = None

    def __post_init__(self):
        """Validate roll data after initialization."""
        if not self.id:
            raise ValueError("Roll id cannot be empty")
        self.die_type = DieType(self.die_type)
        self.mode = RollMode(self.mode)
        if self.mode is RollMode.NORMAL and self.results is not None:
            raise ValueError("Normal rolls do not carry a dual-roll result list")
        if self.mode is not RollMode.NORMAL and (self.results is None or len(self.results) != 2):
            raise ValueError(f"{self.mode.value} rolls must record exactly two dice")

    @property
    def base_result(self) -> int:
        """Die result before modifiers."""
        return self.result - sum(self.modifiers)
