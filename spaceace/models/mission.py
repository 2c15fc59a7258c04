"""Mission and objective data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ObjectiveStatus(str, Enum):
    """Progress of a mission or one of its objectives."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


@dataclass
class Objective:
    id: str
    text: str
    status: ObjectiveStatus = ObjectiveStatus.NOT_STARTED

    def __post_init__(self):
        if not self.id:
            raise ValueError("Objective id cannot be empty")
        self.status = ObjectiveStatus(self.status)


@dataclass
class Mission:
    """A job the crew has taken on.

    Sectors reference missions through ``Sector.linked_mission_ids``; the
    mission keeps the reverse list in ``related_sector_ids``.
    """

    id: str
    title: str
    created_at: datetime
    updated_at: datetime
    description: str = ""
    objectives: list[Objective] = field(default_factory=list)
    rewards: str = ""
    fame_delta: int = 0  # Fame gained (or lost) on completion
    sway_delta: int = 0  # Sway gained (or lost) on completion
    related_sector_ids: list[str] = field(default_factory=list)
    npc_ids: list[str] = field(default_factory=list)
    status: ObjectiveStatus = ObjectiveStatus.NOT_STARTED

    def __post_init__(self):
        """Validate mission data after initialization."""
        if not self.id:
            raise ValueError("Mission id cannot be empty")
        if not self.title:
            raise ValueError(f"Mission {self.id} must have a title")
        self.status = ObjectiveStatus(self.status)

    def objective(self, objective_id: str) -> Objective | None:
        """Find an objective by ID."""
        for objective in self.objectives:
            if objective.id == objective_id:
                return objective
        return None
