"""Sector data model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .hex import HexCoordinate


class SectorType(str, Enum):
    """Broad classification of a sector."""

    UNKNOWN = "unknown"
    CIVILIZED = "civilized"
    FRONTIER = "frontier"
    DANGEROUS = "dangerous"
    ANOMALY = "anomaly"


@dataclass
class Sector:
    """One hex cell of the galaxy map, the unit of exploration.

    A sector with ``discovered_at`` set to None exists on the map and blocks
    its coordinate, but must be presented to the player as unknown space.
    ``is_dangerous`` is tracked independently of ``type``.
    """

    id: str  # Unique identifier (e.g., "home-sector", "sector-vega")
    hex_q: int  # Axial q coordinate
    hex_r: int  # Axial r coordinate
    name: str
    type: SectorType
    created_at: datetime
    updated_at: datetime
    discovered_at: datetime | None = None  # None = unexplored
    is_dangerous: bool = False
    notes: str = ""
    linked_encounter_ids: list[str] = field(default_factory=list)
    linked_mission_ids: list[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate sector data after initialization."""
        if not self.id:
            raise ValueError("Sector id cannot be empty")
        if not self.name:
            raise ValueError(f"Sector {self.id} must have a name")
        # Accept raw strings from persisted state
        self.type = SectorType(self.type)

    @property
    def coordinate(self) -> HexCoordinate:
        """Axial position of the sector."""
        return HexCoordinate(self.hex_q, self.hex_r)

    @property
    def is_discovered(self) -> bool:
        return self.discovered_at is not None

    def discover(self, when: datetime) -> bool:
        """Mark the sector discovered.

        Discovery happens at most once; later calls leave the original
        timestamp untouched.

        Args:
            when: Discovery timestamp

        Returns:
            True if the sector was newly discovered, False if it already was
        """
        if self.discovered_at is not None:
            return False
        self.discovered_at = when
        self.updated_at = when
        return True
