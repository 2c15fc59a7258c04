"""Sector mutators: movement, discovery and map editing.

Every operation mutates the Campaign in place. Operations that cannot apply
(unknown IDs, occupied coordinates, re-discovery) are silent no-ops: they
are logged at DEBUG level and report the outcome through their return value
instead of raising.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from ..models import Campaign, HexCoordinate, Sector, SectorType
from ..utils import hex_neighbors, hex_to_key, is_discoverable

logger = logging.getLogger(__name__)

# Fields update_sector may patch; id, coordinates and timestamps have
# dedicated operations.
EDITABLE_FIELDS = frozenset({"name", "type", "notes", "is_dangerous"})


def _now() -> datetime:
    return datetime.now(timezone.utc)


def sector_at(campaign: Campaign, hex: HexCoordinate) -> Sector | None:
    """Find the sector occupying a coordinate.

    Args:
        campaign: Campaign state
        hex: Coordinate to look up

    Returns:
        The sector at that coordinate, or None if the hex is empty
    """
    for sector in campaign.sectors.values():
        if sector.hex_q == hex.q and sector.hex_r == hex.r:
            return sector
    return None


def occupied_keys(campaign: Campaign) -> dict[str, str]:
    """Map ``"q,r"`` keys to the ID of the sector occupying them."""
    return {hex_to_key(s.coordinate): s.id for s in campaign.sectors.values()}


def discovered_coordinates(campaign: Campaign) -> list[HexCoordinate]:
    return [s.coordinate for s in campaign.sectors.values() if s.is_discovered]


def discoverable_sectors(campaign: Campaign) -> list[Sector]:
    """List undiscovered sectors adjacent to known space.

    Returns:
        Undiscovered sectors within one hex of any discovered sector
    """
    known = discovered_coordinates(campaign)
    return [
        s
        for s in campaign.sectors.values()
        if not s.is_discovered and is_discoverable(s.coordinate, known)
    ]


def create_sector(
    campaign: Campaign,
    hex: HexCoordinate,
    name: str,
    type: SectorType = SectorType.UNKNOWN,
    is_dangerous: bool = False,
    notes: str = "",
    discovered: bool = False,
    now: datetime | None = None,
) -> Sector | None:
    """Create a sector with a fresh ID and add it to the map.

    A coordinate holds at most one sector, so an occupied hex is a no-op.

    Returns:
        The new sector, or None if the coordinate is already occupied
    """
    if sector_at(campaign, hex) is not None:
        logger.debug(f"Coordinate {hex} already occupied, not adding {name}")
        return None
    now = now or _now()
    sector = Sector(
        id=uuid.uuid4().hex,
        hex_q=hex.q,
        hex_r=hex.r,
        name=name,
        type=type,
        is_dangerous=is_dangerous,
        notes=notes,
        created_at=now,
        updated_at=now,
        discovered_at=now if discovered else None,
    )
    campaign.sectors[sector.id] = sector
    return sector


def add_sector_at_position(
    campaign: Campaign,
    hex: HexCoordinate,
    name: str,
    type: SectorType = SectorType.UNKNOWN,
    is_dangerous: bool = False,
    notes: str = "",
    discovered: bool = False,
    now: datetime | None = None,
) -> Sector | None:
    """Add a sector at an explicit coordinate if the hex is free.

    Args:
        campaign: Campaign state
        hex: Target coordinate
        name: Sector name
        type: Sector type
        is_dangerous: Danger flag
        notes: Free-form notes
        discovered: Whether the sector starts discovered
        now: Creation timestamp

    Returns:
        The new sector, or None if the coordinate is already occupied
    """
    return create_sector(campaign, hex, name, type, is_dangerous, notes, discovered, now)


def update_sector(
    campaign: Campaign, sector_id: str, updates: dict[str, Any], now: datetime | None = None
) -> Sector | None:
    """Apply a patch of editable fields to a sector.

    Args:
        campaign: Campaign state
        sector_id: Sector to patch
        updates: Field name -> new value, limited to EDITABLE_FIELDS
        now: Update timestamp

    Returns:
        The patched sector, or None if the ID is unknown

    Raises:
        ValueError: If the patch names a field that cannot be edited, blanks
            the name or carries an unknown sector type
    """
    unknown = set(updates) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update sector fields: {sorted(unknown)}")
    updates = dict(updates)
    if "name" in updates and not updates["name"]:
        raise ValueError(f"Sector {sector_id} must have a name")
    if "type" in updates:
        updates["type"] = SectorType(updates["type"])
    sector = campaign.sectors.get(sector_id)
    if sector is None:
        return None

    for name, value in updates.items():
        setattr(sector, name, value)
    sector.updated_at = now or _now()
    return sector


def discover_sector(campaign: Campaign, sector_id: str, now: datetime | None = None) -> bool:
    """Mark a sector discovered.

    Returns:
        True if the sector was newly discovered; False if it was already
        discovered or does not exist
    """
    sector = campaign.sectors.get(sector_id)
    if sector is None:
        return False
    return sector.discover(now or _now())


def move_to(campaign: Campaign, sector_id: str, now: datetime | None = None) -> list[str]:
    """Move the crew to a sector, revealing it and its neighbors.

    Sets the current-position pointer, discovers the target sector and
    discovers every existing sector on one of its six neighboring hexes.
    Discovery never reverts and re-applying the move changes nothing.

    Args:
        campaign: Campaign state
        sector_id: Destination sector
        now: Discovery timestamp

    Returns:
        IDs of sectors newly discovered by this move (target first)
    """
    sector = campaign.sectors.get(sector_id)
    if sector is None:
        logger.debug(f"Move ignored, unknown sector {sector_id}")
        return []

    now = now or _now()
    campaign.current_sector = sector_id
    newly_discovered = []
    if sector.discover(now):
        newly_discovered.append(sector.id)

    occupants = occupied_keys(campaign)
    for neighbor in hex_neighbors(sector.coordinate):
        neighbor_id = occupants.get(hex_to_key(neighbor))
        if neighbor_id is not None and campaign.sectors[neighbor_id].discover(now):
            newly_discovered.append(neighbor_id)

    logger.info(f"Moved to {sector.name} {sector.coordinate}, discovered {len(newly_discovered)} sectors")
    return newly_discovered


def delete_sector(campaign: Campaign, sector_id: str) -> bool:
    """Remove a sector from the map.

    Clears the current-position pointer if the deleted sector was current.
    Protecting the home sector is left to the caller.

    Returns:
        True if a sector was removed
    """
    if campaign.sectors.pop(sector_id, None) is None:
        return False
    if campaign.current_sector == sector_id:
        campaign.current_sector = None
    return True


def swap_sector_positions(
    campaign: Campaign, first_id: str, second_id: str, now: datetime | None = None
) -> bool:
    """Exchange the coordinates of two sectors.

    Identity, discovery state and links stay with each sector.

    Returns:
        True if both sectors exist and were swapped
    """
    first = campaign.sectors.get(first_id)
    second = campaign.sectors.get(second_id)
    if first is None or second is None:
        logger.debug(f"Swap ignored, unknown sector in ({first_id}, {second_id})")
        return False

    first.hex_q, second.hex_q = second.hex_q, first.hex_q
    first.hex_r, second.hex_r = second.hex_r, first.hex_r
    now = now or _now()
    first.updated_at = now
    second.updated_at = now
    return True


def link_encounter(campaign: Campaign, sector_id: str, encounter_id: str, now: datetime | None = None) -> bool:
    """Attach an encounter ID to a sector (once).

    Returns:
        True if the link was added
    """
    sector = campaign.sectors.get(sector_id)
    if sector is None or encounter_id in sector.linked_encounter_ids:
        return False
    sector.linked_encounter_ids.append(encounter_id)
    sector.updated_at = now or _now()
    return True


def link_mission(campaign: Campaign, sector_id: str, mission_id: str, now: datetime | None = None) -> bool:
    """Attach a mission ID to a sector (once).

    Returns:
        True if the link was added
    """
    sector = campaign.sectors.get(sector_id)
    if sector is None or mission_id in sector.linked_mission_ids:
        return False
    sector.linked_mission_ids.append(mission_id)
    sector.updated_at = now or _now()
    return True
