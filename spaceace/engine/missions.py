"""Missions and their objectives."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from ..models import Campaign, Mission, Objective, ObjectiveStatus
from .sectors import link_mission

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset(
    {"title", "description", "rewards", "fame_delta", "sway_delta", "npc_ids", "status"}
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_mission(
    campaign: Campaign,
    title: str,
    description: str = "",
    objectives: list[str] | None = None,
    rewards: str = "",
    fame_delta: int = 0,
    sway_delta: int = 0,
    related_sector_ids: list[str] | None = None,
    npc_ids: list[str] | None = None,
    now: datetime | None = None,
) -> Mission:
    """Create a mission and link it to its sectors.

    Args:
        campaign: Campaign state
        title: Mission title
        description: Briefing text
        objectives: Objective texts, each starting as not started
        rewards: Free-form reward description
        fame_delta: Fame change on completion
        sway_delta: Sway change on completion
        related_sector_ids: Sectors the mission takes place in; each known
            sector gets the mission in its ``linked_mission_ids``
        npc_ids: Related NPCs
        now: Creation timestamp

    Returns:
        The new mission
    """
    now = now or _now()
    mission = Mission(
        id=uuid.uuid4().hex,
        title=title,
        description=description,
        objectives=[Objective(id=uuid.uuid4().hex, text=text) for text in objectives or []],
        rewards=rewards,
        fame_delta=fame_delta,
        sway_delta=sway_delta,
        related_sector_ids=list(related_sector_ids or []),
        npc_ids=list(npc_ids or []),
        created_at=now,
        updated_at=now,
    )
    campaign.missions[mission.id] = mission

    for sector_id in mission.related_sector_ids:
        if not link_mission(campaign, sector_id, mission.id, now):
            logger.debug(f"Mission {mission.title}: sector {sector_id} not linked")
    return mission


def update_mission(
    campaign: Campaign, mission_id: str, updates: dict[str, Any], now: datetime | None = None
) -> Mission | None:
    """Patch editable mission fields.

    Returns:
        The patched mission, or None if the ID is unknown

    Raises:
        ValueError: If the patch names a field that cannot be edited, blanks
            the title or carries an unknown status
    """
    unknown = set(updates) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update mission fields: {sorted(unknown)}")
    updates = dict(updates)
    if "title" in updates and not updates["title"]:
        raise ValueError(f"Mission {mission_id} must have a title")
    if "status" in updates:
        updates["status"] = ObjectiveStatus(updates["status"])
    mission = campaign.missions.get(mission_id)
    if mission is None:
        return None

    for name, value in updates.items():
        setattr(mission, name, value)
    mission.updated_at = now or _now()
    return mission


def update_objective(
    campaign: Campaign,
    mission_id: str,
    objective_id: str,
    status: ObjectiveStatus,
    now: datetime | None = None,
) -> bool:
    """Set the status of one objective.

    Returns:
        True if the objective was found and updated

    Raises:
        ValueError: If the status is unknown
    """
    status = ObjectiveStatus(status)
    mission = campaign.missions.get(mission_id)
    objective = mission.objective(objective_id) if mission is not None else None
    if objective is None:
        return False
    objective.status = status
    mission.updated_at = now or _now()
    return True


def delete_mission(campaign: Campaign, mission_id: str) -> bool:
    """Remove a mission and unlink it from every sector."""
    if campaign.missions.pop(mission_id, None) is None:
        return False
    for sector in campaign.sectors.values():
        if mission_id in sector.linked_mission_ids:
            sector.linked_mission_ids.remove(mission_id)
    return True
