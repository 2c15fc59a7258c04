"""Roll history: recording, editing and evicting dice rolls.

The history is most-recent-first and capped at ROLL_HISTORY_LIMIT; when a
new roll pushes it past the cap the oldest roll is dropped from both the
history and the roll mapping.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from ..models import Campaign, DieType, LogEntryType, Roll, RollMode
from ..utils import ROLL_HISTORY_LIMIT
from .dice import DiceEngine, RollResult
from .journal import create_log_entry

logger = logging.getLogger(__name__)

# Only the note and the links of a recorded roll may change
EDITABLE_FIELDS = frozenset({"note", "session_id", "mission_id", "encounter_id"})


def add_roll(campaign: Campaign, roll: Roll, limit: int = ROLL_HISTORY_LIMIT) -> Roll:
    """Store a roll at the front of the history, evicting the oldest past the cap.

    Args:
        campaign: Campaign state
        roll: Roll to store
        limit: Maximum history length

    Returns:
        The stored roll
    """
    campaign.rolls[roll.id] = roll
    campaign.roll_history.insert(0, roll.id)

    while len(campaign.roll_history) > limit:
        evicted = campaign.roll_history.pop()
        campaign.rolls.pop(evicted, None)
        logger.debug(f"Evicted roll {evicted} from history")
    return roll


def record_roll(
    campaign: Campaign,
    result: RollResult,
    note: str | None = None,
    session_id: str | None = None,
    mission_id: str | None = None,
    encounter_id: str | None = None,
    now: datetime | None = None,
) -> Roll:
    """Turn a RollResult into a stored Roll.

    The roll joins the current session unless ``session_id`` is given. When
    the campaign has ``auto_log_rolls`` set, a ``roll`` journal entry is
    appended as well.

    Returns:
        The stored roll
    """
    now = now or datetime.now(timezone.utc)
    if session_id is None:
        session_id = campaign.current_session
    roll = Roll(
        id=uuid.uuid4().hex,
        die_type=result.die_type,
        result=result.final_result,
        mode=result.mode,
        timestamp=now,
        modifiers=list(result.modifiers),
        results=list(result.all_rolls) if result.mode is not RollMode.NORMAL else None,
        note=note,
        session_id=session_id,
        mission_id=mission_id,
        encounter_id=encounter_id,
    )
    add_roll(campaign, roll)

    if campaign.auto_log_rolls:
        create_log_entry(
            campaign,
            LogEntryType.ROLL,
            data={
                "roll_id": roll.id,
                "die_type": roll.die_type.value,
                "mode": roll.mode.value,
                "result": roll.result,
            },
            entity_ids=[roll.id],
            session_id=session_id,
            note=describe_roll(roll),
            now=now,
        )
    return roll


def roll_dice(
    campaign: Campaign,
    engine: DiceEngine,
    die_type: DieType,
    mode: RollMode = RollMode.NORMAL,
    modifiers: list[int] | None = None,
    note: str | None = None,
    session_id: str | None = None,
    mission_id: str | None = None,
    encounter_id: str | None = None,
) -> Roll:
    """Validate, roll and record in one step.

    Args:
        campaign: Campaign state
        engine: Dice engine to roll with
        die_type: Die to roll
        mode: Resolution mode
        modifiers: Integer modifiers
        note: Optional note stored on the roll
        session_id: Optional session link
        mission_id: Optional mission link
        encounter_id: Optional encounter link

    Returns:
        The stored roll

    Raises:
        ValueError: If the parameters fail validation; nothing is rolled
    """
    modifiers = [] if modifiers is None else modifiers
    check = engine.validate_roll_params(die_type, mode, modifiers)
    if not check.valid:
        logger.warning(f"Rejected roll ({die_type}, {mode}, {modifiers}): {check.error}")
        raise ValueError(check.error)

    result = engine.perform_roll(die_type, mode, modifiers)
    return record_roll(
        campaign,
        result,
        note=note,
        session_id=session_id,
        mission_id=mission_id,
        encounter_id=encounter_id,
    )


def describe_roll(roll: Roll) -> str:
    """Journal text for a roll, e.g. ``"Rolled 17 on d20 (advantage)"``."""
    text = f"Rolled {roll.result} on {roll.die_type.value}"
    if roll.mode is not RollMode.NORMAL:
        text += f" ({roll.mode.value})"
    return text


def update_roll(campaign: Campaign, roll_id: str, updates: dict[str, Any]) -> Roll | None:
    """Edit the note or links of a recorded roll.

    Returns:
        The updated roll, or None if the ID is unknown

    Raises:
        ValueError: If the patch touches anything but the note and links
    """
    unknown = set(updates) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Recorded rolls are immutable, cannot update: {sorted(unknown)}")
    roll = campaign.rolls.get(roll_id)
    if roll is None:
        return None
    for name, value in updates.items():
        setattr(roll, name, value)
    return roll


def delete_roll(campaign: Campaign, roll_id: str) -> bool:
    if campaign.rolls.pop(roll_id, None) is None:
        return False
    campaign.roll_history = [rid for rid in campaign.roll_history if rid != roll_id]
    return True


def clear_roll_history(campaign: Campaign) -> None:
    campaign.rolls.clear()
    campaign.roll_history.clear()


def recent_rolls(campaign: Campaign, limit: int | None = None) -> list[Roll]:
    """Rolls in history order, most recent first."""
    ids = campaign.roll_history if limit is None else campaign.roll_history[:limit]
    return [campaign.rolls[rid] for rid in ids]
