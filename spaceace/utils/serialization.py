"""Campaign state serialization to/from JSON.

The persisted shape is plain structured data: sector, roll, session and
mission mappings keyed by ID, the current-sector and current-session
pointers, the most-recent-first roll ID list and the journal. Timestamps are
ISO-8601 strings and enums are stored by value.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from ..models.campaign import Campaign
from ..models.log_entry import LogEntry
from ..models.mission import Mission, Objective
from ..models.roll import Roll
from ..models.sector import Sector
from ..models.session import Session
from .rng import GameRNG

FORMAT_VERSION = "1.0.0"


def save_campaign(campaign: Campaign, filepath: str) -> Path:
    """Save campaign state to a JSON file.

    Args:
        campaign: Campaign state to save
        filepath: Path to save file (will be created in /state directory if relative)

    Returns:
        Path the file was written to

    Example:
        save_campaign(campaign, "my_campaign.json")  # Saves to state/my_campaign.json
    """
    path = _resolve_path(filepath, create_dir=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(campaign_to_dict(campaign), f, indent=2)
    return path


def load_campaign(filepath: str) -> Campaign:
    """Load campaign state from a JSON file.

    Args:
        filepath: Path to saved campaign file

    Returns:
        Loaded Campaign object

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is invalid or malformed
    """
    path = _resolve_path(filepath)
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid campaign file {path}: {exc}") from exc

    try:
        return campaign_from_dict(data)
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed campaign file {path}: {exc!r}") from exc


def _resolve_path(filepath: str, create_dir: bool = False) -> Path:
    path = Path(filepath)
    if path.is_absolute():
        return path
    state_dir = Path.cwd() / "state"
    if create_dir:
        state_dir.mkdir(exist_ok=True)
    return state_dir / filepath


def campaign_to_dict(campaign: Campaign) -> dict[str, Any]:
    """Convert Campaign to a JSON-compatible dictionary.

    Args:
        campaign: Campaign to serialize

    Returns:
        Dictionary representation of campaign state
    """
    return {
        "version": FORMAT_VERSION,
        "seed": campaign.seed,
        "sectors": {sid: _serialize_sector(s) for sid, s in campaign.sectors.items()},
        "current_sector": campaign.current_sector,
        "rolls": {rid: _serialize_roll(r) for rid, r in campaign.rolls.items()},
        "roll_history": list(campaign.roll_history),
        "log_entries": {eid: _serialize_log_entry(e) for eid, e in campaign.log_entries.items()},
        "sessions": {sid: _serialize_session(s) for sid, s in campaign.sessions.items()},
        "current_session": campaign.current_session,
        "missions": {mid: _serialize_mission(m) for mid, m in campaign.missions.items()},
        "auto_log_rolls": campaign.auto_log_rolls,
        "rng_state": campaign.rng.get_state(),  # Keep generation deterministic across saves
    }


def campaign_from_dict(data: dict[str, Any]) -> Campaign:
    """Reconstruct Campaign from dictionary.

    Args:
        data: Dictionary representation of campaign state

    Returns:
        Reconstructed Campaign object
    """
    rng = GameRNG(data["seed"])
    if "rng_state" in data:
        # JSON turns the RNG state tuples into lists
        state = data["rng_state"]
        if isinstance(state, list):
            state = (state[0], tuple(state[1]), state[2])
        rng.set_state(state)

    return Campaign(
        seed=data["seed"],
        sectors={sid: _deserialize_sector(s) for sid, s in data.get("sectors", {}).items()},
        current_sector=data.get("current_sector"),
        rolls={rid: _deserialize_roll(r) for rid, r in data.get("rolls", {}).items()},
        roll_history=list(data.get("roll_history", [])),
        log_entries={eid: _deserialize_log_entry(e) for eid, e in data.get("log_entries", {}).items()},
        sessions={sid: _deserialize_session(s) for sid, s in data.get("sessions", {}).items()},
        current_session=data.get("current_session"),
        missions={mid: _deserialize_mission(m) for mid, m in data.get("missions", {}).items()},
        auto_log_rolls=data.get("auto_log_rolls", True),
        rng=rng,
    )


def _dump_time(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _load_time(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value is not None else None


def _serialize_sector(sector: Sector) -> dict[str, Any]:
    """Convert Sector to dictionary."""
    return {
        "id": sector.id,
        "hex_q": sector.hex_q,
        "hex_r": sector.hex_r,
        "name": sector.name,
        "type": sector.type.value,
        "discovered_at": _dump_time(sector.discovered_at),
        "is_dangerous": sector.is_dangerous,
        "notes": sector.notes,
        "linked_encounter_ids": list(sector.linked_encounter_ids),
        "linked_mission_ids": list(sector.linked_mission_ids),
        "created_at": _dump_time(sector.created_at),
        "updated_at": _dump_time(sector.updated_at),
    }


def _deserialize_sector(data: dict[str, Any]) -> Sector:
    """Reconstruct Sector from dictionary."""
    return Sector(
        id=data["id"],
        hex_q=data["hex_q"],
        hex_r=data["hex_r"],
        name=data["name"],
        type=data["type"],
        discovered_at=_load_time(data.get("discovered_at")),
        is_dangerous=data.get("is_dangerous", False),
        notes=data.get("notes", ""),
        linked_encounter_ids=list(data.get("linked_encounter_ids", [])),
        linked_mission_ids=list(data.get("linked_mission_ids", [])),
        created_at=_load_time(data["created_at"]),
        updated_at=_load_time(data["updated_at"]),
    )


def _serialize_roll(roll: Roll) -> dict[str, Any]:
    """Convert Roll to dictionary."""
    return {
        "id": roll.id,
        "die_type": roll.die_type.value,
        "result": roll.result,
        "results": list(roll.results) if roll.results is not None else None,
        "modifiers": list(roll.modifiers),
        "mode": roll.mode.value,
        "note": roll.note,
        "timestamp": _dump_time(roll.timestamp),
        "session_id": roll.session_id,
        "mission_id": roll.mission_id,
        "encounter_id": roll.encounter_id,
    }


def _deserialize_roll(data: dict[str, Any]) -> Roll:
    """Reconstruct Roll from dictionary."""
    return Roll(
        id=data["id"],
        die_type=data["die_type"],
        result=data["result"],
        results=data.get("results"),
        modifiers=list(data.get("modifiers", [])),
        mode=data["mode"],
        note=data.get("note"),
        timestamp=_load_time(data["timestamp"]),
        session_id=data.get("session_id"),
        mission_id=data.get("mission_id"),
        encounter_id=data.get("encounter_id"),
    )


def _serialize_log_entry(entry: LogEntry) -> dict[str, Any]:
    """Convert LogEntry to dictionary."""
    return {
        "id": entry.id,
        "timestamp": _dump_time(entry.timestamp),
        "type": entry.type.value,
        "data": entry.data,
        "entity_ids": list(entry.entity_ids),
        "session_id": entry.session_id,
        "note": entry.note,
    }


def _deserialize_log_entry(data: dict[str, Any]) -> LogEntry:
    """Reconstruct LogEntry from dictionary."""
    return LogEntry(
        id=data["id"],
        timestamp=_load_time(data["timestamp"]),
        type=data["type"],
        data=dict(data.get("data", {})),
        entity_ids=list(data.get("entity_ids", [])),
        session_id=data.get("session_id"),
        note=data.get("note"),
    )


def _serialize_session(session: Session) -> dict[str, Any]:
    """Convert Session to dictionary."""
    return {
        "id": session.id,
        "summary": session.summary,
        "started_at": _dump_time(session.started_at),
        "ended_at": _dump_time(session.ended_at),
        "entry_ids": list(session.entry_ids),
        "is_active": session.is_active,
        "created_at": _dump_time(session.created_at),
        "updated_at": _dump_time(session.updated_at),
    }


def _deserialize_session(data: dict[str, Any]) -> Session:
    """Reconstruct Session from dictionary."""
    return Session(
        id=data["id"],
        summary=data["summary"],
        started_at=_load_time(data["started_at"]),
        ended_at=_load_time(data.get("ended_at")),
        entry_ids=list(data.get("entry_ids", [])),
        is_active=data.get("is_active", False),
        created_at=_load_time(data["created_at"]),
        updated_at=_load_time(data["updated_at"]),
    )


def _serialize_mission(mission: Mission) -> dict[str, Any]:
    """Convert Mission to dictionary."""
    return {
        "id": mission.id,
        "title": mission.title,
        "description": mission.description,
        "objectives": [
            {"id": o.id, "text": o.text, "status": o.status.value} for o in mission.objectives
        ],
        "rewards": mission.rewards,
        "fame_delta": mission.fame_delta,
        "sway_delta": mission.sway_delta,
        "related_sector_ids": list(mission.related_sector_ids),
        "npc_ids": list(mission.npc_ids),
        "status": mission.status.value,
        "created_at": _dump_time(mission.created_at),
        "updated_at": _dump_time(mission.updated_at),
    }


def _deserialize_mission(data: dict[str, Any]) -> Mission:
    """Reconstruct Mission from dictionary."""
    return Mission(
        id=data["id"],
        title=data["title"],
        description=data.get("description", ""),
        objectives=[
            Objective(id=o["id"], text=o["text"], status=o["status"]) for o in data.get("objectives", [])
        ],
        rewards=data.get("rewards", ""),
        fame_delta=data.get("fame_delta", 0),
        sway_delta=data.get("sway_delta", 0),
        related_sector_ids=list(data.get("related_sector_ids", [])),
        npc_ids=list(data.get("npc_ids", [])),
        status=data.get("status", "not_started"),
        created_at=_load_time(data["created_at"]),
        updated_at=_load_time(data["updated_at"]),
    )
