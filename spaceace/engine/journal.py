"""Session journal: creating and editing log entries."""

import uuid
from datetime import datetime, timezone
from typing import Any

from ..models import Campaign, LogEntry, LogEntryType
from .sessions import add_log_entry_to_session

# Fields update_log_entry may patch
EDITABLE_FIELDS = frozenset({"note", "data", "entity_ids", "session_id", "type"})


def create_log_entry(
    campaign: Campaign,
    type: LogEntryType,
    data: dict[str, Any] | None = None,
    entity_ids: list[str] | None = None,
    session_id: str | None = None,
    note: str | None = None,
    now: datetime | None = None,
) -> LogEntry:
    """Append a journal entry with a fresh ID.

    Args:
        campaign: Campaign state
        type: Kind of event
        data: Plain, JSON-compatible details for the event
        entity_ids: IDs of related rolls, sectors, missions...
        session_id: Play session the entry belongs to; defaults to the
            current session, and a known session collects the entry
        note: Free-form text
        now: Entry timestamp

    Returns:
        The new entry
    """
    now = now or datetime.now(timezone.utc)
    if session_id is None:
        session_id = campaign.current_session
    entry = LogEntry(
        id=uuid.uuid4().hex,
        timestamp=now,
        type=type,
        data=dict(data or {}),
        entity_ids=list(entity_ids or []),
        session_id=session_id,
        note=note,
    )
    campaign.log_entries[entry.id] = entry
    if session_id is not None:
        add_log_entry_to_session(campaign, session_id, entry.id, now)
    return entry


def log_quick_event(
    campaign: Campaign,
    type: LogEntryType,
    note: str | None = None,
    session_id: str | None = None,
    **data: Any,
) -> LogEntry:
    """Shorthand for logging common events; keyword arguments become ``data``."""
    return create_log_entry(campaign, type, data=data, session_id=session_id, note=note)


def update_log_entry(campaign: Campaign, entry_id: str, updates: dict[str, Any]) -> LogEntry | None:
    """Patch an existing entry.

    Returns:
        The patched entry, or None if the ID is unknown

    Raises:
        ValueError: If the patch names a field that cannot be edited
    """
    unknown = set(updates) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update log entry fields: {sorted(unknown)}")
    entry = campaign.log_entries.get(entry_id)
    if entry is None:
        return None

    previous_session = entry.session_id
    for name, value in updates.items():
        if name == "type":
            value = LogEntryType(value)
        setattr(entry, name, value)

    # Moving an entry moves it between the sessions' entry lists
    if entry.session_id != previous_session:
        _detach_from_session(campaign, previous_session, entry.id)
        if entry.session_id is not None:
            add_log_entry_to_session(campaign, entry.session_id, entry.id)
    return entry


def delete_log_entry(campaign: Campaign, entry_id: str) -> bool:
    entry = campaign.log_entries.pop(entry_id, None)
    if entry is None:
        return False
    _detach_from_session(campaign, entry.session_id, entry_id)
    return True


def _detach_from_session(campaign: Campaign, session_id: str | None, entry_id: str) -> None:
    session = campaign.sessions.get(session_id) if session_id is not None else None
    if session is not None and entry_id in session.entry_ids:
        session.entry_ids.remove(entry_id)


def entries_for_session(campaign: Campaign, session_id: str) -> list[LogEntry]:
    """Entries of one session, oldest first."""
    entries = [e for e in campaign.log_entries.values() if e.session_id == session_id]
    return sorted(entries, key=lambda e: e.timestamp)
