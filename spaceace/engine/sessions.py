"""Play sessions: starting, ending and collecting journal entries.

Only one session runs at a time. Starting a new one ends the running
session first, so ``campaign.current_session`` always names the single
active session (or None between sessions).
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from ..models import Campaign, Session

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"summary", "started_at", "ended_at"})


def _now() -> datetime:
    return datetime.now(timezone.utc)


def current_session(campaign: Campaign) -> Session | None:
    if campaign.current_session is None:
        return None
    return campaign.sessions.get(campaign.current_session)


def start_session(campaign: Campaign, summary: str | None = None, now: datetime | None = None) -> Session:
    """Open a new session and make it current.

    Args:
        campaign: Campaign state
        summary: Session title; defaults to "Session N"
        now: Start timestamp

    Returns:
        The new, active session
    """
    now = now or _now()
    end_current_session(campaign, now)

    session = Session(
        id=uuid.uuid4().hex,
        summary=summary or f"Session {len(campaign.sessions) + 1}",
        started_at=now,
        created_at=now,
        updated_at=now,
    )
    campaign.sessions[session.id] = session
    campaign.current_session = session.id
    logger.info(f"Started {session.summary}")
    return session


def end_current_session(campaign: Campaign, now: datetime | None = None) -> Session | None:
    """Close the running session.

    Returns:
        The session that was ended, or None if no session was running
    """
    session = current_session(campaign)
    campaign.current_session = None
    if session is None:
        return None

    now = now or _now()
    session.is_active = False
    session.ended_at = now
    session.updated_at = now
    logger.info(f"Ended {session.summary}")
    return session


def update_session(
    campaign: Campaign, session_id: str, updates: dict[str, Any], now: datetime | None = None
) -> Session | None:
    """Patch a session's summary or date range.

    Returns:
        The patched session, or None if the ID is unknown

    Raises:
        ValueError: If the patch names a field that cannot be edited
    """
    unknown = set(updates) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update session fields: {sorted(unknown)}")
    session = campaign.sessions.get(session_id)
    if session is None:
        return None

    started_at = updates.get("started_at", session.started_at)
    ended_at = updates.get("ended_at", session.ended_at)
    if ended_at is not None and ended_at < started_at:
        raise ValueError(f"Session {session_id} ends before it starts")

    for name, value in updates.items():
        setattr(session, name, value)
    session.updated_at = now or _now()
    return session


def add_log_entry_to_session(
    campaign: Campaign, session_id: str, entry_id: str, now: datetime | None = None
) -> bool:
    """Attach a journal entry to a session (once).

    Returns:
        True if the entry was added
    """
    session = campaign.sessions.get(session_id)
    if session is None or entry_id in session.entry_ids:
        return False
    session.entry_ids.append(entry_id)
    session.updated_at = now or _now()
    return True


def delete_session(campaign: Campaign, session_id: str) -> bool:
    """Remove a session; clears the pointer if it was current.

    Journal entries and rolls keep their ``session_id``.
    """
    if campaign.sessions.pop(session_id, None) is None:
        return False
    if campaign.current_session == session_id:
        campaign.current_session = None
    return True
