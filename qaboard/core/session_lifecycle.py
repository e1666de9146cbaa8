"""
Session lifecycle rules.

A session is created active and moves to ended exactly once. Ended sessions
reject new questions and question status changes. Question deletion is not
gated by session state.

The rules operate on any object exposing ``session_code``, ``is_active``,
``start_time`` and ``end_time`` (the ORM model in practice).

Dependencies: datetime
System role: Session state machine
"""

import enum
from datetime import datetime, timezone
from typing import Any

from qaboard.core.exceptions import (
    SessionAlreadyActiveError,
    SessionAlreadyEndedError,
    SessionInactiveError,
)


class SessionState(str, enum.Enum):
    """Lifecycle states of a session."""

    ACTIVE = "active"
    ENDED = "ended"


def session_state(session: Any) -> SessionState:
    """Return the lifecycle state of a session record."""
    return SessionState.ACTIVE if session.is_active else SessionState.ENDED


def ensure_no_active_session(active_session: Any | None) -> None:
    """
    Guard session creation against a course's running session.

    Args:
        active_session: The course's active session, or None

    Raises:
        SessionAlreadyActiveError: Carrying the running session's identifier
        and start time
    """
    if active_session is not None:
        raise SessionAlreadyActiveError(
            active_session.session_code,
            active_session.start_time,
        )


def ensure_accepts_questions(session: Any) -> None:
    """Raise SessionInactiveError unless the session is active."""
    if not session.is_active:
        raise SessionInactiveError(session.session_code)


def ensure_allows_status_updates(session: Any) -> None:
    """Raise SessionInactiveError unless the session is active."""
    if not session.is_active:
        raise SessionInactiveError(
            session.session_code,
            "Cannot update question status - session is not active",
        )


def end_session(session: Any, now: datetime | None = None) -> None:
    """
    Move a session from active to ended.

    Args:
        session: Session record, mutated in place
        now: End time (defaults to current UTC time)

    Raises:
        SessionAlreadyEndedError: If the session has already ended
    """
    if not session.is_active:
        raise SessionAlreadyEndedError(session.session_code)
    session.is_active = False
    session.end_time = now or datetime.now(timezone.utc)


def session_duration_seconds(
    start_time: datetime,
    end_time: datetime | None,
    now: datetime | None = None,
) -> float:
    """
    Seconds between start and end, or start and now for a running session.

    Naive datetimes are treated as UTC.
    """
    start = _as_utc(start_time)
    end = _as_utc(end_time) if end_time else (now or datetime.now(timezone.utc))
    return max((end - start).total_seconds(), 0.0)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
