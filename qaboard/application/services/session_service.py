"""
Session service orchestrator.

Coordinates session lifecycle operations: opening a session for a course,
ending it, and listing a course's sessions.

Dependencies: qaboard.boundary.db.CRUD, qaboard.core, qaboard.configs
System role: Session use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from qaboard.boundary.db.CRUD.course_crud import course_crud
from qaboard.boundary.db.CRUD.session_crud import session_crud
from qaboard.boundary.db.models.session_model import SessionModel
from qaboard.configs import get_settings
from qaboard.core.exceptions import (
    ActiveSessionNotFoundError,
    CourseNotFoundError,
    SessionCodeUnavailableError,
    SessionNotFoundError,
)
from qaboard.core.pagination import page_offset
from qaboard.core.session_codes import generate_session_code
from qaboard.core.session_lifecycle import end_session, ensure_no_active_session

logger = logging.getLogger(__name__)

SESSION_STATUS_FILTERS = {"all": None, "active": True, "ended": False}


def session_to_dict(session: SessionModel) -> dict:
    """Map a session (with its course loaded) to response data."""
    course = session.course
    return {
        "id": session.id,
        "session_id": session.session_code,
        "course_id": session.course_id,
        "course": {
            "id": course.id,
            "title": course.title,
            "code": course.code,
            "instructor": course.instructor,
            "description": course.description,
        } if course is not None else None,
        "instructor": session.instructor,
        "is_active": session.is_active,
        "start_time": session.start_time,
        "end_time": session.end_time,
        "question_count": session.question_count,
        "duration": session.duration_seconds,
        "created_at": session.created_at,
        "updated_at": session.updated_at,
    }


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession, code_attempts: int | None = None) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
            code_attempts: Attempts at finding an unused session identifier
                (defaults to API_SESSION_CODE_ATTEMPTS)
        """
        self.db = db
        self.code_attempts = code_attempts or get_settings().api.session_code_attempts

    async def create_session(self, course_id: UUID, instructor: str) -> dict:
        """
        Open a new active session for a course.

        The shareable identifier is regenerated when it collides with an
        existing one. A concurrent creation for the same course is caught by
        the one-active-session index and reported like the upfront check.

        Args:
            course_id: Parent course UUID
            instructor: Instructor name

        Returns:
            dict: Created session data with course summary

        Raises:
            CourseNotFoundError: If the course does not exist
            SessionAlreadyActiveError: If the course already has an active session
            SessionCodeUnavailableError: If no unused identifier was found within the attempts
        """
        if not await course_crud.exists(self.db, course_id):
            raise CourseNotFoundError(course_id)

        ensure_no_active_session(await session_crud.get_active_for_course(self.db, course_id))

        for attempt in range(1, self.code_attempts + 1):
            session_code = generate_session_code()
            try:
                session = await session_crud.create(
                    self.db,
                    session_code=session_code,
                    course_id=course_id,
                    instructor=instructor,
                    is_active=True,
                )
                await self.db.commit()
                break
            except IntegrityError as e:
                await self.db.rollback()
                ensure_no_active_session(
                    await session_crud.get_active_for_course(self.db, course_id)
                )
                logger.warning(
                    "Session identifier collision, regenerating",
                    extra={"course_id": str(course_id), "session_code": session_code, "attempt": attempt},
                )
                if attempt == self.code_attempts:
                    raise SessionCodeUnavailableError(self.code_attempts) from e

        logger.info(
            "Session started",
            extra={"course_id": str(course_id), "session_code": session_code},
        )
        created = await session_crud.get_with_course(self.db, session.id)
        return session_to_dict(created)

    async def get_session(self, session_code: str) -> dict:
        """
        Get session by its shareable identifier.

        Args:
            session_code: Identifier such as ``VV-7K2Q9A``

        Returns:
            dict: Session data with course summary

        Raises:
            SessionNotFoundError: If session not found
        """
        session = await session_crud.get_by_code(self.db, session_code)
        if not session:
            raise SessionNotFoundError(session_code)
        return session_to_dict(session)

    async def end_session(self, session_code: str) -> dict:
        """
        End an active session and recount its questions.

        Args:
            session_code: Identifier of the session to end

        Returns:
            dict: Ended session data

        Raises:
            SessionNotFoundError: If session not found
            SessionAlreadyEndedError: If the session has already ended
        """
        session = await session_crud.get_by_code(self.db, session_code)
        if not session:
            raise SessionNotFoundError(session_code)

        end_session(session)
        question_count = await session_crud.sync_question_count(self.db, session)
        await self.db.commit()

        logger.info(
            "Session ended",
            extra={"session_code": session_code, "question_count": question_count},
        )
        return session_to_dict(session)

    async def get_course_sessions(
        self,
        course_id: UUID,
        status: str = "all",
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[dict], int]:
        """
        Get a page of a course's sessions, newest first.

        Args:
            course_id: Course UUID
            status: ``all``, ``active`` or ``ended``
            page: 1-based page number
            limit: Page size

        Returns:
            tuple[list[dict], int]: Sessions on the page and the total match count

        Raises:
            CourseNotFoundError: If course not found
        """
        if not await course_crud.exists(self.db, course_id):
            raise CourseNotFoundError(course_id)

        is_active = SESSION_STATUS_FILTERS.get(status)
        sessions = await session_crud.get_for_course(
            self.db,
            course_id,
            is_active=is_active,
            limit=limit,
            offset=page_offset(page, limit),
        )
        total = await session_crud.count_for_course(self.db, course_id, is_active=is_active)
        return [session_to_dict(s) for s in sessions], total

    async def get_active_session(self, course_id: UUID) -> dict:
        """
        Get the running session of a course.

        Raises:
            ActiveSessionNotFoundError: If the course has no active session
        """
        session = await session_crud.get_active_for_course(self.db, course_id)
        if not session:
            raise ActiveSessionNotFoundError(course_id)
        return session_to_dict(session)

