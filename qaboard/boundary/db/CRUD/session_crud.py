"""
Session CRUD operations.

Provides Create, Read, Update, Delete operations for SessionModel
with session-specific query methods.

Dependencies: sqlalchemy, qaboard.boundary.db.models
System role: Session persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from qaboard.boundary.db.models.question_model import QuestionModel
from qaboard.boundary.db.models.session_model import SessionModel
from qaboard.boundary.db.CRUD.base_crud import BaseCRUD


class SessionCRUD(BaseCRUD[SessionModel]):
    """
    CRUD operations for SessionModel.

    Extends BaseCRUD with lookups by shareable code, per-course listing
    with eager loading of the owning course, and question counter upkeep.
    """

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def get_by_code(
        self,
        session: AsyncSession,
        session_code: str,
    ) -> SessionModel | None:
        """
        Retrieve session by its shareable code with the course loaded.

        Args:
            session: Async database session
            session_code: Identifier such as ``VV-7K2Q9A``

        Returns:
            SessionModel with course loaded, None if not found
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.session_code == session_code)
            .options(selectinload(SessionModel.course))
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_course(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> SessionModel | None:
        """
        Retrieve session by primary key with the course loaded.

        Args:
            session: Async database session
            id: Session UUID

        Returns:
            SessionModel with course loaded, None if not found
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.id == id)
            .options(selectinload(SessionModel.course))
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_for_course(
        self,
        session: AsyncSession,
        course_id: UUID,
    ) -> SessionModel | None:
        """
        Retrieve the running session of a course.

        Args:
            session: Async database session
            course_id: Course UUID

        Returns:
            Active SessionModel with course loaded, None if the course has none
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.course_id == course_id, SessionModel.is_active.is_(True))
            .options(selectinload(SessionModel.course))
            .order_by(SessionModel.start_time.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_for_course(
        self,
        session: AsyncSession,
        course_id: UUID,
        is_active: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[SessionModel]:
        """
        Retrieve a course's sessions, newest first.

        Args:
            session: Async database session
            course_id: Course UUID
            is_active: Only active (True) or ended (False) sessions; None for all
            limit: Maximum number of sessions to return
            offset: Number of sessions to skip

        Returns:
            Sequence of SessionModels with course loaded
        """
        stmt = (
            select(SessionModel)
            .where(*self._course_criteria(course_id, is_active))
            .options(selectinload(SessionModel.course))
            .order_by(SessionModel.start_time.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_for_course(
        self,
        session: AsyncSession,
        course_id: UUID,
        is_active: bool | None = None,
    ) -> int:
        """Count a course's sessions, optionally by active flag."""
        return await self.count(session, *self._course_criteria(course_id, is_active))

    async def adjust_question_count(
        self,
        session: AsyncSession,
        id: UUID,
        delta: int,
    ) -> None:
        """
        Atomically add ``delta`` to a session's question counter.

        Args:
            session: Async database session
            id: Session UUID
            delta: +1 on question create, -1 on delete
        """
        stmt = (
            update(SessionModel)
            .where(SessionModel.id == id)
            .values(question_count=SessionModel.question_count + delta)
            .execution_options(synchronize_session="fetch")
        )
        await session.execute(stmt)

    async def sync_question_count(self, session: AsyncSession, record: SessionModel) -> int:
        """
        Recompute a session's question counter from its questions.

        Args:
            session: Async database session
            record: Session to resynchronize, updated in place

        Returns:
            int: The recounted number of questions
        """
        stmt = select(func.count()).select_from(QuestionModel).where(QuestionModel.session_id == record.id)
        record.question_count = (await session.execute(stmt)).scalar_one()
        await session.flush()
        return record.question_count

    @staticmethod
    def _course_criteria(course_id: UUID, is_active: bool | None) -> list[ColumnElement[bool]]:
        criteria = [SessionModel.course_id == course_id]
        if is_active is not None:
            criteria.append(SessionModel.is_active.is_(is_active))
        return criteria


session_crud = SessionCRUD()
