"""
Question CRUD operations.

Provides Create, Read, Update, Delete operations for QuestionModel
with session-scoped listing, status filtering and duplicate detection.

Dependencies: sqlalchemy, qaboard.boundary.db.models, qaboard.core
System role: Question persistence operations
"""

from typing import Sequence

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from qaboard.boundary.db.models.question_model import QuestionModel
from qaboard.boundary.db.CRUD.base_crud import BaseCRUD
from qaboard.core.question_status import StatusFilter, filter_predicate


class QuestionCRUD(BaseCRUD[QuestionModel]):
    """
    CRUD operations for QuestionModel.

    Questions are addressed by the shareable session code, which is stored
    on every question row so board queries need no join.
    """

    def __init__(self) -> None:
        """Initialize QuestionCRUD with QuestionModel."""
        super().__init__(QuestionModel)

    async def find_duplicate(
        self,
        session: AsyncSession,
        session_code: str,
        student_name: str,
        content: str,
    ) -> QuestionModel | None:
        """
        Find an identical question by the same student in the same session.

        Args:
            session: Async database session
            session_code: Session identifier
            student_name: Trimmed author name
            content: Trimmed question text

        Returns:
            The existing question, None if there is no exact match
        """
        stmt = (
            select(QuestionModel)
            .where(
                QuestionModel.session_code == session_code,
                QuestionModel.student_name == student_name,
                QuestionModel.content == content,
            )
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_session(
        self,
        session: AsyncSession,
        session_code: str,
        status: StatusFilter | str | None = None,
        student_name: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[QuestionModel]:
        """
        Retrieve a session's questions, newest first.

        Args:
            session: Async database session
            session_code: Session identifier
            status: Status filter; ``all`` or None disables it
            student_name: Case-insensitive substring of the author name
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            Sequence of matching QuestionModels
        """
        return await self.list_where(
            session,
            *self._session_criteria(session_code, status, student_name),
            order_by=[QuestionModel.timestamp.desc()],
            limit=limit,
            offset=offset,
        )

    async def count_by_session(
        self,
        session: AsyncSession,
        session_code: str,
        status: StatusFilter | str | None = None,
        student_name: str | None = None,
    ) -> int:
        """Count a session's questions under the same filters as get_by_session."""
        return await self.count(
            session,
            *self._session_criteria(session_code, status, student_name),
        )

    async def get_by_status(
        self,
        session: AsyncSession,
        session_code: str,
        status: StatusFilter | str,
    ) -> Sequence[QuestionModel]:
        """Retrieve all questions of a session matching one status filter."""
        return await self.get_by_session(session, session_code, status=status)

    @staticmethod
    def _session_criteria(
        session_code: str,
        status: StatusFilter | str | None,
        student_name: str | None,
    ) -> list[ColumnElement[bool]]:
        criteria = [QuestionModel.session_code == session_code]

        predicate = filter_predicate(status)
        if predicate is not None:
            attribute, expected = predicate
            criteria.append(getattr(QuestionModel, attribute).is_(expected))

        if student_name:
            criteria.append(QuestionModel.student_name.icontains(student_name, autoescape=True))
        return criteria


question_crud = QuestionCRUD()
