"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for CourseModel
with course-specific query methods.

Dependencies: sqlalchemy, qaboard.boundary.db.models
System role: Course persistence operations
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from qaboard.boundary.db.models.course_model import CourseModel
from qaboard.boundary.db.models.question_model import QuestionModel
from qaboard.boundary.db.models.session_model import SessionModel
from qaboard.boundary.db.CRUD.base_crud import BaseCRUD


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with lookups by course code and a delete that
    removes the course's sessions and questions in the same transaction.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def get_by_code(
        self,
        session: AsyncSession,
        code: str,
    ) -> CourseModel | None:
        """
        Retrieve course by its (upper-cased) code.

        Args:
            session: Async database session
            code: Course code, already normalized

        Returns:
            CourseModel if found, None otherwise
        """
        stmt = select(CourseModel).where(CourseModel.code == code)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def code_taken(
        self,
        session: AsyncSession,
        code: str,
        exclude_id: UUID | None = None,
    ) -> bool:
        """
        Check whether another course already uses a code.

        Args:
            session: Async database session
            code: Course code, already normalized
            exclude_id: Course to ignore (the one being updated)

        Returns:
            True if a different course holds the code
        """
        stmt = select(CourseModel.id).where(CourseModel.code == code)
        if exclude_id is not None:
            stmt = stmt.where(CourseModel.id != exclude_id)
        result = await session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def delete_with_sessions(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a course together with its sessions and their questions.

        Args:
            session: Async database session
            id: Course UUID

        Returns:
            True if the course was deleted, False if not found
        """
        session_ids = select(SessionModel.id).where(SessionModel.course_id == id)
        await session.execute(
            delete(QuestionModel)
            .where(QuestionModel.session_id.in_(session_ids))
            .execution_options(synchronize_session=False)
        )
        await session.execute(
            delete(SessionModel)
            .where(SessionModel.course_id == id)
            .execution_options(synchronize_session=False)
        )
        return await self.delete_by_id(session, id)


course_crud = CourseCRUD()
