"""
Question service orchestrator.

Coordinates posting, listing, triaging and deleting questions. Session
activity is checked here against a freshly read session record; the status
engine itself lives in qaboard.core.question_status.

Dependencies: qaboard.boundary.db.CRUD, qaboard.core, qaboard.observability
System role: Question use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from qaboard.boundary.db.CRUD.question_crud import question_crud
from qaboard.boundary.db.CRUD.session_crud import session_crud
from qaboard.boundary.db.models.question_model import QuestionModel
from qaboard.boundary.db.models.session_model import SessionModel
from qaboard.core.exceptions import (
    DuplicateQuestionError,
    QuestionNotFoundError,
    SessionNotFoundError,
)
from qaboard.core.pagination import page_count, page_offset
from qaboard.core.question_grouping import group_by_student, student_stats
from qaboard.core.question_status import (
    QuestionStatus,
    StatusAction,
    StatusFilter,
    parse_action,
)
from qaboard.core.session_lifecycle import (
    ensure_accepts_questions,
    ensure_allows_status_updates,
)
from qaboard.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def question_to_dict(question: QuestionModel) -> dict:
    return {
        "id": question.id,
        "session_id": question.session_code,
        "session_ref": question.session_id,
        "student_name": question.student_name,
        "content": question.content,
        "is_answered": question.is_answered,
        "is_important": question.is_important,
        "status": question.status,
        "timestamp": question.timestamp,
        "last_status_update": question.last_status_update,
        "created_at": question.created_at,
        "updated_at": question.updated_at,
    }


def session_snapshot(session: SessionModel) -> dict:
    """Minimal session state shipped alongside question listings."""
    return {
        "session_id": session.session_code,
        "is_active": session.is_active,
        "question_count": session.question_count,
    }


class QuestionService:
    """Question service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize question service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_session(self, session_code: str) -> SessionModel:
        session = await session_crud.get_by_code(self.db, session_code)
        if not session:
            raise SessionNotFoundError(session_code)
        return session

    async def post_question(
        self,
        session_code: str,
        student_name: str,
        content: str,
    ) -> dict:
        """
        Post a question to an active session.

        The question and the session counter increment are committed together.

        Args:
            session_code: Identifier of the target session
            student_name: Author name
            content: Question text

        Returns:
            dict: Created question data

        Raises:
            SessionNotFoundError: If the session does not exist
            SessionInactiveError: If the session has ended
            DuplicateQuestionError: If the student already posted this exact text
        """
        student_name = student_name.strip()
        content = content.strip()

        session = await self._get_session(session_code)
        ensure_accepts_questions(session)

        if await question_crud.find_duplicate(self.db, session_code, student_name, content):
            raise DuplicateQuestionError(session_code, student_name)

        question = await question_crud.create(
            self.db,
            session_code=session_code,
            session_id=session.id,
            student_name=student_name,
            content=content,
            is_answered=False,
            is_important=False,
            status=QuestionStatus.UNANSWERED,
        )
        await session_crud.adjust_question_count(self.db, session.id, 1)
        await self.db.commit()

        log_with_context(
            logger,
            logging.INFO,
            "Question posted",
            question_id=question.id,
            session_code=session_code,
            student_name=student_name,
            content_preview=content[:80],
        )
        return question_to_dict(question)

    async def get_session_questions(
        self,
        session_code: str,
        status: StatusFilter | str = StatusFilter.ALL,
        student: str | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> dict:
        """
        Get a page of a session's questions, newest first.

        Args:
            session_code: Session identifier
            status: Status filter (flags are tested independently)
            student: Case-insensitive substring of the author name
            page: 1-based page number
            limit: Page size

        Returns:
            dict: questions, grouped_by_student (same page), session snapshot
            and count/total/page/pages

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        session = await self._get_session(session_code)

        questions = await question_crud.get_by_session(
            self.db,
            session_code,
            status=status,
            student_name=student,
            limit=limit,
            offset=page_offset(page, limit),
        )
        total = await question_crud.count_by_session(
            self.db,
            session_code,
            status=status,
            student_name=student,
        )

        items = [question_to_dict(q) for q in questions]
        grouped = {
            name: [question_to_dict(q) for q in group]
            for name, group in group_by_student(questions).items()
        }
        return {
            "questions": items,
            "grouped_by_student": grouped,
            "session": session_snapshot(session),
            "count": len(items),
            "total": total,
            "page": page,
            "pages": page_count(total, limit),
        }

    async def get_questions_by_student(
        self,
        session_code: str,
        status: StatusFilter | str = StatusFilter.ALL,
    ) -> dict:
        """
        Get all of a session's questions grouped by author with statistics.

        Args:
            session_code: Session identifier
            status: Status filter

        Returns:
            dict: questions_by_student, student_stats, session snapshot,
            count (number of students) and total_questions

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        session = await self._get_session(session_code)
        questions = await question_crud.get_by_session(self.db, session_code, status=status)

        grouped = {
            name: [question_to_dict(q) for q in group]
            for name, group in group_by_student(questions).items()
        }
        stats = {name: s.to_dict() for name, s in student_stats(questions).items()}
        return {
            "questions_by_student": grouped,
            "student_stats": stats,
            "session": session_snapshot(session),
            "count": len(grouped),
            "total_questions": len(questions),
        }

    async def update_status(self, question_id: UUID, action: StatusAction | str) -> dict:
        """
        Apply an instructor action to a question's flags.

        Args:
            question_id: Question UUID
            action: One of the six status actions

        Returns:
            dict: Question data after the action

        Raises:
            InvalidStatusActionError: If the action is unknown
            QuestionNotFoundError: If the question does not exist
            SessionInactiveError: If the owning session has ended
        """
        action = parse_action(action)

        question = await question_crud.get_by_id(self.db, question_id)
        if not question:
            raise QuestionNotFoundError(question_id)

        owning_session = await session_crud.get_by_id(self.db, question.session_id)
        if owning_session is None:
            raise SessionNotFoundError(question.session_code)
        ensure_allows_status_updates(owning_session)

        if question.apply_status_action(action):
            await self.db.commit()
            logger.info(
                "Question status updated",
                extra={
                    "question_id": str(question_id),
                    "action": action.value,
                    "status": question.status.value,
                },
            )
        return question_to_dict(question)

    async def delete_question(self, question_id: UUID) -> dict:
        """
        Delete a question and decrement its session's counter.

        Allowed whether or not the owning session is still active.

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        question = await question_crud.get_by_id(self.db, question_id)
        if not question:
            raise QuestionNotFoundError(question_id)

        session_id = question.session_id
        session_code = question.session_code
        await question_crud.delete_by_id(self.db, question_id)
        await session_crud.adjust_question_count(self.db, session_id, -1)
        await self.db.commit()

        logger.info(
            "Question deleted",
            extra={"question_id": str(question_id), "session_code": session_code},
        )
        return {"id": question_id}
