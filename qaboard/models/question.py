"""
Question domain models and schemas.

Request/response schemas for posting, listing and triaging questions.

Dependencies: pydantic
System role: Question API contracts
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from qaboard.core.constants import (
    QUESTION_CONTENT_MAX_LENGTH,
    QUESTION_CONTENT_MIN_LENGTH,
    STUDENT_NAME_MAX_LENGTH,
    STUDENT_NAME_MIN_LENGTH,
)
from qaboard.core.question_status import QuestionStatus, StatusAction
from qaboard.core.session_codes import SESSION_CODE_PATTERN
from qaboard.models.common import ApiResponse, CamelModel, RequestModel


class CreateQuestionRequest(RequestModel):
    """Request schema for posting a question."""

    session_id: str = Field(..., pattern=SESSION_CODE_PATTERN, description="Session identifier")
    student_name: str = Field(
        ...,
        min_length=STUDENT_NAME_MIN_LENGTH,
        max_length=STUDENT_NAME_MAX_LENGTH,
    )
    content: str = Field(
        ...,
        min_length=QUESTION_CONTENT_MIN_LENGTH,
        max_length=QUESTION_CONTENT_MAX_LENGTH,
    )


class UpdateQuestionStatusRequest(CamelModel):
    """Request schema for a status action."""

    action: StatusAction


class QuestionResponse(CamelModel):
    """Response schema for question data."""

    id: UUID
    session_id: str = Field(description="Shareable identifier of the owning session")
    session_ref: UUID = Field(description="Owning session UUID")
    student_name: str
    content: str
    is_answered: bool
    is_important: bool
    status: QuestionStatus
    timestamp: datetime
    last_status_update: datetime
    created_at: datetime
    updated_at: datetime


class SessionSnapshot(CamelModel):
    """Session state returned with question listings."""

    session_id: str
    is_active: bool
    question_count: int


class StudentStatsResponse(CamelModel):
    """Per-student counts; answered and important overlap."""

    total: int
    answered: int
    unanswered: int
    important: int


class QuestionListData(CamelModel):
    questions: list[QuestionResponse]
    grouped_by_student: dict[str, list[QuestionResponse]]
    session: SessionSnapshot


class QuestionsByStudentData(CamelModel):
    questions_by_student: dict[str, list[QuestionResponse]]
    student_stats: dict[str, StudentStatsResponse]
    session: SessionSnapshot


class QuestionsByStudentResponse(ApiResponse[QuestionsByStudentData]):
    """Grouped view envelope: ``count`` is the number of students."""

    count: int
    total_questions: int
