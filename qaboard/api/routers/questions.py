"""
Question API endpoints.

Routes:
- POST /questions - Post question to an active session
- GET /questions/session/{session_id} - Paginated questions with grouping
- GET /questions/session/{session_id}/by-student - Grouped view with per-student stats
- PUT /questions/{id}/status - Apply status action
- DELETE /questions/{id} - Delete question

Dependencies: qaboard.application.services, qaboard.models
System role: Question board HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from qaboard.application.services.question_service import QuestionService
from qaboard.api.deps.dependencies import get_question_service
from qaboard.core.constants import DEFAULT_PAGE, DEFAULT_QUESTION_LIMIT, MAX_LIMIT, Messages
from qaboard.core.question_status import StatusFilter
from qaboard.models.common import ApiResponse, DeletedData
from qaboard.models.question import (
    CreateQuestionRequest,
    QuestionListData,
    QuestionResponse,
    QuestionsByStudentData,
    QuestionsByStudentResponse,
    UpdateQuestionStatusRequest,
)

from .session_code import require_session_code

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/questions", tags=["questions"])


class QuestionListResponse(ApiResponse[QuestionListData]):
    """Paginated question listing; ``count`` is the size of this page."""

    count: int
    total: int
    page: int
    pages: int


@router.post("", response_model=ApiResponse[QuestionResponse], status_code=201)
async def post_question(
    request: CreateQuestionRequest,
    question_service: QuestionService = Depends(get_question_service),
) -> ApiResponse[QuestionResponse]:
    """
    Post a question to an active session.

    Raises:
        SessionNotFoundError: 404
        SessionInactiveError: 400 once the session has ended
        DuplicateQuestionError: 409 for an exact repeat by the same student
    """
    question_data = await question_service.post_question(
        session_code=request.session_id,
        student_name=request.student_name,
        content=request.content,
    )
    return ApiResponse[QuestionResponse](
        message=Messages.QUESTION_POSTED,
        data=QuestionResponse.model_validate(question_data),
    )


@router.get("/session/{session_id}", response_model=QuestionListResponse)
async def list_session_questions(
    session_id: str,
    status: StatusFilter = StatusFilter.ALL,
    student: str | None = Query(None, description="Case-insensitive substring of the student name"),
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_QUESTION_LIMIT, ge=1, le=MAX_LIMIT),
    question_service: QuestionService = Depends(get_question_service),
) -> QuestionListResponse:
    """
    List a session's questions newest first, with the page grouped by student.

    Raises:
        SessionNotFoundError: 404
    """
    student = student.strip() if student else None
    result = await question_service.get_session_questions(
        require_session_code(session_id),
        status=status,
        student=student or None,
        page=page,
        limit=limit,
    )
    return QuestionListResponse(
        count=result["count"],
        total=result["total"],
        page=result["page"],
        pages=result["pages"],
        data=QuestionListData.model_validate(result),
    )


@router.get("/session/{session_id}/by-student", response_model=QuestionsByStudentResponse)
async def list_questions_by_student(
    session_id: str,
    status: StatusFilter = StatusFilter.ALL,
    question_service: QuestionService = Depends(get_question_service),
) -> QuestionsByStudentResponse:
    """
    Group all of a session's questions by student with per-student counts.

    Raises:
        SessionNotFoundError: 404
    """
    result = await question_service.get_questions_by_student(
        require_session_code(session_id),
        status=status,
    )
    return QuestionsByStudentResponse(
        count=result["count"],
        total_questions=result["total_questions"],
        data=QuestionsByStudentData.model_validate(result),
    )


@router.put("/{question_id}/status", response_model=ApiResponse[QuestionResponse])
async def update_question_status(
    question_id: UUID,
    request: UpdateQuestionStatusRequest,
    question_service: QuestionService = Depends(get_question_service),
) -> ApiResponse[QuestionResponse]:
    """
    Apply a status action to a question.

    Raises:
        QuestionNotFoundError: 404
        SessionInactiveError: 400 once the owning session has ended
    """
    question_data = await question_service.update_status(question_id, request.action)
    return ApiResponse[QuestionResponse](
        message=Messages.QUESTION_UPDATED,
        data=QuestionResponse.model_validate(question_data),
    )


@router.delete("/{question_id}", response_model=ApiResponse[DeletedData])
async def delete_question(
    question_id: UUID,
    question_service: QuestionService = Depends(get_question_service),
) -> ApiResponse[DeletedData]:
    """
    Delete a question, whether or not its session is still active.

    Raises:
        QuestionNotFoundError: 404
    """
    deleted = await question_service.delete_question(question_id)
    return ApiResponse[DeletedData](
        message=Messages.QUESTION_DELETED,
        data=DeletedData.model_validate(deleted),
    )
