"""
Session API endpoints.

Routes:
- POST /sessions - Open a session for a course
- GET /sessions/{session_id} - Get session by shareable identifier
- PUT /sessions/{session_id}/end - End session
- GET /sessions/course/{course_id} - List a course's sessions
- GET /sessions/course/{course_id}/active - Active session of a course

Dependencies: qaboard.application.services, qaboard.models
System role: Session lifecycle HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from qaboard.application.services.session_service import SessionService
from qaboard.api.deps.dependencies import get_session_service
from qaboard.core.constants import DEFAULT_PAGE, DEFAULT_SESSION_LIMIT, MAX_LIMIT, Messages
from qaboard.core.pagination import page_count
from qaboard.models.common import ApiResponse, PaginatedResponse
from qaboard.models.session import (
    CreateSessionRequest,
    SessionResponse,
    SessionStatusFilter,
)

from .courses.course_responses import map_session_to_response, map_sessions_to_response
from .session_code import require_session_code

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=ApiResponse[SessionResponse], status_code=201)
async def create_session(
    request: CreateSessionRequest,
    session_service: SessionService = Depends(get_session_service),
) -> ApiResponse[SessionResponse]:
    """
    Open a new session for a course.

    Args:
        request: CreateSessionRequest with course ID and instructor
        session_service: Injected SessionService

    Returns:
        ApiResponse[SessionResponse]: Created session with its shareable ID

    Raises:
        CourseNotFoundError: 404
        SessionAlreadyActiveError: 409, data carries the running session's ID and start time
    """
    logger.info("Starting session", extra={"course_id": str(request.course_id)})
    session_data = await session_service.create_session(
        course_id=request.course_id,
        instructor=request.instructor,
    )
    return ApiResponse[SessionResponse](
        message=Messages.SESSION_STARTED,
        data=map_session_to_response(session_data),
    )


@router.get("/course/{course_id}", response_model=PaginatedResponse[SessionResponse])
async def list_course_sessions(
    course_id: UUID,
    status: SessionStatusFilter = SessionStatusFilter.ALL,
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_SESSION_LIMIT, ge=1, le=MAX_LIMIT),
    session_service: SessionService = Depends(get_session_service),
) -> PaginatedResponse[SessionResponse]:
    """
    List a course's sessions, newest first.

    Raises:
        CourseNotFoundError: 404
    """
    sessions, total = await session_service.get_course_sessions(
        course_id,
        status=status.value,
        page=page,
        limit=limit,
    )
    return PaginatedResponse[SessionResponse](
        count=len(sessions),
        total=total,
        page=page,
        pages=page_count(total, limit),
        data=map_sessions_to_response(sessions),
    )


@router.get("/course/{course_id}/active", response_model=ApiResponse[SessionResponse])
async def get_active_session(
    course_id: UUID,
    session_service: SessionService = Depends(get_session_service),
) -> ApiResponse[SessionResponse]:
    """
    Get the running session of a course.

    Raises:
        ActiveSessionNotFoundError: 404
    """
    session_data = await session_service.get_active_session(course_id)
    return ApiResponse[SessionResponse](data=map_session_to_response(session_data))


@router.get("/{session_id}", response_model=ApiResponse[SessionResponse])
async def get_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> ApiResponse[SessionResponse]:
    """
    Get session by its shareable identifier.

    Raises:
        ValidationError: 400 for a malformed identifier
        SessionNotFoundError: 404
    """
    session_data = await session_service.get_session(require_session_code(session_id))
    return ApiResponse[SessionResponse](data=map_session_to_response(session_data))


@router.put("/{session_id}/end", response_model=ApiResponse[SessionResponse])
async def end_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> ApiResponse[SessionResponse]:
    """
    End a running session.

    Raises:
        SessionNotFoundError: 404
        SessionAlreadyEndedError: 409
    """
    session_data = await session_service.end_session(require_session_code(session_id))
    return ApiResponse[SessionResponse](
        message=Messages.SESSION_ENDED,
        data=map_session_to_response(session_data),
    )
