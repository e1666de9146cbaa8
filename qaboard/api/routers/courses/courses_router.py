"""
Course API endpoints.

Routes:
- POST /courses - Create new course
- GET /courses - List all courses
- GET /courses/{id} - Get single course
- PUT /courses/{id} - Update course
- DELETE /courses/{id} - Delete course

Dependencies: qaboard.application.services, qaboard.models
System role: Course management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from qaboard.application.services.course_service import CourseService
from qaboard.api.deps.dependencies import get_course_service
from qaboard.core.constants import Messages
from qaboard.models.common import ApiResponse, DeletedData, ListResponse
from qaboard.models.course import (
    CourseResponse,
    CreateCourseRequest,
    UpdateCourseRequest,
)

from .course_responses import map_course_to_response, map_courses_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=ListResponse[CourseResponse])
async def list_courses(
    course_service: CourseService = Depends(get_course_service),
) -> ListResponse[CourseResponse]:
    """List all courses, newest first."""
    courses = await course_service.get_all_courses()
    return ListResponse[CourseResponse](
        count=len(courses),
        data=map_courses_to_response(courses),
    )


@router.get("/{course_id}", response_model=ApiResponse[CourseResponse])
async def get_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseResponse]:
    """
    Get single course by ID.

    Raises:
        CourseNotFoundError: 404
    """
    course_data = await course_service.get_course(course_id)
    return ApiResponse[CourseResponse](data=map_course_to_response(course_data))


@router.post("", response_model=ApiResponse[CourseResponse], status_code=201)
async def create_course(
    request: CreateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseResponse]:
    """
    Create a course; the code is stored upper-cased.

    Args:
        request: CreateCourseRequest with title, code, instructor, description
        course_service: Injected CourseService

    Returns:
        ApiResponse[CourseResponse]: Created course

    Raises:
        CourseCodeExistsError: 409 when the code is taken
    """
    logger.info(
        "Creating new course",
        extra={"course_code": request.code, "has_description": bool(request.description)},
    )
    course_data = await course_service.create_course(
        title=request.title,
        code=request.code,
        instructor=request.instructor,
        description=request.description,
    )
    return ApiResponse[CourseResponse](
        message=Messages.COURSE_CREATED,
        data=map_course_to_response(course_data),
    )


@router.put("/{course_id}", response_model=ApiResponse[CourseResponse])
async def update_course(
    course_id: UUID,
    request: UpdateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseResponse]:
    """
    Update the provided fields of a course.

    Only fields present in the body are forwarded; an explicit null
    description clears it.

    Raises:
        CourseNotFoundError: 404
        CourseCodeExistsError: 409 when the new code belongs to another course
    """
    course_data = await course_service.update_course(
        course_id,
        **{field: getattr(request, field) for field in request.model_fields_set},
    )
    return ApiResponse[CourseResponse](
        message=Messages.COURSE_UPDATED,
        data=map_course_to_response(course_data),
    )


@router.delete("/{course_id}", response_model=ApiResponse[DeletedData])
async def delete_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[DeletedData]:
    """
    Delete a course with its ended sessions and their questions.

    Raises:
        CourseNotFoundError: 404
        CourseHasActiveSessionError: 409 while a session is running
    """
    deleted = await course_service.delete_course(course_id)
    return ApiResponse[DeletedData](
        message=Messages.COURSE_DELETED,
        data=DeletedData.model_validate(deleted),
    )
