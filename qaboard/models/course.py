"""
Course domain models and schemas.

Request/response schemas for course operations.

Dependencies: pydantic
System role: Course API contracts
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from qaboard.core.constants import (
    COURSE_CODE_MAX_LENGTH,
    COURSE_DESCRIPTION_MAX_LENGTH,
    COURSE_TITLE_MAX_LENGTH,
    INSTRUCTOR_MAX_LENGTH,
)
from qaboard.models.common import CamelModel, RequestModel


class CreateCourseRequest(RequestModel):
    """Request schema for creating a new course."""

    title: str = Field(..., min_length=1, max_length=COURSE_TITLE_MAX_LENGTH, description="Course title")
    code: str = Field(..., min_length=1, max_length=COURSE_CODE_MAX_LENGTH, description="Course code, stored upper-case")
    instructor: str = Field(..., min_length=1, max_length=INSTRUCTOR_MAX_LENGTH, description="Instructor name")
    description: str | None = Field(None, max_length=COURSE_DESCRIPTION_MAX_LENGTH, description="Course description")


class UpdateCourseRequest(RequestModel):
    """Request schema for updating a course; omitted fields keep their value."""

    title: str | None = Field(None, min_length=1, max_length=COURSE_TITLE_MAX_LENGTH)
    code: str | None = Field(None, min_length=1, max_length=COURSE_CODE_MAX_LENGTH)
    instructor: str | None = Field(None, min_length=1, max_length=INSTRUCTOR_MAX_LENGTH)
    description: str | None = Field(None, max_length=COURSE_DESCRIPTION_MAX_LENGTH)


class CourseSummary(CamelModel):
    """Course fields embedded in session responses."""

    id: UUID
    title: str
    code: str
    instructor: str
    description: str | None = None


class CourseResponse(CourseSummary):
    """Response schema for course data."""

    created_at: datetime
    updated_at: datetime
