"""
Session domain models and schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import Field

from qaboard.core.constants import INSTRUCTOR_MAX_LENGTH
from qaboard.models.common import CamelModel, RequestModel
from qaboard.models.course import CourseSummary


class SessionStatusFilter(str, Enum):
    """Session states accepted when listing a course's sessions."""

    ALL = "all"
    ACTIVE = "active"
    ENDED = "ended"


class CreateSessionRequest(RequestModel):
    """Request schema for opening a session."""

    course_id: UUID = Field(..., description="Course to open the session for")
    instructor: str = Field(..., min_length=1, max_length=INSTRUCTOR_MAX_LENGTH, description="Instructor name")


class SessionResponse(CamelModel):
    """Response schema for session data."""

    id: UUID
    session_id: str = Field(description="Shareable identifier, e.g. VV-7K2Q9A")
    course_id: UUID
    course: CourseSummary | None = None
    instructor: str
    is_active: bool
    start_time: datetime
    end_time: datetime | None = None
    question_count: int
    duration: float = Field(description="Seconds from start to end, or to now while active")
    created_at: datetime
    updated_at: datetime
