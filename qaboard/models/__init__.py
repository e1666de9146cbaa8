"""
API request/response schemas.

Wire field names are camelCase; Python attributes stay snake_case.
"""

from qaboard.models.common import (
    ApiResponse,
    ErrorResponse,
    FieldError,
    ListResponse,
    PaginatedResponse,
)
from qaboard.models.course import CourseResponse, CreateCourseRequest, UpdateCourseRequest
from qaboard.models.question import (
    CreateQuestionRequest,
    QuestionResponse,
    UpdateQuestionStatusRequest,
)
from qaboard.models.session import CreateSessionRequest, SessionResponse

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "FieldError",
    "ListResponse",
    "PaginatedResponse",
    "CourseResponse",
    "CreateCourseRequest",
    "UpdateCourseRequest",
    "CreateSessionRequest",
    "SessionResponse",
    "CreateQuestionRequest",
    "QuestionResponse",
    "UpdateQuestionStatusRequest",
]
