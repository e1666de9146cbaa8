"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_course_service,
    get_question_service,
    get_session_service,
    get_settings_dependency,
)

__all__ = [
    "get_course_service",
    "get_question_service",
    "get_session_service",
    "get_settings_dependency",
]
