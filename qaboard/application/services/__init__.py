"""Service orchestrators."""

from .course_service import CourseService
from .question_service import QuestionService
from .session_service import SessionService

__all__ = [
    "CourseService",
    "QuestionService",
    "SessionService",
]
