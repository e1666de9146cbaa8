"""
Core business logic module.

Contains the exception hierarchy, the question status engine, the session
lifecycle rules and the session identifier generator.
"""

from qaboard.core.exceptions import (
    QABoardException,
    ValidationError,
    NotFoundError,
    ConflictError,
    SessionInactiveError,
)
from qaboard.core.question_status import (
    QuestionStatus,
    StatusAction,
    StatusFilter,
    StatusFlags,
    apply_action,
    derive_status,
)
from qaboard.core.session_codes import generate_session_code, is_valid_session_code

__all__ = [
    "QABoardException",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "SessionInactiveError",
    "QuestionStatus",
    "StatusAction",
    "StatusFilter",
    "StatusFlags",
    "apply_action",
    "derive_status",
    "generate_session_code",
    "is_valid_session_code",
]
