"""
Exception hierarchy for the QA board application.

Provides layered exception structure for domain-specific errors.
Every exception carries the HTTP status it translates to, an optional
client-facing payload and a details dict for observability.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class QABoardException(Exception):
    """Base exception for all QA board application errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
            data: Optional payload returned to the client with the error
        """
        self.message = message
        self.details = details or {}
        self.data = data
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(QABoardException):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class InvalidStatusActionError(ValidationError):
    """Raised when a question status action tag is not recognised."""

    def __init__(self, action: str) -> None:
        super().__init__("Invalid action specified", field="action", details={"action": action})


class NotFoundError(QABoardException):
    """Base class for missing course, session or question records."""

    status_code = 404


class CourseNotFoundError(NotFoundError):
    """Raised when a course cannot be found."""

    def __init__(self, course_id: Any) -> None:
        super().__init__("Course not found", {"course_id": str(course_id)})


class SessionNotFoundError(NotFoundError):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: Human identifier or UUID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = str(session_id)
        super().__init__("Session not found", details)


class ActiveSessionNotFoundError(NotFoundError):
    """Raised when a course has no running session."""

    def __init__(self, course_id: Any) -> None:
        super().__init__(
            "No active session found for this course",
            {"course_id": str(course_id)},
        )


class QuestionNotFoundError(NotFoundError):
    """Raised when a question cannot be found."""

    def __init__(self, question_id: Any) -> None:
        super().__init__("Question not found", {"question_id": str(question_id)})


class ConflictError(QABoardException):
    """Base class for requests that clash with existing state."""

    status_code = 409


class CourseCodeExistsError(ConflictError):
    """Raised when a course code is already taken."""

    def __init__(self, code: str) -> None:
        super().__init__("Course with this code already exists", {"code": code})


class CourseHasActiveSessionError(ConflictError):
    """Raised when deleting a course whose session is still running."""

    def __init__(self, course_id: Any, session_id: str) -> None:
        super().__init__(
            "Cannot delete a course while one of its sessions is active",
            {"course_id": str(course_id), "session_id": session_id},
            data={"sessionId": session_id},
        )


class DuplicateQuestionError(ConflictError):
    """Raised when a student re-posts the exact same question in a session."""

    def __init__(self, session_id: str, student_name: str) -> None:
        super().__init__(
            "You have already posted this exact question",
            {"session_id": session_id, "student_name": student_name},
        )


class SessionAlreadyActiveError(ConflictError):
    """Raised when a course already has a running session."""

    def __init__(self, session_id: str, start_time: Any) -> None:
        start = start_time.isoformat() if hasattr(start_time, "isoformat") else start_time
        super().__init__(
            "An active session already exists for this course",
            {"session_id": session_id},
            data={"sessionId": session_id, "startTime": start},
        )


class SessionAlreadyEndedError(ConflictError):
    """Raised when ending a session that has already ended."""

    def __init__(self, session_id: str) -> None:
        super().__init__("Session is already ended", {"session_id": session_id})


class SessionCodeUnavailableError(ConflictError):
    """Raised when every generated session identifier was already taken."""

    def __init__(self, attempts: int) -> None:
        super().__init__(
            "Could not allocate a session identifier, retry", {"attempts": attempts}
        )


class SessionInactiveError(QABoardException):
    """Raised when a question is posted to, or triaged in, an ended session."""

    status_code = 400

    def __init__(self, session_id: str, message: str = "Session is no longer active") -> None:
        super().__init__(message, {"session_id": session_id})


class UnauthorizedError(QABoardException):
    """Reserved for authentication failures."""

    status_code = 401


class ForbiddenError(QABoardException):
    """Reserved for authorization failures."""

    status_code = 403
