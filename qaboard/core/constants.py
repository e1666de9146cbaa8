"""
Application constants.

Response messages and validation limits shared by the API schemas,
the services and the client validators.
"""

COURSE_TITLE_MAX_LENGTH = 100
COURSE_CODE_MAX_LENGTH = 20
INSTRUCTOR_MAX_LENGTH = 50
COURSE_DESCRIPTION_MAX_LENGTH = 500

QUESTION_CONTENT_MIN_LENGTH = 5
QUESTION_CONTENT_MAX_LENGTH = 1000
STUDENT_NAME_MIN_LENGTH = 1
STUDENT_NAME_MAX_LENGTH = 50

DEFAULT_PAGE = 1
DEFAULT_QUESTION_LIMIT = 50
DEFAULT_SESSION_LIMIT = 10
MAX_LIMIT = 100


class Messages:
    """Human-readable messages returned in the response envelope."""

    COURSE_CREATED = "Course created successfully"
    COURSE_UPDATED = "Course updated successfully"
    COURSE_DELETED = "Course deleted successfully"
    SESSION_STARTED = "Session started successfully"
    SESSION_ENDED = "Session ended successfully"
    QUESTION_POSTED = "Question posted successfully"
    QUESTION_UPDATED = "Question status updated successfully"
    QUESTION_DELETED = "Question deleted successfully"

    VALIDATION_ERROR = "Validation errors"
    INVALID_SESSION_ID = "Invalid session ID format"
    SERVER_ERROR = "Internal server error"
