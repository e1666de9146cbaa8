"""
Client-side input validation.

Mirrors the server limits so obviously invalid input never leaves the client.
Each validator returns an error message, or None when the value is valid.

Dependencies: qaboard.core
System role: Client-side validation
"""

from qaboard.core.constants import (
    COURSE_CODE_MAX_LENGTH,
    COURSE_DESCRIPTION_MAX_LENGTH,
    COURSE_TITLE_MAX_LENGTH,
    INSTRUCTOR_MAX_LENGTH,
    QUESTION_CONTENT_MAX_LENGTH,
    QUESTION_CONTENT_MIN_LENGTH,
    STUDENT_NAME_MAX_LENGTH,
)
from qaboard.core.session_codes import is_valid_session_code


def validate_student_name(name: str | None) -> str | None:
    name = (name or "").strip()
    if not name:
        return "Student name is required"
    if len(name) > STUDENT_NAME_MAX_LENGTH:
        return f"Student name cannot exceed {STUDENT_NAME_MAX_LENGTH} characters"
    return None


def validate_question_content(content: str | None) -> str | None:
    content = (content or "").strip()
    if not content:
        return "Question content is required"
    if len(content) < QUESTION_CONTENT_MIN_LENGTH:
        return f"Question must be at least {QUESTION_CONTENT_MIN_LENGTH} characters long"
    if len(content) > QUESTION_CONTENT_MAX_LENGTH:
        return f"Question cannot exceed {QUESTION_CONTENT_MAX_LENGTH} characters"
    return None


def validate_session_id(session_id: str | None) -> str | None:
    session_id = (session_id or "").strip()
    if not session_id:
        return "Session ID is required"
    if not is_valid_session_code(session_id):
        return "Invalid session ID format. Expected format: VV-XXXXXX"
    return None


def validate_course(
    title: str | None,
    code: str | None,
    instructor: str | None,
    description: str | None = None,
) -> list[str]:
    """Collect every problem with a course form; an empty list means valid."""
    errors = []
    title, code, instructor = (title or "").strip(), (code or "").strip(), (instructor or "").strip()

    if not title:
        errors.append("Course title is required")
    elif len(title) > COURSE_TITLE_MAX_LENGTH:
        errors.append(f"Course title cannot exceed {COURSE_TITLE_MAX_LENGTH} characters")

    if not code:
        errors.append("Course code is required")
    elif len(code) > COURSE_CODE_MAX_LENGTH:
        errors.append(f"Course code cannot exceed {COURSE_CODE_MAX_LENGTH} characters")

    if not instructor:
        errors.append("Instructor name is required")
    elif len(instructor) > INSTRUCTOR_MAX_LENGTH:
        errors.append(f"Instructor name cannot exceed {INSTRUCTOR_MAX_LENGTH} characters")

    if description and len(description.strip()) > COURSE_DESCRIPTION_MAX_LENGTH:
        errors.append(f"Description cannot exceed {COURSE_DESCRIPTION_MAX_LENGTH} characters")

    return errors
