"""
Course and session response mapping utilities.

Transforms service dictionaries into Pydantic response models.
Centralizes response construction logic.

Dependencies: qaboard.models.course, qaboard.models.session
System role: Course and session response transformation
"""

from typing import Any

from qaboard.models.course import CourseResponse
from qaboard.models.session import SessionResponse


def map_course_to_response(course_data: dict[str, Any]) -> CourseResponse:
    """
    Transform course data dictionary into CourseResponse.

    Args:
        course_data: Dictionary containing course fields
            Expected keys: id, title, code, instructor, description, created_at, updated_at

    Returns:
        CourseResponse: Pydantic model for API response
    """
    return CourseResponse.model_validate(course_data)


def map_courses_to_response(courses_data: list[dict[str, Any]]) -> list[CourseResponse]:
    """Transform a list of course dictionaries into CourseResponses."""
    return [map_course_to_response(course) for course in courses_data]


def map_session_to_response(session_data: dict[str, Any]) -> SessionResponse:
    """
    Transform session data dictionary into SessionResponse.

    Args:
        session_data: Dictionary containing session fields and a ``course`` summary

    Returns:
        SessionResponse: Pydantic model for API response
    """
    return SessionResponse.model_validate(session_data)


def map_sessions_to_response(sessions_data: list[dict[str, Any]]) -> list[SessionResponse]:
    """Transform a list of session dictionaries into SessionResponses."""
    return [map_session_to_response(session) for session in sessions_data]
