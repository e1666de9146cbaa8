"""
Service fixtures bound to the in-memory database.

Dependencies: pytest, qaboard.application.services
System role: Service instances sharing one test session
"""

import pytest

from qaboard.application.services import CourseService, QuestionService, SessionService


@pytest.fixture
def course_service(test_async_db) -> CourseService:
    return CourseService(test_async_db)


@pytest.fixture
def session_service(test_async_db) -> SessionService:
    return SessionService(test_async_db, code_attempts=3)


@pytest.fixture
def question_service(test_async_db) -> QuestionService:
    return QuestionService(test_async_db)


@pytest.fixture
async def course(course_service) -> dict:
    return await course_service.create_course(title="Systems", code="cs301", instructor="Dr. A")


@pytest.fixture
async def live_session(session_service, course) -> dict:
    return await session_service.create_session(course["id"], "Dr. A")
