"""
API test fixtures.

Provides: TestClient over the full application with every service
dependency replaced by its AsyncMock
Dependencies: fastapi.testclient
System role: HTTP-level test harness
"""

import pytest
from fastapi.testclient import TestClient

from qaboard.api.deps.dependencies import (
    get_course_service,
    get_question_service,
    get_session_service,
)
from qaboard.api.main import create_app


@pytest.fixture
def app(mock_course_service, mock_session_service, mock_question_service):
    application = create_app()
    application.dependency_overrides[get_course_service] = lambda: mock_course_service
    application.dependency_overrides[get_session_service] = lambda: mock_session_service
    application.dependency_overrides[get_question_service] = lambda: mock_question_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
