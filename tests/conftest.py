"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite engine and sessions, app with database override,
service mocks, and factories for service-shaped payloads
Dependencies: pytest, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine sharing one connection (StaticPool) with foreign keys on
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from qaboard.boundary.db.base import Base
    from qaboard.boundary.db.connection import enable_sqlite_foreign_keys
    from qaboard.boundary.db import models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Session factory configured like the application's."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create a session on the in-memory database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def db_app(test_session_factory):
    """
    Application whose database dependency points at the test engine.

    Each request gets its own session, as in production.
    """
    from qaboard.api.main import create_app
    from qaboard.boundary.db.connection import get_async_db

    app = create_app()

    async def override_get_async_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_get_async_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def mock_course_service():
    """AsyncMock standing in for CourseService."""
    return AsyncMock()


@pytest.fixture
def mock_session_service():
    """AsyncMock standing in for SessionService."""
    return AsyncMock()


@pytest.fixture
def mock_question_service():
    """AsyncMock standing in for QuestionService."""
    return AsyncMock()


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def course_payload(now):
    """Course data shaped like CourseService output."""
    return {
        "id": uuid.uuid4(),
        "title": "Systems",
        "code": "CS301",
        "instructor": "Dr. A",
        "description": None,
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def session_payload(now, course_payload):
    """Session data shaped like SessionService output."""
    return {
        "id": uuid.uuid4(),
        "session_id": "VV-7K2Q9A",
        "course_id": course_payload["id"],
        "course": {
            key: course_payload[key]
            for key in ("id", "title", "code", "instructor", "description")
        },
        "instructor": "Dr. A",
        "is_active": True,
        "start_time": now,
        "end_time": None,
        "question_count": 0,
        "duration": 0.0,
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def question_payload(now, session_payload):
    """Question data shaped like QuestionService output."""
    return {
        "id": uuid.uuid4(),
        "session_id": session_payload["session_id"],
        "session_ref": session_payload["id"],
        "student_name": "Bob",
        "content": "What is a mutex?",
        "is_answered": False,
        "is_important": False,
        "status": "unanswered",
        "timestamp": now,
        "last_status_update": now,
        "created_at": now,
        "updated_at": now,
    }
