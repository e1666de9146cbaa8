"""
Fixtures seeding the in-memory database.

Dependencies: pytest, qaboard.boundary.db.CRUD
System role: Database rows for CRUD and service tests
"""

from datetime import datetime, timedelta, timezone

import pytest

from qaboard.boundary.db.CRUD.course_crud import course_crud
from qaboard.boundary.db.CRUD.session_crud import session_crud

BASE_TIME = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
async def course(test_async_db):
    """A persisted course."""
    record = await course_crud.create(
        test_async_db,
        title="Systems",
        code="CS301",
        instructor="Dr. A",
    )
    await test_async_db.commit()
    return record


@pytest.fixture
async def active_session(test_async_db, course):
    """A running session of ``course``."""
    record = await session_crud.create(
        test_async_db,
        session_code="VV-ACTIVE1",
        course_id=course.id,
        instructor="Dr. A",
        is_active=True,
        start_time=BASE_TIME + timedelta(hours=2),
    )
    await test_async_db.commit()
    return record


@pytest.fixture
async def ended_session(test_async_db, course):
    """An ended session of ``course``, started before ``active_session``."""
    record = await session_crud.create(
        test_async_db,
        session_code="VV-ENDED01",
        course_id=course.id,
        instructor="Dr. A",
        is_active=False,
        start_time=BASE_TIME,
        end_time=BASE_TIME + timedelta(hours=1),
    )
    await test_async_db.commit()
    return record
