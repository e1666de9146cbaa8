"""
Test suite for CourseService.

System role: Verification of course rules against the database
"""

import uuid

import pytest

from qaboard.core.exceptions import (
    CourseCodeExistsError,
    CourseHasActiveSessionError,
    CourseNotFoundError,
    SessionNotFoundError,
)


class TestCreateCourse:

    async def test_code_is_normalized(self, course) -> None:
        assert course["code"] == "CS301"
        assert course["description"] is None

    async def test_duplicate_code_ignores_case(self, course_service, course) -> None:
        with pytest.raises(CourseCodeExistsError) as exc_info:
            await course_service.create_course(title="Again", code=" Cs301 ", instructor="Dr. B")

        assert exc_info.value.status_code == 409


class TestReadCourses:

    async def test_get_course(self, course_service, course) -> None:
        fetched = await course_service.get_course(course["id"])

        assert fetched["title"] == "Systems"

    async def test_get_missing_course(self, course_service) -> None:
        with pytest.raises(CourseNotFoundError):
            await course_service.get_course(uuid.uuid4())

    async def test_newest_first(self, course_service, course) -> None:
        await course_service.create_course(title="Networks", code="CS302", instructor="Dr. B")

        courses = await course_service.get_all_courses()

        assert [c["code"] for c in courses] == ["CS302", "CS301"]


class TestUpdateCourse:

    async def test_partial_update(self, course_service, course) -> None:
        updated = await course_service.update_course(course["id"], title="Operating Systems", code="os1")

        assert updated["title"] == "Operating Systems"
        assert updated["code"] == "OS1"
        assert updated["instructor"] == "Dr. A"

    async def test_keeping_own_code_is_allowed(self, course_service, course) -> None:
        updated = await course_service.update_course(course["id"], code="CS301")

        assert updated["code"] == "CS301"

    async def test_taking_another_code_conflicts(self, course_service, course) -> None:
        other = await course_service.create_course(title="Networks", code="CS302", instructor="Dr. B")

        with pytest.raises(CourseCodeExistsError):
            await course_service.update_course(other["id"], code="cs301")

    async def test_null_description_clears_it(self, course_service) -> None:
        created = await course_service.create_course(
            title="Networks", code="CS302", instructor="Dr. B", description="Sockets and routing"
        )

        updated = await course_service.update_course(created["id"], description=None)

        assert updated["description"] is None
        assert updated["title"] == "Networks"

    async def test_omitted_description_is_kept(self, course_service) -> None:
        created = await course_service.create_course(
            title="Networks", code="CS302", instructor="Dr. B", description="Sockets and routing"
        )

        updated = await course_service.update_course(created["id"], title="Networking")

        assert updated["description"] == "Sockets and routing"

    async def test_empty_update_returns_course(self, course_service, course) -> None:
        assert (await course_service.update_course(course["id"]))["title"] == "Systems"

    async def test_update_missing(self, course_service) -> None:
        with pytest.raises(CourseNotFoundError):
            await course_service.update_course(uuid.uuid4(), title="x")


class TestDeleteCourse:

    async def test_active_session_blocks_delete(self, course_service, course, live_session) -> None:
        with pytest.raises(CourseHasActiveSessionError) as exc_info:
            await course_service.delete_course(course["id"])

        assert exc_info.value.data == {"sessionId": live_session["session_id"]}

    async def test_delete_removes_ended_sessions_and_questions(
        self, course_service, session_service, question_service, course, live_session
    ) -> None:
        # Arrange
        code = live_session["session_id"]
        await question_service.post_question(code, "Bob", "What is a mutex?")
        await session_service.end_session(code)

        # Act
        result = await course_service.delete_course(course["id"])

        # Assert
        assert result == {"id": course["id"]}
        assert await course_service.get_all_courses() == []
        with pytest.raises(SessionNotFoundError):
            await session_service.get_session(code)

    async def test_delete_missing(self, course_service) -> None:
        with pytest.raises(CourseNotFoundError):
            await course_service.delete_course(uuid.uuid4())
