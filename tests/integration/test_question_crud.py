"""
Integration tests for question persistence.

System role: Verification of QuestionCRUD filtering and ordering
"""

from datetime import timedelta

import pytest

from qaboard.boundary.db.CRUD.question_crud import question_crud
from qaboard.core.question_status import QuestionStatus


@pytest.fixture
async def questions(test_async_db, active_session, base_time):
    """Four questions posted a minute apart, oldest first."""
    rows = [
        ("Bob", "Plain question?", False, False),
        ("Alice", "Answered question?", True, False),
        ("bobby", "Important question?", False, True),
        ("Carol", "Answered and important?", True, True),
    ]
    created = []
    for minute, (name, content, answered, important) in enumerate(rows):
        created.append(
            await question_crud.create(
                test_async_db,
                session_code=active_session.session_code,
                session_id=active_session.id,
                student_name=name,
                content=content,
                is_answered=answered,
                is_important=important,
                timestamp=base_time + timedelta(minutes=minute),
            )
        )
    await test_async_db.commit()
    return created


class TestQuestionListing:

    async def test_newest_first(self, test_async_db, active_session, questions) -> None:
        listed = await question_crud.get_by_session(test_async_db, active_session.session_code)

        assert [q.student_name for q in listed] == ["Carol", "bobby", "Alice", "Bob"]

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("answered", {"Alice", "Carol"}),
            ("unanswered", {"Bob", "bobby"}),
            ("important", {"bobby", "Carol"}),
            ("all", {"Bob", "Alice", "bobby", "Carol"}),
        ],
    )
    async def test_status_filters_test_flags(
        self, test_async_db, active_session, questions, status, expected
    ) -> None:
        listed = await question_crud.get_by_status(test_async_db, active_session.session_code, status)

        assert {q.student_name for q in listed} == expected
        assert await question_crud.count_by_session(
            test_async_db, active_session.session_code, status=status
        ) == len(expected)

    async def test_student_filter_is_case_insensitive_substring(
        self, test_async_db, active_session, questions
    ) -> None:
        listed = await question_crud.get_by_session(
            test_async_db, active_session.session_code, student_name="BOB"
        )

        assert [q.student_name for q in listed] == ["bobby", "Bob"]

    async def test_student_filter_escapes_wildcards(
        self, test_async_db, active_session, questions
    ) -> None:
        listed = await question_crud.get_by_session(
            test_async_db, active_session.session_code, student_name="%"
        )

        assert listed == []

    async def test_limit_and_offset(self, test_async_db, active_session, questions) -> None:
        listed = await question_crud.get_by_session(
            test_async_db, active_session.session_code, limit=2, offset=2
        )

        assert [q.student_name for q in listed] == ["Alice", "Bob"]

    async def test_other_session_is_excluded(self, test_async_db, ended_session, questions) -> None:
        assert await question_crud.count_by_session(test_async_db, ended_session.session_code) == 0


class TestDuplicateDetection:

    async def test_find_duplicate_is_exact(self, test_async_db, active_session, questions) -> None:
        code = active_session.session_code

        assert await question_crud.find_duplicate(test_async_db, code, "Bob", "Plain question?")
        assert await question_crud.find_duplicate(test_async_db, code, "Bob", "plain question?") is None
        assert await question_crud.find_duplicate(test_async_db, code, "Alice", "Plain question?") is None


class TestStatusPersistence:

    async def test_status_round_trips_as_value(self, test_async_db, active_session) -> None:
        question = await question_crud.create(
            test_async_db,
            session_code=active_session.session_code,
            session_id=active_session.id,
            student_name="Bob",
            content="Does status persist?",
        )
        question.apply_status_action("mark_important")
        await test_async_db.commit()

        listed = await question_crud.get_by_status(
            test_async_db, active_session.session_code, "important"
        )

        assert listed[0].status is QuestionStatus.IMPORTANT

    async def test_timestamps_reload_as_utc(self, test_async_db, active_session) -> None:
        question = await question_crud.create(
            test_async_db,
            session_code=active_session.session_code,
            session_id=active_session.id,
            student_name="Bob",
            content="Which timezone am I in?",
        )
        await test_async_db.commit()
        test_async_db.expunge_all()

        reloaded = await question_crud.get_by_id(test_async_db, question.id)

        assert reloaded.timestamp.tzinfo is not None
        assert reloaded.timestamp.utcoffset() == timedelta(0)
        assert reloaded.last_status_update.utcoffset() == timedelta(0)
        assert reloaded.created_at.utcoffset() == timedelta(0)
