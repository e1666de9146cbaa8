"""
Test suite for client state and its persistence.

System role: Verification of state transitions and StateStore
"""

import json
from unittest.mock import AsyncMock

import pytest

from qaboard.client.board import QuestionBoard
from qaboard.client.state import AppState, QuestionFilters, StateStore, UserRole
from qaboard.core.question_status import StatusFilter


@pytest.fixture
def state() -> AppState:
    return AppState(
        user_role=UserRole.STUDENT,
        current_session={"sessionId": "VV-7K2Q9A"},
        current_course={"code": "CS301"},
        student_name="Bob",
        session_joined=True,
        questions=[{"id": "q1", "isAnswered": False}, {"id": "q2", "isAnswered": False}],
    )


class TestTransitions:

    def test_switching_session_drops_questions(self, state) -> None:
        state.set_current_session({"sessionId": "VV-OTHER1"})

        assert state.questions == []
        assert state.student_name == "Bob"

    def test_update_current_session_keeps_questions(self, state) -> None:
        state.update_current_session({"sessionId": "VV-7K2Q9A", "isActive": False})

        assert len(state.questions) == 2
        assert state.current_session["isActive"] is False

    def test_clear_session_resets_identity(self, state) -> None:
        state.set_status_filter("answered")

        state.clear_session()

        assert state.current_session is None
        assert state.current_course is None
        assert state.questions == []
        assert state.filters == QuestionFilters()
        assert (state.student_name, state.session_joined) == ("", False)

    def test_question_mutations(self, state) -> None:
        state.add_question({"id": "q3"})
        state.update_question({"id": "q1", "isAnswered": True})
        state.remove_question("q2")

        assert [q["id"] for q in state.questions] == ["q1", "q3"]
        assert state.questions[0]["isAnswered"] is True

    def test_messages_stop_loading(self, state) -> None:
        state.set_loading(True)
        state.set_error("nope")
        assert state.loading is False

        state.set_loading(True)
        state.set_success("yes")
        assert state.loading is False

        state.clear_messages()
        assert (state.error, state.success) == (None, None)

    def test_filters_are_independent(self, state) -> None:
        state.set_student_filter("bo")
        state.set_status_filter(StatusFilter.IMPORTANT)

        assert state.filters == QuestionFilters(status=StatusFilter.IMPORTANT, student="bo")

        state.clear_filters()
        assert state.filters.status is StatusFilter.ALL


class TestStateStore:

    def test_round_trip_keeps_identity_only(self, state, tmp_path) -> None:
        store = StateStore(tmp_path / "state.json")

        store.save(state)
        restored = store.load()

        assert restored.user_role is UserRole.STUDENT
        assert restored.current_session == {"sessionId": "VV-7K2Q9A"}
        assert restored.student_name == "Bob"
        assert restored.session_joined is True
        assert restored.questions == []

    def test_missing_file(self, tmp_path) -> None:
        assert StateStore(tmp_path / "absent.json").load() == AppState()

    def test_corrupt_file(self, tmp_path) -> None:
        path = tmp_path / "state.json"
        path.write_text("{not json", encoding="utf-8")

        assert StateStore(path).load() == AppState()

    def test_wrong_value_types_fall_back_to_fresh_state(self, tmp_path) -> None:
        path = tmp_path / "state.json"
        path.write_text(
            json.dumps(
                {"userRole": "student", "currentSession": "VV-ABC123", "studentName": 42}
            ),
            encoding="utf-8",
        )

        restored = StateStore(path).load()

        assert restored == AppState()
        assert QuestionBoard(AsyncMock(), restored, poll_interval=1).session_id is None

    def test_saved_file_uses_camel_case_keys(self, state, tmp_path) -> None:
        store = StateStore(tmp_path / "state.json")

        store.save(state)
        saved = json.loads(store.path.read_text(encoding="utf-8"))

        assert saved == {
            "userRole": "student",
            "currentSession": {"sessionId": "VV-7K2Q9A"},
            "currentCourse": {"code": "CS301"},
            "studentName": "Bob",
            "sessionJoined": True,
        }

    def test_clear(self, state, tmp_path) -> None:
        store = StateStore(tmp_path / "state.json")
        store.save(state)

        store.clear()
        store.clear()

        assert not store.path.exists()
