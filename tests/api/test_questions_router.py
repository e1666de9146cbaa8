"""
Test suite for the questions router.

System role: Verification of question endpoints and envelopes
"""

import uuid

import pytest

from qaboard.core.exceptions import (
    DuplicateQuestionError,
    InvalidStatusActionError,
    QuestionNotFoundError,
    SessionInactiveError,
)


@pytest.fixture
def listing(question_payload) -> dict:
    return {
        "questions": [question_payload],
        "grouped_by_student": {"Bob": [question_payload]},
        "session": {"session_id": "VV-7K2Q9A", "is_active": True, "question_count": 1},
        "count": 1,
        "total": 1,
        "page": 1,
        "pages": 1,
    }


class TestPostQuestion:

    def test_post_question(self, client, mock_question_service, question_payload) -> None:
        # Arrange
        mock_question_service.post_question.return_value = question_payload

        # Act
        response = client.post(
            "/api/v1/questions",
            json={"sessionId": "VV-7K2Q9A", "studentName": " Bob ", "content": " What is a mutex? "},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["data"]["studentName"] == "Bob"
        assert body["data"]["status"] == "unanswered"
        mock_question_service.post_question.assert_awaited_once_with(
            session_code="VV-7K2Q9A",
            student_name="Bob",
            content="What is a mutex?",
        )

    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"sessionId": "VV-7K2Q9A", "studentName": "Bob", "content": "Hi?"}, "content"),
            ({"sessionId": "VV-7K2Q9A", "studentName": "", "content": "What is a mutex?"}, "studentName"),
            ({"sessionId": "vv-7k2q9a", "studentName": "Bob", "content": "What is a mutex?"}, "sessionId"),
        ],
    )
    def test_body_validation(self, client, mock_question_service, payload, field) -> None:
        response = client.post("/api/v1/questions", json=payload)

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == [field]
        mock_question_service.post_question.assert_not_called()

    def test_duplicate(self, client, mock_question_service) -> None:
        mock_question_service.post_question.side_effect = DuplicateQuestionError("VV-7K2Q9A", "Bob")

        response = client.post(
            "/api/v1/questions",
            json={"sessionId": "VV-7K2Q9A", "studentName": "Bob", "content": "What is a mutex?"},
        )

        assert response.status_code == 409
        assert response.json()["message"] == "You have already posted this exact question"

    def test_inactive_session(self, client, mock_question_service) -> None:
        mock_question_service.post_question.side_effect = SessionInactiveError("VV-7K2Q9A")

        response = client.post(
            "/api/v1/questions",
            json={"sessionId": "VV-7K2Q9A", "studentName": "Bob", "content": "What is a mutex?"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Session is no longer active"


class TestListQuestions:

    def test_listing_envelope(self, client, mock_question_service, listing) -> None:
        mock_question_service.get_session_questions.return_value = listing

        response = client.get(
            "/api/v1/questions/session/VV-7K2Q9A",
            params={"status": "answered", "student": "  bo ", "limit": 10},
        )

        assert response.status_code == 200
        body = response.json()
        assert (body["count"], body["total"], body["page"], body["pages"]) == (1, 1, 1, 1)
        assert list(body["data"]["groupedByStudent"]) == ["Bob"]
        assert body["data"]["session"]["questionCount"] == 1
        mock_question_service.get_session_questions.assert_awaited_once_with(
            "VV-7K2Q9A", status="answered", student="bo", page=1, limit=10
        )

    def test_limit_is_capped(self, client) -> None:
        response = client.get("/api/v1/questions/session/VV-7K2Q9A", params={"limit": 101})

        assert response.status_code == 400

    def test_malformed_session(self, client, mock_question_service) -> None:
        response = client.get("/api/v1/questions/session/ABC")

        assert response.status_code == 400
        mock_question_service.get_session_questions.assert_not_called()

    def test_by_student(self, client, mock_question_service, question_payload) -> None:
        mock_question_service.get_questions_by_student.return_value = {
            "questions_by_student": {"Bob": [question_payload]},
            "student_stats": {"Bob": {"total": 1, "answered": 0, "unanswered": 1, "important": 0}},
            "session": {"session_id": "VV-7K2Q9A", "is_active": True, "question_count": 1},
            "count": 1,
            "total_questions": 1,
        }

        response = client.get("/api/v1/questions/session/VV-7K2Q9A/by-student")

        assert response.status_code == 200
        body = response.json()
        assert body["totalQuestions"] == 1
        assert body["data"]["studentStats"]["Bob"]["unanswered"] == 1


class TestUpdateStatus:

    def test_update_status(self, client, mock_question_service, question_payload) -> None:
        mock_question_service.update_status.return_value = {
            **question_payload,
            "is_answered": True,
            "status": "answered",
        }

        response = client.put(
            f"/api/v1/questions/{question_payload['id']}/status",
            json={"action": "mark_answered"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "answered"
        assert response.json()["message"] == "Question status updated successfully"

    def test_unknown_action_is_rejected_before_the_service(self, client, mock_question_service) -> None:
        response = client.put(f"/api/v1/questions/{uuid.uuid4()}/status", json={"action": "mark_urgent"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "action"
        mock_question_service.update_status.assert_not_called()

    def test_service_action_error(self, client, mock_question_service) -> None:
        mock_question_service.update_status.side_effect = InvalidStatusActionError("x")

        response = client.put(f"/api/v1/questions/{uuid.uuid4()}/status", json={"action": "toggle_answered"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid action specified"


class TestDeleteQuestion:

    def test_delete(self, client, mock_question_service) -> None:
        question_id = uuid.uuid4()
        mock_question_service.delete_question.return_value = {"id": question_id}

        response = client.delete(f"/api/v1/questions/{question_id}")

        assert response.status_code == 200
        assert response.json()["message"] == "Question deleted successfully"

    def test_unknown_question(self, client, mock_question_service) -> None:
        question_id = uuid.uuid4()
        mock_question_service.delete_question.side_effect = QuestionNotFoundError(question_id)

        response = client.delete(f"/api/v1/questions/{question_id}")

        assert response.status_code == 404
