"""Test suite for client-side validation."""

import pytest

from qaboard.client.validators import (
    validate_course,
    validate_question_content,
    validate_session_id,
    validate_student_name,
)


class TestValidators:

    @pytest.mark.parametrize(("name", "ok"), [("Bob", True), ("   ", False), (None, False), ("x" * 51, False)])
    def test_student_name(self, name, ok) -> None:
        assert (validate_student_name(name) is None) is ok

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("What is a mutex?", None),
            ("", "Question content is required"),
            ("Hi? ", "Question must be at least 5 characters long"),
            ("x" * 1001, "Question cannot exceed 1000 characters"),
        ],
    )
    def test_question_content(self, content, message) -> None:
        assert validate_question_content(content) == message

    def test_session_id(self) -> None:
        assert validate_session_id(" VV-7K2Q9A ") is None
        assert validate_session_id("") == "Session ID is required"
        assert validate_session_id("VV-12").startswith("Invalid session ID format")

    def test_course_collects_every_error(self) -> None:
        errors = validate_course("", "x" * 21, "Dr. A", description="d" * 501)

        assert errors == [
            "Course title is required",
            "Course code cannot exceed 20 characters",
            "Description cannot exceed 500 characters",
        ]
        assert validate_course("Systems", "CS301", "Dr. A") == []
