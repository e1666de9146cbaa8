"""
Test suite for the question status engine.

System role: Verification of flag derivation, actions and filters
"""

import pytest

from qaboard.core.exceptions import InvalidStatusActionError
from qaboard.core.question_status import (
    QuestionStatus,
    StatusAction,
    StatusFilter,
    StatusFlags,
    apply_action,
    derive_status,
    filter_predicate,
    matches_filter,
    parse_action,
)


class TestDeriveStatus:
    """Derivation of status from the two flags."""

    @pytest.mark.parametrize(
        ("is_answered", "is_important", "expected"),
        [
            (False, False, QuestionStatus.UNANSWERED),
            (True, False, QuestionStatus.ANSWERED),
            (False, True, QuestionStatus.IMPORTANT),
            (True, True, QuestionStatus.IMPORTANT),
        ],
    )
    def test_derive_status_table(self, is_answered, is_important, expected) -> None:
        assert derive_status(is_answered, is_important) is expected

    def test_flags_status_property_uses_derivation(self) -> None:
        assert StatusFlags(is_answered=True, is_important=True).status is QuestionStatus.IMPORTANT


class TestApplyAction:
    """Instructor actions on flag pairs."""

    def test_toggle_answered_twice_restores_flag(self) -> None:
        # Arrange
        flags = StatusFlags()

        # Act
        once = apply_action(flags, StatusAction.TOGGLE_ANSWERED)
        twice = apply_action(once, StatusAction.TOGGLE_ANSWERED)

        # Assert
        assert once.is_answered is True
        assert twice == flags

    def test_mark_answered_is_idempotent(self) -> None:
        first = apply_action(StatusFlags(), StatusAction.MARK_ANSWERED)
        second = apply_action(first, StatusAction.MARK_ANSWERED)

        assert first == second == StatusFlags(is_answered=True, is_important=False)

    def test_action_leaves_other_flag_untouched(self) -> None:
        flags = StatusFlags(is_answered=True, is_important=False)

        result = apply_action(flags, StatusAction.MARK_IMPORTANT)

        assert result == StatusFlags(is_answered=True, is_important=True)

    @pytest.mark.parametrize(
        ("action", "expected"),
        [
            ("toggle_important", StatusFlags(True, False)),
            ("mark_answered", StatusFlags(True, True)),
            ("mark_important", StatusFlags(True, True)),
            ("unmark_answered", StatusFlags(False, True)),
            ("unmark_important", StatusFlags(True, False)),
        ],
    )
    def test_actions_from_answered_and_important(self, action, expected) -> None:
        assert apply_action(StatusFlags(True, True), action) == expected

    def test_mark_important_then_mark_answered_stays_important(self) -> None:
        flags = apply_action(StatusFlags(), "mark_important")
        flags = apply_action(flags, "mark_answered")

        assert flags.status is QuestionStatus.IMPORTANT

    def test_unknown_action_raises(self) -> None:
        with pytest.raises(InvalidStatusActionError) as exc_info:
            apply_action(StatusFlags(), "mark_urgent")

        assert exc_info.value.status_code == 400
        assert exc_info.value.details["field"] == "action"

    def test_parse_action_accepts_enum_and_string(self) -> None:
        assert parse_action(StatusAction.MARK_ANSWERED) is StatusAction.MARK_ANSWERED
        assert parse_action("unmark_important") is StatusAction.UNMARK_IMPORTANT


class TestStatusFilters:
    """Filters test the flags independently of the derived status."""

    def test_answered_filter_includes_answered_and_important(self) -> None:
        both = StatusFlags(is_answered=True, is_important=True)

        assert both.status is QuestionStatus.IMPORTANT
        assert matches_filter(both, StatusFilter.ANSWERED)
        assert matches_filter(both, StatusFilter.IMPORTANT)
        assert not matches_filter(both, StatusFilter.UNANSWERED)

    def test_unanswered_filter_includes_important_unanswered(self) -> None:
        assert matches_filter(StatusFlags(is_important=True), "unanswered")

    @pytest.mark.parametrize("status", ["all", None, "bogus"])
    def test_all_and_unknown_disable_filtering(self, status) -> None:
        assert filter_predicate(status) is None
        assert matches_filter(StatusFlags(), status)

    def test_predicates(self) -> None:
        assert filter_predicate(StatusFilter.ANSWERED) == ("is_answered", True)
        assert filter_predicate("unanswered") == ("is_answered", False)
        assert filter_predicate("important") == ("is_important", True)
