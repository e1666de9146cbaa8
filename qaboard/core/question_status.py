"""
Question status engine.

A question carries two independent flags, ``is_answered`` and
``is_important``. Its ``status`` is a derived view of those flags where
importance takes precedence over answered-ness. Status filters, on the other
hand, test the flags independently: a question that is both answered and
important matches the ``answered`` filter as well as the ``important`` one.

Dependencies: enum, dataclasses
System role: Derivation and mutation rules for question status
"""

import enum
from dataclasses import dataclass

from qaboard.core.exceptions import InvalidStatusActionError


class QuestionStatus(str, enum.Enum):
    """Display status derived from the question flags."""

    UNANSWERED = "unanswered"
    ANSWERED = "answered"
    IMPORTANT = "important"


class StatusAction(str, enum.Enum):
    """Instructor actions on a question's flags."""

    TOGGLE_ANSWERED = "toggle_answered"
    TOGGLE_IMPORTANT = "toggle_important"
    MARK_ANSWERED = "mark_answered"
    MARK_IMPORTANT = "mark_important"
    UNMARK_ANSWERED = "unmark_answered"
    UNMARK_IMPORTANT = "unmark_important"


class StatusFilter(str, enum.Enum):
    """Status values accepted when listing questions."""

    ALL = "all"
    ANSWERED = "answered"
    UNANSWERED = "unanswered"
    IMPORTANT = "important"


def derive_status(is_answered: bool, is_important: bool) -> QuestionStatus:
    """
    Derive the display status from the two flags.

    Args:
        is_answered: Whether the instructor marked the question answered
        is_important: Whether the instructor marked the question important

    Returns:
        QuestionStatus: IMPORTANT whenever the important flag is set,
        otherwise ANSWERED or UNANSWERED
    """
    if is_answered and is_important:
        return QuestionStatus.IMPORTANT
    if is_answered:
        return QuestionStatus.ANSWERED
    if is_important:
        return QuestionStatus.IMPORTANT
    return QuestionStatus.UNANSWERED


@dataclass(frozen=True)
class StatusFlags:
    """Immutable pair of question flags."""

    is_answered: bool = False
    is_important: bool = False

    @property
    def status(self) -> QuestionStatus:
        return derive_status(self.is_answered, self.is_important)


def parse_action(action: "StatusAction | str") -> StatusAction:
    """
    Coerce an action tag into a StatusAction.

    Raises:
        InvalidStatusActionError: If the tag is not one of the six actions
    """
    if isinstance(action, StatusAction):
        return action
    try:
        return StatusAction(action)
    except ValueError:
        raise InvalidStatusActionError(str(action)) from None


def apply_action(flags: StatusFlags, action: "StatusAction | str") -> StatusFlags:
    """
    Apply an instructor action to a pair of flags.

    Toggle actions flip the named flag, mark actions force it true and unmark
    actions force it false. The flag not named by the action is untouched.

    Args:
        flags: Current flags
        action: Action tag

    Returns:
        StatusFlags: New flags (equal to ``flags`` when the action is a no-op)

    Raises:
        InvalidStatusActionError: If the action tag is unknown
    """
    action = parse_action(action)
    answered, important = flags.is_answered, flags.is_important

    if action is StatusAction.TOGGLE_ANSWERED:
        answered = not answered
    elif action is StatusAction.TOGGLE_IMPORTANT:
        important = not important
    elif action is StatusAction.MARK_ANSWERED:
        answered = True
    elif action is StatusAction.MARK_IMPORTANT:
        important = True
    elif action is StatusAction.UNMARK_ANSWERED:
        answered = False
    elif action is StatusAction.UNMARK_IMPORTANT:
        important = False

    return StatusFlags(is_answered=answered, is_important=important)


def filter_predicate(status: "StatusFilter | str | None") -> tuple[str, bool] | None:
    """
    Map a status filter onto the flag it tests.

    Args:
        status: ``answered``, ``unanswered``, ``important``, ``all`` or None

    Returns:
        tuple[str, bool] | None: (flag attribute name, required value), or
        None when no filtering applies (``all`` or any unknown value)
    """
    value = status.value if isinstance(status, StatusFilter) else status
    if value == StatusFilter.ANSWERED.value:
        return ("is_answered", True)
    if value == StatusFilter.UNANSWERED.value:
        return ("is_answered", False)
    if value == StatusFilter.IMPORTANT.value:
        return ("is_important", True)
    return None


def matches_filter(flags: StatusFlags, status: "StatusFilter | str | None") -> bool:
    """Check whether a pair of flags passes a status filter."""
    predicate = filter_predicate(status)
    if predicate is None:
        return True
    attribute, expected = predicate
    return getattr(flags, attribute) is expected
