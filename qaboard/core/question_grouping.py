"""
Grouping of questions by author.

Dependencies: dataclasses
System role: Per-student views of a session's questions
"""

from dataclasses import asdict, dataclass
from typing import Any, Iterable, TypeVar

Q = TypeVar("Q")


@dataclass
class StudentStats:
    """
    Per-student question counts.

    Counts are not exclusive: a question that is both answered and important
    counts toward ``answered`` and ``important``.
    """

    total: int = 0
    answered: int = 0
    unanswered: int = 0
    important: int = 0

    def add(self, question: Any) -> None:
        self.total += 1
        if question.is_answered:
            self.answered += 1
        else:
            self.unanswered += 1
        if question.is_important:
            self.important += 1

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def group_by_student(questions: Iterable[Q]) -> dict[str, list[Q]]:
    """
    Group questions by student name.

    Students appear in order of their first question and each student's
    questions keep the input order.
    """
    grouped: dict[str, list[Q]] = {}
    for question in questions:
        grouped.setdefault(question.student_name, []).append(question)
    return grouped


def student_stats(questions: Iterable[Any]) -> dict[str, StudentStats]:
    """Count total, answered, unanswered and important questions per student."""
    stats: dict[str, StudentStats] = {}
    for question in questions:
        stats.setdefault(question.student_name, StudentStats()).add(question)
    return stats
