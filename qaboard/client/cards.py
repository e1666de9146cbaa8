"""
Question card view model.

Presentation rules for one question on the board: color by flags,
student initials, relative time label and status badges.

Dependencies: datetime
System role: Client-side question rendering
"""

from dataclasses import dataclass
from datetime import datetime, timezone

UNANSWERED_COLOR = "#FFEB3B"
ANSWERED_COLOR = "#4CAF50"
IMPORTANT_COLOR = "#FF5722"
ANSWERED_IMPORTANT_COLOR = "#9C27B0"

SMALL_CARD_CONTENT_LIMIT = 100


def card_color(is_answered: bool, is_important: bool) -> str:
    """Pick the card color; answered and important together get their own color."""
    if is_answered and is_important:
        return ANSWERED_IMPORTANT_COLOR
    if is_important:
        return IMPORTANT_COLOR
    if is_answered:
        return ANSWERED_COLOR
    return UNANSWERED_COLOR


def initials(name: str) -> str:
    """Up to two upper-cased initials, e.g. ``"ada lovelace"`` -> ``"AL"``."""
    parts = name.split()
    return "".join(part[0] for part in parts[:2]).upper() or "?"


def parse_timestamp(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def relative_time(timestamp: str | datetime, now: datetime | None = None) -> str:
    """
    Human label for how long ago something happened.

    Returns ``Just now`` under a minute, ``Nm ago`` under an hour, ``Nh ago``
    under a day, and the calendar date otherwise.
    """
    moment = parse_timestamp(timestamp)
    now = now or datetime.now(timezone.utc)
    seconds = (now - moment).total_seconds()

    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        return f"{int(seconds // 60)}m ago"
    if seconds < 86400:
        return f"{int(seconds // 3600)}h ago"
    return moment.strftime("%Y-%m-%d")


@dataclass(frozen=True)
class QuestionCard:
    """A question as shown on the board."""

    id: str
    student_name: str
    content: str
    is_answered: bool
    is_important: bool
    timestamp: datetime

    @classmethod
    def from_api(cls, question: dict) -> "QuestionCard":
        """Build a card from a question as returned by the API (camelCase keys)."""
        return cls(
            id=str(question["id"]),
            student_name=question["studentName"],
            content=question["content"],
            is_answered=bool(question.get("isAnswered")),
            is_important=bool(question.get("isImportant")),
            timestamp=parse_timestamp(question["timestamp"]),
        )

    @property
    def color(self) -> str:
        return card_color(self.is_answered, self.is_important)

    @property
    def initials(self) -> str:
        return initials(self.student_name)

    @property
    def badges(self) -> list[str]:
        badges = []
        if self.is_answered:
            badges.append("Answered")
        if self.is_important:
            badges.append("Important")
        return badges or ["New"]

    def time_label(self, now: datetime | None = None) -> str:
        return relative_time(self.timestamp, now)

    def display_content(self, small: bool = False) -> str:
        if small and len(self.content) > SMALL_CARD_CONTENT_LIMIT:
            return self.content[:SMALL_CARD_CONTENT_LIMIT] + "..."
        return self.content

    def render(self, now: datetime | None = None, small: bool = False) -> str:
        """Plain-text rendering for terminals and logs."""
        header = f"[{self.initials}] {self.student_name} · {self.time_label(now)}"
        badges = " ".join(f"<{badge}>" for badge in self.badges)
        return f"{header}\n{self.display_content(small)}\n{badges}"
