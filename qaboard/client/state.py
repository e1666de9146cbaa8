"""
Client application state.

AppState holds everything the board UI needs and is passed explicitly to
the controller. Only the identity subset (role, session, course, student
name, joined flag) survives restarts, through StateStore.

Dependencies: dataclasses, pydantic
System role: Client-side state container and persistence boundary
"""

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError as SchemaValidationError

from qaboard.core.question_status import StatusFilter
from qaboard.models.common import CamelModel

logger = logging.getLogger(__name__)


class UserRole(str, enum.Enum):
    INSTRUCTOR = "instructor"
    STUDENT = "student"


@dataclass
class QuestionFilters:
    status: StatusFilter = StatusFilter.ALL
    student: str = ""


class PersistedState(CamelModel):
    """On-disk schema of the AppState subset that survives restarts."""

    user_role: UserRole | None = None
    current_session: dict | None = None
    current_course: dict | None = None
    student_name: str = ""
    session_joined: bool = False


@dataclass
class AppState:
    """
    Mutable board state.

    Transition methods mirror the actions a UI dispatches; each one only
    touches the fields it names, except where noted.
    """

    # User and session
    user_role: UserRole | None = None
    current_session: dict | None = None
    current_course: dict | None = None

    # Student
    student_name: str = ""
    session_joined: bool = False

    # UI
    loading: bool = False
    error: str | None = None
    success: str | None = None

    # Board data
    questions: list[dict] = field(default_factory=list)
    questions_by_student: dict[str, list[dict]] = field(default_factory=dict)
    session_snapshot: dict | None = None

    filters: QuestionFilters = field(default_factory=QuestionFilters)
    is_online: bool = True

    def set_user_role(self, role: UserRole | str) -> None:
        self.user_role = UserRole(role)

    def set_current_session(self, session: dict | None) -> None:
        """Switch sessions; questions of the previous session are dropped."""
        self.current_session = session
        self.questions = []
        self.questions_by_student = {}
        self.session_snapshot = None

    def update_current_session(self, session: dict) -> None:
        """Refresh the current session record without dropping its questions."""
        self.current_session = session

    def set_current_course(self, course: dict | None) -> None:
        self.current_course = course

    def clear_session(self) -> None:
        """Leave the session: drops session, course, questions, filters and student identity."""
        self.current_session = None
        self.current_course = None
        self.questions = []
        self.questions_by_student = {}
        self.session_snapshot = None
        self.filters = QuestionFilters()
        self.session_joined = False
        self.student_name = ""

    def set_student_name(self, name: str) -> None:
        self.student_name = name

    def set_session_joined(self, joined: bool) -> None:
        self.session_joined = joined

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    def set_error(self, error: str | None) -> None:
        self.error = error
        self.loading = False

    def set_success(self, success: str | None) -> None:
        self.success = success
        self.loading = False

    def clear_messages(self) -> None:
        self.error = None
        self.success = None

    def set_questions(self, questions: list[dict]) -> None:
        self.questions = list(questions)

    def add_question(self, question: dict) -> None:
        self.questions = [*self.questions, question]

    def update_question(self, question: dict) -> None:
        """Merge ``question`` into the entry with the same id."""
        self.questions = [
            {**q, **question} if q.get("id") == question.get("id") else q
            for q in self.questions
        ]

    def remove_question(self, question_id: str) -> None:
        self.questions = [q for q in self.questions if q.get("id") != str(question_id)]

    def set_questions_by_student(self, grouped: dict[str, list[dict]]) -> None:
        self.questions_by_student = dict(grouped)

    def set_status_filter(self, status: StatusFilter | str) -> None:
        self.filters = QuestionFilters(status=StatusFilter(status), student=self.filters.student)

    def set_student_filter(self, student: str) -> None:
        self.filters = QuestionFilters(status=self.filters.status, student=student)

    def clear_filters(self) -> None:
        self.filters = QuestionFilters()

    def set_online_status(self, online: bool) -> None:
        self.is_online = online

    def persisted(self) -> PersistedState:
        """The subset of state written by StateStore."""
        return PersistedState(
            user_role=self.user_role,
            current_session=self.current_session,
            current_course=self.current_course,
            student_name=self.student_name,
            session_joined=self.session_joined,
        )

    @classmethod
    def from_persisted(cls, data: PersistedState) -> "AppState":
        return cls(
            user_role=data.user_role,
            current_session=data.current_session,
            current_course=data.current_course,
            student_name=data.student_name,
            session_joined=data.session_joined,
        )


class StateStore:
    """JSON file holding the persisted subset of AppState."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def save(self, state: AppState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            state.persisted().model_dump_json(by_alias=True, indent=2),
            encoding="utf-8",
        )

    def load(self) -> AppState:
        """
        Restore state from disk.

        Returns:
            AppState: Restored state, or a fresh one when the file is missing
            or does not match PersistedState
        """
        if not self.path.exists():
            return AppState()
        try:
            data = PersistedState.model_validate_json(self.path.read_bytes())
        except SchemaValidationError as e:
            logger.warning(
                "Discarding unreadable client state",
                extra={"path": str(self.path), "error_count": e.error_count()},
            )
            return AppState()
        return AppState.from_persisted(data)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
