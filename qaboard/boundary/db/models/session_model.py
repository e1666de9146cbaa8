"""
Session ORM model.

Represents one Q&A session of a course, identified to students by a short
shareable code. Questions are scoped to a session.

Dependencies: sqlalchemy, qaboard.boundary.db.base
System role: Session persistence for the Q&A board
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qaboard.boundary.db.base import Base, UUIDMixin, TimestampMixin, UTCDateTime, utcnow
from qaboard.core.session_lifecycle import session_duration_seconds


class SessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Session ORM model.

    A session starts active and is ended once by the instructor. The partial
    unique index on ``course_id WHERE is_active`` keeps at most one running
    session per course even when two creations race past the service check.

    Attributes:
        id: UUID primary key (auto-generated)
        session_code: Human-shareable identifier (``VV-XXXXXX``), unique
        course_id: Owning course
        instructor: Instructor name copied from the request
        is_active: False once the session has ended
        start_time: When the session was opened (UTC)
        end_time: When the session was ended (UTC), None while active
        question_count: Number of questions posted, maintained in the same
            transaction as question create/delete
        questions: Questions posted to this session (cascading delete)

    Relationships:
        course: Many-to-one with CourseModel
        questions: One-to-many with QuestionModel
    """

    __tablename__ = "sessions"
    __table_args__ = (
        Index(
            "uq_sessions_one_active_per_course",
            "course_id",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active"),
        ),
    )

    session_code: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        unique=True,
        index=True,
        doc="Shareable session identifier",
    )

    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Parent course ID",
    )

    instructor: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        index=True,
    )

    start_time: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
        index=True,
    )

    end_time: Mapped[datetime | None] = mapped_column(
        UTCDateTime(),
        nullable=True,
        default=None,
    )

    question_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    # Relationships
    course = relationship("CourseModel", back_populates="sessions")
    questions = relationship(
        "QuestionModel",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def duration_seconds(self) -> float:
        """Seconds the session has been (or was) running."""
        return session_duration_seconds(self.start_time, self.end_time)
