"""
Question ORM model.

Represents a question a student posted to a session. The ``status`` column
is a denormalized view of the two flags and is only written through
``apply_status_action``.

Dependencies: sqlalchemy, qaboard.boundary.db.base, qaboard.core.question_status
System role: Question persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, Enum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qaboard.boundary.db.base import Base, UUIDMixin, TimestampMixin, UTCDateTime, utcnow
from qaboard.core.question_status import (
    QuestionStatus,
    StatusAction,
    StatusFlags,
    apply_action,
)


class QuestionModel(Base, UUIDMixin, TimestampMixin):
    """
    Question ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        session_code: Shareable identifier of the owning session (denormalized)
        session_id: Owning session UUID
        student_name: Author name (50 char limit)
        content: Question text, 5-1000 chars after trimming
        is_answered: Instructor marked the question answered
        is_important: Instructor marked the question important
        status: Derived from the two flags (important wins over answered)
        timestamp: When the question was posted (UTC)
        last_status_update: Last time either flag changed (UTC)
    """

    __tablename__ = "questions"
    __table_args__ = (
        Index("ix_questions_session_timestamp", "session_code", "timestamp"),
        Index("ix_questions_session_status", "session_code", "status"),
        Index("ix_questions_session_answered", "session_code", "is_answered"),
        Index("ix_questions_session_important", "session_code", "is_important"),
        Index("ix_questions_student_session", "student_name", "session_code"),
    )

    session_code: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        index=True,
    )

    session_id: Mapped[UUID] = mapped_column(
        ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False,
    )

    student_name: Mapped[str] = mapped_column(String(50), nullable=False)

    content: Mapped[str] = mapped_column(String(1000), nullable=False)

    is_answered: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    is_important: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    status: Mapped[QuestionStatus] = mapped_column(
        Enum(
            QuestionStatus,
            native_enum=False,
            length=16,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=QuestionStatus.UNANSWERED,
    )

    timestamp: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
    )

    last_status_update: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
    )

    # Relationships
    session = relationship("SessionModel", back_populates="questions")

    @property
    def flags(self) -> StatusFlags:
        return StatusFlags(is_answered=bool(self.is_answered), is_important=bool(self.is_important))

    def apply_status_action(
        self,
        action: StatusAction | str,
        now: datetime | None = None,
    ) -> bool:
        """
        Apply an instructor action and keep ``status`` in sync with the flags.

        ``last_status_update`` only moves when a flag actually changes.

        Args:
            action: Status action tag
            now: Timestamp to record (defaults to current UTC time)

        Returns:
            bool: True if either flag changed

        Raises:
            InvalidStatusActionError: If the action tag is unknown
        """
        current = self.flags
        updated = apply_action(current, action)
        if updated == current:
            return False

        self.is_answered = updated.is_answered
        self.is_important = updated.is_important
        self.status = updated.status
        self.last_status_update = now or utcnow()
        return True
