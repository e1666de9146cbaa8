"""
Course ORM model.

Represents a course taught by an instructor. Sessions are opened against a
course; the course code is the unique, upper-cased handle instructors use.

Dependencies: sqlalchemy, qaboard.boundary.db.base
System role: Course persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qaboard.boundary.db.base import Base, UUIDMixin, TimestampMixin


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Course title (100 char limit)
        code: Unique course code, stored upper-case (20 char limit)
        instructor: Instructor name (50 char limit)
        description: Optional course description (500 char limit)
        sessions: Q&A sessions opened for this course
        created_at: Course creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        sessions: One-to-many with SessionModel (deleted with the course)
    """

    __tablename__ = "courses"

    title: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        doc="Course title",
    )

    code: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        unique=True,
        index=True,
        doc="Upper-cased unique course code",
    )

    instructor: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        doc="Instructor name",
    )

    description: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        default=None,
        doc="Course description",
    )

    # Relationships
    sessions = relationship(
        "SessionModel",
        back_populates="course",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
