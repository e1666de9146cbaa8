"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - CourseModel, SessionModel, QuestionModel: Core domain entities
  - course_crud, session_crud, question_crud: CRUD operation singletons

Dependencies: sqlalchemy, qaboard.configs
System role: Database adapter providing persistent storage for courses,
sessions and questions.
"""

from qaboard.boundary.db.base import Base, TimestampMixin, UUIDMixin
from qaboard.boundary.db.connection import (
    create_all_tables,
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from qaboard.boundary.db.models import CourseModel, QuestionModel, SessionModel
from qaboard.boundary.db.CRUD import (
    BaseCRUD,
    CourseCRUD,
    SessionCRUD,
    QuestionCRUD,
    course_crud,
    session_crud,
    question_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "create_all_tables",
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "CourseModel",
    "SessionModel",
    "QuestionModel",
    # CRUD classes
    "BaseCRUD",
    "CourseCRUD",
    "SessionCRUD",
    "QuestionCRUD",
    # CRUD singletons
    "course_crud",
    "session_crud",
    "question_crud",
]
