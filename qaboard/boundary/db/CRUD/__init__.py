"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from qaboard.boundary.db.CRUD import course_crud, session_crud, question_crud

    # Use singleton instances
    course = await course_crud.get_by_code(db, "CS101")

    # Or instantiate classes directly for custom behavior
    from qaboard.boundary.db.CRUD import QuestionCRUD
    custom_crud = QuestionCRUD()
"""

from qaboard.boundary.db.CRUD.base_crud import BaseCRUD
from qaboard.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from qaboard.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from qaboard.boundary.db.CRUD.question_crud import QuestionCRUD, question_crud

__all__ = [
    "BaseCRUD",
    "CourseCRUD",
    "course_crud",
    "SessionCRUD",
    "session_crud",
    "QuestionCRUD",
    "question_crud",
]
