"""
Database models package.

Exports:
  - CourseModel: Course ORM model
  - SessionModel: Session ORM model
  - QuestionModel: Question ORM model

Dependencies: sqlalchemy, qaboard.boundary.db.base
System role: Database model definitions for domain entities
"""

from qaboard.boundary.db.models.course_model import CourseModel
from qaboard.boundary.db.models.session_model import SessionModel
from qaboard.boundary.db.models.question_model import QuestionModel

__all__ = [
    "CourseModel",
    "SessionModel",
    "QuestionModel",
]
