"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: qaboard.configs, qaboard.application, qaboard.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from qaboard.configs import Settings, get_settings
from qaboard.boundary.db import get_async_db
from qaboard.application.services import (
    CourseService,
    QuestionService,
    SessionService,
)


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_course_service(db: AsyncSession = Depends(get_async_db)) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db)


def get_session_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db, code_attempts=settings.api.session_code_attempts)


def get_question_service(db: AsyncSession = Depends(get_async_db)) -> QuestionService:
    """
    Get question service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        QuestionService: Question service instance
    """
    return QuestionService(db=db)
