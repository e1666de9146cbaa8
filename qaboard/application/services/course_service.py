"""
Course service orchestrator.

Coordinates course lifecycle operations.

Dependencies: qaboard.boundary.db.CRUD, qaboard.core
System role: Course use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from qaboard.boundary.db.CRUD.course_crud import course_crud
from qaboard.boundary.db.CRUD.session_crud import session_crud
from qaboard.boundary.db.models.course_model import CourseModel
from qaboard.core.exceptions import (
    CourseCodeExistsError,
    CourseHasActiveSessionError,
    CourseNotFoundError,
)

logger = logging.getLogger(__name__)

# Default for update fields where None is a meaningful value
_UNCHANGED = object()


def normalize_course_code(code: str) -> str:
    """Course codes are stored trimmed and upper-cased."""
    return code.strip().upper()


def course_to_dict(course: CourseModel) -> dict:
    return {
        "id": course.id,
        "title": course.title,
        "code": course.code,
        "instructor": course.instructor,
        "description": course.description,
        "created_at": course.created_at,
        "updated_at": course.updated_at,
    }


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize course service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_course(
        self,
        title: str,
        code: str,
        instructor: str,
        description: str | None = None,
    ) -> dict:
        """
        Create a course with a unique, upper-cased code.

        Args:
            title: Course title
            code: Course code (normalized to upper-case)
            instructor: Instructor name
            description: Course description (optional)

        Returns:
            dict: Created course data

        Raises:
            CourseCodeExistsError: If another course already uses the code
        """
        code = normalize_course_code(code)
        if await course_crud.code_taken(self.db, code):
            raise CourseCodeExistsError(code)

        course = await course_crud.create(
            self.db,
            title=title,
            code=code,
            instructor=instructor,
            description=description,
        )
        await self.db.commit()

        logger.info(
            "Course created",
            extra={"course_id": str(course.id), "course_code": code},
        )
        return course_to_dict(course)

    async def get_course(self, course_id: UUID) -> dict:
        """
        Get course by ID.

        Args:
            course_id: Course UUID

        Returns:
            dict: Course data with id, title, code, instructor, description, timestamps

        Raises:
            CourseNotFoundError: If course not found
        """
        course = await course_crud.get_by_id(self.db, course_id)
        if not course:
            raise CourseNotFoundError(course_id)
        return course_to_dict(course)

    async def get_all_courses(
        self,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        """
        Get all courses, newest first.

        Args:
            limit: Maximum number of courses to return
            offset: Number of courses to skip

        Returns:
            list[dict]: List of course dicts
        """
        courses = await course_crud.get_all(
            self.db,
            limit=limit,
            offset=offset,
            newest_first=True,
        )
        return [course_to_dict(c) for c in courses]

    async def update_course(
        self,
        course_id: UUID,
        title: str | None = None,
        code: str | None = None,
        instructor: str | None = None,
        description: str | None | object = _UNCHANGED,
    ) -> dict:
        """
        Update the provided course fields.

        Title, code and instructor are required columns, so None leaves them
        as they are. A None or blank description clears it.

        Args:
            course_id: Course UUID
            title: New title (optional)
            code: New code (optional, normalized to upper-case)
            instructor: New instructor name (optional)
            description: New description; None clears it (optional)

        Returns:
            dict: Updated course data

        Raises:
            CourseNotFoundError: If course not found
            CourseCodeExistsError: If the new code belongs to another course
        """
        course = await course_crud.get_by_id(self.db, course_id)
        if not course:
            raise CourseNotFoundError(course_id)

        updates = {}
        if title is not None:
            updates["title"] = title
        if code is not None:
            updates["code"] = normalize_course_code(code)
            if await course_crud.code_taken(self.db, updates["code"], exclude_id=course_id):
                raise CourseCodeExistsError(updates["code"])
        if instructor is not None:
            updates["instructor"] = instructor
        if description is not _UNCHANGED:
            updates["description"] = description or None

        if not updates:
            return course_to_dict(course)

        updated = await course_crud.update_by_id(self.db, course_id, **updates)
        if not updated:
            raise CourseNotFoundError(course_id)
        await self.db.commit()

        logger.info(
            "Course updated",
            extra={"course_id": str(course_id), "updates": list(updates.keys())},
        )
        return course_to_dict(updated)

    async def delete_course(self, course_id: UUID) -> dict:
        """
        Delete a course together with its ended sessions and their questions.

        Args:
            course_id: Course UUID

        Returns:
            dict: Identifier of the deleted course

        Raises:
            CourseNotFoundError: If course not found
            CourseHasActiveSessionError: If one of its sessions is still running
        """
        if not await course_crud.exists(self.db, course_id):
            raise CourseNotFoundError(course_id)

        active = await session_crud.get_active_for_course(self.db, course_id)
        if active is not None:
            raise CourseHasActiveSessionError(course_id, active.session_code)

        deleted = await course_crud.delete_with_sessions(self.db, course_id)
        if not deleted:
            raise CourseNotFoundError(course_id)
        await self.db.commit()

        logger.info("Course deleted", extra={"course_id": str(course_id)})
        return {"id": course_id}
