"""
API routes module.

FastAPI routers for all versioned HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    courses_router,
    questions_router,
    sessions_router,
)

api_router = APIRouter()

# Include all versioned routers
api_router.include_router(courses_router)
api_router.include_router(sessions_router)
api_router.include_router(questions_router)

__all__ = ["api_router"]
