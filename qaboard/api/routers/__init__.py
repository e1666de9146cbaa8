"""
API routers package.

Each router handles a specific domain of endpoints.
"""

from .courses import router as courses_router
from .health import router as health_router
from .questions import router as questions_router
from .sessions import router as sessions_router

__all__ = [
    "courses_router",
    "health_router",
    "questions_router",
    "sessions_router",
]
