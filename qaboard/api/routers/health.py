"""
Health check API endpoints.

Routes: GET /, GET /health, GET /health/db

Dependencies: qaboard.boundary
System role: Health check HTTP API
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from qaboard import __version__
from qaboard.boundary.db import get_async_db
from qaboard.configs import Settings
from qaboard.api.deps.dependencies import get_settings_dependency
from qaboard.models.common import CamelModel

logger = logging.getLogger(__name__)


class HealthResponse(CamelModel):
    """Health check response model."""

    success: bool = True
    status: str
    message: str
    timestamp: datetime
    version: str = __version__


router = APIRouter(tags=["health"])


@router.get("/")
async def index(settings: Settings = Depends(get_settings_dependency)) -> dict:
    """Describe the API and where its resources live."""
    prefix = settings.api.prefix
    return {
        "success": True,
        "message": "Welcome to the QA Board API",
        "description": "Classroom Q&A board: sessions, questions and instructor triage",
        "version": __version__,
        "endpoints": {
            "health": "/health",
            "courses": f"{prefix}/courses",
            "sessions": f"{prefix}/sessions",
            "questions": f"{prefix}/questions",
        },
    }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(
        status="healthy",
        message="QA Board API is running",
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/health/db", response_model=HealthResponse)
async def health_check_db(db: AsyncSession = Depends(get_async_db)):
    """Database health check: one round trip."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Database health check failed", extra={"error_type": type(e).__name__})
        body = HealthResponse(
            success=False,
            status="unhealthy",
            message="Database connection failed",
            timestamp=datetime.now(timezone.utc),
        )
        return JSONResponse(status_code=503, content=body.model_dump(mode="json", by_alias=True))

    return HealthResponse(
        status="healthy",
        message="Database connection OK",
        timestamp=datetime.now(timezone.utc),
    )
