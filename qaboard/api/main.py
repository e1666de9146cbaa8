"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers, middleware and exception
handlers, and configures the uvicorn server.

Dependencies: fastapi, qaboard.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qaboard import __version__
from qaboard.api import api_router
from qaboard.api.error_handlers import register_exception_handlers
from qaboard.api.routers import health_router
from qaboard.api.security import SecurityHeadersMiddleware
from qaboard.boundary.db.connection import create_all_tables, dispose_engine
from qaboard.configs import Settings, get_settings
from qaboard.observability.logger import configure_logging
from qaboard.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    if settings.database.create_tables:
        await create_all_tables()
        logger.info("Database tables ready")

    yield

    # Shutdown
    await dispose_engine()
    logger.info("Database engine disposed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Settings to build the app from (defaults to get_settings())

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="QA Board API",
        description="Classroom Q&A board with session-scoped questions",
        version=__version__,
        lifespan=lifespan,
    )

    # Any origin in development, configured origins elsewhere
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else settings.api.cors_origins,
        allow_credentials=not settings.is_development,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Outermost last: correlation ID is set before request logging runs
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router, prefix=settings.api.prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "qaboard.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
