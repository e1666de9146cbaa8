"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, FastAPI dependency
for database session injection, and schema creation.

Dependencies: sqlalchemy, qaboard.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from qaboard.configs import get_settings
from qaboard.boundary.db.base import Base


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create the process-wide async SQLAlchemy engine.

    PostgreSQL engines use a sized connection pool with pool_pre_ping=True to
    detect stale connections early. SQLite engines enable foreign keys on
    every new connection.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    settings = get_settings()
    db_config = settings.database

    if db_config.is_sqlite:
        engine = create_async_engine(
            db_config.async_database_url,
            echo=db_config.echo_sql,
        )
        enable_sqlite_foreign_keys(engine)
        return engine

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on SQLite foreign key enforcement for every pooled connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@lru_cache
def get_async_session_factory() -> async_sessionmaker:
    """
    Create async session factory for database operations.

    Returns async_sessionmaker bound to the engine with autoflush=False for
    explicit transaction control, and expire_on_commit=False so records
    remain readable after the service commits.

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    engine = get_async_engine()
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new async database session for each request and ensures it's closed
    after the route completes, even if exceptions occur. Uncommitted work is
    rolled back when the session closes.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Usage:
        from fastapi import Depends

        @app.get("/courses/{id}")
        async def get_course(id: UUID, db: AsyncSession = Depends(get_async_db)):
            return await course_crud.get_by_id(db, id)
    """
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        yield session


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all tables registered on Base.metadata.

    Idempotent: existing tables remain unchanged.

    Args:
        engine: Engine to use (defaults to the process-wide engine)
    """
    # Register models on the metadata before create_all
    from qaboard.boundary.db import models  # noqa: F401

    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Close pooled connections on application shutdown."""
    if get_async_engine.cache_info().currsize:
        await get_async_engine().dispose()
