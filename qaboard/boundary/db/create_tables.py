"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, qaboard.configs
System role: Database schema initialization

Usage:
    python -m qaboard.boundary.db.create_tables
    python -m qaboard.boundary.db.create_tables --drop
"""

import asyncio
import logging
import sys

from qaboard.boundary.db import models  # noqa: F401
from qaboard.boundary.db.base import Base
from qaboard.boundary.db.connection import create_all_tables, dispose_engine, get_async_engine
from qaboard.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def main(drop: bool = False) -> None:
    """Create (optionally after dropping) every table."""
    try:
        if drop:
            await drop_all_tables()
            logger.info("All tables dropped")
        await create_all_tables()
        logger.info("All tables created", extra={"tables": sorted(Base.metadata.tables)})
    finally:
        await dispose_engine()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main(drop="--drop" in sys.argv[1:]))
