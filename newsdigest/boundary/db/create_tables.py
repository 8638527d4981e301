"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, newsdigest.configs
System role: Database schema initialization

Usage:
    python -m newsdigest.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from newsdigest.boundary.db.base import Base
from newsdigest.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from newsdigest.boundary.db.models import (  # noqa: F401
    ChunkGroupModel,
    ChunkModel,
    ContentItemModel,
    PartialSummaryModel,
    SummaryModel,
)

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Engine to use; defaults to the cached application engine

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails

    Usage:
        python -m newsdigest.boundary.db.create_tables
        # Or in code:
        await create_all_tables()
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"{__name__}:create_all_tables - Tables created successfully")


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Engine to use; defaults to the cached application engine

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info(f"{__name__}:drop_all_tables - All tables dropped")


if __name__ == "__main__":
    from newsdigest.observability import configure_logging

    configure_logging()
    asyncio.run(create_all_tables())
