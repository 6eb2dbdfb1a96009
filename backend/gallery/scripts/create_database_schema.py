"""
Create Database Schema Script
Creates all tables defined in SQLAlchemy models (no migration history).
For versioned schema changes use Alembic: `alembic upgrade head`.
"""

import asyncio
import sys
from typing import List

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine

from gallery.core.database import Base, dispose_engine, get_database_url, get_engine
from gallery.core.logging import get_logger
import gallery.models  # noqa: F401  Register all models on Base.metadata

logger = get_logger(__name__)

EXPECTED_TABLES = ["Component", "ComponentVersion", "Favorite", "User"]


async def create_all_tables(engine: AsyncEngine | None = None) -> List[str]:
    """Create all tables and return the names of the tables now present."""
    engine = engine or get_engine()
    logger.info("Creating database schema", database_url=get_database_url())

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    logger.info("Tables created", tables=tables)

    missing_tables = set(EXPECTED_TABLES) - set(tables)
    if missing_tables:
        logger.error("Missing expected tables", missing_tables=sorted(missing_tables))
    else:
        logger.info("All expected tables created successfully")
    return tables


async def main() -> int:
    try:
        await create_all_tables()
        return 0
    except Exception as e:
        logger.error("Failed to create database schema", error=str(e))
        return 1
    finally:
        await dispose_engine()


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
