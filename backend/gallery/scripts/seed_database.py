"""
Seed Database Script
Clears the components table and repopulates it from the component registry.

Usage: gallery-seed   (or: python -m gallery.scripts.seed_database)
"""

import asyncio
import sys
from typing import Sequence

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.catalog.registry import COMPONENT_REGISTRY, ComponentEntry
from gallery.core.database import dispose_engine, get_session_factory
from gallery.core.logging import get_logger
from gallery.models.component import Component

logger = get_logger(__name__)


async def seed_components(
    session: AsyncSession,
    registry: Sequence[ComponentEntry] = COMPONENT_REGISTRY
) -> int:
    """
    Replace every component row with the registry entries.

    Existing components are deleted first (their favorites and versions
    cascade). Each entry is committed on its own, so a failure part way
    leaves the entries inserted before it.

    Returns:
        Number of components inserted
    """
    await session.execute(delete(Component))
    await session.commit()
    logger.info("Cleared existing components")

    for entry in registry:
        data = entry.to_dict()
        data["dependencies"] = data.get("dependencies") or []
        session.add(Component(**data))
        await session.commit()
        logger.info("Added component", component_id=entry.id, name=entry.name)

    logger.info("Successfully seeded components", count=len(registry))
    return len(registry)


async def main() -> int:
    """Seed the configured database; returns the process exit status."""
    logger.info("Starting database seed...")
    try:
        async with get_session_factory()() as session:
            await seed_components(session)
        return 0
    except Exception as e:
        logger.error("Error seeding database", error=str(e), exc_info=True)
        return 1
    finally:
        await dispose_engine()


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
