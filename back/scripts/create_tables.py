#!/usr/bin/env python
"""
Script to create database tables for CivicDesk
"""

# Standard library imports
import asyncio
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Local application imports
from civicdesk.core.db import async_engine, run_with_new_session
from civicdesk.core.monitoring.logging import get_logger

# Import all models to register them with Base
from civicdesk.models import Base
from civicdesk.services.departments.department_services import seed_default_departments

logger = get_logger("civicdesk.scripts.create_tables")


async def create_tables(seed: bool = True) -> None:
    """Create all tables in the database and optionally seed the department catalog"""
    logger.info("Creating database tables...")

    try:
        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")

        if seed:
            created = await run_with_new_session(seed_default_departments)
            logger.info(f"Seeded {created} departments")
    except Exception:
        logger.exception("Error creating tables")
        sys.exit(1)
    finally:
        await async_engine.dispose()


if __name__ == "__main__":
    asyncio.run(create_tables(seed="--no-seed" not in sys.argv))
