"""
Blocks until the record store answers, then makes sure the image bucket
exists. Run before starting the API: ``python -m civicdesk.pre_start``.
"""

# Standard library imports
import asyncio
import sys

# Third-party imports
from minio.error import S3Error
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Local application imports
from civicdesk.core.db import async_engine
from civicdesk.core.monitoring.logging import get_logger
from civicdesk.services.storage.s3_service import S3Service

logger = get_logger("civicdesk.pre_start")

DB_MAX_ATTEMPTS = 30
DB_RETRY_SECONDS = 2


async def database_is_ready() -> bool:
    try:
        async with async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Record store not reachable yet: {e}")
        return False
    return True


async def wait_for_database(max_attempts: int = DB_MAX_ATTEMPTS, retry_seconds: float = DB_RETRY_SECONDS) -> bool:
    for attempt in range(1, max_attempts + 1):
        if await database_is_ready():
            logger.info(f"Record store ready after {attempt} attempt(s)")
            return True
        if attempt < max_attempts:
            await asyncio.sleep(retry_seconds)

    logger.error(f"Record store still unreachable after {max_attempts} attempts")
    return False


def storage_is_ready(storage: S3Service | None = None) -> bool:
    storage = storage or S3Service()
    try:
        storage.ensure_bucket()
    except S3Error as e:
        logger.error(f"Image bucket '{storage.bucket_name}' unavailable: {e}")
        return False
    logger.info(f"Image bucket '{storage.bucket_name}' ready")
    return True


async def main() -> None:
    try:
        if not await wait_for_database():
            sys.exit(1)
    finally:
        await async_engine.dispose()

    if not await asyncio.to_thread(storage_is_ready):
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
