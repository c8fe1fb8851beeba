"""
Copy the testimonies JSON file into the database tables.

Usage:
    python scripts/migrate_json_to_db.py [path/to/testimonies.json]

The tables are cleared first, so the script can be re-run after editing the JSON.
Cached listing pages are dropped afterwards when Redis is reachable.
"""

import asyncio
import logging
import os
import sys

from redis.asyncio import Redis

# Add the project root directory to the path so we can import src
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.core.config import settings  # noqa: E402
from src.database import init_db, close_db, get_async_session  # noqa: E402
from src.services.testimonies import ContentLoader, ContentStore, TestimonyCacheManager  # noqa: E402
from src.utils.logging.error_logger import error_logger  # noqa: E402

# Set up logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


async def clear_cached_listings():
    redis = Redis.from_url(settings.redis_url, decode_responses=True, socket_connect_timeout=5)
    try:
        await redis.ping()
    except Exception as e:
        logger.warning(f"Redis not reachable, cached listings left to expire: {e}")
        await redis.close()
        return
    try:
        await TestimonyCacheManager(redis, settings.cache_prefix).clear_listings()
    finally:
        await redis.close()


async def migrate(data_file_path=None):
    loader = ContentLoader(data_file_path=data_file_path, source="json")
    testimonies = await loader.load_testimonies()

    for message in loader.get_load_errors():
        logger.warning(f"Not migrated: {message}")

    logger.info(f"Migrating {len(testimonies)} testimonies to {settings.database_url.split('@')[-1]}")
    await init_db()
    try:
        async with get_async_session() as session:
            counts = await ContentStore(session).import_testimonies(testimonies)
    finally:
        await close_db()

    logger.info(
        f"Migrated {counts['testimonies']} testimonies, {counts['images']} images "
        f"and {counts['links']} image links"
    )
    await clear_cached_listings()
    return counts


def main():
    data_file_path = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        asyncio.run(migrate(data_file_path))
    except Exception as e:
        logger.error(f"Migration failed: {e}")
        error_logger.log_error_sync(
            e,
            request_info=None,
            additional_context={"script": "migrate_json_to_db", "data_file": data_file_path}
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
