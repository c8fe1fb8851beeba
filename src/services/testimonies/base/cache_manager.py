"""
Cache manager for testimony services.
Extends the base cache manager with listing-specific keys.
"""

import hashlib
import json
import logging
from typing import Dict, Any

from ....utils.cache import CacheManager, MINUTE

logger = logging.getLogger(__name__)

# Testimony-specific cache key prefixes
CACHE_KEY_LISTING_PREFIX = "testimonies:list:"

# Public listing responses are served stale-while-revalidate for 5 minutes
LISTING_TTL = 5 * MINUTE


class TestimonyCacheManager(CacheManager):
    """
    Cache manager for the public testimony listing.
    Works without Redis; every lookup is then a miss.
    """

    def __init__(self, redis_client, prefix: str = "memorial"):
        super().__init__(redis_client, prefix)
        self.logger = logger

    @staticmethod
    def listing_hash(params: Dict[str, Any]) -> str:
        """
        Stable hash of listing parameters.

        Args:
            params: Query parameters of the listing request

        Returns:
            str: Hex digest usable as a cache key suffix
        """
        raw = json.dumps(params, sort_keys=True, default=str)
        return hashlib.md5(raw.encode("utf-8")).hexdigest()

    def listing_key(self, params: Dict[str, Any]) -> str:
        return f"{CACHE_KEY_LISTING_PREFIX}{self.listing_hash(params)}"

    async def clear_listings(self) -> int:
        """
        Drop every cached listing page, e.g. after the corpus was re-imported.

        Returns:
            int: Number of keys deleted
        """
        deleted = await self.clear_pattern(f"{CACHE_KEY_LISTING_PREFIX}*")
        self.logger.info(f"Cleared {deleted} cached testimony listings")
        return deleted
