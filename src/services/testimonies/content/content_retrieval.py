"""
Content retrieval service for the public testimony listing.
Handles lookup by id, substring search, category filtering and pagination.
"""

import math
from typing import Dict, List, Optional
from fastapi import BackgroundTasks

from ..base import BaseService, TestimonyCacheManager, TestimonyValidator
from ..base.cache_manager import LISTING_TTL
from ....core.config import settings
from ....schemas.testimony_schemas import Testimony, PaginatedTestimonies, PaginationInfo


class ContentRetrieval(BaseService):
    """
    Paginated listing over the loaded corpus, ordered by magazine page.
    Results are cached for five minutes when Redis is available.
    """

    def __init__(self, testimonies: List[Testimony],
                 cache_manager: Optional[TestimonyCacheManager] = None,
                 validator: Optional[TestimonyValidator] = None):
        super().__init__(cache_manager, validator)
        self._testimonies = list(testimonies)
        self._by_page = sorted(self._testimonies, key=lambda t: t.page)
        self._by_id: Dict[str, Testimony] = {}
        for testimony in self._testimonies:
            self._by_id.setdefault(testimony.id, testimony)

    def get_service_name(self) -> str:
        """Get the service name."""
        return "content_retrieval"

    def get_testimony(self, testimony_id: str) -> Optional[Testimony]:
        return self._by_id.get(testimony_id)

    def list_testimonies(self, page: int = 1, limit: Optional[int] = None,
                         search: Optional[str] = None,
                         category: Optional[str] = None) -> PaginatedTestimonies:
        """
        List testimonies in page order.

        Args:
            page: 1-based page number
            limit: Page size, defaults to DEFAULT_PAGE_SIZE
            search: Case-insensitive substring looked up in title, author and content
            category: Exact category match

        Returns:
            PaginatedTestimonies: One page of testimonies and pagination info

        Raises:
            ValidationError: If page or limit are out of range
        """
        page, limit = self.validator.validate_pagination(
            page, limit if limit is not None else settings.default_page_size
        )

        matching = self._by_page
        if search and search.strip():
            needle = search.strip().lower()
            matching = [
                t for t in matching
                if needle in t.title.lower() or needle in t.author.lower() or needle in t.content.lower()
            ]
        if category:
            matching = [t for t in matching if t.category == category]

        total_count = len(matching)
        total_pages = math.ceil(total_count / limit)
        offset = (page - 1) * limit
        data = matching[offset:offset + limit]

        return PaginatedTestimonies(
            data=data,
            pagination=PaginationInfo(
                current_page=page,
                total_pages=total_pages,
                total_count=total_count,
                has_next_page=page < total_pages,
                has_previous_page=page > 1,
                page_size=limit,
                total_fetched=len(data),
            ),
        )

    async def get_listing(self, page: int = 1, limit: Optional[int] = None,
                          search: Optional[str] = None, category: Optional[str] = None,
                          background_tasks: Optional[BackgroundTasks] = None) -> Dict:
        """
        Cached variant of list_testimonies returning the serialized payload.

        Returns:
            Dict: {"data": [...], "pagination": {...}} with camelCase keys
        """
        cache_key = self.cache.listing_key(
            {"page": page, "limit": limit, "search": search, "category": category}
        )
        try:
            cached = await self._cache_get(cache_key)
            if cached:
                return cached

            listing = self.list_testimonies(page=page, limit=limit, search=search, category=category)
            payload = listing.model_dump(mode="json", by_alias=True)

            if self.cache.enabled:
                await self._cache_set(cache_key, payload, LISTING_TTL, background_tasks)
            return payload
        except Exception as e:
            self._handle_service_error(e, "Error listing testimonies")
