"""
Content overview service.
Derives filter dropdown options, category statistics and the featured selection.
"""

from collections import Counter
from typing import List, Optional

from ..base import BaseService, TestimonyCacheManager
from ....core.config import settings
from ....schemas.testimony_schemas import Testimony, FilterOptions, CorpusStats


class ContentOverview(BaseService):
    """
    Summary views over the corpus. All operations are pure reads.
    """

    def __init__(self, testimonies: List[Testimony],
                 cache_manager: Optional[TestimonyCacheManager] = None,
                 featured_ids: Optional[List[str]] = None):
        """
        Initialize the overview service.

        Args:
            testimonies: The loaded corpus
            cache_manager: Cache manager instance
            featured_ids: Hand-picked ids in display order, defaults to FEATURED_TESTIMONY_IDS
        """
        super().__init__(cache_manager)
        self._testimonies = list(testimonies)
        self.featured_ids = list(featured_ids if featured_ids is not None else settings.featured_testimony_ids)

    def get_service_name(self) -> str:
        """Get the service name."""
        return "content_overview"

    def get_filter_options(self) -> FilterOptions:
        """
        Distinct values for each filter, each list sorted ascending.
        """
        return FilterOptions(
            categories=sorted({t.category for t in self._testimonies}),
            relationships=sorted({t.relationship for t in self._testimonies}),
            authors=sorted({t.author for t in self._testimonies}),
            tags=sorted({tag for t in self._testimonies for tag in t.tags}),
        )

    def get_stats(self) -> CorpusStats:
        """
        Total count and per-category counts. Categories with no entries are absent.
        """
        counts = Counter(t.category for t in self._testimonies)
        return CorpusStats(total=len(self._testimonies), categories=dict(counts))

    def get_featured_testimonies(self, count: int = 6) -> List[Testimony]:
        """
        Up to `count` testimonies from the featured list, in list order.
        Ids missing from the corpus are skipped.
        """
        if count <= 0:
            return []

        by_id = {}
        for testimony in self._testimonies:
            by_id.setdefault(testimony.id, testimony)

        featured = [by_id[fid] for fid in self.featured_ids if fid in by_id]
        return featured[:count]
