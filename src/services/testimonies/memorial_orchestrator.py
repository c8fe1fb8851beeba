"""
Memorial orchestrator service.
Builds every testimony service over one loaded corpus and exposes a single facade.
"""

from typing import Dict, List, Optional, Any
from fastapi import BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession

from .base import BaseService, TestimonyCacheManager, TestimonyValidator
from ...core.config import settings
from ...schemas.testimony_schemas import (
    Testimony, SearchResult, FilterOptions, CorpusStats,
    TestimonyImageSources, GalleryImage, Chapter, ChapterDetail,
)

# Content services
from .content import ContentLoader, ContentRetrieval, ContentOverview, ChapterCatalog

# Search services
from .search import TestimonySearchEngine, QueryProcessor, ResultHighlighter, sort_results

# Image services
from .images import ImageCatalog, GalleryResolver


class MemorialOrchestrator(BaseService):
    """
    Main orchestrator for the memorial testimony services.
    One instance per loaded corpus; rebuild it to pick up corpus changes.
    """

    def __init__(self, testimonies: List[Testimony], redis_client=None,
                 content_loader: Optional[ContentLoader] = None,
                 chapters: Optional[List[Chapter]] = None,
                 image_filenames: Optional[List[str]] = None,
                 featured_ids: Optional[List[str]] = None):
        """
        Initialize the orchestrator.

        Args:
            testimonies: The loaded corpus
            redis_client: Optional Redis client for caching listings
            content_loader: Loader that produced the corpus, kept for source info
            chapters: Chapter list, read from CHAPTERS_DATA_FILE if omitted
            image_filenames: Image inventory, the bundled list if omitted
            featured_ids: Featured testimony ids, FEATURED_TESTIMONY_IDS if omitted
        """
        self.cache = TestimonyCacheManager(redis_client, settings.cache_prefix)
        self.validator = TestimonyValidator()
        super().__init__(self.cache, self.validator)

        self.content_loader = content_loader

        # Content services
        self.content_retrieval = ContentRetrieval(testimonies, self.cache, self.validator)
        self.content_overview = ContentOverview(testimonies, self.cache, featured_ids)
        self.chapter_catalog = ChapterCatalog(testimonies, self.cache, chapters)

        # Search services
        self.search_engine = TestimonySearchEngine(testimonies, self.cache)
        self.query_processor = QueryProcessor(self.cache)
        self.result_highlighter = ResultHighlighter(self.cache)

        # Image services
        self.image_catalog = ImageCatalog(image_filenames, self.cache)
        self.gallery_resolver = GalleryResolver(self.image_catalog, self.cache)

    @classmethod
    async def create(cls, redis_client=None, db_session: Optional[AsyncSession] = None,
                     content_loader: Optional[ContentLoader] = None, **kwargs) -> "MemorialOrchestrator":
        """
        Load the corpus from the configured source and build the services.
        """
        loader = content_loader or ContentLoader()
        testimonies = await loader.load_testimonies(db_session)
        return cls(testimonies, redis_client=redis_client, content_loader=loader, **kwargs)

    def get_service_name(self) -> str:
        """Get the service name."""
        return "memorial_orchestrator"

    # Search

    def search(self, query: Any = "", filters: Optional[Any] = None) -> List[SearchResult]:
        return self.search_engine.search(query, filters)

    def search_testimonies(self, query: Optional[str] = None, category: Optional[str] = None,
                           relationship: Optional[str] = None, author: Optional[str] = None,
                           tags: Any = None, sort_by: Optional[str] = None,
                           highlight: bool = True, preview_length: Optional[int] = None,
                           limit: Optional[int] = None, offset: int = 0) -> Dict:
        """
        Search with request-style parameters, for the HTTP layer.

        Returns:
            Dict: {"query", "filters", "total", "results"}
        """
        try:
            normalized = self.query_processor.normalize_query(self.validator.validate_search_query(query))
            filters = self.query_processor.parse_filters(category, relationship, author, tags)

            results = self.search_engine.search(normalized, filters)
            if sort_by:
                results = sort_results(results, sort_by)

            total = len(results)
            page = results[offset:offset + limit] if limit else results[offset:]
            if highlight:
                page = self.result_highlighter.decorate_all(page, preview_length)

            return {
                "query": normalized,
                "filters": filters.to_dict(),
                "total": total,
                "results": page,
            }
        except Exception as e:
            self._handle_service_error(e, f"Error searching testimonies with query: {query}")

    def get_testimony_by_id(self, testimony_id: str) -> Optional[Testimony]:
        return self.search_engine.get_testimony_by_id(testimony_id)

    def get_all_testimonies(self) -> List[Testimony]:
        return self.search_engine.get_all_testimonies()

    def get_testimonies_by_category(self, category: str) -> List[Testimony]:
        return self.search_engine.get_testimonies_by_category(category)

    # Overview

    def get_filter_options(self) -> FilterOptions:
        return self.content_overview.get_filter_options()

    def get_stats(self) -> CorpusStats:
        return self.content_overview.get_stats()

    def get_featured_testimonies(self, count: int = 6) -> List[Testimony]:
        return self.content_overview.get_featured_testimonies(count)

    # Listing

    async def get_listing(self, page: int = 1, limit: Optional[int] = None,
                          search: Optional[str] = None, category: Optional[str] = None,
                          background_tasks: Optional[BackgroundTasks] = None) -> Dict:
        return await self.content_retrieval.get_listing(page, limit, search, category, background_tasks)

    # Images

    def get_testimony_images(self, testimony: Testimony) -> TestimonyImageSources:
        return self.gallery_resolver.get_image_sources(testimony)

    def get_images_for_page_number(self, page_number: int) -> List[str]:
        return self.image_catalog.get_images_for_page_number(page_number)

    def get_images_for_page_range(self, start_page: int, end_page: int) -> List[str]:
        start_page, end_page = self.validator.validate_page_range(start_page, end_page)
        return self.image_catalog.get_images_for_page_range(start_page, end_page)

    def get_images_for_section(self, section_title: str) -> List[GalleryImage]:
        return self.image_catalog.get_images_for_section(section_title)

    def get_all_images(self) -> List[str]:
        return self.image_catalog.get_all_images()

    # Chapters

    def get_chapters(self) -> List[Chapter]:
        return self.chapter_catalog.get_all_chapters()

    def get_chapter_detail(self, slug: str) -> Optional[ChapterDetail]:
        return self.chapter_catalog.get_chapter_detail(slug)

    async def health_check(self) -> dict:
        """
        Corpus and cache status.
        """
        cache_healthy = await self.cache.health_check()
        info = self.content_loader.get_file_info() if self.content_loader else {"source": "memory"}
        return {
            "service": self.get_service_name(),
            "healthy": len(self.search_engine) > 0,
            "testimonies": len(self.search_engine),
            "source": info,
            "cache_enabled": self.cache.enabled,
            "cache_healthy": cache_healthy,
        }
