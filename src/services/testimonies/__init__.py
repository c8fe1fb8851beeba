"""
Testimony services module.
Search, filtering, highlighting and image association over the memorial corpus.
"""

from .memorial_orchestrator import MemorialOrchestrator

# Base services
from .base import BaseService, TestimonyCacheManager, TestimonyValidator

# Content services
from .content import ContentLoader, ContentRetrieval, ContentOverview, ChapterCatalog, ContentStore

# Search services
from .search import TestimonySearchEngine, SearchFilters, QueryProcessor, ResultHighlighter

# Image services
from .images import ImageCatalog, GalleryResolver

__all__ = [
    # Main orchestrator
    'MemorialOrchestrator',

    # Base services
    'BaseService',
    'TestimonyCacheManager',
    'TestimonyValidator',

    # Content services
    'ContentLoader',
    'ContentRetrieval',
    'ContentOverview',
    'ChapterCatalog',
    'ContentStore',

    # Search services
    'TestimonySearchEngine',
    'SearchFilters',
    'QueryProcessor',
    'ResultHighlighter',

    # Image services
    'ImageCatalog',
    'GalleryResolver',
]
