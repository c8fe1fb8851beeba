"""
Content services for testimonies.
Handles corpus loading, listing, overviews and chapters.
"""

from .content_loader import ContentLoader, CorpusLoadError
from .content_retrieval import ContentRetrieval
from .content_overview import ContentOverview
from .chapter_catalog import ChapterCatalog
from .content_store import ContentStore

__all__ = [
    'ContentLoader',
    'CorpusLoadError',
    'ContentRetrieval',
    'ContentOverview',
    'ChapterCatalog',
    'ContentStore',
]
