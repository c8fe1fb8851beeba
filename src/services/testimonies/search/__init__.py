"""
Search services for testimonies.
Handles fuzzy search, filtering, and result highlighting.
"""

from .search_engine import TestimonySearchEngine
from .query_processor import QueryProcessor, SearchFilters, apply_filters, sort_results
from .result_highlighter import (
    ResultHighlighter,
    highlight_matches,
    truncate_content,
    parse_rich_text_to_plain_text,
    parse_rich_text_to_html,
    build_preview,
)

__all__ = [
    'TestimonySearchEngine',
    'QueryProcessor',
    'SearchFilters',
    'apply_filters',
    'sort_results',
    'ResultHighlighter',
    'highlight_matches',
    'truncate_content',
    'parse_rich_text_to_plain_text',
    'parse_rich_text_to_html',
    'build_preview',
]
