"""
Query processor for testimony search.
Normalizes queries, parses structured filters and orders results for display.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..base import BaseService, TestimonyCacheManager
from ....schemas.testimony_schemas import Testimony, SearchResult, SortOption


def _is_unset(value: Any) -> bool:
    return value is None or value == ""


@dataclass
class SearchFilters:
    """
    Conjunctive post-filters for search results. Unset or empty values do not filter.
    Values of the wrong type never raise; they simply match nothing.
    """
    category: Optional[Any] = None
    relationship: Optional[Any] = None
    author: Optional[Any] = None
    tags: Optional[Any] = field(default=None)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SearchFilters":
        if not isinstance(data, dict):
            return cls()
        return cls(
            category=data.get("category"),
            relationship=data.get("relationship"),
            author=data.get("author"),
            tags=data.get("tags"),
        )

    def is_empty(self) -> bool:
        return (
            _is_unset(self.category)
            and _is_unset(self.relationship)
            and _is_unset(self.author)
            and (self.tags is None or (isinstance(self.tags, (list, tuple)) and len(self.tags) == 0))
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "relationship": self.relationship,
            "author": self.author,
            "tags": list(self.tags) if isinstance(self.tags, (list, tuple)) else self.tags,
        }

    def matches(self, testimony: Testimony) -> bool:
        """True if the testimony passes every set filter."""
        if not _is_unset(self.category):
            if not isinstance(self.category, str) or testimony.category != self.category:
                return False

        if not _is_unset(self.relationship):
            if not isinstance(self.relationship, str) or testimony.relationship != self.relationship:
                return False

        if not _is_unset(self.author):
            if not isinstance(self.author, str) or self.author.lower() not in testimony.author.lower():
                return False

        if self.tags is not None:
            if not isinstance(self.tags, (list, tuple)):
                return False
            if self.tags:
                wanted = [tag.lower() for tag in self.tags if isinstance(tag, str)]
                item_tags = [tag.lower() for tag in testimony.tags]
                if not any(want in item_tag for want in wanted for item_tag in item_tags):
                    return False

        return True


def apply_filters(results: List[SearchResult], filters: Optional[SearchFilters]) -> List[SearchResult]:
    """Keep results whose item passes the filters, preserving order."""
    if filters is None or filters.is_empty():
        return results
    return [result for result in results if filters.matches(result.item)]


def sort_results(results: Sequence[SearchResult], sort_by: Any = SortOption.RELEVANCE) -> List[SearchResult]:
    """
    Presentation ordering. Unknown options fall back to relevance.
    Sorting is stable, so ties keep the incoming order.

    Args:
        results: Search results
        sort_by: relevance, author, title or page

    Returns:
        List[SearchResult]: New, sorted list
    """
    try:
        option = SortOption(sort_by)
    except ValueError:
        option = SortOption.RELEVANCE

    if option == SortOption.AUTHOR:
        return sorted(results, key=lambda r: r.item.author.casefold())
    if option == SortOption.TITLE:
        return sorted(results, key=lambda r: r.item.title.casefold())
    if option == SortOption.PAGE:
        return sorted(results, key=lambda r: r.item.page)
    # Unscored results count as perfect matches
    return sorted(results, key=lambda r: r.score or 0)


class QueryProcessor(BaseService):
    """
    Turns raw request parameters into a normalized query and SearchFilters.
    """

    def __init__(self, cache_manager: Optional[TestimonyCacheManager] = None):
        super().__init__(cache_manager)

    def get_service_name(self) -> str:
        """Get the service name."""
        return "query_processor"

    def normalize_query(self, query: Any) -> str:
        """
        Trim and collapse whitespace. Anything that is not a string becomes an empty query.
        """
        if not isinstance(query, str):
            return ""
        return " ".join(query.split())

    def parse_tags(self, tags: Any) -> Optional[List[str]]:
        """
        Accept a list of tags or a comma-separated string; blanks are dropped.
        """
        if tags is None:
            return None
        if isinstance(tags, str):
            tags = tags.split(",")
        if not isinstance(tags, (list, tuple)):
            return None
        parsed = []
        for tag in tags:
            if isinstance(tag, str):
                parsed.extend(part.strip() for part in tag.split(",") if part.strip())
        return parsed

    def parse_filters(self, category: Optional[str] = None, relationship: Optional[str] = None,
                      author: Optional[str] = None, tags: Any = None) -> SearchFilters:
        return SearchFilters(
            category=category or None,
            relationship=relationship or None,
            author=author or None,
            tags=self.parse_tags(tags),
        )
