"""
Search engine for testimony content.
Weighted fuzzy matching over title, author, content and tags.
"""

from typing import Dict, List, Optional, Tuple, Any

from rapidfuzz import fuzz

from ..base import BaseService, TestimonyCacheManager
from ....core.config import settings
from ....schemas.testimony_schemas import Testimony, SearchResult, MatchInfo
from .query_processor import SearchFilters, apply_filters

# Relative importance of each field; they sum to 1
SEARCH_KEYS: List[Tuple[str, float]] = [
    ("title", 0.3),
    ("author", 0.2),
    ("content", 0.4),
    ("tags", 0.1),
]

# Stand-in for a perfect field score so it still counts in the product
EPSILON = 2.220446049250313e-16


def _fold_case(text: str) -> str:
    """Lowercase without changing the string length, so offsets stay valid."""
    folded = text.lower()
    if len(folded) == len(text):
        return folded
    return "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in text)


class TestimonySearchEngine(BaseService):
    """
    In-memory search index over one corpus.
    Scores follow the 0 = perfect, 1 = mismatch convention; lower is better.
    The index is read-only after construction.
    """

    def __init__(self, testimonies: List[Testimony],
                 cache_manager: Optional[TestimonyCacheManager] = None,
                 threshold: Optional[float] = None,
                 min_match_char_length: Optional[int] = None,
                 keys: Optional[List[Tuple[str, float]]] = None):
        """
        Build the index.

        Args:
            testimonies: Corpus in display order
            cache_manager: Cache manager instance
            threshold: Maximum field score that still counts as a match
            min_match_char_length: Shortest matched run worth reporting
            keys: (field, weight) pairs to search
        """
        super().__init__(cache_manager)
        self.threshold = settings.search_threshold if threshold is None else threshold
        self.min_match_char_length = (
            settings.search_min_match_char_length if min_match_char_length is None else min_match_char_length
        )
        self.keys = keys or SEARCH_KEYS

        self._testimonies: Tuple[Testimony, ...] = tuple(testimonies)
        self._by_id: Dict[str, Testimony] = {}
        for testimony in self._testimonies:
            self._by_id.setdefault(testimony.id, testimony)

        # Pre-folded field values, one record per testimony
        self._index: List[Dict[str, List[Tuple[str, str]]]] = [
            self._index_record(testimony) for testimony in self._testimonies
        ]
        self.logger.info(f"[{self.get_service_name()}] Indexed {len(self._testimonies)} testimonies")

    def get_service_name(self) -> str:
        """Get the service name."""
        return "search_engine"

    def _index_record(self, testimony: Testimony) -> Dict[str, List[Tuple[str, str]]]:
        record = {}
        for key, _ in self.keys:
            value = getattr(testimony, key, None)
            values = value if isinstance(value, list) else [value]
            record[key] = [(v, _fold_case(v)) for v in values if isinstance(v, str)]
        return record

    def _match_value(self, query: str, folded_value: str) -> Optional[Tuple[float, int, int]]:
        """
        Best partial alignment of the query inside one field value.
        A value shorter than the query is compared whole, so a long query
        cannot match a short tag or name through a few shared letters.

        Returns:
            (score, start, end) with an inclusive end offset, or None if not close enough
        """
        if not folded_value:
            return None
        cutoff = (1 - self.threshold) * 100
        if len(query) > len(folded_value):
            ratio = fuzz.ratio(query, folded_value, score_cutoff=cutoff)
            if not ratio:
                return None
            score = 1 - ratio / 100
            if score > self.threshold or len(folded_value) < self.min_match_char_length:
                return None
            return score, 0, len(folded_value) - 1
        alignment = fuzz.partial_ratio_alignment(query, folded_value, score_cutoff=cutoff)
        if alignment is None:
            return None
        score = 1 - alignment.score / 100
        if score > self.threshold:
            return None
        if alignment.dest_end - alignment.dest_start < self.min_match_char_length:
            return None
        return score, alignment.dest_start, alignment.dest_end - 1

    def _score_record(self, query: str, record: Dict[str, List[Tuple[str, str]]]
                      ) -> Tuple[Optional[float], List[MatchInfo]]:
        total_score = 1.0
        matches: List[MatchInfo] = []

        for key, weight in self.keys:
            values = record.get(key, [])
            is_array = key == "tags"
            for ref_index, (value, folded) in enumerate(values):
                found = self._match_value(query, folded)
                if found is None:
                    continue
                score, start, end = found
                total_score *= max(score, EPSILON) ** weight
                matches.append(MatchInfo(
                    key=key,
                    indices=[(start, end)],
                    value=value,
                    ref_index=ref_index if is_array else None,
                ))

        if not matches:
            return None, []
        return total_score, matches

    def search(self, query: Any = "", filters: Optional[Any] = None) -> List[SearchResult]:
        """
        Search the corpus.

        An empty or whitespace query returns every testimony, unscored, in corpus order.
        Otherwise results are ordered by ascending score, ties by corpus order.
        Filters are applied afterwards and never reorder results.

        Args:
            query: Free-text query
            filters: SearchFilters or a plain dict with the same keys

        Returns:
            List[SearchResult]: Matching testimonies
        """
        if not isinstance(filters, SearchFilters):
            filters = SearchFilters.from_dict(filters)

        normalized = _fold_case(query.strip()) if isinstance(query, str) else ""

        if not normalized:
            results = [SearchResult(item=testimony) for testimony in self._testimonies]
        else:
            scored = []
            for position, (testimony, record) in enumerate(zip(self._testimonies, self._index)):
                score, matches = self._score_record(normalized, record)
                if score is not None:
                    scored.append((score, position, testimony, matches))
            scored.sort(key=lambda entry: (entry[0], entry[1]))
            results = [
                SearchResult(item=testimony, score=score, matches=matches)
                for score, _, testimony, matches in scored
            ]

        return apply_filters(results, filters)

    def get_testimony_by_id(self, testimony_id: Any) -> Optional[Testimony]:
        """First testimony with this id, if any."""
        if not isinstance(testimony_id, str):
            return None
        return self._by_id.get(testimony_id)

    def get_all_testimonies(self) -> List[Testimony]:
        return list(self._testimonies)

    def get_testimonies_by_category(self, category: Any) -> List[Testimony]:
        return [t for t in self._testimonies if t.category == category]

    def __len__(self) -> int:
        return len(self._testimonies)
