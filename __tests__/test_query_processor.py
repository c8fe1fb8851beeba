"""
Tests for query normalization, filter parsing and result ordering.
"""

from src.schemas.testimony_schemas import SearchResult
from src.services.testimonies import QueryProcessor, SearchFilters
from src.services.testimonies.search import apply_filters, sort_results
from conftest import make_testimony


def _result(score=None, **fields):
    return SearchResult(item=make_testimony(**fields), score=score)


def test_normalize_query_collapses_whitespace():
    processor = QueryProcessor()
    assert processor.normalize_query("  rare   soul \n") == "rare soul"
    assert processor.normalize_query(None) == ""
    assert processor.normalize_query(123) == ""


def test_parse_tags_accepts_lists_and_comma_strings():
    processor = QueryProcessor()
    assert processor.parse_tags(None) is None
    assert processor.parse_tags("food, love,,") == ["food", "love"]
    assert processor.parse_tags(["food,love", "faith"]) == ["food", "love", "faith"]
    assert processor.parse_tags(5) is None


def test_parse_filters_treats_blank_as_unset():
    filters = QueryProcessor().parse_filters(category="", relationship="Son", author=None, tags=None)
    assert filters.category is None
    assert filters.relationship == "Son"
    assert filters.to_dict() == {"category": None, "relationship": "Son", "author": None, "tags": None}


def test_search_filters_from_dict_and_is_empty():
    assert SearchFilters.from_dict(None).is_empty()
    assert SearchFilters.from_dict("category=family").is_empty()
    assert SearchFilters(tags=[]).is_empty()
    assert not SearchFilters.from_dict({"category": "family"}).is_empty()


def test_search_filters_conjunction():
    testimony = make_testimony(category="family", relationship="Wife", author="Poonam Batra", tags=["Love", "marriage"])

    assert SearchFilters(category="family", author="BATRA", tags=["lov"]).matches(testimony)
    assert not SearchFilters(category="family", relationship="Son").matches(testimony)
    assert not SearchFilters(category="Family").matches(testimony)
    assert not SearchFilters(tags=["cooking"]).matches(testimony)
    assert not SearchFilters(author=7).matches(testimony)


def test_apply_filters_keeps_order():
    results = [
        _result(0.1, id="a", category="family"),
        _result(0.2, id="b", category="friends"),
        _result(0.3, id="c", category="family"),
    ]
    filtered = apply_filters(results, SearchFilters(category="family"))
    assert [r.item.id for r in filtered] == ["a", "c"]
    assert apply_filters(results, None) is results


def test_sort_results_by_author_title_and_page():
    results = [
        _result(0.5, id="a", author="zara", title="beta", page=30),
        _result(0.1, id="b", author="Anil", title="Alpha", page=4),
        _result(0.3, id="c", author="mohan", title="gamma", page=12),
    ]

    assert [r.item.id for r in sort_results(results, "author")] == ["b", "c", "a"]
    assert [r.item.id for r in sort_results(results, "title")] == ["b", "a", "c"]
    assert [r.item.id for r in sort_results(results, "page")] == ["b", "c", "a"]
    assert [r.item.id for r in sort_results(results, "relevance")] == ["b", "c", "a"]


def test_sort_results_unknown_option_falls_back_to_relevance():
    results = [_result(0.9, id="a"), _result(None, id="b"), _result(0.2, id="c")]
    assert [r.item.id for r in sort_results(results, "newest")] == ["b", "c", "a"]


def test_sort_results_is_stable_and_does_not_mutate():
    results = [_result(0.5, id="a", page=10), _result(0.5, id="b", page=10), _result(0.1, id="c", page=2)]
    sorted_results = sort_results(results, "page")

    assert [r.item.id for r in sorted_results] == ["c", "a", "b"]
    assert [r.item.id for r in results] == ["a", "b", "c"]
