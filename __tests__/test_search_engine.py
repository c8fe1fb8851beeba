"""
Tests for the fuzzy testimony search engine.
"""

import pytest

from src.services.testimonies import TestimonySearchEngine, SearchFilters
from conftest import make_testimony


@pytest.fixture(scope="module")
def engine(corpus):
    return TestimonySearchEngine(corpus)


def test_empty_query_returns_whole_corpus_unscored(engine, corpus):
    for query in ("", "   ", None, 42):
        results = engine.search(query)
        assert [r.item.id for r in results] == [t.id for t in corpus]
        assert all(r.score is None and r.matches is None for r in results)


def test_exact_title_match_ranks_first(engine):
    results = engine.search("soul")

    assert results[0].item.id == "rare-soul"
    title_matches = [m for m in results[0].matches if m.key == "title"]
    assert title_matches[0].indices == [(7, 10)]
    assert title_matches[0].value == "A Rare Soul"


def test_results_sorted_by_ascending_score(engine):
    results = engine.search("tony")

    assert len(results) > 1
    scores = [r.score for r in results]
    assert scores == sorted(scores)
    assert all(0 <= score <= 1 for score in scores)


def test_search_is_case_insensitive(engine):
    lower = engine.search("besan barfi")
    upper = engine.search("BESAN BARFI")

    assert lower[0].item.id == "besan-barfi"
    assert [r.item.id for r in lower] == [r.item.id for r in upper]


def test_unrelated_query_returns_nothing(engine):
    assert engine.search("qxzqxj") == []


@pytest.mark.parametrize("query", ["pizza delivery", "computer science degree"])
def test_long_query_does_not_match_short_tags_or_authors(engine, query):
    for result in engine.search(query):
        assert not [m for m in result.matches if m.key in ("tags", "author")]


def test_short_field_is_compared_whole_against_longer_query():
    testimony = make_testimony(title="Quiet", author="Ravi", content="Morning tea", tags=["love"])
    engine = TestimonySearchEngine([testimony])

    assert engine.search("rare soul of the family") == []

    results = engine.search("loves")
    assert len(results) == 1
    assert [(m.key, m.indices, m.ref_index) for m in results[0].matches] == [("tags", [(0, 3)], 0)]


def test_match_position_in_field_does_not_affect_score():
    early = make_testimony(id="early", content="tenderness " + "filler " * 80)
    late = make_testimony(id="late", content="filler " * 80 + "tenderness")
    results = TestimonySearchEngine([early, late]).search("tenderness")

    assert [r.item.id for r in results] == ["early", "late"]
    assert results[0].score == results[1].score


def test_tag_matches_report_element_index(engine):
    results = engine.search("recipe")
    besan = next(r for r in results if r.item.id == "besan-barfi")

    tag_matches = [m for m in besan.matches if m.key == "tags"]
    assert tag_matches
    assert tag_matches[0].ref_index == 1
    assert tag_matches[0].value == "recipe"
    assert all(m.ref_index is None for m in besan.matches if m.key != "tags")


def test_match_indices_point_into_value(engine):
    for result in engine.search("gratitude"):
        for match in result.matches:
            for start, end in match.indices:
                assert 0 <= start <= end < len(match.value)
                assert end - start + 1 >= engine.min_match_char_length


def test_filters_apply_after_search(engine):
    results = engine.search("", {"category": "friends"})
    assert [r.item.id for r in results] == ["rare-soul", "bond-beyond-blood"]

    results = engine.search("", SearchFilters(relationship="Friend", author="mittal"))
    assert [r.item.id for r in results] == ["bond-beyond-blood"]


def test_filters_preserve_relevance_order(engine):
    unfiltered = [r.item.id for r in engine.search("tony")]
    filtered = [r.item.id for r in engine.search("tony", {"category": "family"})]

    assert filtered == [tid for tid in unfiltered if tid in filtered]


def test_tag_filter_is_case_insensitive_substring(engine):
    results = engine.search("", {"tags": ["GRAT"]})
    assert [r.item.id for r in results] == ["dear-papa-soumya", "rare-soul"]


def test_filters_with_wrong_types_match_nothing(engine):
    assert engine.search("", {"category": 5}) == []
    assert engine.search("", {"tags": "gratitude"}) == []


def test_empty_filter_values_do_not_filter(engine, corpus):
    results = engine.search("", {"category": "", "author": None, "tags": []})
    assert len(results) == len(corpus)


def test_duplicate_ids_first_wins_on_lookup():
    first = make_testimony(id="dup", title="First")
    second = make_testimony(id="dup", title="Second")
    engine = TestimonySearchEngine([first, second])

    assert len(engine) == 2
    assert engine.get_testimony_by_id("dup").title == "First"
    assert len(engine.search("")) == 2


def test_lookup_helpers(engine):
    assert engine.get_testimony_by_id("rare-soul").author == "Rakesh Sharma"
    assert engine.get_testimony_by_id("missing") is None
    assert engine.get_testimony_by_id(None) is None
    assert [t.id for t in engine.get_testimonies_by_category("elders")] == ["devotion", "best-of-all-of-us"]
    assert engine.get_testimonies_by_category("unknown") == []


def test_empty_corpus():
    engine = TestimonySearchEngine([])
    assert engine.search("anything") == []
    assert engine.search("") == []
    assert engine.get_all_testimonies() == []
