"""
Tests for overview, listing and chapter services over the bundled corpus.
"""

import asyncio
import json
from unittest.mock import AsyncMock

import pytest

from src.services.testimonies import ContentOverview, ContentRetrieval, ChapterCatalog, TestimonyCacheManager
from src.services.testimonies.base import ValidationError


# Overview

def test_stats_count_categories(corpus):
    stats = ContentOverview(corpus).get_stats()

    assert stats.total == 12
    assert stats.categories == {"family": 7, "elders": 2, "friends": 2, "colleagues": 1}
    assert sum(stats.categories.values()) == stats.total


def test_filter_options_are_sorted_and_distinct(corpus):
    options = ContentOverview(corpus).get_filter_options()

    assert options.categories == ["colleagues", "elders", "family", "friends"]
    for values in (options.relationships, options.authors, options.tags):
        assert values == sorted(set(values))
    assert "Friend" in options.relationships
    assert "gratitude" in options.tags


def test_filter_options_empty_corpus():
    options = ContentOverview([]).get_filter_options()
    assert options.categories == options.relationships == options.authors == options.tags == []


def test_featured_skips_missing_ids_and_keeps_order(corpus):
    overview = ContentOverview(corpus)

    featured = overview.get_featured_testimonies(6)
    assert [t.id for t in featured] == [
        "foreword", "hum-do-humare-char", "letter-from-son-to-son", "mere-papa-with-love", "dear-papa-soumya",
    ]
    assert [t.id for t in overview.get_featured_testimonies(2)] == ["foreword", "hum-do-humare-char"]
    assert overview.get_featured_testimonies(0) == []


def test_featured_with_custom_ids(corpus):
    overview = ContentOverview(corpus, featured_ids=["besan-barfi", "nope", "devotion"])
    assert [t.id for t in overview.get_featured_testimonies()] == ["besan-barfi", "devotion"]


# Listing

def test_listing_pages_in_page_order(corpus):
    retrieval = ContentRetrieval(corpus)

    first = retrieval.list_testimonies(page=1, limit=5)
    assert [t.page for t in first.data] == [4, 8, 11, 14, 18]
    assert first.pagination.total_pages == 3
    assert first.pagination.has_next_page
    assert not first.pagination.has_previous_page

    last = retrieval.list_testimonies(page=3, limit=5)
    assert [t.id for t in last.data] == ["ac-lagwa-dein", "besan-barfi"]
    assert last.pagination.total_fetched == 2
    assert not last.pagination.has_next_page


def test_listing_search_and_category(corpus):
    retrieval = ContentRetrieval(corpus)

    assert [t.id for t in retrieval.list_testimonies(search="BARFI").data] == ["besan-barfi"]
    assert [t.id for t in retrieval.list_testimonies(category="elders").data] == ["devotion", "best-of-all-of-us"]
    assert retrieval.list_testimonies(search="barfi", category="friends").pagination.total_count == 0


def test_listing_rejects_bad_pagination(corpus):
    retrieval = ContentRetrieval(corpus)
    with pytest.raises(ValidationError):
        retrieval.list_testimonies(page=0)
    with pytest.raises(ValidationError):
        retrieval.list_testimonies(limit=101)


def test_listing_payload_uses_camel_case(corpus):
    payload = asyncio.run(ContentRetrieval(corpus).get_listing(page=1, limit=2))

    assert set(payload["pagination"]) == {
        "currentPage", "totalPages", "totalCount", "hasNextPage", "hasPreviousPage", "pageSize", "totalFetched",
    }
    assert payload["data"][0]["id"] == "foreword"


def test_listing_is_cached_in_redis(corpus):
    redis = AsyncMock()
    redis.get.return_value = None
    retrieval = ContentRetrieval(corpus, TestimonyCacheManager(redis))

    payload = asyncio.run(retrieval.get_listing(page=1, limit=3))

    assert redis.set.await_count == 1
    key, value = redis.set.await_args.args
    assert key.startswith("memorial:testimonies:list:")
    assert json.loads(value) == payload
    assert redis.set.await_args.kwargs["ex"] == 300


def test_listing_served_from_cache(corpus):
    cached = {"data": [], "pagination": {"currentPage": 9}}
    redis = AsyncMock()
    redis.get.return_value = json.dumps(cached)
    retrieval = ContentRetrieval(corpus, TestimonyCacheManager(redis))

    assert asyncio.run(retrieval.get_listing(page=9)) == cached
    redis.set.assert_not_awaited()


def test_listing_hash_is_order_independent():
    a = TestimonyCacheManager.listing_hash({"page": 1, "search": "tony"})
    b = TestimonyCacheManager.listing_hash({"search": "tony", "page": 1})
    assert a == b
    assert a != TestimonyCacheManager.listing_hash({"page": 2, "search": "tony"})


def test_clear_listings_only_matches_listing_keys():
    redis = AsyncMock()
    redis.keys.return_value = ["memorial:testimonies:list:abc", "memorial:testimonies:list:def"]
    redis.delete.return_value = 2

    deleted = asyncio.run(TestimonyCacheManager(redis).clear_listings())

    assert deleted == 2
    redis.keys.assert_awaited_once_with("memorial:testimonies:list:*")
    redis.delete.assert_awaited_once_with(
        "memorial:testimonies:list:abc", "memorial:testimonies:list:def"
    )


def test_clear_listings_without_redis():
    assert asyncio.run(TestimonyCacheManager(None).clear_listings()) == 0


# Chapters

def test_chapters_in_order(corpus):
    chapters = ChapterCatalog(corpus).get_all_chapters()

    assert [c.order for c in chapters] == [1, 2, 3, 4, 5]
    assert chapters[0].slug == "foreword-family-foundation"
    assert chapters[0].magazine_pages.start_page == 4


def test_chapter_detail_navigation(corpus):
    catalog = ChapterCatalog(corpus)

    detail = catalog.get_chapter_detail("family-circle")
    assert [t.id for t in detail.testimonies] == ["adventures-of-tony-pinky", "rare-soul"]
    assert detail.previous_chapter.slug == "elders-perspectives"
    assert detail.next_chapter.slug == "friends-professional-life"

    first = catalog.get_chapter_detail("foreword-family-foundation")
    assert first.previous_chapter is None
    last = catalog.get_chapter_detail("next-generation")
    assert last.next_chapter is None
    assert [t.id for t in last.testimonies] == ["besan-barfi"]

    assert catalog.get_chapter_detail("missing") is None
    assert catalog.get_next_chapter("missing") is None
