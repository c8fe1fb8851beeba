"""
Tests for match highlighting, truncation and previews.
"""

from src.schemas.testimony_schemas import SearchResult, MatchInfo
from src.services.testimonies import ResultHighlighter, TestimonySearchEngine
from src.services.testimonies.search import (
    highlight_matches,
    truncate_content,
    parse_rich_text_to_plain_text,
    parse_rich_text_to_html,
    build_preview,
)
from src.services.testimonies.search.result_highlighter import HIGHLIGHT_OPEN, HIGHLIGHT_CLOSE
from conftest import make_testimony


def _mark(text):
    return f"{HIGHLIGHT_OPEN}{text}{HIGHLIGHT_CLOSE}"


def test_highlight_single_range():
    matches = [{"key": "title", "indices": [(7, 10)]}]
    assert highlight_matches("A Rare Soul", matches, key="title") == f"A Rare {_mark('Soul')}"


def test_highlight_multiple_ranges_keep_offsets():
    matches = [{"key": "content", "indices": [(0, 3), (9, 12)]}]
    assert highlight_matches("Tony and Tony", matches) == f"{_mark('Tony')} and {_mark('Tony')}"


def test_highlight_accepts_match_models():
    matches = [MatchInfo(key="content", indices=[(4, 7)], value="was soul")]
    assert highlight_matches("was soul", matches) == f"was {_mark('soul')}"


def test_highlight_without_matches_returns_text():
    assert highlight_matches("unchanged", None) == "unchanged"
    assert highlight_matches("unchanged", []) == "unchanged"


def test_highlight_ignores_other_keys():
    matches = [{"key": "author", "indices": [(0, 3)]}]
    assert highlight_matches("Tony Batra", matches) == "Tony Batra"
    assert highlight_matches("Tony Batra", matches, key="author") == f"{_mark('Tony')} Batra"


def test_truncate_short_text_unchanged():
    assert truncate_content("short", 200) == "short"
    assert truncate_content("exactly10!", 10) == "exactly10!"


def test_truncate_cuts_at_word_boundary():
    assert truncate_content("hello world foo", 10) == "hello..."


def test_truncate_without_spaces_reserves_room_for_ellipsis():
    assert truncate_content("abcdefghijkl", 8) == "abcde..."


def test_truncate_keeps_last_word_when_ellipsis_fits():
    assert truncate_content("aaaa bbbb cccc", 12) == "aaaa bbbb..."
    assert truncate_content("aaaa bbbb...", 12) == "aaaa bbbb..."


def test_truncate_backs_off_a_word_when_ellipsis_would_overflow():
    assert truncate_content("aaaa bbbbbbb cc", 13) == "aaaa..."


def test_truncate_never_exceeds_limit_and_is_idempotent():
    text = "Tony loved besan barfi more than any other sweet and always asked for more"
    for limit in (5, 12, 30, 60):
        once = truncate_content(text, limit)
        assert len(once) <= limit
        assert truncate_content(once, limit) == once


def test_plain_text_strips_markers():
    content = "**Bold** and *italic*\n\n> Quoted line\nEnd"
    assert parse_rich_text_to_plain_text(content) == "Bold and italic Quoted line End"


def test_html_rendering():
    assert parse_rich_text_to_html("**b** *i*") == "<strong>b</strong> <em>i</em>"
    assert parse_rich_text_to_html("a\n\nb") == 'a</p><p class="mb-2">b'
    assert parse_rich_text_to_html("a\nb") == "a<br />b"
    assert "<blockquote" in parse_rich_text_to_html("> Bas, aur nahi")


def test_build_preview_short_and_long():
    assert build_preview("**Short** note", 200) == "<strong>Short</strong> note"

    long_content = "**Word** " * 50
    preview = build_preview(long_content, 40)
    assert "**" not in preview
    assert preview.endswith("...")
    assert len(preview) <= 40


def test_decorate_windows_preview_around_first_content_match():
    content = ("alpha " * 60) + "target word here"
    testimony = make_testimony(title="Target Practice", content=content)
    result = SearchResult(
        item=testimony,
        score=0.01,
        matches=[
            MatchInfo(key="title", indices=[(0, 5)], value="Target Practice"),
            MatchInfo(key="content", indices=[(360, 365)], value=content),
        ],
    )

    hit = ResultHighlighter(preview_length=100).decorate(result)

    assert hit.highlighted_title == f"{_mark('Target')} Practice"
    assert hit.preview == "..." + "alpha " * 5 + _mark("target") + " word here"
    assert hit.score == 0.01


def test_decorate_without_content_match_uses_plain_preview():
    testimony = make_testimony(title="Devotion", content="**Quiet** faith")
    result = SearchResult(
        item=testimony,
        score=0.2,
        matches=[MatchInfo(key="title", indices=[(0, 7)], value="Devotion")],
    )

    hit = ResultHighlighter().decorate(result)

    assert hit.highlighted_title == _mark("Devotion")
    assert hit.preview == "<strong>Quiet</strong> faith"


def test_decorate_search_results_end_to_end(corpus):
    results = TestimonySearchEngine(corpus).search("soul")
    hits = ResultHighlighter().decorate_all(results[:1])

    assert hits[0].item.id == "rare-soul"
    assert _mark("Soul") in hits[0].highlighted_title
    assert _mark("soul") in hits[0].preview
    assert hits[0].model_dump(by_alias=True)["highlightedTitle"] == hits[0].highlighted_title
