"""
Result highlighter for testimony search.
Marks matched ranges in text and shortens content for previews.
"""

import re
from typing import Any, Iterable, List, Optional, Tuple

from ..base import BaseService, TestimonyCacheManager
from ....core.config import settings
from ....schemas.testimony_schemas import SearchResult, SearchHit

HIGHLIGHT_OPEN = '<mark class="bg-yellow-200 px-1 rounded">'
HIGHLIGHT_CLOSE = "</mark>"
HIGHLIGHT_KEYS = ("content", "title")
ELLIPSIS = "..."

BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")
ITALIC_PATTERN = re.compile(r"\*(.*?)\*")
QUOTE_PATTERN = re.compile(r"^> (.*)$", re.MULTILINE)
NEWLINES_PATTERN = re.compile(r"\n+")
BLOCKQUOTE_HTML = '<blockquote class="border-l-2 border-gray-300 pl-2 italic text-gray-600">\\1</blockquote>'


def _match_field(match: Any, name: str) -> Any:
    if isinstance(match, dict):
        return match.get(name)
    return getattr(match, name, None)


def _collect_ranges(matches: Iterable[Any], key: Optional[str]) -> List[Tuple[int, int]]:
    """(start, exclusive end) pairs from match metadata; malformed entries are ignored."""
    wanted = (key,) if key else HIGHLIGHT_KEYS
    ranges = []
    for match in matches:
        if _match_field(match, "key") not in wanted:
            continue
        indices = _match_field(match, "indices") or []
        for pair in indices:
            try:
                start, end = pair
                start, end = int(start), int(end)
            except (TypeError, ValueError):
                continue
            ranges.append((start, end + 1))
    return ranges


def highlight_matches(text: str, matches: Optional[Iterable[Any]] = None, key: Optional[str] = None) -> str:
    """
    Wrap matched ranges in <mark> tags.

    Ranges are applied from the highest start offset down, so earlier offsets stay
    valid; overlapping ranges are not merged.

    Args:
        text: Original field text
        matches: Match metadata with `key` and inclusive `indices`
        key: Only use matches for this field; content and title by default

    Returns:
        str: Marked-up text, or the text unchanged when there is nothing to mark
    """
    if not matches or not isinstance(text, str):
        return text

    ranges = _collect_ranges(matches, key)
    ranges.sort(key=lambda r: r[0], reverse=True)

    highlighted = text
    for start, end in ranges:
        highlighted = (
            f"{highlighted[:start]}{HIGHLIGHT_OPEN}{highlighted[start:end]}"
            f"{HIGHLIGHT_CLOSE}{highlighted[end:]}"
        )
    return highlighted


def truncate_content(text: str, max_length: int = 200) -> str:
    """
    Shorten text to at most max_length characters, cutting at the last space and
    appending "...". Text that already fits is returned unchanged.
    """
    if not isinstance(text, str) or len(text) <= max_length:
        return text
    if max_length <= len(ELLIPSIS):
        return text[:max(max_length, 0)]

    truncated = _cut_at_last_space(text[:max_length])
    if len(truncated) + len(ELLIPSIS) > max_length:
        # No word boundary leaves room for the ellipsis
        truncated = _cut_at_last_space(text[:max_length - len(ELLIPSIS)])
    return truncated + ELLIPSIS


def _cut_at_last_space(text: str) -> str:
    last_space = text.rfind(" ")
    return text[:last_space] if last_space > 0 else text


def parse_rich_text_to_plain_text(content: str) -> str:
    """Strip the editor's markdown-like markers and flatten line breaks."""
    if not isinstance(content, str):
        return ""
    text = BOLD_PATTERN.sub(r"\1", content)
    text = ITALIC_PATTERN.sub(r"\1", text)
    text = QUOTE_PATTERN.sub(r"\1", text)
    text = NEWLINES_PATTERN.sub(" ", text)
    return text.strip()


def parse_rich_text_to_html(content: str) -> str:
    """Render bold, italic, quotes and paragraphs as HTML."""
    if not isinstance(content, str):
        return ""
    html = BOLD_PATTERN.sub(r"<strong>\1</strong>", content)
    html = ITALIC_PATTERN.sub(r"<em>\1</em>", html)
    html = QUOTE_PATTERN.sub(BLOCKQUOTE_HTML, html)
    html = html.replace("\n\n", '</p><p class="mb-2">')
    return html.replace("\n", "<br />")


def build_preview(content: str, max_length: int = 200) -> str:
    """
    Card preview: rich text as HTML when it fits, otherwise truncated plain text.
    """
    plain = parse_rich_text_to_plain_text(content)
    if len(plain) <= max_length:
        return parse_rich_text_to_html(content)
    return truncate_content(plain, max_length)


class ResultHighlighter(BaseService):
    """
    Decorates search results with highlighted titles and previews.
    """

    def __init__(self, cache_manager: Optional[TestimonyCacheManager] = None,
                 preview_length: Optional[int] = None):
        super().__init__(cache_manager)
        self.preview_length = preview_length or settings.default_preview_length

    def get_service_name(self) -> str:
        """Get the service name."""
        return "result_highlighter"

    def decorate(self, result: SearchResult, preview_length: Optional[int] = None) -> SearchHit:
        length = preview_length or self.preview_length
        matches = result.matches or []
        title = highlight_matches(result.item.title, matches, key="title")

        content_matches = [m for m in matches if m.key == "content"]
        if content_matches:
            # Preview around the first content match, marked up
            start, end = content_matches[0].indices[0]
            content = result.item.content
            window_start = max(0, start - length // 4)
            if window_start > 0:
                space = content.rfind(" ", 0, window_start)
                window_start = space + 1 if space >= 0 else window_start
            snippet = content[window_start:]
            local_start, local_end = start - window_start, end - window_start
            limit = max(length, local_end + 1 + len(ELLIPSIS))
            preview = truncate_content(snippet, limit)
            kept = len(preview) - len(ELLIPSIS) if len(snippet) > limit else len(preview)
            # The word-boundary cut may land inside the match; leave it unmarked then
            if local_end < kept:
                preview = highlight_matches(preview, [{"key": "content", "indices": [(local_start, local_end)]}])
            if window_start > 0:
                preview = ELLIPSIS + preview
        else:
            preview = build_preview(result.item.content, length)

        return SearchHit(
            item=result.item,
            score=result.score,
            matches=result.matches,
            highlighted_title=title,
            preview=preview,
        )

    def decorate_all(self, results: List[SearchResult], preview_length: Optional[int] = None) -> List[SearchHit]:
        return [self.decorate(result, preview_length) for result in results]
