"""
Chapter catalog service.
Static chapter groupings of the magazine and navigation between them.
"""

import json
import os
from typing import List, Optional
from pathlib import Path

from ..base import BaseService, TestimonyCacheManager
from .content_loader import CorpusLoadError
from ....core.config import settings
from ....schemas.testimony_schemas import Chapter, ChapterDetail, Testimony


class ChapterCatalog(BaseService):
    """
    Chapters ordered by their `order` field.
    Testimonies reference chapters by slug; the reference is not enforced.
    """

    def __init__(self, testimonies: List[Testimony],
                 cache_manager: Optional[TestimonyCacheManager] = None,
                 chapters: Optional[List[Chapter]] = None,
                 data_file_path: Optional[str] = None):
        super().__init__(cache_manager)
        self._file_path = Path(data_file_path or settings.chapters_data_file)
        self._testimonies = list(testimonies)
        if chapters is None:
            chapters = self._load_chapters()
        self._chapters = sorted(chapters, key=lambda c: c.order)

    def get_service_name(self) -> str:
        """Get the service name."""
        return "chapter_catalog"

    def _load_chapters(self) -> List[Chapter]:
        if not os.path.exists(self._file_path):
            raise CorpusLoadError(f"Chapters data file not found at {self._file_path}")
        try:
            with open(self._file_path, "r", encoding="utf-8") as file:
                data = json.load(file)
        except json.JSONDecodeError as e:
            raise CorpusLoadError(f"Error parsing chapters JSON data: {e}")
        if not isinstance(data, list):
            raise CorpusLoadError("Chapters data must be a JSON array")
        return [Chapter.model_validate(item) for item in data]

    def get_all_chapters(self) -> List[Chapter]:
        return list(self._chapters)

    def get_chapter_by_slug(self, slug: str) -> Optional[Chapter]:
        return next((c for c in self._chapters if c.slug == slug), None)

    def get_next_chapter(self, slug: str) -> Optional[Chapter]:
        current = self.get_chapter_by_slug(slug)
        if current is None:
            return None
        return next((c for c in self._chapters if c.order > current.order), None)

    def get_previous_chapter(self, slug: str) -> Optional[Chapter]:
        current = self.get_chapter_by_slug(slug)
        if current is None:
            return None
        earlier = [c for c in self._chapters if c.order < current.order]
        return earlier[-1] if earlier else None

    def get_chapter_testimonies(self, slug: str) -> List[Testimony]:
        """Testimonies whose `chapter` is this slug, in page order."""
        return sorted((t for t in self._testimonies if t.chapter == slug), key=lambda t: t.page)

    def get_chapter_detail(self, slug: str) -> Optional[ChapterDetail]:
        chapter = self.get_chapter_by_slug(slug)
        if chapter is None:
            return None
        return ChapterDetail(
            chapter=chapter,
            testimonies=self.get_chapter_testimonies(slug),
            previous_chapter=self.get_previous_chapter(slug),
            next_chapter=self.get_next_chapter(slug),
        )
