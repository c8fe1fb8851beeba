"""
Content loader service for the testimony corpus.
Loads the corpus once, from a JSON file or from the database.
"""

import json
import os
from typing import Dict, List, Optional, Any
from datetime import datetime
from pathlib import Path

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..base import BaseService, TestimonyCacheManager, TestimonyValidator, InvalidTestimonyError
from ....core.config import settings
from ....database import get_async_session
from ....models.testimony_models import Testimony as TestimonyRow, TestimonyImage as TestimonyImageRow
from ....schemas.testimony_schemas import Testimony

SUPPORTED_SOURCES = ("json", "database")


class CorpusLoadError(Exception):
    """The corpus source is missing or unreadable as a whole."""
    pass


class ContentLoader(BaseService):
    """
    Service for loading testimony records.
    Invalid records are skipped and reported unless strict mode is on.
    """

    def __init__(self, cache_manager: Optional[TestimonyCacheManager] = None,
                 data_file_path: Optional[str] = None,
                 source: Optional[str] = None,
                 strict: Optional[bool] = None,
                 validator: Optional[TestimonyValidator] = None):
        """
        Initialize the content loader.

        Args:
            cache_manager: Cache manager instance
            data_file_path: Optional path to the testimonies JSON file
            source: "json" or "database"; defaults to DATA_SOURCE
            strict: Abort on the first invalid record; defaults to STRICT_CORPUS_VALIDATION
            validator: Optional validator instance
        """
        super().__init__(cache_manager, validator)

        self._file_path = Path(data_file_path or settings.testimonies_data_file)
        self.source = (source or settings.data_source).lower()
        self.strict = settings.strict_corpus_validation if strict is None else strict

        if self.source not in SUPPORTED_SOURCES:
            raise CorpusLoadError(f"Unsupported data source: {self.source}")

        self._last_loaded: Optional[datetime] = None
        self._load_errors: List[str] = []

    def get_service_name(self) -> str:
        """Get the service name."""
        return "content_loader"

    async def load_testimonies(self, db_session: Optional[AsyncSession] = None) -> List[Testimony]:
        """
        Load the corpus from the configured source.

        Args:
            db_session: Optional session for the database source; one is opened if omitted

        Returns:
            List[Testimony]: Records in source order
        """
        try:
            if self.source == "database":
                if db_session is not None:
                    raw_records = await self._read_database(db_session)
                else:
                    async with get_async_session() as session:
                        raw_records = await self._read_database(session)
            else:
                raw_records = self._read_json_file()

            testimonies = self.build_corpus(raw_records)
            self._last_loaded = datetime.now()
            self.logger.info(
                f"[{self.get_service_name()}] Loaded {len(testimonies)} testimonies from {self.source} "
                f"({len(self._load_errors)} skipped)"
            )
            return testimonies
        except Exception as e:
            self._handle_service_error(e, f"Error loading testimonies from {self.source}")

    def load_testimonies_from_file(self) -> List[Testimony]:
        """Synchronous JSON-only load, for scripts and tests."""
        testimonies = self.build_corpus(self._read_json_file())
        self._last_loaded = datetime.now()
        return testimonies

    def build_corpus(self, raw_records: List[Any]) -> List[Testimony]:
        """
        Normalize raw records into Testimony objects.

        Args:
            raw_records: Decoded records in source order

        Returns:
            List[Testimony]: Valid records; duplicates kept, first one wins on lookup

        Raises:
            InvalidTestimonyError: In strict mode, on the first invalid record
        """
        self._load_errors = []
        testimonies: List[Testimony] = []
        seen_ids = set()

        for index, raw in enumerate(raw_records):
            try:
                testimony = self.validator.normalize_testimony(raw, index)
            except InvalidTestimonyError as e:
                if self.strict:
                    raise
                self._load_errors.append(str(e))
                self.logger.warning(f"[{self.get_service_name()}] Skipping invalid testimony: {e}")
                continue

            if testimony.id in seen_ids:
                self.logger.warning(
                    f"[{self.get_service_name()}] Duplicate testimony id {testimony.id!r} at record {index}"
                )
            seen_ids.add(testimony.id)
            testimonies.append(testimony)

        return testimonies

    def _read_json_file(self) -> List[Any]:
        """
        Read the raw records from the JSON file.

        Raises:
            CorpusLoadError: If the file is missing, unparseable or not an array
        """
        if not os.path.exists(self._file_path):
            raise CorpusLoadError(f"Testimonies data file not found at {self._file_path}")

        try:
            with open(self._file_path, "r", encoding="utf-8") as file:
                data = json.load(file)
        except json.JSONDecodeError as e:
            raise CorpusLoadError(f"Error parsing testimonies JSON data: {e}")

        if not isinstance(data, list):
            raise CorpusLoadError("Testimonies data must be a JSON array")

        return data

    async def _read_database(self, session: AsyncSession) -> List[Dict[str, Any]]:
        """
        Read testimony rows with their linked images, in page order.
        """
        stmt = (
            select(TestimonyRow)
            .options(selectinload(TestimonyRow.image_links).selectinload(TestimonyImageRow.image))
            .order_by(TestimonyRow.page, TestimonyRow.id)
        )
        result = await session.execute(stmt)
        rows = result.scalars().all()
        return [self._row_to_record(row) for row in rows]

    @staticmethod
    def _row_to_record(row: TestimonyRow) -> Dict[str, Any]:
        links = sorted(row.image_links, key=lambda link: link.order)
        images = [link.image.path for link in links]
        captions = {link.image.path: link.caption for link in links if link.caption}
        return {
            "id": row.id,
            "title": row.title,
            "author": row.author,
            "relationship": row.relationship,
            "content": row.content,
            "page": row.page,
            "category": row.category,
            "chapter": row.chapter,
            "tags": row.tags,
            "pageRange": row.page_range,
            "images": images or None,
            "imagesCaptions": captions,
        }

    def get_load_errors(self) -> List[str]:
        """Messages for records skipped during the last load."""
        return list(self._load_errors)

    def get_last_loaded_time(self) -> Optional[datetime]:
        return self._last_loaded

    def get_file_info(self) -> Dict:
        """
        Get information about the corpus source.

        Returns:
            Dict: Source information
        """
        if self.source == "database":
            return {
                "source": self.source,
                "database_url": settings.database_url.split("@")[-1],
                "last_loaded": self._last_loaded.isoformat() if self._last_loaded else None,
                "load_errors": len(self._load_errors),
            }
        try:
            file_stats = os.stat(self._file_path)
            return {
                "source": self.source,
                "file_path": str(self._file_path),
                "file_size": file_stats.st_size,
                "file_modified": datetime.fromtimestamp(file_stats.st_mtime).isoformat(),
                "file_exists": True,
                "last_loaded": self._last_loaded.isoformat() if self._last_loaded else None,
                "load_errors": len(self._load_errors),
            }
        except OSError as e:
            return {
                "source": self.source,
                "file_path": str(self._file_path),
                "file_exists": False,
                "error": str(e),
            }
