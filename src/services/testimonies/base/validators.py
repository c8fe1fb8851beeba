"""
Validators for testimony service inputs.
Normalizes raw corpus records at the ingestion boundary and checks request parameters.
"""

import logging
from typing import Dict, List, Optional, Any, Tuple

from pydantic import ValidationError as PydanticValidationError

from ....schemas.testimony_schemas import Testimony, TestimonyCategory

logger = logging.getLogger(__name__)

KNOWN_CATEGORIES = {category.value for category in TestimonyCategory}
REQUIRED_FIELDS = ["id", "title", "content", "page"]
MAX_PAGE_SIZE = 100


class ValidationError(Exception):
    """Custom exception for validation errors."""
    pass


class InvalidTestimonyError(ValidationError):
    """A corpus record that cannot be turned into a Testimony."""

    def __init__(self, message: str, index: Optional[int] = None, record_id: Optional[str] = None):
        self.index = index
        self.record_id = record_id
        location = []
        if index is not None:
            location.append(f"record {index}")
        if record_id:
            location.append(f"id={record_id!r}")
        prefix = f"{', '.join(location)}: " if location else ""
        super().__init__(f"{prefix}{message}")


class TestimonyValidator:
    """
    Validator class for testimony service inputs.
    """

    def __init__(self):
        self.logger = logger

    def validate_required_fields(self, data: Dict, required_fields: List[str]) -> bool:
        """
        Validate that all required fields are present in the data.

        Args:
            data: Data to validate
            required_fields: List of required field names

        Returns:
            bool: True if all required fields are present

        Raises:
            ValidationError: If any required field is missing
        """
        missing_fields = [
            field for field in required_fields
            if field not in data or data[field] is None
        ]

        if missing_fields:
            raise ValidationError(f"Missing required fields: {', '.join(missing_fields)}")

        return True

    def normalize_testimony(self, raw: Any, index: Optional[int] = None) -> Testimony:
        """
        Turn a raw corpus record into a Testimony, filling optional fields with defaults.

        Args:
            raw: Decoded JSON object (or database row mapping)
            index: Position of the record in the source, for error messages

        Returns:
            Testimony: The normalized record

        Raises:
            InvalidTestimonyError: If the record cannot be parsed
        """
        if not isinstance(raw, dict):
            raise InvalidTestimonyError(f"expected an object, got {type(raw).__name__}", index)

        record_id = raw.get("id") if isinstance(raw.get("id"), str) else None

        try:
            self.validate_required_fields(raw, REQUIRED_FIELDS)
        except ValidationError as e:
            raise InvalidTestimonyError(str(e), index, record_id)

        data = dict(raw)
        for field in ("author", "relationship", "chapter", "category"):
            if data.get(field) is None:
                data[field] = ""
        if data.get("tags") is None:
            data["tags"] = []
        if data.get("imagesCaptions") is None:
            data["imagesCaptions"] = {}
        if not data.get("pageRange"):
            data["pageRange"] = None

        if isinstance(data["page"], bool):
            raise InvalidTestimonyError("page must be an integer", index, record_id)

        try:
            testimony = Testimony.model_validate(data)
        except PydanticValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise InvalidTestimonyError(f"invalid fields: {fields}", index, record_id)

        if testimony.category not in KNOWN_CATEGORIES:
            self.logger.warning(
                f"Testimony {testimony.id!r} has unknown category {testimony.category!r}"
            )
        if testimony.page < 1:
            self.logger.warning(
                f"Testimony {testimony.id!r} has non-positive page {testimony.page}; "
                "page-based images will not resolve"
            )

        return testimony

    def validate_page_range(self, start: Any, end: Any) -> Tuple[int, int]:
        """
        Validate an inclusive magazine page range.

        Raises:
            ValidationError: If either bound is not an integer or start > end
        """
        try:
            start, end = int(start), int(end)
        except (ValueError, TypeError):
            raise ValidationError(f"Invalid page range: {start}-{end}")
        if start > end:
            raise ValidationError(f"Page range start {start} is after end {end}")
        return start, end

    def validate_pagination(self, page: Any, limit: Any) -> Tuple[int, int]:
        """
        Validate listing pagination parameters.

        Args:
            page: 1-based page number
            limit: Page size

        Returns:
            tuple: (page, limit)

        Raises:
            ValidationError: If either value is out of range
        """
        try:
            page, limit = int(page), int(limit)
        except (ValueError, TypeError):
            raise ValidationError(f"Invalid pagination parameters: page={page}, limit={limit}")
        if page < 1:
            raise ValidationError(f"Page must be at least 1, got: {page}")
        if limit < 1 or limit > MAX_PAGE_SIZE:
            raise ValidationError(f"Limit must be between 1 and {MAX_PAGE_SIZE}, got: {limit}")
        return page, limit

    def validate_search_query(self, query: Any) -> str:
        """
        Normalize a search query. Empty queries are allowed and mean "everything".

        Raises:
            ValidationError: If query is not a string or is unreasonably long
        """
        if query is None:
            return ""
        if not isinstance(query, str):
            raise ValidationError(f"Search query must be a string, got: {type(query)}")
        if len(query) > 500:
            raise ValidationError("Search query cannot exceed 500 characters")
        return query
