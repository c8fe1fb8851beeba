"""
Image catalog over the static magazine image inventory.
Associates images with magazine pages through the filename convention
PageNumber_SectionTitle_SectionPageNumber_PhotoNumber.ext
"""

import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Any

from ..base import BaseService, TestimonyCacheManager
from ....core.config import settings
from ....schemas.testimony_schemas import GalleryImage
from .image_files import ALL_IMAGES, COLLAGE_FILES

IMAGE_FILENAME_PATTERN = re.compile(r"(\d+)_(.+?)_(\d+)_(\d+)\.(jpg|png)")
IMAGE_EXTENSION_PATTERN = re.compile(r"\.(jpg|png)$")


@dataclass(frozen=True)
class ParsedImageFilename:
    page_number: int
    section_title: str
    section_page: int
    photo_number: int
    extension: str


def parse_image_filename(filename: Any) -> Optional[ParsedImageFilename]:
    """
    Parse a filename following the magazine convention.

    Args:
        filename: Bare filename, without directory

    Returns:
        Optional[ParsedImageFilename]: None if the name does not follow the convention
    """
    if not isinstance(filename, str):
        return None
    match = IMAGE_FILENAME_PATTERN.fullmatch(filename)
    if not match:
        return None

    page_number, section_title, section_page, photo_number, extension = match.groups()
    return ParsedImageFilename(
        page_number=int(page_number),
        section_title=section_title.replace("_", " "),
        section_page=int(section_page),
        photo_number=int(photo_number),
        extension=extension,
    )


def _is_page_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ImageCatalog(BaseService):
    """
    Read-only index of the image inventory, grouped by magazine page.
    """

    def __init__(self, filenames: Optional[List[str]] = None,
                 cache_manager: Optional[TestimonyCacheManager] = None,
                 base_path: Optional[str] = None,
                 collage_files: Optional[List[str]] = None):
        """
        Initialize the image catalog.

        Args:
            filenames: Image inventory, defaults to the bundled magazine list
            cache_manager: Cache manager instance
            base_path: URL prefix for image paths, defaults to IMAGE_BASE_PATH
            collage_files: Files shown in the family collage
        """
        super().__init__(cache_manager)
        self.base_path = base_path or settings.image_base_path
        if not self.base_path.endswith("/"):
            self.base_path += "/"
        self._filenames = list(filenames if filenames is not None else ALL_IMAGES)
        self._collage_files = list(collage_files if collage_files is not None else COLLAGE_FILES)

        self._parsed: Dict[str, ParsedImageFilename] = {}
        self._by_page: Dict[int, List[str]] = defaultdict(list)
        for filename in self._filenames:
            parsed = parse_image_filename(filename)
            if parsed is None:
                continue
            self._parsed[filename] = parsed
            self._by_page[parsed.page_number].append(self.to_path(filename))

        # Plain string sort: "18_x_11_10" lands before "18_x_11_2"
        for page in self._by_page:
            self._by_page[page].sort()

        skipped = len(self._filenames) - len(self._parsed)
        if skipped:
            self.logger.info(
                f"[{self.get_service_name()}] {skipped} images do not follow the page naming convention"
            )

    def get_service_name(self) -> str:
        """Get the service name."""
        return "image_catalog"

    def to_path(self, filename: str) -> str:
        return f"{self.base_path}{filename}"

    def get_all_images(self) -> List[str]:
        """Every image in inventory order, including ones outside the naming convention."""
        return [self.to_path(filename) for filename in self._filenames]

    def get_images_for_page_number(self, page_number: Any) -> List[str]:
        """
        Full paths of images printed on a magazine page, sorted by filename.
        """
        if not _is_page_number(page_number):
            return []
        return list(self._by_page.get(page_number, []))

    def get_images_for_page_range(self, start_page: Any, end_page: Any) -> List[str]:
        """
        Images for every page from start_page to end_page inclusive, in page order.
        """
        if not (_is_page_number(start_page) and _is_page_number(end_page)):
            return []
        images: List[str] = []
        for page in range(start_page, end_page + 1):
            images.extend(self.get_images_for_page_number(page))
        return images

    def get_images_for_section(self, section_title: Any) -> List[GalleryImage]:
        """
        Legacy lookup: images whose section title contains the given title,
        case-insensitively, ordered by section page then photo number.
        """
        if not isinstance(section_title, str):
            return []
        normalized = " ".join(section_title.lower().split())
        if not normalized:
            return []

        testimony_id = re.sub(r"\s+", "-", section_title.lower())
        matched = []
        for filename, parsed in self._parsed.items():
            if normalized not in parsed.section_title.lower():
                continue
            matched.append((parsed, GalleryImage(
                id=IMAGE_EXTENSION_PATTERN.sub("", filename),
                testimony_id=testimony_id,
                src=self.to_path(filename),
                alt=f"{section_title} - Photo {parsed.photo_number}",
                caption=f"Page {parsed.page_number}, Section {parsed.section_page}",
            )))

        matched.sort(key=lambda pair: (pair[0].section_page, pair[0].photo_number))
        return [image for _, image in matched]

    def get_collage_images(self) -> List[GalleryImage]:
        """General family photos."""
        return [
            GalleryImage(
                id=IMAGE_EXTENSION_PATTERN.sub("", filename),
                testimony_id="collage",
                src=self.to_path(filename),
                alt=f"Family photo collage {index + 1}",
                caption="Family memories",
                width=400,
                height=400,
            )
            for index, filename in enumerate(self._collage_files)
        ]

    def get_page_numbers(self) -> List[int]:
        """Magazine pages that have at least one image."""
        return sorted(self._by_page)
