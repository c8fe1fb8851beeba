"""
Gallery resolver.
Builds the display gallery and profile image for a testimony.
"""

import re
from typing import Dict, List, Optional
from urllib.parse import quote

from ..base import BaseService, TestimonyCacheManager
from ....schemas.testimony_schemas import Testimony, GalleryImage, TestimonyImageSources
from .image_catalog import ImageCatalog
from .image_files import STORY_PAGE_MAPPINGS

LEADING_PAGE_PATTERN = re.compile(r"^(\d+)_")

# Section titles for testimonies curated before page-based lookup existed
LEGACY_SECTIONS: Dict[str, str] = {
    "foreword": "Foreword",
    "hum-do-humare-char": "Hum Do Humare Char",
}
COLLAGE_ID = "collage"

AVATAR_COLORS = [
    "#ef4444", "#f97316", "#f59e0b", "#eab308", "#84cc16", "#22c55e",
    "#10b981", "#14b8a6", "#06b6d4", "#0ea5e9", "#3b82f6", "#6366f1",
    "#8b5cf6", "#a855f7", "#d946ef", "#ec4899", "#f43f5e",
]


def _svg_number(value: float):
    return int(value) if float(value).is_integer() else value


def generate_avatar_url(name: str, size: int = 100) -> str:
    """
    Inline SVG data URL with the name's initials on a colored circle.

    Args:
        name: Author name; the first letters of the first two words are used
        size: Width and height in pixels

    Returns:
        str: data:image/svg+xml URL
    """
    name = name or ""
    initials = "".join(part[:1] for part in name.split(" ")).upper()[:2]
    background_color = AVATAR_COLORS[len(name) % len(AVATAR_COLORS)]

    half = _svg_number(size / 2)
    font_size = _svg_number(size / 2.5)
    return (
        "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' "
        f"width='{size}' height='{size}' viewBox='0 0 {size} {size}'%3E"
        f"%3Ccircle cx='{half}' cy='{half}' r='{half}' fill='{quote(background_color, safe='')}'/%3E"
        f"%3Ctext x='50%25' y='50%25' font-family='serif' font-size='{font_size}' "
        "font-weight='bold' text-anchor='middle' dy='0.35em' fill='white'%3E"
        f"{initials}%3C/text%3E%3C/svg%3E"
    )


class GalleryResolver(BaseService):
    """
    Resolves a testimony's gallery with three tiers, each tried only when the
    previous one yields nothing:
    curated images, then page-derived images, then legacy section matching.
    """

    def __init__(self, catalog: ImageCatalog,
                 cache_manager: Optional[TestimonyCacheManager] = None,
                 story_page_mappings: Optional[Dict[str, List[int]]] = None,
                 legacy_sections: Optional[Dict[str, str]] = None):
        super().__init__(cache_manager)
        self.catalog = catalog
        self.story_page_mappings = story_page_mappings if story_page_mappings is not None else STORY_PAGE_MAPPINGS
        self.legacy_sections = legacy_sections if legacy_sections is not None else LEGACY_SECTIONS

    def get_service_name(self) -> str:
        """Get the service name."""
        return "gallery_resolver"

    def get_pages_for_testimony(self, testimony: Testimony) -> List[int]:
        """
        Magazine pages a testimony spans: its pageRange, else the story mapping, else its page.
        """
        if testimony.page_range is not None:
            return list(range(testimony.page_range.start, testimony.page_range.end + 1))
        pages = list(self.story_page_mappings.get(testimony.id, []))
        if not pages and testimony.page:
            pages = [testimony.page]
        return pages

    def get_curated_images(self, testimony: Testimony) -> List[GalleryImage]:
        gallery = []
        for index, image_path in enumerate(testimony.images or []):
            caption = testimony.images_captions.get(image_path)
            if not caption:
                filename = image_path.split("/")[-1]
                match = LEADING_PAGE_PATTERN.match(filename)
                page_number = int(match.group(1)) if match else testimony.page
                caption = f"From page {page_number} of the magazine"
            gallery.append(GalleryImage(
                id=f"{testimony.id}-cms-{index}",
                testimony_id=testimony.id,
                src=image_path,
                alt=f"{testimony.title} - Image {index + 1}",
                caption=caption,
            ))
        return gallery

    def get_page_images(self, testimony: Testimony) -> List[GalleryImage]:
        gallery = []
        for page in self.get_pages_for_testimony(testimony):
            for index, image_path in enumerate(self.catalog.get_images_for_page_number(page)):
                gallery.append(GalleryImage(
                    id=f"{testimony.id}-page-{page}-{index}",
                    testimony_id=testimony.id,
                    src=image_path,
                    alt=f"{testimony.title} - Photo from page {page}",
                    caption=f"From page {page} of the magazine",
                ))
        return gallery

    def get_legacy_images(self, testimony: Testimony) -> List[GalleryImage]:
        """
        Images curated by section title before page numbers were tracked.
        Known ids map to fixed sections; anything else matches on its title.
        """
        if testimony.id == COLLAGE_ID:
            return self.catalog.get_collage_images()
        section = self.legacy_sections.get(testimony.id)
        if section is not None:
            return self.catalog.get_images_for_section(section)
        return self.catalog.get_images_for_section(testimony.title)

    def get_gallery_images(self, testimony: Testimony) -> List[GalleryImage]:
        gallery = self.get_curated_images(testimony)
        if not gallery:
            gallery = self.get_page_images(testimony)
        if not gallery:
            gallery = self.get_legacy_images(testimony)
        return [image for image in gallery if not image.is_profile]

    def get_profile_image(self, testimony: Testimony) -> str:
        """Curated profile photo if one is known, else a generated initials avatar."""
        profile = next((image for image in self.get_legacy_images(testimony) if image.is_profile), None)
        if profile is not None:
            return profile.src
        return generate_avatar_url(testimony.author)

    def get_image_sources(self, testimony: Testimony) -> TestimonyImageSources:
        try:
            return TestimonyImageSources(
                profile_image=self.get_profile_image(testimony),
                gallery_images=self.get_gallery_images(testimony),
            )
        except Exception as e:
            self._handle_service_error(e, f"Error resolving images for {testimony.id}")
