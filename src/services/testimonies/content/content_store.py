"""
Content store service.
Writes the corpus into the relational tables used by the database source.
"""

from typing import Dict, List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from ..base import BaseService, TestimonyCacheManager
from ..images.image_catalog import parse_image_filename
from ....models.testimony_models import Testimony as TestimonyRow, Image as ImageRow, TestimonyImage as TestimonyImageRow
from ....schemas.testimony_schemas import Testimony


class ContentStore(BaseService):
    """
    Replaces the contents of the testimonies, images and testimony_images tables.
    """

    def __init__(self, session: AsyncSession,
                 cache_manager: Optional[TestimonyCacheManager] = None):
        super().__init__(cache_manager)
        self.session = session

    def get_service_name(self) -> str:
        """Get the service name."""
        return "content_store"

    @staticmethod
    def build_image_row(image_path: str) -> ImageRow:
        """Image metadata parsed from the filename; unconventional names keep only path and filename."""
        filename = image_path.split("/")[-1]
        parsed = parse_image_filename(filename)
        if parsed is None:
            return ImageRow(path=image_path, filename=filename, is_page_based=False)
        return ImageRow(
            path=image_path,
            filename=filename,
            page=parsed.page_number,
            title=parsed.section_title,
            is_page_based=True,
            section_title=parsed.section_title,
            section_page=parsed.section_page,
            photo_number=parsed.photo_number,
        )

    async def clear(self) -> None:
        await self.session.execute(delete(TestimonyImageRow))
        await self.session.execute(delete(TestimonyRow))
        await self.session.execute(delete(ImageRow))

    async def import_testimonies(self, testimonies: List[Testimony]) -> Dict[str, int]:
        """
        Clear the tables and insert the given testimonies with their images.

        Args:
            testimonies: Normalized corpus records

        Returns:
            Dict: Counts of inserted testimonies, unique images and links
        """
        try:
            await self.clear()

            images_by_path: Dict[str, ImageRow] = {}
            inserted_ids = set()
            link_count = 0

            for testimony in testimonies:
                if testimony.id in inserted_ids:
                    self.logger.warning(
                        f"[{self.get_service_name()}] Skipping duplicate testimony id {testimony.id!r}"
                    )
                    continue
                inserted_ids.add(testimony.id)

                row = TestimonyRow(
                    id=testimony.id,
                    title=testimony.title,
                    author=testimony.author,
                    relationship=testimony.relationship,
                    content=testimony.content,
                    page=testimony.page,
                    category=testimony.category,
                    chapter=testimony.chapter,
                    tags=list(testimony.tags),
                    page_range=testimony.page_range.model_dump() if testimony.page_range else None,
                )
                self.session.add(row)

                linked_paths = set()
                for order, image_path in enumerate(testimony.images or []):
                    if image_path in linked_paths:
                        continue
                    linked_paths.add(image_path)

                    image = images_by_path.get(image_path)
                    if image is None:
                        image = self.build_image_row(image_path)
                        self.session.add(image)
                        images_by_path[image_path] = image

                    row.image_links.append(TestimonyImageRow(
                        image=image,
                        caption=testimony.images_captions.get(image_path),
                        order=order,
                    ))
                    link_count += 1

            await self.session.commit()

            counts = {
                "testimonies": len(inserted_ids),
                "images": len(images_by_path),
                "links": link_count,
            }
            self.logger.info(f"[{self.get_service_name()}] Imported {counts}")
            return counts
        except Exception as e:
            await self.session.rollback()
            self._handle_service_error(e, "Error importing testimonies")
