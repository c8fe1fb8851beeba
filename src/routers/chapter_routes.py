from fastapi import APIRouter, Depends, Path
import logging

from ..services.testimonies import MemorialOrchestrator
from ..utils.custom_utils import generate_response
from .testimony_routes import get_memorial_service, PUBLIC_CACHE_HEADERS

router = APIRouter(prefix="/chapters", tags=["Chapters"])
logger = logging.getLogger(__name__)


@router.get("")
async def get_chapters(service: MemorialOrchestrator = Depends(get_memorial_service)):
    """
    All chapters of the memory book in reading order.
    """
    try:
        return generate_response(
            status_code=200,
            response_message="Chapters retrieved successfully",
            customer_message="Chapters retrieved successfully",
            body=service.get_chapters(),
            headers=PUBLIC_CACHE_HEADERS
        )
    except Exception as e:
        logger.error(f"Error retrieving chapters: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving chapters: {str(e)}",
            customer_message="An error occurred while retrieving chapters",
            body=None
        )


@router.get("/{slug}")
async def get_chapter(
    slug: str = Path(..., description="Chapter slug"),
    service: MemorialOrchestrator = Depends(get_memorial_service)
):
    """
    A chapter with its testimonies and its neighbours for navigation.
    """
    try:
        detail = service.get_chapter_detail(slug)
        if detail is None:
            return generate_response(
                status_code=404,
                response_message=f"Chapter {slug} not found",
                customer_message="Chapter not found",
                body=None
            )

        return generate_response(
            status_code=200,
            response_message="Chapter retrieved successfully",
            customer_message="Chapter retrieved successfully",
            body=detail,
            headers=PUBLIC_CACHE_HEADERS
        )
    except Exception as e:
        logger.error(f"Error retrieving chapter {slug}: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving chapter: {str(e)}",
            customer_message="An error occurred while retrieving the chapter",
            body=None
        )
