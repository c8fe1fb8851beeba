from fastapi import APIRouter, Depends, Query, Path
import logging

from ..services.testimonies import MemorialOrchestrator
from ..services.testimonies.base import ValidationError
from ..utils.custom_utils import generate_response
from .testimony_routes import get_memorial_service, PUBLIC_CACHE_HEADERS

router = APIRouter(prefix="/images", tags=["Images"])
logger = logging.getLogger(__name__)


@router.get("")
async def get_all_images(service: MemorialOrchestrator = Depends(get_memorial_service)):
    """
    Every image path in the magazine inventory.
    """
    try:
        images = service.get_all_images()
        return generate_response(
            status_code=200,
            response_message="Images retrieved successfully",
            customer_message="Images retrieved successfully",
            body={"total": len(images), "images": images},
            headers=PUBLIC_CACHE_HEADERS
        )
    except Exception as e:
        logger.error(f"Error retrieving images: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving images: {str(e)}",
            customer_message="An error occurred while retrieving images",
            body=None
        )


@router.get("/pages")
async def get_images_for_page_range(
    start: int = Query(..., description="First magazine page"),
    end: int = Query(..., description="Last magazine page, inclusive"),
    service: MemorialOrchestrator = Depends(get_memorial_service)
):
    """
    Images for a range of magazine pages, in page order.
    """
    try:
        images = service.get_images_for_page_range(start, end)
        return generate_response(
            status_code=200,
            response_message=f"Images for pages {start}-{end} retrieved successfully",
            customer_message="Images retrieved successfully",
            body={"start": start, "end": end, "images": images},
            headers=PUBLIC_CACHE_HEADERS
        )
    except ValidationError as e:
        return generate_response(
            status_code=400,
            response_message=str(e),
            customer_message="Invalid page range",
            body=None
        )
    except Exception as e:
        logger.error(f"Error retrieving images for pages {start}-{end}: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving images: {str(e)}",
            customer_message="An error occurred while retrieving images",
            body=None
        )


@router.get("/pages/{page}")
async def get_images_for_page(
    page: int = Path(..., description="Magazine page number"),
    service: MemorialOrchestrator = Depends(get_memorial_service)
):
    """
    Images printed on one magazine page; an empty list when there are none.
    """
    try:
        return generate_response(
            status_code=200,
            response_message=f"Images for page {page} retrieved successfully",
            customer_message="Images retrieved successfully",
            body={"page": page, "images": service.get_images_for_page_number(page)},
            headers=PUBLIC_CACHE_HEADERS
        )
    except Exception as e:
        logger.error(f"Error retrieving images for page {page}: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving images: {str(e)}",
            customer_message="An error occurred while retrieving images",
            body=None
        )


@router.get("/sections/{section_title}")
async def get_images_for_section(
    section_title: str = Path(..., description="Section title, matched case-insensitively"),
    service: MemorialOrchestrator = Depends(get_memorial_service)
):
    """
    Gallery images whose filename section contains the given title.
    """
    try:
        return generate_response(
            status_code=200,
            response_message=f"Images for section '{section_title}' retrieved successfully",
            customer_message="Images retrieved successfully",
            body=service.get_images_for_section(section_title),
            headers=PUBLIC_CACHE_HEADERS
        )
    except Exception as e:
        logger.error(f"Error retrieving images for section {section_title}: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving images: {str(e)}",
            customer_message="An error occurred while retrieving images",
            body=None
        )
