from fastapi import APIRouter, Depends, Query, Path, BackgroundTasks, Request
from typing import List, Optional
import logging
import time

from ..core.config import settings
from ..services.testimonies import MemorialOrchestrator
from ..services.testimonies.base import ValidationError
from ..schemas.testimony_schemas import SortOption
from ..utils.custom_utils import generate_response

router = APIRouter(prefix="/testimonials", tags=["Testimonials"])
logger = logging.getLogger(__name__)

# Served by CDNs for 5 minutes, stale for another 10
PUBLIC_CACHE_HEADERS = {"Cache-Control": "public, s-maxage=300, stale-while-revalidate=600"}


def get_memorial_service(request: Request) -> MemorialOrchestrator:
    """Dependency returning the orchestrator built at startup."""
    return request.app.state.memorial


@router.get("")
async def list_testimonials(
    background_tasks: BackgroundTasks,
    id: Optional[str] = Query(None, description="Return a single testimony by id"),
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(settings.default_page_size, description="Page size"),
    search: Optional[str] = Query(None, description="Substring matched against title, author and content"),
    category: Optional[str] = Query(None, description="Exact category"),
    service: MemorialOrchestrator = Depends(get_memorial_service)
):
    """
    Public testimony listing ordered by magazine page, or a single testimony when `id` is given.
    """
    try:
        if id:
            testimony = service.get_testimony_by_id(id)
            if testimony is None:
                return generate_response(
                    status_code=404,
                    response_message=f"Testimony {id} not found",
                    customer_message="Testimony not found",
                    body=None
                )
            return generate_response(
                status_code=200,
                response_message="Testimony retrieved successfully",
                customer_message="Testimony retrieved successfully",
                body=testimony,
                headers=PUBLIC_CACHE_HEADERS
            )

        listing = await service.get_listing(
            page=page, limit=limit, search=search, category=category,
            background_tasks=background_tasks
        )
        return generate_response(
            status_code=200,
            response_message="Testimonies retrieved successfully",
            customer_message="Testimonies retrieved successfully",
            body=listing,
            headers=PUBLIC_CACHE_HEADERS
        )
    except ValidationError as e:
        return generate_response(
            status_code=400,
            response_message=str(e),
            customer_message="Invalid pagination parameters",
            body=None
        )
    except Exception as e:
        logger.error(f"Error listing testimonies: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error listing testimonies: {str(e)}",
            customer_message="An error occurred while retrieving testimonies",
            body=None
        )


@router.get("/search")
async def search_testimonials(
    q: Optional[str] = Query(None, description="Free-text query; empty returns everything"),
    category: Optional[str] = Query(None, description="Exact category"),
    relationship: Optional[str] = Query(None, description="Exact relationship"),
    author: Optional[str] = Query(None, description="Case-insensitive author substring"),
    tags: Optional[List[str]] = Query(None, description="Tags; repeat or comma-separate"),
    sort: Optional[SortOption] = Query(None, description="relevance, author, title or page"),
    highlight: bool = Query(True, description="Add highlighted title and preview"),
    preview_length: int = Query(settings.default_preview_length, ge=20, le=2000, description="Preview length"),
    limit: Optional[int] = Query(None, ge=1, le=200, description="Maximum number of results"),
    offset: int = Query(0, ge=0, description="Number of results to skip"),
    service: MemorialOrchestrator = Depends(get_memorial_service)
):
    """
    Fuzzy search over title, author, content and tags with optional filters.
    """
    try:
        start_time = time.time()

        results = service.search_testimonies(
            query=q, category=category, relationship=relationship, author=author,
            tags=tags, sort_by=sort.value if sort else None, highlight=highlight,
            preview_length=preview_length, limit=limit, offset=offset
        )

        response_time = time.time() - start_time
        results["metadata"] = {"response_time_ms": round(response_time * 1000, 2)}

        return generate_response(
            status_code=200,
            response_message="Search completed successfully",
            customer_message="Search completed successfully",
            body=results
        )
    except ValidationError as e:
        return generate_response(
            status_code=400,
            response_message=str(e),
            customer_message="Invalid search query",
            body=None
        )
    except Exception as e:
        logger.error(f"Error searching testimonies: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error searching testimonies: {str(e)}",
            customer_message="An error occurred while searching testimonies",
            body=None
        )


@router.get("/filters")
async def get_filter_options(service: MemorialOrchestrator = Depends(get_memorial_service)):
    """
    Distinct categories, relationships, authors and tags for filter dropdowns.
    """
    try:
        return generate_response(
            status_code=200,
            response_message="Filter options retrieved successfully",
            customer_message="Filter options retrieved successfully",
            body=service.get_filter_options(),
            headers=PUBLIC_CACHE_HEADERS
        )
    except Exception as e:
        logger.error(f"Error retrieving filter options: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving filter options: {str(e)}",
            customer_message="An error occurred while retrieving filter options",
            body=None
        )


@router.get("/stats")
async def get_stats(service: MemorialOrchestrator = Depends(get_memorial_service)):
    """
    Total testimony count and counts per category.
    """
    try:
        return generate_response(
            status_code=200,
            response_message="Statistics retrieved successfully",
            customer_message="Statistics retrieved successfully",
            body=service.get_stats(),
            headers=PUBLIC_CACHE_HEADERS
        )
    except Exception as e:
        logger.error(f"Error retrieving statistics: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving statistics: {str(e)}",
            customer_message="An error occurred while retrieving statistics",
            body=None
        )


@router.get("/featured")
async def get_featured(
    count: int = Query(6, ge=1, le=50, description="Maximum number of testimonies"),
    service: MemorialOrchestrator = Depends(get_memorial_service)
):
    """
    Hand-picked testimonies for the homepage, in curated order.
    """
    try:
        return generate_response(
            status_code=200,
            response_message="Featured testimonies retrieved successfully",
            customer_message="Featured testimonies retrieved successfully",
            body=service.get_featured_testimonies(count),
            headers=PUBLIC_CACHE_HEADERS
        )
    except Exception as e:
        logger.error(f"Error retrieving featured testimonies: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving featured testimonies: {str(e)}",
            customer_message="An error occurred while retrieving featured testimonies",
            body=None
        )


@router.get("/{testimony_id}")
async def get_testimony(
    testimony_id: str = Path(..., description="Testimony id"),
    service: MemorialOrchestrator = Depends(get_memorial_service)
):
    """
    A single testimony with its resolved images.
    """
    try:
        testimony = service.get_testimony_by_id(testimony_id)
        if testimony is None:
            return generate_response(
                status_code=404,
                response_message=f"Testimony {testimony_id} not found",
                customer_message="Testimony not found",
                body=None
            )

        return generate_response(
            status_code=200,
            response_message="Testimony retrieved successfully",
            customer_message="Testimony retrieved successfully",
            body={
                "testimony": testimony,
                "images": service.get_testimony_images(testimony),
            },
            headers=PUBLIC_CACHE_HEADERS
        )
    except Exception as e:
        logger.error(f"Error retrieving testimony {testimony_id}: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving testimony: {str(e)}",
            customer_message="An error occurred while retrieving the testimony",
            body=None
        )


@router.get("/{testimony_id}/images")
async def get_testimony_images(
    testimony_id: str = Path(..., description="Testimony id"),
    service: MemorialOrchestrator = Depends(get_memorial_service)
):
    """
    Profile image and gallery for a testimony.
    """
    try:
        testimony = service.get_testimony_by_id(testimony_id)
        if testimony is None:
            return generate_response(
                status_code=404,
                response_message=f"Testimony {testimony_id} not found",
                customer_message="Testimony not found",
                body=None
            )

        return generate_response(
            status_code=200,
            response_message="Testimony images retrieved successfully",
            customer_message="Testimony images retrieved successfully",
            body=service.get_testimony_images(testimony),
            headers=PUBLIC_CACHE_HEADERS
        )
    except Exception as e:
        logger.error(f"Error retrieving images for {testimony_id}: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving testimony images: {str(e)}",
            customer_message="An error occurred while retrieving images",
            body=None
        )
