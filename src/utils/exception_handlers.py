import logging

from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from src.utils.custom_utils import generate_response
from src.utils.logging.error_logger import error_logger

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: HTTPException) -> ORJSONResponse:
    """Wrap HTTPException in the standard response envelope."""
    return generate_response(
        status_code=exc.status_code,
        response_message=str(exc.detail),
        customer_message=str(exc.detail),
        body=None,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> ORJSONResponse:
    """Invalid query or path parameters."""
    return generate_response(
        status_code=422,
        response_message="Request validation failed",
        customer_message="Some of the request parameters are invalid",
        body={"errors": exc.errors()},
    )


async def pydantic_validation_error_handler(request: Request, exc: ValidationError) -> ORJSONResponse:
    # Raised while building response models, so it is our fault rather than the caller's
    logger.error(f"Response validation error on {request.url.path}: {exc}")
    await error_logger.log_error(error=exc, request=request)
    return generate_response(
        status_code=500,
        response_message=f"Data validation error: {str(exc)}",
        customer_message="An unexpected error occurred",
        body=None,
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> ORJSONResponse:
    logger.error(f"Database error on {request.url.path}: {exc}")
    await error_logger.log_error(error=exc, request=request)
    return generate_response(
        status_code=500,
        response_message="Database error",
        customer_message="An error occurred while accessing the archive",
        body=None,
    )
