# Import necessary FastAPI components
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
import logging
from datetime import datetime
from redis.asyncio import Redis

# Import application routes and custom error handlers
from src.routers import testimony_routes, image_routes, chapter_routes
from src.utils.exception_handlers import (
    http_exception_handler,
    pydantic_validation_error_handler,
    sqlalchemy_exception_handler,
    validation_exception_handler
)

# Import middleware
from src.middleware.logging_middleware import LoggingMiddleware

# Import configuration
from src.core.config import settings

# Import database
from src.database import init_db, close_db

# Import services
from src.services.testimonies import MemorialOrchestrator, ContentLoader

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


async def connect_redis():
    """Connect to Redis, or return None so the API runs without a cache."""
    try:
        logger.info(f"Connecting to Redis at: {settings.redis_url}")
        redis = Redis.from_url(
            url=settings.redis_url,
            decode_responses=True,
            socket_timeout=5,
            socket_connect_timeout=5
        )
        await redis.ping()
        logger.info("Redis connection established successfully")
        return redis
    except Exception as e:
        logger.warning(f"Redis connection failed: {str(e)}. Listings will not be cached.")
        return None


# Lifespan context manager for startup and shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Initialize application state
    app.state.settings = settings

    if settings.data_source == "database":
        logger.info("Initializing database connection...")
        await init_db()
        logger.info("Database connection initialized successfully")

    app.state.redis = await connect_redis()

    # Load the corpus once; every request reads the same immutable index
    loader = ContentLoader()
    app.state.memorial = await MemorialOrchestrator.create(
        redis_client=app.state.redis,
        content_loader=loader
    )
    logger.info(f"Memorial services ready with {len(app.state.memorial.search_engine)} testimonies")

    yield

    # Shutdown: Clean up resources
    if settings.data_source == "database":
        logger.info("Closing database connection...")
        await close_db()
        logger.info("Database connection closed successfully")

    if app.state.redis:
        try:
            await app.state.redis.close()
            logger.info("Redis connection closed successfully")
        except Exception as e:
            logger.warning(f"Error closing Redis connection: {str(e)}")


# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="API for the Tony memorial site - testimonies, search and magazine images",
    version=settings.app_version,
    default_response_class=ORJSONResponse,
    lifespan=lifespan
)

# CORS Configuration
logger.info(f"Effective CORS Origins: {settings.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=settings.cors_methods,
    allow_headers=settings.cors_headers,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# Register custom exception handlers
# These ensure consistent error responses across the API
app.add_exception_handler(
    HTTPException,  # Handle general HTTP exceptions
    http_exception_handler
)
app.add_exception_handler(
    RequestValidationError,  # Handle request validation errors
    validation_exception_handler
)
app.add_exception_handler(
    ValidationError,  # Handle Pydantic validation errors
    pydantic_validation_error_handler
)
app.add_exception_handler(
    SQLAlchemyError,  # Handle database-related errors
    sqlalchemy_exception_handler
)


@app.get("/health", tags=["Health"])
async def health_check(request: Request):
    """Health check endpoint for monitoring system status

    Reports the loaded corpus, where it came from and the status of Redis.
    """
    health_status = {
        "status": "healthy",
        "timestamp": str(datetime.now()),
        "version": settings.app_version,
        "dependencies": {
            "redis": "unknown",
            "corpus": "unknown"
        }
    }

    # Check Redis health
    try:
        redis = getattr(request.app.state, "redis", None)
        if redis:
            redis_ping = await redis.ping()
            health_status["dependencies"]["redis"] = "healthy" if redis_ping else "unhealthy"
        else:
            health_status["dependencies"]["redis"] = "not_configured"
    except Exception as e:
        logger.error(f"Redis health check error: {str(e)}")
        health_status["dependencies"]["redis"] = "unhealthy"

    # Check the loaded corpus
    memorial = getattr(request.app.state, "memorial", None)
    if memorial is None:
        health_status["dependencies"]["corpus"] = "unavailable"
        health_status["status"] = "unhealthy"
    else:
        corpus = await memorial.health_check()
        health_status["corpus"] = {
            "testimonies": corpus["testimonies"],
            "source": corpus["source"],
        }
        health_status["dependencies"]["corpus"] = "healthy" if corpus["healthy"] else "empty"

    # A missing cache degrades performance only
    if health_status["dependencies"]["redis"] == "unhealthy":
        health_status["status"] = "degraded"

    return ORJSONResponse(content=health_status)

# Include all routers with appropriate prefixes
api_prefix = settings.api_prefix

# Testimony routes
app.include_router(
    testimony_routes.router,
    prefix=api_prefix
)

# Image routes
app.include_router(
    image_routes.router,
    prefix=api_prefix
)

# Chapter routes
app.include_router(
    chapter_routes.router,
    prefix=api_prefix
)
