# Import necessary FastAPI components
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from datetime import datetime

# Import application routes and custom error handlers
from src.routers import wiki_routes
from src.core.exceptions import WikiError
from src.utils.exception_handlers import (
    http_exception_handler,
    validation_exception_handler,
    wiki_exception_handler
)

# Import middleware
from src.middleware.logging_middleware import LoggingMiddleware

# Import configuration
from src.core.config import settings

# Import services
from src.services.wiki import ContentLoader

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
)
logger = logging.getLogger(__name__)


# Lifespan context manager for startup and shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Initialize application state
    app.state.settings = settings
    logger.info(f"Starting {settings.app_name} {settings.app_version} ({settings.environment})")

    content_health = await ContentLoader().health_check()
    if content_health["healthy"]:
        logger.info(f"Serving wiki content from {content_health['content_dir']}")
    else:
        logger.warning(f"Wiki content directory {content_health['content_dir']} is missing")

    yield

    logger.info("Shutting down")


# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="API for the personal wiki - articles and related-article discovery",
    version=settings.app_version,
    debug=settings.debug,
    default_response_class=ORJSONResponse,
    lifespan=lifespan
)

# CORS Configuration
logger.info(f"Effective CORS Origins: {settings.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=settings.cors_methods,
    allow_headers=settings.cors_headers,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# Register custom exception handlers
# These ensure consistent error responses across the API
app.add_exception_handler(
    WikiError,  # Handle missing parameters and unknown articles
    wiki_exception_handler
)
app.add_exception_handler(
    StarletteHTTPException,  # Handle general HTTP exceptions, unknown routes included
    http_exception_handler
)
app.add_exception_handler(
    RequestValidationError,  # Handle request validation errors
    validation_exception_handler
)


@app.get("/health", tags=["Health"])
async def health_check(request: Request):
    """Health check endpoint for monitoring system status

    Returns a status response indicating the API is operational and whether
    the content store can be read.
    """
    content_health = await ContentLoader().health_check()

    health_status = {
        "status": "healthy" if content_health["healthy"] else "unhealthy",
        "timestamp": str(datetime.now()),
        "version": settings.app_version,
        "dependencies": {
            "content_store": "healthy" if content_health["healthy"] else "unhealthy"
        }
    }

    return ORJSONResponse(content=health_status)


# Wiki routes
app.include_router(
    wiki_routes.router,
    prefix=settings.api_prefix
)
