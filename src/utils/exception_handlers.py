"""
Exception handlers that give every error response the same shape:
``{"detail": "<message>"}`` with the matching status code.
"""

import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.exceptions import WikiError

logger = logging.getLogger(__name__)


async def wiki_exception_handler(request: Request, exc: WikiError) -> ORJSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return ORJSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> ORJSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return ORJSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> ORJSONResponse:
    logger.warning(f"Request validation failed for {request.url.path}: {exc.errors()}")
    return ORJSONResponse(
        status_code=422,
        content={"detail": "Invalid request", "errors": jsonable_errors(exc)}
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Strip the non-serialisable ``ctx``/``input`` parts of validation errors"""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
