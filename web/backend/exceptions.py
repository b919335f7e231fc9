#!/usr/bin/env python3
"""
Exception handlers for the web application.

Domain errors from core.errors are mapped to JSON error responses.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.errors import (
    JobSwipeError,
    DocumentNotFoundError,
    SessionNotFoundError,
    InvalidInputError,
    SessionStateError,
    StoreUnavailableError,
    CompletionError,
    DuplicateApplicationError,
)

logger = logging.getLogger(__name__)


def status_code_for(exc: JobSwipeError) -> int:
    if isinstance(exc, (DocumentNotFoundError, SessionNotFoundError)):
        return 404
    if isinstance(exc, (InvalidInputError, SessionStateError)):
        return 400
    if isinstance(exc, DuplicateApplicationError):
        return 409
    if isinstance(exc, (StoreUnavailableError, CompletionError)):
        return 503
    return 500


async def service_exception_handler(
    request: Request,
    exc: JobSwipeError
) -> JSONResponse:
    """
    Handle domain exceptions.

    Args:
        request: The FastAPI request.
        exc: The domain exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Rejected request to {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """Handle FastAPI HTTP exceptions with consistent format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
