"""Global error handling middleware.

This module provides consistent error responses across all API endpoints.
All exceptions are caught and converted to a standardized JSON format with
appropriate HTTP status codes.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from clarity.config import settings
from clarity.core.errors import ERROR_CATALOG, get_error
from clarity.core.exceptions import ClarityError

logger = logging.getLogger(__name__)


def _error_body(
    error_code: str, message: str, user_message: str, suggestion: str, retry_allowed: bool
) -> dict:
    return {
        "error_code": error_code,
        "message": message,
        "user_message": user_message,
        "suggestion": suggestion,
        "retry_allowed": retry_allowed,
    }


async def handle_clarity_error(request: Request, exc: ClarityError) -> JSONResponse:
    """Handle domain exceptions using the error catalog.

    Args:
        request: The incoming request
        exc: The domain exception

    Returns:
        JSONResponse with error details from catalog
    """
    error_info = get_error(exc.error_code)

    extra = {"error_code": exc.error_code, "path": request.url.path, "method": request.method}
    if settings.debug:
        extra["details"] = exc.details

    log = logger.error if exc.http_status >= 500 else logger.warning
    log(f"Request rejected: {exc.error_code}", extra=extra)

    return JSONResponse(
        status_code=exc.http_status,
        content=_error_body(
            exc.error_code,
            error_info["message"],
            error_info["user_message"],
            error_info["suggestion"],
            error_info["retry_allowed"],
        ),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle Pydantic validation errors.

    Args:
        request: The incoming request
        exc: The validation error

    Returns:
        JSONResponse with field-level messages joined into ``message``
    """
    errors = exc.errors()
    error_messages = []

    for error in errors:
        field = ".".join(str(x) for x in error.get("loc", []))
        msg = error.get("msg", "Invalid value")
        error_messages.append(f"{field}: {msg}")

    extra = {"path": request.url.path, "method": request.method}
    if settings.debug:
        extra["errors"] = errors
    logger.warning(f"Validation error on {request.url.path}", extra=extra)

    # Schema validators may tag an error with a catalog code (e.g. INS_001).
    coded = [e["type"] for e in errors if e.get("type") in ERROR_CATALOG]
    error_info = get_error(coded[0] if coded else "VAL_001")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            error_info["code"],
            " | ".join(error_messages),
            error_info["user_message"],
            error_info["suggestion"],
            error_info["retry_allowed"],
        ),
    )


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    """Handle database integrity errors.

    A unique violation here usually means two requests raced to create the
    same user's budget.
    """
    # Do not log str(exc): it can include SQL + bound parameters.
    log = logger.exception if settings.debug else logger.error
    log(
        f"Database integrity error on {request.url.path}",
        extra={"path": request.url.path, "method": request.method},
    )

    error_msg = str(exc).lower()
    if "unique" in error_msg or "duplicate" in error_msg:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=_error_body(
                "DB_002",
                "Resource already exists",
                "This record already exists",
                "Please retry the request",
                True,
            ),
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "DB_001",
            "Database operation failed",
            "A database error occurred",
            "Please try again later",
            True,
        ),
    )


async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without exposing internal details."""
    log = logger.exception if settings.debug else logger.error
    log(
        f"Unexpected error on {request.url.path}",
        extra={
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "SYS_001",
            "Internal server error",
            "An unexpected error occurred",
            "Please try again later or contact support",
            True,
        ),
    )
