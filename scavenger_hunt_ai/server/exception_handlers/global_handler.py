"""
Exception Handlers for FastAPI Application.

Every error leaves the API in the same envelope::

    {"code": "...", "message": "...", "details": ..., "timestamp": "..."}

Application errors carry their own status and code, validation failures
become ``400 VALIDATION_ERROR`` with the field errors as details and clients
over the rate limit get ``429 RATE_LIMITED``. Any unhandled exception is
logged with its traceback and reported as ``500 INTERNAL_SERVER_ERROR`` with
an error ID.
"""

import traceback
import uuid
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from scavenger_hunt_ai.core.errors import AppError
from scavenger_hunt_ai.core.logging_config import get_logger
from scavenger_hunt_ai.core.models.io.common import ErrorResponse
from scavenger_hunt_ai.core.monitoring import log_error

logger = get_logger(__name__)

HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    422: "VALIDATION_ERROR",
}


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Build a JSON response carrying the error envelope."""
    body = ErrorResponse(code=code, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"), headers=headers)


def _field_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Report an expected application error with its own status and code."""
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}: {exc.message}")
    return error_response(exc.status_code, exc.code, exc.message, exc.details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework HTTP errors (unknown routes, wrong methods) in the envelope."""
    code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return error_response(exc.status_code, code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 with the field errors."""
    details = _field_errors(exc)
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {details}")
    return error_response(400, "VALIDATION_ERROR", "Request validation failed", details)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Report a client over its request limit as 429.

    Called synchronously by the rate limiting middleware.
    """
    logger.warning(f"Rate limit exceeded by {request.client.host if request.client else 'unknown'}: {exc.detail}")
    return error_response(
        429,
        "RATE_LIMITED",
        "Too many requests, please try again later.",
        {"limit": str(exc.detail)},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns the error envelope with an
    error ID that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with the error envelope
    """
    error_id = uuid.uuid4().hex[:12]

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )
    log_error(
        error_type=type(exc).__name__,
        error_message=str(exc),
        context={"error_id": error_id, "path": request.url.path},
    )

    return error_response(
        500,
        "INTERNAL_SERVER_ERROR",
        "Internal server error",
        {"error_id": error_id, "error_type": type(exc).__name__},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    This function should be called during application initialization to set up
    all custom exception handlers.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
