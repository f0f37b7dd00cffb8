"""Error Handlers — global exception handlers for the moderation API.

Invariants:
    - BazaarError → structured JSON with error code, message, severity
    - RateLimitExceededError additionally sets Retry-After
    - slowapi's RateLimitExceeded is converted first, so every 429 has the same shape
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (BazaarError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the entry point import fan-out small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded

from bazaar.core.errors import BazaarError, ErrorSeverity, RateLimitExceededError
from bazaar.infrastructure.rate_limit import to_bazaar_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bazaar_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_bazaar_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(BazaarError)
    async def bazaar_error_handler(request: Request, exc: BazaarError):
        """Handle all service errors."""
        return _bazaar_error_response(request, exc)

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        """slowapi rejection → same envelope as any other BazaarError."""
        return _bazaar_error_response(request, to_bazaar_error(request, exc))


def _bazaar_error_response(request: Request, exc: BazaarError) -> JSONResponse:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"BazaarError: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "client_key": exc.context.client_key,
        },
    )
    headers = None
    if isinstance(exc, RateLimitExceededError):
        headers = {"Retry-After": str(exc.window_seconds)}
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_response(),
        headers=headers,
    )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
