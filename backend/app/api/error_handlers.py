"""Error Handlers - global exception handlers for the social API.

Invariants:
    - ApiError -> structured JSON with error code, message, severity, details
    - RequestValidationError -> 400 with field-level error details
    - Exception (catch-all) -> 500, never leaks internal details
    - Every error is logged before the response is produced

Design Decisions:
    - Three-layer handler: domain (ApiError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import ApiError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _register_api_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        """Handle all ApiError subclasses."""
        exc.context.request_id = exc.context.request_id or _request_id(request)
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"ApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "request_id": exc.context.request_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
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
            extra={"path": request.url.path, "request_id": _request_id(request)},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "request_id": _request_id(request)},
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
