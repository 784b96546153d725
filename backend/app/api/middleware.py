"""HTTP Middleware - request id, access logging, timeout and secure headers.

Invariants:
    - Every response carries X-Request-Id (incoming value echoed, else generated)
    - request.state.request_id is set before any handler runs
    - Requests under the versioned prefix are cut off after timeout_seconds with a 504 envelope
    - One access log line per request: method, path, status, duration

Design Decisions:
    - BaseHTTPMiddleware: handlers stay unaware of request ids and timing
    - Secure headers set only when the handler did not set them itself
"""

import asyncio
import logging
import time
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from app.core.errors import ErrorContext, RequestTimeoutError

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-XSS-Protection": "0",
    "Cross-Origin-Resource-Policy": "same-origin",
}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a request id, enforces the timeout and logs the outcome."""

    def __init__(
        self, app: ASGIApp, timeout_seconds: float, timeout_prefix: str = "/",
    ):
        super().__init__(app)
        self.timeout_seconds = timeout_seconds
        self.timeout_prefix = timeout_prefix

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        if request.url.path.startswith(self.timeout_prefix):
            try:
                response = await asyncio.wait_for(
                    call_next(request), timeout=self.timeout_seconds,
                )
            except asyncio.TimeoutError:
                exc = RequestTimeoutError(
                    self.timeout_seconds, ErrorContext(request_id=request_id),
                )
                logger.error(
                    f"Request timed out: {request.method} {request.url.path}",
                    extra={"request_id": request_id, "error_code": exc.code},
                )
                response = JSONResponse(
                    status_code=exc.http_status, content=exc.to_response(),
                )
        else:
            response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        return response


class SecureHeadersMiddleware(BaseHTTPMiddleware):
    """Adds conservative security headers to every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        response = await call_next(request)
        for header, value in SECURE_HEADERS.items():
            response.headers.setdefault(header, value)
        return response
