"""Error Hierarchy - typed, categorized exceptions for all API failure modes.

Invariants:
    - Every API error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - Storage errors never carry HTTP semantics; they are mapped at the service boundary

Design Decisions:
    - Single hierarchy with ApiError base: FastAPI global handler catches all
    - StorageError kept outside ApiError: the ORM layer reports what happened,
      the service layer decides which HTTP status that means
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    record_id: str | None = None
    request_id: str | None = None
    debug_info: dict[str, Any] | None = None


class ApiError(Exception):
    """Base exception for all errors surfaced through the HTTP API."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {
                "resource": self.context.resource,
                "record_id": self.context.record_id,
                "request_id": self.context.request_id,
            },
        }
        if self.details is not None:
            body["details"] = self.details
        return {"error": body}


# ─── Client Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(ApiError):
    """Requested record does not exist."""
    def __init__(
        self, resource: str, record_id: object, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource
        ctx.record_id = str(record_id)
        super().__init__(
            f"{resource} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class ConflictError(ApiError):
    """A uniqueness constraint rejected the write."""
    def __init__(
        self,
        message: str,
        fields: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409, details=fields,
        )
        self.fields = fields or []


# ─── Infrastructure Errors (500-level) ──────────────────────────

class InternalError(ApiError):
    """Storage or unexpected failure while serving a request."""
    def __init__(
        self,
        message: str,
        details: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500, details=details,
        )


class RequestTimeoutError(ApiError):
    """Request exceeded the configured processing time."""
    def __init__(self, timeout_seconds: float, context: ErrorContext | None = None):
        super().__init__(
            f"Request exceeded {timeout_seconds:g}s timeout",
            "REQUEST_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.ERROR, context, 504,
        )


# ─── Storage Signals (no HTTP semantics) ────────────────────────

class StorageError(Exception):
    """Any failure reported by the storage layer."""
    def __init__(self, message: str, operation: str = "unknown"):
        super().__init__(message)
        self.message = message
        self.operation = operation


class RecordNotFoundError(StorageError):
    """A targeted update/delete matched no row."""
    def __init__(self, table: str, record_id: object):
        super().__init__(
            f"No {table} record with id {record_id}", "lookup",
        )
        self.table = table
        self.record_id = record_id


class UniqueViolationError(StorageError):
    """Insert/update violated a unique constraint.

    `fields` holds the offending column names when the driver reports them.
    """
    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message, "commit")
        self.fields = fields or []
