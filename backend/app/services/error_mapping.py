"""Error Mapping - translates storage signals into HTTP-facing API errors.

Invariants:
    - RecordNotFoundError -> ResourceNotFoundError (404, generic message)
    - UniqueViolationError -> ConflictError (409, offending API field names)
    - Any other exception -> InternalError (500, underlying message text)
    - Every mapped error is logged before it is raised
"""

import logging
from typing import NoReturn

from pydantic.alias_generators import to_camel

from app.core.errors import (
    ConflictError, ErrorContext, InternalError, RecordNotFoundError,
    ResourceNotFoundError, UniqueViolationError,
)

logger = logging.getLogger(__name__)


def raise_for_storage_error(
    exc: Exception, resource: str, action: str, record_id: object = None,
) -> NoReturn:
    """Re-raise a storage failure as the matching ApiError."""
    context = ErrorContext(
        resource=resource,
        record_id=str(record_id) if record_id is not None else None,
    )
    if isinstance(exc, RecordNotFoundError):
        logger.warning(
            f"Failed to {action} {resource} {record_id}: not found",
            extra={"resource": resource, "record_id": context.record_id},
        )
        raise ResourceNotFoundError(resource, record_id, context) from exc
    if isinstance(exc, UniqueViolationError):
        fields = [to_camel(f) for f in exc.fields]
        logger.warning(
            f"Failed to {action} {resource}: unique constraint on {fields}",
            extra={"resource": resource, "error_code": "CONFLICT"},
        )
        raise ConflictError(
            f"Could not {action} {resource}", fields or None, context,
        ) from exc
    logger.error(
        f"Failed to {action} {resource}: {exc}",
        extra={"resource": resource, "error_code": "INTERNAL_ERROR"},
        exc_info=exc,
    )
    raise InternalError(f"Failed to {action} {resource}", str(exc), context) from exc
