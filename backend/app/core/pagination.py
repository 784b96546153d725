"""Pagination - turns raw query-string values into a well-formed skip/take window.

Invariants:
    - process_list_query never raises; malformed input degrades to skip=0, take=10
    - take is always within MIN_PAGE_SIZE..MAX_PAGE_SIZE
    - skip is always within 0..MAX_RECORD_ID (fits a BIGINT OFFSET)
    - Filters pass through untouched unless the window fails re-validation,
      in which case they are dropped together with the pagination values

Design Decisions:
    - List and search windows computed differently on purpose: list falls back
      to the default page size on an out-of-range limit, search clamps it
    - Filter criteria are opaque here (any object with a no-arg constructor),
      so one processor serves every resource
"""

import logging
import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from app.core.domain_types import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MAX_RECORD_ID, MIN_PAGE_SIZE,
)

logger = logging.getLogger(__name__)

F = TypeVar("F")


@dataclass(frozen=True)
class ListQueryOptions(Generic[F]):
    """Normalized list query: typed filter criteria plus the page window."""
    where: F
    skip: int
    take: int


@dataclass(frozen=True)
class SearchWindow:
    """Page window for a search request."""
    page: int
    skip: int
    take: int


def parse_int(value: str | None) -> int | None:
    """Parse a query-string value as a base-10 integer, None if absent or non-numeric."""
    if value is None:
        return None
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def _check_window(
    skip: int, take: int, page: int | None, limit: int | None,
) -> None:
    """Re-validate derived values against the strict bounds. Raises ValueError."""
    if not 0 <= skip <= MAX_RECORD_ID:
        raise ValueError(f"skip must be within 0..{MAX_RECORD_ID}, got {skip}")
    if not MIN_PAGE_SIZE <= take <= MAX_PAGE_SIZE:
        raise ValueError(f"take must be within {MIN_PAGE_SIZE}..{MAX_PAGE_SIZE}, got {take}")
    if page is not None and page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if limit is not None and not MIN_PAGE_SIZE <= limit <= MAX_PAGE_SIZE:
        raise ValueError(
            f"limit must be within {MIN_PAGE_SIZE}..{MAX_PAGE_SIZE}, got {limit}",
        )


def process_list_query(
    page: str | None,
    limit: str | None,
    filters: F,
    resource: str = "resource",
) -> ListQueryOptions[F]:
    """Convert raw list-query values into {where, skip, take}."""
    parsed_page = parse_int(page)
    parsed_limit = parse_int(limit)

    take = (
        parsed_limit
        if parsed_limit is not None and MIN_PAGE_SIZE <= parsed_limit <= MAX_PAGE_SIZE
        else DEFAULT_PAGE_SIZE
    )
    skip = (parsed_page - 1) * take if parsed_page and parsed_page > 0 else 0

    try:
        _check_window(skip, take, parsed_page, parsed_limit)
    except ValueError as e:
        logger.warning(
            f"{resource} query parameter processing error: {e}",
            extra={"resource": resource},
        )
        return ListQueryOptions(
            where=type(filters)(), skip=0, take=DEFAULT_PAGE_SIZE,
        )

    return ListQueryOptions(where=filters, skip=skip, take=take)


def process_search_query(page: str | None, limit: str | None) -> SearchWindow:
    """Search window: page defaults to 1, limit defaults to 10 and is clamped.

    page is also capped so the resulting skip stays within MAX_RECORD_ID.
    """
    parsed_page = parse_int(page)
    parsed_limit = parse_int(limit)

    requested = parsed_limit if parsed_limit is not None else DEFAULT_PAGE_SIZE
    take = min(max(requested, MIN_PAGE_SIZE), MAX_PAGE_SIZE)
    last_page = MAX_RECORD_ID // take + 1
    current = min(max(parsed_page if parsed_page is not None else 1, 1), last_page)
    return SearchWindow(page=current, skip=(current - 1) * take, take=take)


def page_meta(total: int, skip: int, take: int, page: int | None = None) -> dict:
    """Envelope metadata. page defaults to the one implied by skip/take."""
    return {
        "total": total,
        "skip": skip,
        "take": take,
        "page": page if page is not None else skip // take + 1,
        "totalPages": math.ceil(total / take),
    }
