"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId is a 64-bit signed integer, always within 1..MAX_RECORD_ID
    - Page sizes are bounded MIN_PAGE_SIZE..MAX_PAGE_SIZE
    - All valid match modes encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", int)

MAX_RECORD_ID = 2**63 - 1


# ─── Pagination ──────────────────────────────────────────────────

DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100


# ─── Enums ───────────────────────────────────────────────────────

class MatchMode(str, Enum):
    """Case-insensitive text matching strategy for filters and search."""
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"


class ResourceName(str, Enum):
    """Every resource exposed by the API, valued by its URL segment."""
    USERS = "users"
    POSTS = "posts"
    LIKES = "likes"
    COMMENTS = "comments"
    FOLLOWERS = "followers"
    HASHTAGS = "hashtags"
