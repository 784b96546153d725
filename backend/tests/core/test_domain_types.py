"""Domain Types - verifies identity bounds and enum values.

Tests:
    - RecordId wraps int and MAX_RECORD_ID is the signed 64-bit maximum
    - ResourceName values are the URL segments
    - MatchMode has exactly two strategies
"""

from app.core.domain_types import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MAX_RECORD_ID, MIN_PAGE_SIZE,
    MatchMode, RecordId, ResourceName,
)


def test_record_id_wraps_int():
    assert RecordId(7) == 7
    assert MAX_RECORD_ID == 9223372036854775807


def test_page_size_bounds():
    assert MIN_PAGE_SIZE <= DEFAULT_PAGE_SIZE <= MAX_PAGE_SIZE
    assert (MIN_PAGE_SIZE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE) == (1, 10, 100)


def test_resource_names_are_url_segments():
    assert {r.value for r in ResourceName} == {
        "users", "posts", "likes", "comments", "followers", "hashtags",
    }


def test_match_mode_has_two_strategies():
    assert set(MatchMode) == {MatchMode.CONTAINS, MatchMode.STARTS_WITH}
