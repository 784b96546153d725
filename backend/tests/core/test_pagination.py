"""Pagination - tests for list/search window normalization and page metadata.

Tests cover:
    - parse_int accepts only base-10 digit strings
    - process_list_query defaults, page/limit arithmetic, out-of-range fallbacks
    - process_list_query never raises and keeps filters on a valid window
    - process_search_query clamps limit, floors page at 1 and caps it so skip fits a BIGINT
    - Oversized list pages fall back to defaults
    - page_meta derives page and totalPages
"""

from dataclasses import dataclass

import pytest

from app.core.domain_types import MAX_RECORD_ID
from app.core.pagination import (
    page_meta, parse_int, process_list_query, process_search_query,
)


@dataclass(frozen=True)
class _Filter:
    username: str | None = None


# ─── parse_int ───────────────────────────────────────────────────

@pytest.mark.parametrize("raw, expected", [
    ("3", 3), (" 12 ", 12), ("0", 0), (None, None),
    ("abc", None), ("", None), ("-1", None), ("1.5", None), ("²", None),
])
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


# ─── process_list_query ──────────────────────────────────────────

def test_list_defaults_when_absent():
    opts = process_list_query(None, None, _Filter())
    assert (opts.skip, opts.take) == (0, 10)


def test_list_page_and_limit_compute_skip():
    opts = process_list_query("3", "20", _Filter())
    assert (opts.skip, opts.take) == (40, 20)


def test_list_non_numeric_page_treated_as_absent():
    opts = process_list_query("abc", "5", _Filter())
    assert (opts.skip, opts.take) == (0, 5)


def test_list_out_of_range_limit_falls_back_to_default():
    assert process_list_query("1", "500", _Filter()).take == 10
    assert process_list_query("1", "0", _Filter()).take == 10


def test_list_keeps_filters_on_valid_window():
    filters = _Filter(username="ali")
    opts = process_list_query("2", "10", filters)
    assert opts.where is filters


def test_list_invalid_window_drops_filters_and_resets():
    """limit=500 passes the derivation but fails re-validation."""
    opts = process_list_query("2", "500", _Filter(username="ali"))
    assert opts.where == _Filter()
    assert (opts.skip, opts.take) == (0, 10)


def test_list_page_zero_fails_revalidation():
    opts = process_list_query("0", "10", _Filter(username="x"))
    assert opts.where == _Filter()
    assert (opts.skip, opts.take) == (0, 10)


def test_list_huge_page_falls_back_to_defaults():
    """A page whose offset would not fit a BIGINT is treated as invalid."""
    opts = process_list_query("99999999999999999999", "10", _Filter(username="x"))
    assert opts.where == _Filter()
    assert (opts.skip, opts.take) == (0, 10)


def test_list_largest_page_keeps_window():
    opts = process_list_query(str(MAX_RECORD_ID // 10 + 1), "10", _Filter())
    assert opts.skip == MAX_RECORD_ID // 10 * 10
    assert opts.skip <= MAX_RECORD_ID


def test_list_take_always_in_bounds():
    for page in (None, "1", "7", "junk"):
        for limit in (None, "1", "100", "101", "0", "x"):
            opts = process_list_query(page, limit, _Filter())
            assert 1 <= opts.take <= 100
            assert opts.skip >= 0


# ─── process_search_query ────────────────────────────────────────

def test_search_defaults():
    window = process_search_query(None, None)
    assert (window.page, window.skip, window.take) == (1, 0, 10)


def test_search_clamps_limit():
    assert process_search_query("1", "500").take == 100
    assert process_search_query("1", "0").take == 1


def test_search_floors_page_at_one():
    window = process_search_query("0", "10")
    assert (window.page, window.skip) == (1, 0)


def test_search_page_offsets_skip():
    window = process_search_query("3", "25")
    assert (window.page, window.skip, window.take) == (3, 50, 25)


def test_search_huge_page_capped_to_bigint_offset():
    window = process_search_query("99999999999999999999", "10")
    assert window.skip <= MAX_RECORD_ID
    assert window.page == MAX_RECORD_ID // 10 + 1
    assert window.skip == (window.page - 1) * 10


# ─── page_meta ───────────────────────────────────────────────────

def test_page_meta_from_skip_and_take():
    meta = page_meta(total=25, skip=20, take=10)
    assert meta == {
        "total": 25, "skip": 20, "take": 10, "page": 3, "totalPages": 3,
    }


def test_page_meta_explicit_page_and_empty_total():
    meta = page_meta(total=0, skip=0, take=10, page=4)
    assert meta["page"] == 4
    assert meta["totalPages"] == 0
