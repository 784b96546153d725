"""Query Builder - verifies WHERE clause behaviour against a real SQLite database.

Tests:
    - No conditions / no columns -> None
    - Filters AND together, search ORs across columns
    - Matching is case-insensitive; starts-with does not match mid-string
    - LIKE wildcards in the needle match literally

Design Decisions:
    - Clauses are executed, not string-compared: the rendered SQL differs
      across SQLAlchemy releases (lower(...) LIKE vs ILIKE)
"""

import pytest
from sqlalchemy import select

from app.core.domain_types import MatchMode
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.query_builder import filter_condition, search_condition
from app.models import Hashtag, User


@pytest.fixture
async def manager(tmp_path):
    m = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'qb.sqlite'}")
    async with m.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with m.session() as db:
        db.add_all([
            User(username="AdaLovelace", email="ada@example.com", password_hash="h"),
            User(username="grace", email="grace@ADA.org", password_hash="h"),
            User(username="linus", email="linus@example.com", password_hash="h"),
            Hashtag(name="python"),
            Hashtag(name="cpython"),
            Hashtag(name="100%real"),
            Hashtag(name="100xreal"),
        ])
        await db.commit()
    yield m
    await m.close()


async def _names(manager, model, column: str, where) -> set[str]:
    async with manager.session() as db:
        rows = (await db.execute(select(model).where(where))).scalars().all()
    return {getattr(row, column) for row in rows}


def test_filter_without_conditions_is_none():
    assert filter_condition(User, {}) is None


def test_search_without_columns_is_none():
    assert search_condition(User, (), "x", MatchMode.CONTAINS) is None


async def test_filter_ands_conditions(manager):
    where = filter_condition(User, {"username": "ADA", "email": "example"})
    assert await _names(manager, User, "username", where) == {"AdaLovelace"}


async def test_search_ors_columns(manager):
    where = search_condition(User, ("username", "email"), "ada", MatchMode.CONTAINS)
    assert await _names(manager, User, "username", where) == {"AdaLovelace", "grace"}


async def test_search_starts_with_skips_mid_string(manager):
    where = search_condition(Hashtag, ("name",), "PY", MatchMode.STARTS_WITH)
    assert await _names(manager, Hashtag, "name", where) == {"python"}


async def test_wildcards_in_needle_match_literally(manager):
    where = filter_condition(Hashtag, {"name": "100%"})
    assert await _names(manager, Hashtag, "name", where) == {"100%real"}
