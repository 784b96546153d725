"""Database Session Manager - verifies error translation and health checks on SQLite.

Tests cover:
    - Unique violations surface as UniqueViolationError with column names
    - Foreign key violations surface as plain StorageError (SQLite FKs enforced)
    - health_check is True on a live engine
    - get_db_manager raises until init_db runs
"""

import pytest

import app.infrastructure.database as db_module
from app.core.errors import StorageError, UniqueViolationError
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.models import Post, User


@pytest.fixture
async def manager(tmp_path):
    m = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'db.sqlite'}")
    async with m.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield m
    await m.close()


async def test_unique_violation_translated(manager):
    async with manager.session() as db:
        db.add(User(username="ada", email="ada@example.com", password_hash="h"))
        await db.commit()

    with pytest.raises(UniqueViolationError) as exc_info:
        async with manager.session() as db:
            db.add(User(username="ada", email="other@example.com", password_hash="h"))
            await db.commit()
    assert exc_info.value.fields == ["username"]


async def test_foreign_key_violation_is_storage_error(manager):
    with pytest.raises(StorageError) as exc_info:
        async with manager.session() as db:
            db.add(Post(user_id=999, content="orphan"))
            await db.commit()
    assert not isinstance(exc_info.value, UniqueViolationError)


async def test_health_check_live(manager):
    assert await manager.health_check() is True


def test_get_db_manager_requires_init(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError, match="not initialized"):
        db_module.get_db_manager()
