"""API test fixtures - file-backed SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite database under tmp_path
    - db_manager patched so routes and health probes use the test engine
    - SQLite foreign keys enforced, as in production

Design Decisions:
    - File database over :memory: list rows and count run concurrently on
      separate sessions, and every connection must see the same data
    - ASGITransport does not run lifespan, so the manager is patched directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

import app.infrastructure.database as db_module
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.main import app

from tests.api.helpers import API


@pytest.fixture
async def test_manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'api.sqlite'}")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.close()


@pytest.fixture
async def client(test_manager):
    """FastAPI test client bound to the test database."""
    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager


@pytest.fixture
async def user(client):
    res = await client.post(f"{API}/users", json={
        "username": "ada", "email": "ada@example.com", "passwordHash": "h1",
    })
    assert res.status_code == 201
    return res.json()


@pytest.fixture
async def post(client, user):
    res = await client.post(f"{API}/posts", json={
        "userId": user["id"], "content": "Hello world",
    })
    assert res.status_code == 201
    return res.json()
