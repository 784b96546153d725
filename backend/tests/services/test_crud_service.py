"""CRUD Service - verifies response shaping and storage error mapping.

Tests cover:
    - list/search build {data, meta} with the right page numbers
    - Repository signals map to 404 / 409 / 500 ApiErrors
    - Conflict fields reported in camelCase
    - Search over a resource with no text columns passes no condition
    - A failing row fetch cancels the concurrent count

Design Decisions:
    - Repository replaced by AsyncMock: no database, only the service contract
"""

import asyncio
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from app.core.domain_types import RecordId, ResourceName
from app.core.errors import (
    ConflictError, InternalError, RecordNotFoundError, ResourceNotFoundError,
    StorageError, UniqueViolationError,
)
from app.schemas.common import SearchQuery
from app.schemas.likes import LikeCreate
from app.schemas.users import UserCreate, UserListQuery, UserUpdate
from app.services.crud_service import CrudService
from app.services.resource_registry import RESOURCES

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _user(id_: int, username: str = "ada") -> SimpleNamespace:
    return SimpleNamespace(
        id=id_, username=username, email=f"{username}@example.com",
        password_hash="h", created_at=NOW,
    )


def _service(resource: ResourceName = ResourceName.USERS, **repo_methods):
    repo = AsyncMock()
    for name, value in repo_methods.items():
        setattr(repo, name, value)
    return CrudService(RESOURCES[resource], repo), repo


# ─── list ────────────────────────────────────────────────────────

async def test_list_returns_envelope():
    service, repo = _service(
        find_many=AsyncMock(return_value=[_user(2, "bob"), _user(1)]),
        count=AsyncMock(return_value=25),
    )
    page = await service.list(UserListQuery(page="3", limit="10"))

    assert [u.username for u in page.data] == ["bob", "ada"]
    assert page.meta.page == 3
    assert page.meta.total_pages == 3
    assert repo.find_many.await_args.args[1:] == (20, 10)


async def test_list_without_filters_passes_no_condition():
    service, repo = _service(
        find_many=AsyncMock(return_value=[]), count=AsyncMock(return_value=0),
    )
    await service.list(UserListQuery())
    assert repo.find_many.await_args.args[0] is None
    assert repo.count.await_args.args[0] is None


async def test_list_storage_failure_is_internal_error():
    service, _ = _service(
        find_many=AsyncMock(side_effect=StorageError("down")),
        count=AsyncMock(return_value=0),
    )
    with pytest.raises(InternalError) as exc_info:
        await service.list(UserListQuery())
    assert exc_info.value.message == "Failed to retrieve users"
    assert exc_info.value.details == "down"


async def test_list_failure_cancels_sibling_count():
    count_cancelled = asyncio.Event()

    async def slow_count(where):
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            count_cancelled.set()
            raise
        return 0

    async def failing_find_many(where, skip, take):
        await asyncio.sleep(0)
        raise StorageError("down")

    service, _ = _service(find_many=failing_find_many, count=slow_count)
    with pytest.raises(InternalError):
        await service.list(UserListQuery())
    assert count_cancelled.is_set()


# ─── search ──────────────────────────────────────────────────────

async def test_search_meta_uses_requested_page():
    service, _ = _service(
        find_many=AsyncMock(return_value=[]), count=AsyncMock(return_value=0),
    )
    page = await service.search(SearchQuery(query="zzz", page="4", limit="5"))
    assert page.meta.page == 4
    assert (page.meta.skip, page.meta.take) == (15, 5)
    assert page.meta.total_pages == 0


async def test_search_without_text_columns_ignores_query():
    service, repo = _service(
        ResourceName.LIKES,
        find_many=AsyncMock(return_value=[]), count=AsyncMock(return_value=0),
    )
    await service.search(SearchQuery(query="anything"))
    assert repo.find_many.await_args.args[0] is None


# ─── get / create / update / delete ──────────────────────────────

async def test_get_missing_is_not_found():
    service, _ = _service(find_unique=AsyncMock(return_value=None))
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await service.get(RecordId(5))
    assert exc_info.value.http_status == 404
    assert exc_info.value.context.record_id == "5"


async def test_create_conflict_reports_camel_case_fields():
    service, _ = _service(
        ResourceName.LIKES,
        create=AsyncMock(side_effect=UniqueViolationError("dup", ["user_id", "post_id"])),
    )
    with pytest.raises(ConflictError) as exc_info:
        await service.create(LikeCreate(userId=1, postId=2))
    assert exc_info.value.fields == ["userId", "postId"]
    assert exc_info.value.message == "Could not create likes"


async def test_create_passes_snake_case_values():
    service, repo = _service(create=AsyncMock(return_value=_user(1)))
    out = await service.create(
        UserCreate(username="ada", email="ada@example.com", passwordHash="h"),
    )
    assert repo.create.await_args.args[0] == {
        "username": "ada", "email": "ada@example.com", "password_hash": "h",
    }
    assert out.id == 1


async def test_update_sends_only_changed_columns():
    service, repo = _service(update=AsyncMock(return_value=_user(1, "eve")))
    await service.update(RecordId(1), UserUpdate(username="eve"))
    assert repo.update.await_args.args == (1, {"username": "eve"})


async def test_update_missing_is_not_found():
    service, _ = _service(update=AsyncMock(side_effect=RecordNotFoundError("users", 9)))
    with pytest.raises(ResourceNotFoundError):
        await service.update(RecordId(9), UserUpdate(username="eve"))


async def test_delete_returns_message():
    service, _ = _service(delete=AsyncMock(return_value=None))
    result = await service.delete(RecordId(1))
    assert result.success is True
    assert result.message == "users deleted successfully"
