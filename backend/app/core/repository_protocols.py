"""Boundary Protocols - contracts between services and storage.

Invariants:
    - Services depend on RecordRepository, never on SQLAlchemy sessions directly
    - update/delete raise RecordNotFoundError when the id matches no row
    - Writes raise UniqueViolationError / StorageError (core/errors.py), never
      driver exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake
    - where is an opaque condition object built by infrastructure/query_builder.py
"""

from typing import Any, Protocol

from app.core.domain_types import RecordId


class RecordRepository(Protocol):
    """Contract for single-table record persistence."""
    async def find_many(self, where: Any, skip: int, take: int) -> list[Any]: ...
    async def count(self, where: Any) -> int: ...
    async def find_unique(self, record_id: RecordId) -> Any | None: ...
    async def create(self, values: dict) -> Any: ...
    async def update(self, record_id: RecordId, values: dict) -> Any: ...
    async def delete(self, record_id: RecordId) -> None: ...
