"""SQL Repository - generic single-table CRUD over the async session manager.

Invariants:
    - Each call opens and closes its own session (safe to run calls concurrently)
    - Lists are ordered by id descending
    - update/delete on a missing id raise RecordNotFoundError
    - Only columns present in `values` are written on update

Design Decisions:
    - One class parameterized by the ORM model instead of one repository per table
"""

import logging

from sqlalchemy import func, select

from app.core.domain_types import RecordId
from app.core.errors import RecordNotFoundError
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)


class SqlRepository:
    """RecordRepository implementation for one ORM model."""

    def __init__(self, model: type[Base], manager: DatabaseSessionManager):
        self.model = model
        self._manager = manager

    @property
    def table(self) -> str:
        return self.model.__tablename__

    async def find_many(self, where, skip: int, take: int) -> list[Base]:
        query = select(self.model).order_by(self.model.id.desc())
        if where is not None:
            query = query.where(where)
        query = query.offset(skip).limit(take)
        async with self._manager.session() as db:
            result = await db.execute(query)
            return list(result.scalars().all())

    async def count(self, where) -> int:
        query = select(func.count()).select_from(self.model)
        if where is not None:
            query = query.where(where)
        async with self._manager.session() as db:
            result = await db.execute(query)
            return int(result.scalar_one())

    async def find_unique(self, record_id: RecordId) -> Base | None:
        async with self._manager.session() as db:
            return await db.get(self.model, record_id)

    async def create(self, values: dict) -> Base:
        async with self._manager.session() as db:
            record = self.model(**values)
            db.add(record)
            await db.commit()
            await db.refresh(record)
            logger.info(
                f"Created {self.table} record {record.id}",
                extra={"resource": self.table, "record_id": record.id},
            )
            return record

    async def update(self, record_id: RecordId, values: dict) -> Base:
        async with self._manager.session() as db:
            record = await db.get(self.model, record_id)
            if record is None:
                raise RecordNotFoundError(self.table, record_id)
            for column, value in values.items():
                setattr(record, column, value)
            await db.commit()
            await db.refresh(record)
            return record

    async def delete(self, record_id: RecordId) -> None:
        async with self._manager.session() as db:
            record = await db.get(self.model, record_id)
            if record is None:
                raise RecordNotFoundError(self.table, record_id)
            await db.delete(record)
            await db.commit()
            logger.info(
                f"Deleted {self.table} record {record_id}",
                extra={"resource": self.table, "record_id": record_id},
            )
