"""CRUD Service - list, get, create, update, delete and search for one resource.

Invariants:
    - List/search fetch rows and total concurrently; both complete before a response
    - If either fetch fails the other is cancelled before the error is mapped
    - List meta.page = skip // take + 1; search meta.page = requested page
    - totalPages = ceil(total / take)
    - Storage failures leave this layer only as ApiError subclasses
    - Search with no searchable columns applies no text condition

Design Decisions:
    - One service class parameterized by ResourceSpec; routes stay thin
    - Repository injected as a RecordRepository protocol so tests can swap it
"""

import asyncio
import logging

from app.core.domain_types import RecordId
from app.core.errors import ResourceNotFoundError
from app.core.pagination import page_meta, process_list_query, process_search_query
from app.core.repository_protocols import RecordRepository
from app.infrastructure.query_builder import filter_condition, search_condition
from app.schemas.common import (
    CamelModel, DeleteResult, ListQuery, Page, PageMeta, SearchQuery, UpdateModel,
)
from app.services.error_mapping import raise_for_storage_error
from app.services.resource_registry import ResourceSpec

logger = logging.getLogger(__name__)


class CrudService:
    """Orchestrates validation output -> storage call -> response shaping."""

    def __init__(self, spec: ResourceSpec, repository: RecordRepository):
        self.spec = spec
        self.repository = repository

    @property
    def resource(self) -> str:
        return self.spec.label

    async def list(self, query: ListQuery) -> Page:
        filters = self.spec.filter_type.model_validate(query.model_dump())
        options = process_list_query(
            query.page, query.limit, filters, resource=self.resource,
        )
        where = filter_condition(self.spec.model, options.where.conditions())
        try:
            rows, total = await self._rows_and_total(where, options.skip, options.take)
        except Exception as e:
            raise_for_storage_error(e, self.resource, "retrieve")
        return self._page(rows, page_meta(total, options.skip, options.take))

    async def search(self, query: SearchQuery) -> Page:
        window = process_search_query(query.page, query.limit)
        where = search_condition(
            self.spec.model, self.spec.search_columns, query.query, self.spec.search_mode,
        )
        if where is None:
            logger.debug(
                f"{self.resource} has no searchable columns; query ignored",
                extra={"resource": self.resource},
            )
        try:
            rows, total = await self._rows_and_total(where, window.skip, window.take)
        except Exception as e:
            raise_for_storage_error(e, self.resource, "search")
        return self._page(rows, page_meta(total, window.skip, window.take, window.page))

    async def get(self, record_id: RecordId) -> CamelModel:
        try:
            record = await self.repository.find_unique(record_id)
        except Exception as e:
            raise_for_storage_error(e, self.resource, "retrieve", record_id)
        if record is None:
            raise ResourceNotFoundError(self.resource, record_id)
        return self.spec.out_schema.model_validate(record)

    async def create(self, body: CamelModel) -> CamelModel:
        try:
            record = await self.repository.create(body.model_dump())
        except Exception as e:
            raise_for_storage_error(e, self.resource, "create")
        return self.spec.out_schema.model_validate(record)

    async def update(self, record_id: RecordId, body: UpdateModel) -> CamelModel:
        try:
            record = await self.repository.update(record_id, body.changes())
        except Exception as e:
            raise_for_storage_error(e, self.resource, "update", record_id)
        return self.spec.out_schema.model_validate(record)

    async def delete(self, record_id: RecordId) -> DeleteResult:
        try:
            await self.repository.delete(record_id)
        except Exception as e:
            raise_for_storage_error(e, self.resource, "delete", record_id)
        return DeleteResult(message=f"{self.resource} deleted successfully")

    async def _rows_and_total(self, where, skip: int, take: int) -> tuple[list, int]:
        """Fetch one page and the total concurrently; a failure cancels the other."""
        try:
            async with asyncio.TaskGroup() as tg:
                rows = tg.create_task(self.repository.find_many(where, skip, take))
                total = tg.create_task(self.repository.count(where))
        except ExceptionGroup as eg:
            raise eg.exceptions[0] from eg
        return rows.result(), total.result()

    def _page(self, rows: list, meta: dict) -> Page:
        out = self.spec.out_schema
        return Page[out](
            data=[out.model_validate(row) for row in rows],
            meta=PageMeta.model_validate(meta),
        )
