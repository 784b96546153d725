"""CRUD Router Factory - builds the six-endpoint router for any registered resource.

Invariants:
    - GET /search is registered before GET /{record_id} so "search" never parses as an id
    - Path ids are positive 64-bit integers; anything else is a 400
    - Create returns 201; every other success returns 200
    - Handlers only validate and delegate to CrudService

Design Decisions:
    - One factory parameterized by ResourceSpec instead of six copy-pasted modules
    - Query strings bound to pydantic models (Annotated[Model, Query()]) so each
      resource's filters are declared once, in its schema module
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from app.core.domain_types import MAX_RECORD_ID, RecordId
from app.infrastructure.database import DatabaseSessionManager, get_db_manager
from app.infrastructure.repository import SqlRepository
from app.schemas.common import DeleteResult, Page, SearchQuery
from app.services.crud_service import CrudService
from app.services.resource_registry import ResourceSpec

RecordIdPath = Annotated[int, Path(gt=0, le=MAX_RECORD_ID)]


def build_crud_router(spec: ResourceSpec) -> APIRouter:
    """Router with list/get/create/update/delete/search for spec's resource."""
    router = APIRouter(prefix=f"/{spec.label}", tags=[spec.label])

    Out = spec.out_schema
    Create = spec.create_schema
    Update = spec.update_schema
    ListQueryModel = spec.list_query_schema

    def get_service(
        manager: DatabaseSessionManager = Depends(get_db_manager),
    ) -> CrudService:
        return CrudService(spec, SqlRepository(spec.model, manager))

    @router.get("/search", response_model=Page[Out])
    async def search_records(
        query: Annotated[SearchQuery, Query()],
        service: CrudService = Depends(get_service),
    ):
        """Case-insensitive text search with pagination."""
        return await service.search(query)

    @router.get("", response_model=Page[Out])
    async def list_records(
        query: Annotated[ListQueryModel, Query()],
        service: CrudService = Depends(get_service),
    ):
        """List with pagination and optional text filters."""
        return await service.list(query)

    @router.get("/{record_id}", response_model=Out)
    async def get_record(
        record_id: RecordIdPath,
        service: CrudService = Depends(get_service),
    ):
        return await service.get(RecordId(record_id))

    @router.post("", response_model=Out, status_code=status.HTTP_201_CREATED)
    async def create_record(
        body: Create,
        service: CrudService = Depends(get_service),
    ):
        return await service.create(body)

    @router.put("/{record_id}", response_model=Out)
    async def update_record(
        record_id: RecordIdPath,
        body: Update,
        service: CrudService = Depends(get_service),
    ):
        return await service.update(RecordId(record_id), body)

    @router.delete("/{record_id}", response_model=DeleteResult)
    async def delete_record(
        record_id: RecordIdPath,
        service: CrudService = Depends(get_service),
    ):
        return await service.delete(RecordId(record_id))

    return router
