"""Router Aggregator - mounts every resource router plus the health probes.

Invariants:
    - Each resource is served under /<plural> with exactly six operations
    - Registration order follows RESOURCES; no cross-resource orchestration
"""

from fastapi import APIRouter

from app.api.routes import health
from app.api.routes.crud import build_crud_router
from app.services.resource_registry import RESOURCES


def build_api_router() -> APIRouter:
    """Versionless API router; main.py mounts it under /<api_version>."""
    router = APIRouter()
    for spec in RESOURCES.values():
        router.include_router(build_crud_router(spec))
    router.include_router(health.router)
    return router
