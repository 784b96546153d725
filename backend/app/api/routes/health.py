"""Health & Readiness Probes - liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /healthz always returns 200 plain text if the process is up (liveness)
    - GET /healthz/ready returns 503 if the database is unreachable (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

from app.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/healthz", tags=["health"])


@router.get("", response_class=PlainTextResponse)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return "Health OK"


@router.get("/ready")
async def readiness_check():
    """Readiness probe, includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
