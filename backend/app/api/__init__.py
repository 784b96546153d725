"""API Layer - FastAPI routes, middleware and error handlers.

Invariants:
    - Routers assembled explicitly in router.py (no auto-discovery)
    - All endpoints return structured JSON responses, except the plain-text health check

Design Decisions:
    - Thin routes delegate to services
"""
