"""Infrastructure Layer - database access and cross-cutting concerns.

Invariants:
    - Infrastructure uses only types and errors from core/, never services/ or api/
    - All driver exceptions mapped to storage signals before leaving this layer

Design Decisions:
    - One generic repository over per-table repositories
"""
