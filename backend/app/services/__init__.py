"""Services Layer - the CRUD orchestration shared by every resource.

Invariants:
    - Services translate storage signals into ApiError subclasses
    - Resource behaviour is driven by the explicit registry (no auto-discovery)

Design Decisions:
    - One service class parameterized by ResourceSpec (no god objects, no copy-paste)
"""
