"""Core Layer - pure domain logic, no DB, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Pagination and error types are deterministic and side-effect free (logging aside)

Design Decisions:
    - Functional core separated from imperative shell
"""
