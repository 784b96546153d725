"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (path, query, body, response)
    - One module per resource; shared pieces live in common.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
