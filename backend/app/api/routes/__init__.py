"""Route Modules - the generic CRUD router factory and the health probes.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services)
"""
