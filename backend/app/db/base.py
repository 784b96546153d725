"""SQLAlchemy Declarative Base - shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Primary and foreign keys use BigId (BIGINT, INTEGER on SQLite)

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - BigId falls back to INTEGER on SQLite: only INTEGER PRIMARY KEY autoincrements there
"""

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase

BigId = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """Base class for all social API ORM models."""
    pass
