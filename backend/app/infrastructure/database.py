"""Database Session Manager - async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to StorageError subclasses (core/errors.py)
    - Unique violations carry the offending column names when the driver reports them
    - SQLite connections enforce foreign keys (PRAGMA foreign_keys=ON)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: rows stay readable after their session closes
    - One short-lived session per repository call, so list rows and count can run concurrently
"""

import logging
import re
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from app.core.errors import StorageError, UniqueViolationError

logger = logging.getLogger(__name__)

_PG_UNIQUE_SQLSTATE = "23505"
_PG_KEY_DETAIL = re.compile(r"Key \((?P<cols>[^)]+)\)=")
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: (?P<cols>.+)$")


def unique_violation_fields(exc: IntegrityError) -> list[str] | None:
    """Columns named by a unique violation, or None if exc is another integrity error."""
    orig = exc.orig
    cause = getattr(orig, "__cause__", None)

    sqlstate = getattr(orig, "sqlstate", None) or getattr(cause, "sqlstate", None)
    if sqlstate == _PG_UNIQUE_SQLSTATE:
        detail = getattr(cause, "detail", None) or str(orig)
        match = _PG_KEY_DETAIL.search(detail or "")
        if not match:
            return []
        return [col.strip() for col in match.group("cols").split(",")]

    match = _SQLITE_UNIQUE.search(str(orig).strip())
    if match:
        # "users.username" / "likes.user_id, likes.post_id"
        return [
            col.strip().rsplit(".", 1)[-1]
            for col in match.group("cols").split(",")
        ]
    if "duplicate key value violates unique constraint" in str(orig):
        return []
    return None


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        url = make_url(database_url)
        engine_kwargs: dict = {"pool_pre_ping": True}
        if url.get_backend_name() != "sqlite":
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        if url.get_backend_name() == "sqlite":
            event.listen(
                self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            fields = unique_violation_fields(e)
            if fields is not None:
                logger.warning(f"DB unique violation on {fields}: {e.orig}")
                raise UniqueViolationError(str(e.orig), fields) from e
            logger.error(f"DB integrity error: {e.orig}")
            raise StorageError(f"Integrity constraint violated: {e.orig}", "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise StorageError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise StorageError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StorageError("Database operation failed", "unknown") from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def close_db() -> None:
    global db_manager
    if db_manager is None:
        return
    await db_manager.close()
    db_manager = None


def get_db_manager() -> DatabaseSessionManager:
    """FastAPI dependency for the process-wide session manager."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return db_manager
