"""Database Session Manager — single async SQLite handle with error mapping.

Invariants:
    - One engine per process, one pooled connection by default: concurrent
      requests queue at the pool, no extra locking
    - Every store failure rolls back and surfaces as DatabaseError (core/errors.py)
    - create_all() is idempotent (CREATE TABLE IF NOT EXISTS semantics)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - translate_db_errors() wraps the service call, not the dependency teardown,
      so the mapped error reaches the FastAPI handlers
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.pool import AsyncAdaptedQueuePool
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from user_messaging.core.errors import DatabaseError
from user_messaging.db.base import Base
import user_messaging.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def _is_memory_url(database_url: str) -> bool:
    return make_url(database_url).database in (None, "", ":memory:")


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Issue PRAGMA foreign_keys=ON on every new connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@asynccontextmanager
async def translate_db_errors(
    session: AsyncSession, operation: str,
) -> AsyncGenerator[AsyncSession, None]:
    """Roll back and map SQLAlchemy failures to DatabaseError."""
    try:
        yield session
    except IntegrityError as e:
        await session.rollback()
        logger.error(f"DB integrity error: {e}", extra={"operation": operation})
        raise DatabaseError("Integrity constraint violated", operation)
    except OperationalError as e:
        await session.rollback()
        logger.error(f"DB operational error: {e}", extra={"operation": operation})
        raise DatabaseError("Connection or operational error", operation)
    except DBAPIError as e:
        await session.rollback()
        logger.error(f"DB driver error: {e}", extra={"operation": operation})
        raise DatabaseError("Database driver error", operation)
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"SQLAlchemy error: {e}", extra={"operation": operation})
        raise DatabaseError("Database operation failed", operation)


class DatabaseSessionManager:
    """Owns the process-wide engine and hands out async sessions."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 1,
        max_overflow: int = 0,
        sqlite_foreign_keys: bool = False,
    ):
        engine_kwargs = {}
        # In-memory SQLite keeps the dialect default StaticPool (one shared connection)
        if not _is_memory_url(database_url):
            engine_kwargs.update(
                poolclass=AsyncAdaptedQueuePool,
                pool_size=pool_size,
                max_overflow=max_overflow,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        if sqlite_foreign_keys:
            enable_sqlite_foreign_keys(self.engine)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """Create users/messages tables if they don't exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session that is always closed afterwards."""
        session = self._session_factory()
        try:
            yield session
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

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
