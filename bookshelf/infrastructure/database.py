"""Database Session Manager — async connection pool with automatic rollback.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - Pool sizing applies to server databases only; SQLite keeps driver defaults

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from bookshelf.core.errors import DatabaseError
from bookshelf.db.base import Base

logger = logging.getLogger(__name__)


def translate_db_error(exc: SQLAlchemyError, operation: str) -> DatabaseError:
    """Map a SQLAlchemy failure onto the DatabaseError variant."""
    if isinstance(exc, IntegrityError):
        logger.error(f"DB integrity error during {operation}: {exc}")
        return DatabaseError("Integrity constraint violated", operation)
    if isinstance(exc, OperationalError):
        logger.error(f"DB operational error during {operation}: {exc}")
        return DatabaseError("Connection or operational error", operation)
    if isinstance(exc, DBAPIError):
        logger.error(f"DB driver error during {operation}: {exc}")
        return DatabaseError("Database driver error", operation)
    logger.error(f"SQLAlchemy error during {operation}: {exc}")
    return DatabaseError("Database operation failed", operation)


class DatabaseSessionManager:
    """Manages async database sessions with pooling and rollback."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
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
        except SQLAlchemyError as e:
            await session.rollback()
            raise translate_db_error(e, "session") from e
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create missing tables (development convenience; Alembic owns real schema)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

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
