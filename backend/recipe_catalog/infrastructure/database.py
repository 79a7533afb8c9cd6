"""Database Session Manager — one engine per process, one session per request.

Invariants:
    - A request session that raises is rolled back before the error leaves
    - SQLAlchemy exceptions leave session() only as DatabaseError, most specific first
    - Driver messages are logged, never put in the DatabaseError message
    - Pool sizing and pre-ping only for server databases; SQLite keeps its default pool

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - Error mapping as an ordered table: IntegrityError and OperationalError are
      DBAPIError subclasses, so order decides which message wins
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from recipe_catalog.core.errors import DatabaseError
from recipe_catalog.db.session import create_engine, create_session_factory

logger = logging.getLogger(__name__)

# (exception type, sanitized message, operation)
_ERROR_MAP: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def engine_options(
    database_url: str, pool_size: int = 20, max_overflow: int = 10,
) -> dict:
    """Engine keyword arguments appropriate for the URL's backend."""
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_pre_ping": True,
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_recycle": 3600,
    }


def to_database_error(exc: SQLAlchemyError) -> DatabaseError:
    for exc_type, message, operation in _ERROR_MAP:
        if isinstance(exc, exc_type):
            return DatabaseError(message, operation)
    return DatabaseError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the engine and hands out request-scoped sessions."""

    def __init__(self, database_url: str, **pool_kwargs):
        self.engine = create_engine(
            database_url, **engine_options(database_url, **pool_kwargs),
        )
        self._session_factory = create_session_factory(self.engine)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Request session rolled back: {e}")
                raise to_database_error(e) from e

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **pool_kwargs) -> None:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **pool_kwargs)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
