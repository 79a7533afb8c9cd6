"""Async Session Factory — engines and sessions for usage outside FastAPI.

Invariants:
    - SQLite engines enforce foreign keys (PRAGMA foreign_keys=ON per connection)
    - SQLite lower() folds the same characters as Python str.lower(), so
      case-insensitive search agrees across SQLite, PostgreSQL and in-memory
    - Meant for scripts, migrations, and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: alembic and test fixtures need
      a raw engine + session factory without the request-scoped manager
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


def _unicode_lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


def configure_sqlite(engine: AsyncEngine) -> None:
    """Per SQLite connection: FK enforcement on, built-in ASCII-only lower() replaced."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        dbapi_connection.create_function("lower", 1, _unicode_lower)


def create_engine(database_url: str, **kwargs) -> AsyncEngine:
    """Create an async engine with the catalog's connection setup applied."""
    engine = create_async_engine(database_url, echo=False, **kwargs)
    configure_sqlite(engine)
    return engine


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the given engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
