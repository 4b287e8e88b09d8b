"""Database configuration and session management."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


def _engine_options(database_url: str) -> dict[str, object]:
    """Return engine keyword arguments suited to the configured backend."""

    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True, "pool_recycle": 3600}
    if url.database in (None, "", ":memory:"):
        # Every connection to ``:memory:`` is a new database; share a single one.
        return {"poolclass": StaticPool}
    return {}


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on ``ON DELETE CASCADE`` support for SQLite connections."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseSessionManager:
    """Own the async engine and hand out sessions that roll back on failure."""

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self.engine = create_async_engine(
            database_url, echo=echo, **_engine_options(database_url)
        )
        if self.engine.dialect.name == "sqlite":
            _enable_sqlite_foreign_keys(self.engine)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session and roll it back if the caller fails."""

        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError:
            await session.rollback()
            logger.exception("Database session rolled back after an error")
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Ensure all ORM models have corresponding database tables."""

        from app.infrastructure import models  # noqa: F401  # ensure models are imported

        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all, checkfirst=True)

    async def drop_all(self) -> None:
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, *, echo: bool = False) -> DatabaseSessionManager:
    """Create the process-wide session manager."""

    global db_manager
    db_manager = DatabaseSessionManager(database_url, echo=echo)
    logger.info("Database engine created for %s", make_url(database_url).render_as_string())
    return db_manager


def get_db_manager() -> DatabaseSessionManager:
    if db_manager is None:
        raise RuntimeError("Database not initialized; call init_db() first")
    return db_manager


async def initialize_database() -> None:
    """Create missing tables using the active session manager."""

    await get_db_manager().create_all()


async def close_database() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session and close it afterwards."""

    async with get_db_manager().session() as session:
        yield session
