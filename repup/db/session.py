"""Async database engine, session factory and scoped transactions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import event, inspect, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from repup.core.config import Settings
from repup.db.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Handle to the storage backend: one engine, one pool, one session factory.

    Built once by the startup sequence and passed to every store. Nothing on it
    changes after construction.
    """

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 25,
        max_overflow: int = 0,
        pool_recycle: int = 1800,
        pool_timeout: float = 5.0,
        connect_timeout: float = 5.0,
        echo: bool = False,
    ):
        self.url = make_url(url)
        self.connect_timeout = connect_timeout
        engine_kwargs: dict = {"echo": echo, "pool_pre_ping": True}
        if self.url.get_backend_name() != "sqlite":
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=pool_recycle,
                pool_timeout=pool_timeout,
            )
        self.engine: AsyncEngine = create_async_engine(self.url, **engine_kwargs)
        if self.url.get_backend_name() == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Database:
        return cls(
            settings.async_database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_recycle=settings.database_pool_recycle,
            pool_timeout=settings.database_pool_timeout,
            connect_timeout=settings.database_connect_timeout,
            echo=settings.debug,
        )

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Scoped transaction: commit once on success, roll back on any exception.

        Cancellation of the calling task counts as an exception. The connection
        goes back to the pool on every exit path.
        """
        async with self.session_maker() as session:
            try:
                async with session.begin():
                    yield session
            except BaseException as exc:
                logger.debug("Transaction rolled back: %r", exc)
                raise

    async def ping(self) -> None:
        """Liveness probe, bounded by connect_timeout."""

        async def _probe() -> None:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

        await asyncio.wait_for(_probe(), timeout=self.connect_timeout)

    async def create_all(self) -> None:
        """Create missing tables (Alembic is the normal path)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def list_tables(self) -> list[str]:
        async with self.engine.connect() as conn:
            names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        return sorted(names)

    async def dispose(self) -> None:
        await self.engine.dispose()
