"""Async store handle, declarative base, and row helpers.

The store wraps a SQLAlchemy ``AsyncEngine`` and owns its connection pool.
It is constructed explicitly and opened/closed by whoever owns the process
lifecycle (the FastAPI lifespan, a script, or a test fixture)::

    store = Store(settings)
    await store.open()
    try:
        user = await get_user_with_id(store, 1)
    finally:
        await store.close()

Statements are plain SQL strings with asyncpg's ``$n`` placeholders and are
sent to the driver unchanged via ``exec_driver_sql``.
"""

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from lightbnb.config import Settings

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class Store:
    """Explicitly constructed handle to the relational store."""

    def __init__(self, config: Settings) -> None:
        self._config = config
        self._engine: AsyncEngine | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Store is not open. Call `await store.open()` at startup.")
        return self._engine

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    async def open(self) -> None:
        """Create the engine and its connection pool. Idempotent."""
        if self._engine is not None:
            return
        self._engine = create_async_engine(
            self._config.async_database_url,
            echo=self._config.debug,
            pool_pre_ping=True,
            pool_size=self._config.db_pool_size,
            max_overflow=self._config.db_max_overflow,
        )
        logger.info("Store opened (pool_size=%s)", self._config.db_pool_size)

    async def close(self) -> None:
        """Dispose pooled connections. Safe to call on a closed store."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        logger.info("Store closed")

    async def __aenter__(self) -> "Store":
        await self.open()
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def fetch(self, sql: str, params: Sequence[Any] = ()) -> list[Record]:
        """Run a read-only statement and return every row as a dict."""
        async with self.engine.connect() as conn:
            result = await conn.exec_driver_sql(sql, tuple(params))
            return [dict(row) for row in result.mappings()]

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> list[Record]:
        """Run a writing statement, commit it, and return any RETURNING rows."""
        async with self.engine.begin() as conn:
            result = await conn.exec_driver_sql(sql, tuple(params))
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings()]


def first_or_none(rows: list[Record]) -> Record | None:
    """Return the first row of a result set, or None when it is empty."""
    return rows[0] if rows else None
