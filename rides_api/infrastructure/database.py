"""
Async SQLAlchemy engine and session factory.

``Database`` is constructed explicitly and owned by the application:
``connect()`` at startup (creates the engine and builds the schema),
``disconnect()`` at shutdown.  Uses ``aiosqlite`` as the driver so the
event loop is never blocked on disk I/O.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


def _is_sqlite_memory(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (
        None,
        "",
        ":memory:",
    )


class Database:
    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected. Call connect() on startup.")
        return self._engine

    async def connect(self) -> None:
        if self._engine is not None:
            return

        options: dict = {"echo": self.echo}
        if _is_sqlite_memory(self.url):
            # One shared connection, otherwise every session gets a fresh,
            # empty in-memory database.
            options["poolclass"] = StaticPool

        engine = create_async_engine(self.url, **options)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        self._engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def disconnect(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None

    def session(self) -> AsyncSession:
        if self._session_factory is None:
            raise RuntimeError("Database is not connected. Call connect() on startup.")
        return self._session_factory()
