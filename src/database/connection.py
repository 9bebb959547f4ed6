"""
Database connection options and request-scoped context providers
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Depends, Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from database.context import ApplicationDbContext

logger = logging.getLogger(__name__)

IN_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


def normalize_database_url(url: str) -> str:
    """Convert plain PostgreSQL URLs to the asyncpg dialect"""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


class DbContextOptions:
    """
    Connection configuration handed to every ApplicationDbContext.

    The options own the async engine (and so the connection pool). The engine
    is created on first use; one options instance is one database target.
    """

    def __init__(self, url: str, echo: bool = False, serialize_sessions: bool = False, **engine_kwargs):
        self.url = url
        self.echo = echo
        self.engine_kwargs = engine_kwargs
        self._engine: Optional[AsyncEngine] = None
        self._session_lock: Optional[asyncio.Lock] = asyncio.Lock() if serialize_sessions else None

    @classmethod
    def from_url(cls, url: str, echo: bool = False) -> "DbContextOptions":
        return cls(normalize_database_url(url), echo=echo, pool_pre_ping=True)

    @classmethod
    def from_settings(cls, settings) -> "DbContextOptions":
        return cls.from_url(settings.database_url, echo=settings.sqlalchemy_echo)

    @classmethod
    def in_memory(cls, echo: bool = False) -> "DbContextOptions":
        # A single shared connection keeps the in-memory database alive for
        # the lifetime of this options instance. Sessions sharing it would share
        # one transaction, so request sessions take turns.
        return cls(
            IN_MEMORY_URL,
            echo=echo,
            serialize_sessions=True,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    @property
    def is_in_memory(self) -> bool:
        url = make_url(self.url)
        return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")

    @property
    def masked_url(self) -> str:
        return make_url(self.url).render_as_string(hide_password=True)

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            logger.info(f"Creating database engine for {self.masked_url}")
            self._engine = create_async_engine(self.url, echo=self.echo, **self.engine_kwargs)
        return self._engine

    @asynccontextmanager
    async def exclusive(self) -> AsyncIterator[None]:
        """Hold the session lock, when these options have one"""
        if self._session_lock is None:
            yield
            return
        async with self._session_lock:
            yield

    async def dispose(self) -> None:
        """Close the engine and every pooled connection"""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            logger.info(f"Database connections closed for {self.masked_url}")

    def __repr__(self) -> str:
        return f"DbContextOptions(url={self.masked_url!r})"


def get_db_context_options(request: Request) -> DbContextOptions:
    """Resolve the options registered by the composition root"""
    return request.app.state.db_context_options


async def get_db_context(
    options: DbContextOptions = Depends(get_db_context_options),
) -> AsyncIterator[ApplicationDbContext]:
    """Yield one context per request, closed when the request finishes"""
    async with options.exclusive():
        async with ApplicationDbContext(options) as context:
            yield context
