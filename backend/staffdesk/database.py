"""Database handle shared by every request of one application."""
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .models import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine and session factory for a single store URL.

    Built once per application, opened by the startup hook and disposed on
    shutdown. The engine is only created on first use, so an unknown dialect
    or a missing driver surfaces in `connect()` rather than at import time.
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self.echo = echo
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            connect_args = {"check_same_thread": False} if self.url.startswith("sqlite+") else {}
            self._engine = create_async_engine(
                self.url, future=True, echo=self.echo, connect_args=connect_args
            )
        return self._engine

    @property
    def sessionmaker(self) -> async_sessionmaker[AsyncSession]:
        if self._sessionmaker is None:
            self._sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False)
        return self._sessionmaker

    async def connect(self) -> None:
        """Open the store and make sure both collections and their indexes exist."""

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database connection open (%s)", self.engine.url.render_as_string(hide_password=True))

    async def dispose(self) -> None:
        """Close every pooled connection."""

        if self._engine is None:
            return
        await self._engine.dispose()
        logger.info("Database connection closed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Provide one async SQLAlchemy session."""

        async with self.sessionmaker() as session:
            yield session
