from contextlib import asynccontextmanager
from typing import AsyncIterator
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncEngine, AsyncSession
from sqlalchemy.pool import NullPool

from app.models import Base


class Database:
    """Encapsulates the async engine and session factory for one database URL."""

    def __init__(self, database_url: str, disable_pool: bool = False):
        self.url = self.format_database_url(database_url)
        self.disable_pool = disable_pool
        self.engine = self._create_async_engine()
        self.SessionLocal = async_sessionmaker(
            self.engine,
            autocommit=False,
            autoflush=False,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @staticmethod
    def format_database_url(url: str) -> str:
        """Swap sync driver prefixes for their async counterparts."""
        url = url.strip()
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        if url.startswith("sqlite://"):
            return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return url

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def _needs_null_pool(self) -> bool:
        """Disable SQLAlchemy pooling when asked to or behind a transaction pooler."""
        if self.disable_pool:
            return True
        return ":6543/" in self.url

    def _create_async_engine(self) -> AsyncEngine:
        engine_kwargs = {"pool_pre_ping": True}
        if self.url.startswith("postgresql+asyncpg"):
            engine_kwargs["connect_args"] = {"statement_cache_size": 0, "prepared_statement_cache_size": 0}
        if self._needs_null_pool():
            engine_kwargs["poolclass"] = NullPool
        return create_async_engine(self.url, **engine_kwargs)

    @asynccontextmanager
    async def get_session(self) -> AsyncIterator[AsyncSession]:
        """Provides a transactional scope around a series of operations."""
        session = self.SessionLocal()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create any missing tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self):
        """Dispose the engine and close all connections."""
        if self.engine:
            await self.engine.dispose()
