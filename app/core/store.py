from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Request

from app.core.config import Settings
from app.core.database import Database
from app.core.logging import console_logger
from app.core.utils.enums import StorageBackendEnum
from app.repositories.base import DataStore
from app.repositories.memory_store import build_memory_store
from app.repositories.seed_data import DEFAULT_SETTINGS
from app.repositories.sql_store import SqlSettingsRepository, build_sql_store


class StoreProvider(ABC):
    """Chosen once at startup; hands a DataStore to each request."""

    backend: StorageBackendEnum

    async def startup(self) -> None:
        pass

    async def shutdown(self) -> None:
        pass

    @abstractmethod
    def session(self):
        """Async context manager yielding a DataStore."""


class MemoryStoreProvider(StoreProvider):
    backend = StorageBackendEnum.DEMO

    def __init__(self, seed: bool = True):
        self.seed = seed
        self.store: Optional[DataStore] = None

    async def startup(self) -> None:
        self.store = await build_memory_store(seed=self.seed)
        console_logger.warning("DATABASE_URL not set, running in demo mode with in-memory data")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[DataStore]:
        if self.store is None:
            raise RuntimeError("Memory store not started")
        yield self.store


class SqlStoreProvider(StoreProvider):
    backend = StorageBackendEnum.DATABASE

    def __init__(self, database: Database):
        self.database = database

    async def startup(self) -> None:
        await self.database.create_all()
        async with self.database.get_session() as db_session:
            added = await SqlSettingsRepository(db_session).ensure_defaults(DEFAULT_SETTINGS)
        console_logger.info("Database store ready", dialect=self.database.engine.dialect.name, default_settings_added=added)

    async def shutdown(self) -> None:
        await self.database.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[DataStore]:
        async with self.database.get_session() as db_session:
            yield build_sql_store(db_session)


def build_store_provider(app_settings: Settings) -> StoreProvider:
    if app_settings.demo_mode:
        return MemoryStoreProvider()
    return SqlStoreProvider(Database(app_settings.DATABASE_URL, disable_pool=app_settings.SQLALCHEMY_DISABLE_POOL))


# FastAPI dependency for injecting the store selected at startup
async def get_store(request: Request) -> AsyncIterator[DataStore]:
    provider: StoreProvider = request.app.state.store_provider
    async with provider.session() as store:
        yield store
