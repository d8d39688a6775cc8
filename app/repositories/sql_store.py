from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Type

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.utils.clock import utcnow
from app.core.utils.enums import StorageBackendEnum
from app.models import (
    AppSetting,
    Base,
    BlockedNumber,
    CallHistoryEntry,
    UsageRecord,
    VoiceCommandLog,
    WhitelistContact,
)
from app.repositories.base import DataStore, RecordRepository, SettingsRepository, to_setting_value


class SqlRecordRepository(RecordRepository):
    """Repository over one mapped table."""

    def __init__(
        self,
        db_session: AsyncSession,
        model: Type[Base],
        order_field: str = "created_at",
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db_session = db_session
        self.model = model
        self.order_field = order_field
        self.clock = clock

    async def list(self, limit: Optional[int] = None) -> List[Any]:
        order_column = getattr(self.model, self.order_field)
        query = select(self.model).order_by(order_column.desc(), self.model.id.desc())
        if limit is not None:
            query = query.limit(limit)
        result = await self.db_session.execute(query)
        return list(result.scalars().all())

    async def create(self, fields: Dict[str, Any]) -> Any:
        record = self.model(**{**fields, self.order_field: self.clock()})
        self.db_session.add(record)
        await self.db_session.commit()
        await self.db_session.refresh(record)
        return record

    async def delete(self, record_id: int) -> bool:
        result = await self.db_session.execute(
            delete(self.model).where(self.model.id == record_id)
        )
        await self.db_session.commit()
        return (result.rowcount or 0) > 0

    async def count(self) -> int:
        result = await self.db_session.execute(select(func.count()).select_from(self.model))
        return result.scalar() or 0


class SqlSettingsRepository(SettingsRepository):

    def __init__(self, db_session: AsyncSession, clock: Callable[[], datetime] = utcnow):
        self.db_session = db_session
        self.clock = clock

    async def get_all(self) -> Dict[str, Optional[str]]:
        result = await self.db_session.execute(select(AppSetting).order_by(AppSetting.key))
        return {row.key: row.value for row in result.scalars().all()}

    async def merge(self, values: Dict[str, Any]) -> Dict[str, Optional[str]]:
        now = self.clock()
        for key, value in values.items():
            row = await self.db_session.get(AppSetting, key)
            if row is None:
                self.db_session.add(AppSetting(key=key, value=to_setting_value(value), updated_at=now))
            else:
                row.value = to_setting_value(value)
                row.updated_at = now
        await self.db_session.commit()
        return await self.get_all()

    async def ensure_defaults(self, defaults: Dict[str, str]) -> int:
        """Insert default keys that are missing; returns how many were added."""
        existing = await self.get_all()
        missing = {key: value for key, value in defaults.items() if key not in existing}
        if missing:
            await self.merge(missing)
        return len(missing)


def build_sql_store(db_session: AsyncSession, clock: Callable[[], datetime] = utcnow) -> DataStore:
    return DataStore(
        backend=StorageBackendEnum.DATABASE,
        whitelist=SqlRecordRepository(db_session, WhitelistContact, clock=clock),
        blocked=SqlRecordRepository(db_session, BlockedNumber, clock=clock),
        call_history=SqlRecordRepository(db_session, CallHistoryEntry, order_field="timestamp", clock=clock),
        voice_commands=SqlRecordRepository(db_session, VoiceCommandLog, order_field="timestamp", clock=clock),
        usage=SqlRecordRepository(db_session, UsageRecord, clock=clock),
        settings=SqlSettingsRepository(db_session, clock=clock),
    )
