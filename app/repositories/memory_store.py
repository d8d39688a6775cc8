from typing import Any, Callable, Dict, List, Optional, Type
from datetime import datetime

from pydantic import BaseModel

from app.core.logging import console_logger
from app.core.utils.clock import utcnow
from app.core.utils.enums import StorageBackendEnum
from app.repositories.base import DataStore, RecordRepository, SettingsRepository, to_setting_value
from app.repositories.seed_data import DEFAULT_SETTINGS, SEED_BLOCKED, SEED_CALL_HISTORY, SEED_WHITELIST
from app.schemas.records import BlockedResponse, CallResponse, ContactResponse, VoiceCommandLogResponse
from app.schemas.usage import UsageRecordResponse


class MemoryRecordRepository(RecordRepository):
    """Process-local records keyed by a per-type id counter. Lost on restart."""

    def __init__(
        self,
        record_cls: Type[BaseModel],
        order_field: str = "created_at",
        clock: Callable[[], datetime] = utcnow,
    ):
        self.record_cls = record_cls
        self.order_field = order_field
        self.clock = clock
        self._records: Dict[int, BaseModel] = {}
        self._next_id = 1

    def _sort_key(self, record: BaseModel):
        return (getattr(record, self.order_field), record.id)

    async def list(self, limit: Optional[int] = None) -> List[BaseModel]:
        records = sorted(self._records.values(), key=self._sort_key, reverse=True)
        return records if limit is None else records[:limit]

    async def create(self, fields: Dict[str, Any]) -> BaseModel:
        record = self.record_cls(**{**fields, "id": self._next_id, self.order_field: self.clock()})
        self._records[record.id] = record
        self._next_id += 1
        return record

    async def delete(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None

    async def count(self) -> int:
        return len(self._records)


class MemorySettingsRepository(SettingsRepository):

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, Optional[str]] = dict(initial or {})

    async def get_all(self) -> Dict[str, Optional[str]]:
        return dict(self._values)

    async def merge(self, values: Dict[str, Any]) -> Dict[str, Optional[str]]:
        self._values.update({key: to_setting_value(value) for key, value in values.items()})
        return dict(self._values)


async def build_memory_store(seed: bool = True, clock: Callable[[], datetime] = utcnow) -> DataStore:
    """Create a demo store, optionally filled with the demo seed records."""
    store = DataStore(
        backend=StorageBackendEnum.DEMO,
        whitelist=MemoryRecordRepository(ContactResponse, clock=clock),
        blocked=MemoryRecordRepository(BlockedResponse, clock=clock),
        call_history=MemoryRecordRepository(CallResponse, order_field="timestamp", clock=clock),
        voice_commands=MemoryRecordRepository(VoiceCommandLogResponse, order_field="timestamp", clock=clock),
        usage=MemoryRecordRepository(UsageRecordResponse, clock=clock),
        settings=MemorySettingsRepository(DEFAULT_SETTINGS),
    )
    if seed:
        for contact in SEED_WHITELIST:
            await store.whitelist.create(contact)
        for blocked in SEED_BLOCKED:
            await store.blocked.create(blocked)
        for call in SEED_CALL_HISTORY:
            await store.call_history.create(call)
        console_logger.info(
            "Demo store seeded",
            whitelist=len(SEED_WHITELIST),
            blocked=len(SEED_BLOCKED),
            calls=len(SEED_CALL_HISTORY),
        )
    return store
