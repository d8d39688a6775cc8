from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from app.core.utils.enums import StorageBackendEnum


def to_setting_value(value: Any) -> Optional[str]:
    """Settings are a flat string map; JSON scalars are stored as text."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RecordRepository(ABC):
    """List/create/delete over one flat record type.

    ``list`` returns newest first (ties broken by higher id first). ``create``
    assigns the id and the server timestamp. ``delete`` of an unknown id is a
    no-op; the return value only tells whether something was removed.
    """

    @abstractmethod
    async def list(self, limit: Optional[int] = None) -> List[Any]:
        ...

    @abstractmethod
    async def create(self, fields: Dict[str, Any]) -> Any:
        ...

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        ...

    async def count(self) -> int:
        return len(await self.list())


class SettingsRepository(ABC):

    @abstractmethod
    async def get_all(self) -> Dict[str, Optional[str]]:
        ...

    @abstractmethod
    async def merge(self, values: Dict[str, Any]) -> Dict[str, Optional[str]]:
        ...


@dataclass
class DataStore:
    """Bundle of repositories handed to request handlers."""

    backend: StorageBackendEnum
    whitelist: RecordRepository
    blocked: RecordRepository
    call_history: RecordRepository
    voice_commands: RecordRepository
    usage: RecordRepository
    settings: SettingsRepository
