from app.core.utils.enums import ScreeningVerdictEnum
from app.core.utils.phone import comparison_key
from app.repositories.base import DataStore
from app.schemas.records import ScreeningResponse


class ScreeningService:
    """Classify an incoming number against trusted and blocked lists."""

    def __init__(self, store: DataStore, default_region: str = "US"):
        self.store = store
        self.default_region = default_region

    async def _contains(self, repository, key: str) -> bool:
        for record in await repository.list():
            if comparison_key(record.phone_number, self.default_region) == key:
                return True
        return False

    async def classify(self, phone_number: str) -> ScreeningResponse:
        key = comparison_key(phone_number, self.default_region)
        verdict = ScreeningVerdictEnum.UNKNOWN
        if key:
            # Trusted wins over blocked
            if await self._contains(self.store.whitelist, key):
                verdict = ScreeningVerdictEnum.TRUSTED
            elif await self._contains(self.store.blocked, key):
                verdict = ScreeningVerdictEnum.BLOCKED
        return ScreeningResponse(phone_number=phone_number, verdict=verdict.value)
