from datetime import datetime
from typing import Callable

from app.core.utils.clock import local_date, utcnow
from app.core.utils.enums import UrgencyLevelEnum
from app.repositories.base import DataStore
from app.schemas.records import StatsResponse


class StatsService:
    """Dashboard counters, recomputed from the store on every call.

    "Today" means the record's calendar date in the server's local timezone
    equals the current local date; it is not a rolling 24 hour window.
    """

    def __init__(self, store: DataStore, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    async def compute_stats(self) -> StatsResponse:
        today = local_date(self.clock())

        calls = await self.store.call_history.list()
        todays_calls = [call for call in calls if local_date(call.timestamp) == today]
        urgent_calls = [call for call in todays_calls if call.urgency_level == UrgencyLevelEnum.HIGH.value]

        voice_commands = await self.store.voice_commands.list()
        voice_commands_today = sum(1 for command in voice_commands if local_date(command.timestamp) == today)

        return StatsResponse(
            whitelist_count=await self.store.whitelist.count(),
            blocked_count=await self.store.blocked.count(),
            todays_calls=len(todays_calls),
            urgent_calls=len(urgent_calls),
            voice_commands_today=voice_commands_today,
        )
