import asyncio
from typing import Optional

import httpx

from app.core.logging import console_logger


class KeepAlivePinger:
    """Periodically GETs the service's own /health so idle hosts stay awake."""

    def __init__(self, base_url: str, interval_seconds: int = 840, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = base_url.rstrip("/") + "/health"
        self.interval_seconds = interval_seconds
        self._transport = transport
        self._task: Optional[asyncio.Task] = None

    async def ping_once(self) -> bool:
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(10.0, connect=3.0), transport=self._transport) as client:
                response = await client.get(self.url)
            response.raise_for_status()
            console_logger.debug("keep_alive.ok", url=self.url, status_code=response.status_code)
            return True
        except httpx.HTTPError as exc:
            console_logger.warning("keep_alive.failed", url=self.url, error=str(exc))
            return False

    async def run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            await self.ping_once()

    def start(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self.run())
            console_logger.info("Keep-alive started", url=self.url, interval_seconds=self.interval_seconds)

    async def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
