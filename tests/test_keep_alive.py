import httpx
import pytest

from app.services.keep_alive import KeepAlivePinger


@pytest.mark.asyncio
async def test_ping_hits_health_endpoint():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json={"status": "healthy"})

    pinger = KeepAlivePinger("https://treloar.example.com/", transport=httpx.MockTransport(handler))
    assert await pinger.ping_once() is True
    assert seen == ["https://treloar.example.com/health"]


@pytest.mark.asyncio
async def test_failed_ping_is_reported_not_raised():
    pinger = KeepAlivePinger(
        "https://treloar.example.com",
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
    )
    assert await pinger.ping_once() is False


@pytest.mark.asyncio
async def test_start_and_stop():
    pinger = KeepAlivePinger("https://treloar.example.com", interval_seconds=3600,
                             transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    pinger.start()
    assert pinger._task is not None
    await pinger.stop()
    assert pinger._task is None
