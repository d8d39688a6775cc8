import pytest

from app.repositories.memory_store import build_memory_store
from app.services.stats_service import StatsService

from conftest import FakeClock


def test_stats_for_seeded_demo_store(client):
    stats = client.get("/api/stats").json()
    assert stats == {
        "whitelist_count": 3,
        "blocked_count": 2,
        "todays_calls": 3,
        "urgent_calls": 1,
        "voice_commands_today": 0,
    }


def test_stats_follow_writes(client):
    client.post("/api/whitelist", json={"phone_number": "+15550001000"})
    client.post("/api/blocked", json={"phone_number": "+15550002000"})
    client.post("/api/call-history", json={"phone_number": "+15550003000", "urgency_level": "high"})
    client.post("/api/voice-command", json={"transcript": "refresh"})

    stats = client.get("/api/stats").json()
    assert stats["whitelist_count"] == 4
    assert stats["blocked_count"] == 3
    assert stats["todays_calls"] == 4
    assert stats["urgent_calls"] == 2
    assert stats["voice_commands_today"] == 1


@pytest.mark.asyncio
async def test_only_todays_calls_are_counted(local_noon):
    clock = FakeClock(local_noon)
    store = await build_memory_store(seed=False, clock=clock)

    clock.advance(days=-1)
    await store.call_history.create({"urgency_level": "high"})
    await store.voice_commands.create({"transcript": "help", "action": "help", "success": True})

    clock.now = local_noon
    await store.call_history.create({"urgency_level": "high"})
    await store.call_history.create({"urgency_level": "low"})

    stats = await StatsService(store, clock=clock).compute_stats()
    assert stats.todays_calls == 2
    assert stats.urgent_calls == 1
    assert stats.voice_commands_today == 0


@pytest.mark.asyncio
async def test_urgent_means_high_only(local_noon):
    clock = FakeClock(local_noon)
    store = await build_memory_store(seed=False, clock=clock)
    for level in ("medium", "none", None, "HIGH"):
        await store.call_history.create({"urgency_level": level})

    stats = await StatsService(store, clock=clock).compute_stats()
    assert stats.todays_calls == 4
    assert stats.urgent_calls == 0


@pytest.mark.asyncio
async def test_empty_store():
    store = await build_memory_store(seed=False)
    stats = await StatsService(store).compute_stats()
    assert stats.whitelist_count == 0
    assert stats.blocked_count == 0
    assert stats.todays_calls == 0
