from decimal import Decimal

import pytest

from app.core.exceptions import UsageLimitExceeded
from app.core.utils.usage_rates import compute_cost, get_rate
from app.repositories.memory_store import build_memory_store
from app.services.usage_service import UsageService

from conftest import FakeClock


def test_rates():
    assert get_rate("ai_chat") == Decimal("0.0200")
    assert compute_cost("call_screening", 3) == Decimal("0.1500")


def test_empty_usage_summary(client):
    usage = client.get("/api/usage").json()
    assert usage["user_id"] == "demo"
    assert usage["by_type"] == {}
    assert usage["total_cost"] == 0
    assert usage["credit_limit"] == 25.0
    assert usage["credit_remaining"] == 25.0


@pytest.mark.asyncio
async def test_summary_only_covers_current_period(local_noon):
    clock = FakeClock(local_noon.replace(day=1))
    store = await build_memory_store(seed=False, clock=clock)
    service = UsageService(store, credit_limit=1, clock=clock)

    clock.advance(days=-3)
    await service.record("demo", "ai_chat")
    clock.now = local_noon.replace(day=1)
    await service.record("demo", "ai_chat")
    await service.record("someone-else", "ai_chat")

    summary = await service.summary("demo")
    assert summary.by_type["ai_chat"].amount == 1
    assert summary.total_cost == 0.02
    assert summary.credit_remaining == 0.98


@pytest.mark.asyncio
async def test_zero_limit_disables_enforcement():
    store = await build_memory_store(seed=False)
    service = UsageService(store, credit_limit=0)
    for _ in range(5):
        await service.record("demo", "call_screening")
    await service.ensure_within_limit("demo")
    assert (await service.summary("demo")).credit_limit is None


@pytest.mark.asyncio
async def test_limit_reached_raises():
    store = await build_memory_store(seed=False)
    service = UsageService(store, credit_limit=0.05)
    await service.record("demo", "call_screening")

    with pytest.raises(UsageLimitExceeded) as exc_info:
        await service.ensure_within_limit("demo")
    assert exc_info.value.used == Decimal("0.0500")
