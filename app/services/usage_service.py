from datetime import datetime
from decimal import Decimal
from typing import Callable, Dict, Optional

from app.core.exceptions import UsageLimitExceeded
from app.core.logging import console_logger
from app.core.utils.clock import billing_period, utcnow
from app.core.utils.usage_rates import compute_cost
from app.repositories.base import DataStore
from app.schemas.usage import UsageSummaryResponse, UsageTypeTotal


class UsageService:
    """Mock metering: append-only usage rows priced from a fixed rate table."""

    def __init__(self, store: DataStore, credit_limit: float = 0, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.credit_limit = Decimal(str(credit_limit)) if credit_limit else None
        self.clock = clock

    async def record(self, user_id: str, usage_type: str, amount: Decimal | int = 1):
        amount = Decimal(amount)
        cost = compute_cost(usage_type, amount)
        record = await self.store.usage.create({
            "user_id": user_id,
            "usage_type": usage_type,
            "amount": amount,
            "cost": cost,
            "billing_period": billing_period(self.clock()),
        })
        console_logger.debug(f"Recorded {amount} {usage_type} for {user_id} at {cost}")
        return record

    async def _period_totals(self, user_id: str, period: str) -> Dict[str, Dict[str, Decimal]]:
        totals: Dict[str, Dict[str, Decimal]] = {}
        for row in await self.store.usage.list():
            if row.user_id != user_id or row.billing_period != period:
                continue
            bucket = totals.setdefault(row.usage_type, {"amount": Decimal("0"), "cost": Decimal("0")})
            bucket["amount"] += Decimal(str(row.amount))
            bucket["cost"] += Decimal(str(row.cost))
        return totals

    async def monthly_cost(self, user_id: str, period: Optional[str] = None) -> Decimal:
        totals = await self._period_totals(user_id, period or billing_period(self.clock()))
        return sum((bucket["cost"] for bucket in totals.values()), Decimal("0"))

    async def ensure_within_limit(self, user_id: str) -> None:
        if self.credit_limit is None:
            return
        used = await self.monthly_cost(user_id)
        if used >= self.credit_limit:
            console_logger.warning("Usage limit reached", user_id=user_id, used=str(used), limit=str(self.credit_limit))
            raise UsageLimitExceeded(limit=self.credit_limit, used=used)

    async def summary(self, user_id: str) -> UsageSummaryResponse:
        period = billing_period(self.clock())
        totals = await self._period_totals(user_id, period)
        total_cost = sum((bucket["cost"] for bucket in totals.values()), Decimal("0"))
        remaining = None
        if self.credit_limit is not None:
            remaining = float(max(self.credit_limit - total_cost, Decimal("0")))
        return UsageSummaryResponse(
            user_id=user_id,
            billing_period=period,
            by_type={
                usage_type: UsageTypeTotal(amount=float(bucket["amount"]), cost=float(bucket["cost"]))
                for usage_type, bucket in totals.items()
            },
            total_cost=float(total_cost),
            credit_limit=float(self.credit_limit) if self.credit_limit is not None else None,
            credit_remaining=remaining,
        )
