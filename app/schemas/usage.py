from datetime import datetime
from typing import Dict
from pydantic import BaseModel, field_validator

from app.core.utils.clock import as_utc


class UsageRecordResponse(BaseModel):
    id: int
    user_id: str
    usage_type: str
    amount: float
    cost: float
    billing_period: str
    created_at: datetime

    @field_validator("created_at", mode="after")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        return as_utc(v)

    class Config:
        from_attributes = True


class UsageTypeTotal(BaseModel):
    amount: float
    cost: float


class UsageSummaryResponse(BaseModel):
    user_id: str
    billing_period: str
    by_type: Dict[str, UsageTypeTotal]
    total_cost: float
    credit_limit: float | None = None
    credit_remaining: float | None = None
