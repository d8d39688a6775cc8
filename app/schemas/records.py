from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.core.utils.clock import as_utc


class RecordResponse(BaseModel):
    """Base for stored records; timestamps always leave the API timezone-aware."""

    @field_validator("created_at", "timestamp", mode="after", check_fields=False)
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        return as_utc(v)

    class Config:
        from_attributes = True


# ========= WHITELIST =========

class ContactCreateRequest(BaseModel):
    """Fields are optional on purpose: missing values are stored as null."""
    phone_number: Optional[str] = Field(None, description="Phone number with country code")
    contact_name: Optional[str] = None
    relationship: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "phone_number": "+15551230000",
                "contact_name": "Dr. Smith",
                "relationship": "Doctor",
            }
        }


class ContactResponse(RecordResponse):
    id: int
    phone_number: Optional[str] = None
    contact_name: Optional[str] = None
    relationship: Optional[str] = None
    created_at: datetime


# ========= BLOCKED NUMBERS =========

class BlockedCreateRequest(BaseModel):
    phone_number: Optional[str] = None
    reason: Optional[str] = None


class BlockedResponse(RecordResponse):
    id: int
    phone_number: Optional[str] = None
    reason: Optional[str] = None
    attempts: int = 1
    created_at: datetime


# ========= CALL HISTORY =========

class CallCreateRequest(BaseModel):
    phone_number: Optional[str] = None
    caller_name: Optional[str] = None
    call_type: Optional[str] = Field(None, description="urgent, screening, blocked, incoming, ...")
    duration: Optional[int] = Field(None, description="Duration in seconds")
    urgency_level: Optional[str] = Field(None, description="high, medium, low or none")
    status: Optional[str] = None
    ai_action: Optional[str] = None


class CallResponse(RecordResponse):
    id: int
    phone_number: Optional[str] = None
    caller_name: Optional[str] = None
    call_type: Optional[str] = None
    duration: Optional[int] = None
    urgency_level: Optional[str] = None
    status: Optional[str] = None
    ai_action: Optional[str] = None
    timestamp: datetime


class VoiceCommandLogResponse(RecordResponse):
    id: int
    transcript: Optional[str] = None
    action: Optional[str] = None
    success: bool = False
    timestamp: datetime


# ========= GENERIC =========

class CreatedResponse(BaseModel):
    id: int
    message: str


class MessageResponse(BaseModel):
    message: str


class StatsResponse(BaseModel):
    whitelist_count: int
    blocked_count: int
    todays_calls: int
    urgent_calls: int
    voice_commands_today: int


class ScreeningResponse(BaseModel):
    phone_number: str
    verdict: str
