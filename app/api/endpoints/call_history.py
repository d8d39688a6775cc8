from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from app.api.deps import get_app_settings
from app.core.auth import AuthUser, get_current_user
from app.core.config import Settings
from app.core.store import get_store
from app.core.utils.enums import UsageTypeEnum
from app.repositories.base import DataStore
from app.schemas.records import CallCreateRequest, CallResponse, CreatedResponse
from app.services.usage_service import UsageService

router = APIRouter(tags=["call-history"])


@router.get("", response_model=List[CallResponse])
async def list_call_history(
    store: DataStore = Depends(get_store),
    app_settings: Settings = Depends(get_app_settings),
):
    """Most recent calls first, capped at CALL_HISTORY_LIMIT."""
    return await store.call_history.list(limit=app_settings.CALL_HISTORY_LIMIT)


@router.post("", response_model=CreatedResponse)
async def record_call(
    payload: Optional[CallCreateRequest] = Body(None),
    user: AuthUser = Depends(get_current_user),
    store: DataStore = Depends(get_store),
    app_settings: Settings = Depends(get_app_settings),
):
    payload = payload or CallCreateRequest()
    call = await store.call_history.create(payload.model_dump())
    usage = UsageService(store, credit_limit=app_settings.PLAN_MONTHLY_CREDIT_LIMIT)
    await usage.record(user.id, UsageTypeEnum.CALL_SCREENING.value)
    return CreatedResponse(id=call.id, message="Call recorded successfully")
