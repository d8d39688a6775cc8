from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.api.deps import get_app_settings
from app.core.auth import AuthUser, get_current_user
from app.core.config import Settings
from app.core.exceptions import UsageLimitExceeded
from app.core.store import get_store
from app.repositories.base import DataStore
from app.schemas.assistant import ChatRequest, ChatResponse, VoiceCommandRequest, VoiceCommandResponse
from app.services.assistant_service import AssistantService
from app.services.usage_service import UsageService

router = APIRouter(tags=["assistant"])


def _limit_error(exc: UsageLimitExceeded) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail={
            "error": "Monthly credit limit reached",
            "limit": float(exc.limit),
            "used": float(exc.used),
        },
    )


@router.post("/ai-chat", response_model=ChatResponse)
async def ai_chat(
    payload: Optional[ChatRequest] = Body(None),
    user: AuthUser = Depends(get_current_user),
    store: DataStore = Depends(get_store),
    app_settings: Settings = Depends(get_app_settings),
):
    service = AssistantService(store, UsageService(store, credit_limit=app_settings.PLAN_MONTHLY_CREDIT_LIMIT))
    try:
        return await service.chat(user.id, payload.message if payload else None)
    except UsageLimitExceeded as e:
        raise _limit_error(e)


@router.post("/voice-command", response_model=VoiceCommandResponse, response_model_exclude_none=True)
async def voice_command(
    payload: Optional[VoiceCommandRequest] = Body(None),
    user: AuthUser = Depends(get_current_user),
    store: DataStore = Depends(get_store),
    app_settings: Settings = Depends(get_app_settings),
):
    """
    Match a browser transcript against the command table.

    Unrecognized commands still return 200 with ``success: false``.
    """
    service = AssistantService(store, UsageService(store, credit_limit=app_settings.PLAN_MONTHLY_CREDIT_LIMIT))
    try:
        return await service.voice_command(user.id, payload.transcript if payload else None)
    except UsageLimitExceeded as e:
        raise _limit_error(e)
