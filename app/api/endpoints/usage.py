from fastapi import APIRouter, Depends

from app.api.deps import get_app_settings
from app.core.auth import AuthUser, get_current_user
from app.core.config import Settings
from app.core.store import get_store
from app.repositories.base import DataStore
from app.schemas.usage import UsageSummaryResponse
from app.services.usage_service import UsageService

router = APIRouter(tags=["usage"])


@router.get("", response_model=UsageSummaryResponse)
async def usage_summary(
    user: AuthUser = Depends(get_current_user),
    store: DataStore = Depends(get_store),
    app_settings: Settings = Depends(get_app_settings),
):
    return await UsageService(store, credit_limit=app_settings.PLAN_MONTHLY_CREDIT_LIMIT).summary(user.id)
