from fastapi import APIRouter, Depends, Query

from app.api.deps import get_app_settings
from app.core.config import Settings
from app.core.store import get_store
from app.repositories.base import DataStore
from app.schemas.records import ScreeningResponse
from app.services.screening_service import ScreeningService

router = APIRouter(tags=["screening"])


@router.get("", response_model=ScreeningResponse)
async def screen_number(
    phone_number: str = Query(..., description="Raw phone number (any format)"),
    store: DataStore = Depends(get_store),
    app_settings: Settings = Depends(get_app_settings),
):
    service = ScreeningService(store, default_region=app_settings.DEFAULT_PHONE_REGION)
    return await service.classify(phone_number)
