from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from app.core.logging import console_logger
from app.core.store import get_store
from app.repositories.base import DataStore
from app.schemas.records import MessageResponse

router = APIRouter(tags=["settings"])


@router.get("", response_model=Dict[str, Optional[str]])
async def get_settings(store: DataStore = Depends(get_store)):
    return await store.settings.get_all()


@router.put("", response_model=MessageResponse)
async def update_settings(
    values: Optional[Dict[str, Any]] = Body(None),
    store: DataStore = Depends(get_store),
):
    """Merge the given keys into the settings map; other keys are kept."""
    values = values or {}
    await store.settings.merge(values)
    console_logger.info("Settings updated", keys=sorted(values))
    return MessageResponse(message="Settings updated successfully")
