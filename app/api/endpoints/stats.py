from fastapi import APIRouter, Depends

from app.core.store import get_store
from app.repositories.base import DataStore
from app.schemas.records import StatsResponse
from app.services.stats_service import StatsService

router = APIRouter(tags=["stats"])


@router.get("", response_model=StatsResponse)
async def get_stats(store: DataStore = Depends(get_store)):
    """Dashboard counters; recomputed on every request."""
    return await StatsService(store).compute_stats()
