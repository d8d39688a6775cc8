from fastapi import APIRouter, Depends

from app.api.endpoints import assistant, auth, blocked, call_history, dashboard, health, screening, settings, stats, usage, whitelist
from app.core.auth import get_current_user


def build_api_router(prefix: str = "/api") -> APIRouter:
    api_router = APIRouter(prefix=prefix)
    protected = [Depends(get_current_user)]

    api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
    api_router.include_router(stats.router, prefix="/stats", dependencies=protected)
    api_router.include_router(whitelist.router, prefix="/whitelist", dependencies=protected)
    api_router.include_router(blocked.router, prefix="/blocked", dependencies=protected)
    api_router.include_router(call_history.router, prefix="/call-history", dependencies=protected)
    api_router.include_router(settings.router, prefix="/settings", dependencies=protected)
    api_router.include_router(usage.router, prefix="/usage", dependencies=protected)
    api_router.include_router(screening.router, prefix="/screen", dependencies=protected)
    api_router.include_router(assistant.router, dependencies=protected)
    return api_router


site_router = APIRouter()
site_router.include_router(health.router, tags=["health"])
site_router.include_router(dashboard.router)
