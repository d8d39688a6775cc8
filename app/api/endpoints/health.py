import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    """Basic health check"""
    app_settings = request.app.state.settings
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": int(time.monotonic() - request.app.state.started_at),
        "environment": app_settings.ENVIRONMENT,
        "features": {
            "storage": request.app.state.store_provider.backend.value,
            "auth_enabled": app_settings.AUTH_ENABLED,
            "keep_alive": bool(app_settings.KEEP_ALIVE_URL),
        },
    }
