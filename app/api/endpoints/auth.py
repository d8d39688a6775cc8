from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.api.deps import get_app_settings
from app.core.auth import check_credentials, create_access_token
from app.core.config import Settings
from app.core.logging import console_logger
from app.schemas.auth import LoginRequest, TokenResponse

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: LoginRequest = Body(...),
    app_settings: Settings = Depends(get_app_settings),
):
    if not check_credentials(payload.username, payload.password, app_settings):
        console_logger.warning("Login failed", username=payload.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token, expires_in = create_access_token(payload.username, app_settings)
    return TokenResponse(access_token=token, expires_in=expires_in)
