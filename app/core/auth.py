import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from fastapi import HTTPException, Depends, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from app.core.config import Settings

security = HTTPBearer(auto_error=False)

DEMO_USER_ID = "demo"


class AuthUser:
    """The caller behind a request; the demo user when auth is disabled."""
    def __init__(self, user_id: str, username: Optional[str] = None):
        self.id = str(user_id)
        self.username = username or self.id

    def __str__(self):
        return f"AuthUser(id={self.id}, username={self.username})"


def check_credentials(username: str, password: str, app_settings: Settings) -> bool:
    """Compare against the configured account; an empty password never matches."""
    if not app_settings.DEMO_PASSWORD:
        return False
    username_ok = secrets.compare_digest(username.encode(), app_settings.DEMO_USERNAME.encode())
    password_ok = secrets.compare_digest(password.encode(), app_settings.DEMO_PASSWORD.encode())
    return username_ok and password_ok


def create_access_token(subject: str, app_settings: Settings) -> Tuple[str, int]:
    expires_in = app_settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    expire = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
    payload = {"sub": subject, "exp": expire}
    token = jwt.encode(payload, app_settings.JWT_SECRET, algorithm=app_settings.JWT_ALGORITHM)
    return token, expires_in


async def verify_jwt_token(token: str, app_settings: Settings) -> dict:
    try:
        return jwt.decode(token, app_settings.JWT_SECRET, algorithms=[app_settings.JWT_ALGORITHM])
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """Bearer token user when AUTH_ENABLED, otherwise the shared demo user."""
    app_settings: Settings = request.app.state.settings
    if not app_settings.AUTH_ENABLED:
        return AuthUser(user_id=DEMO_USER_ID)

    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = await verify_jwt_token(credentials.credentials, app_settings)

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token: missing user ID"
        )
    return AuthUser(user_id=user_id)
