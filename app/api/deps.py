from typing import Optional

from fastapi import Request

from app.core.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with (tests pass their own)."""
    return request.app.state.settings


def parse_record_id(raw: str) -> Optional[int]:
    """Path ids that are not integers match no record."""
    try:
        return int(raw)
    except ValueError:
        return None
