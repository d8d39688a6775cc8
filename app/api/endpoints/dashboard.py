from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["dashboard"])

TEMPLATE_PATH = Path(__file__).resolve().parents[2] / "templates" / "dashboard.html"


@lru_cache(maxsize=1)
def load_dashboard() -> str:
    return TEMPLATE_PATH.read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def dashboard():
    return HTMLResponse(content=load_dashboard())
