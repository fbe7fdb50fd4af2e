# dafurn/api/routers/health.py
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from dafurn.config import settings
from dafurn.schemas.user import HealthOut

router = APIRouter(tags=["health"])

@router.get("/api/health", response_model=HealthOut)
async def health():
    """
    Liveness check. Does not touch the database.

    Returns:
        HealthOut: {"status": "ok"} with status 200
    """
    return HealthOut(status="ok")

@router.get("/", response_class=PlainTextResponse)
async def landing():
    return settings.LANDING_TEXT
