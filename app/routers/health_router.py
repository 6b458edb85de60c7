from __future__ import annotations
from fastapi import APIRouter

from app.config import settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health():
    return {"status": "ok", "service": settings.service_name, "git_host": settings.git_base_url}
