# unitconv/api/v1/endpoints/health.py
from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from unitconv.core.config import settings
from unitconv.services.units import UNIT_LISTS

router = APIRouter(prefix="/health", tags=["health"])


class HealthOut(BaseModel):
    status: str
    env: str
    categories: int | None = None


@router.get("", response_model=dict)
def health_simple():
    return {"status": "ok", "env": settings.APP_ENV}


@router.get("/extended", response_model=HealthOut)
def health_extended():
    return HealthOut(status="ok", env=settings.APP_ENV, categories=len(UNIT_LISTS))
