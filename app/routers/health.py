"""
Health Check Router - IEOP Scoring Engine
app/routers/health.py

The scoring engine has no external dependencies of its own; the catalog is
best-effort and never makes the service unhealthy.
"""
from fastapi import APIRouter
from pydantic import BaseModel
from datetime import datetime, timezone

from app.config import get_settings

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )
