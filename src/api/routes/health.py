"""Health check endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from infrastructure.database.session import get_async_session

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    database: str | None = None
    text_provider: str | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """Liveness probe; checks no dependencies."""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        timestamp=datetime.now(UTC).isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """
    Readiness check covering the database and text provider configuration.

    The provider is not called; a missing API key reports ``unconfigured``
    and marks the service degraded, since enhancement would always fail.
    """
    try:
        await db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        db_status = f"unhealthy: {type(e).__name__}"

    provider_status = "configured" if settings.provider_configured else "unconfigured"

    healthy = db_status == "healthy" and settings.provider_configured
    return HealthResponse(
        status="healthy" if healthy else "degraded",
        version=VERSION,
        timestamp=datetime.now(UTC).isoformat(),
        environment=settings.app_env,
        database=db_status,
        text_provider=provider_status,
    )
