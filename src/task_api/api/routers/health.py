"""Health and readiness endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import AppContextDependency
from ...schemas.system import HealthCheckResponse

router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def read_health(context: AppContextDependency) -> HealthCheckResponse:
    """Return a heartbeat payload with the process uptime in seconds."""
    return HealthCheckResponse(status="ok", uptime=round(context.uptime, 3))
