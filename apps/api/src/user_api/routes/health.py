"""Health, status and version routes for the versioned API."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from user_api.config import Settings, get_settings
from user_api.models.health import HealthCheckResponse, StatusResponse, VersionResponse

V2_FEATURES = ["enhanced_logging", "metrics", "tracing"]

router = APIRouter(tags=["health"])
v2_router = APIRouter(tags=["health"])


def format_uptime(seconds: float) -> str:
    """Format a duration as ``1h2m3s``, dropping leading zero units."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


@router.get("/health", response_model=HealthCheckResponse, response_model_exclude_none=True)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status and version information
    """
    return HealthCheckResponse(status="healthy", version="v1", service=settings.app_name)


@router.get("/status", response_model=StatusResponse)
async def status_check(request: Request) -> StatusResponse:
    """Operational status with the current time and process uptime."""
    started_at = getattr(request.app.state, "started_at", time.monotonic())
    return StatusResponse(
        status="operational",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=format_uptime(time.monotonic() - started_at),
        version="v1",
    )


@router.get("/version", response_model=VersionResponse)
async def version_info(settings: Settings = Depends(get_settings)) -> VersionResponse:
    return VersionResponse(
        version=settings.app_version,
        api_version="v1",
        build=settings.environment,
        commit=settings.build_commit,
    )


@v2_router.get("/health", response_model=HealthCheckResponse)
async def health_check_v2(settings: Settings = Depends(get_settings)) -> HealthCheckResponse:
    return HealthCheckResponse(
        status="healthy",
        version="v2",
        service=settings.app_name,
        features=V2_FEATURES,
    )
