"""Health, status and version response models."""

from typing import ClassVar

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    service: str
    features: list[str] | None = None

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "status": "healthy",
                "version": "v1",
                "service": "hanacaraka",
            }
        }


class StatusResponse(BaseModel):
    """Operational status response model."""

    status: str
    timestamp: str
    uptime: str
    version: str


class VersionResponse(BaseModel):
    """Build and version information."""

    version: str
    api_version: str
    build: str
    commit: str


class PingResponse(BaseModel):
    message: str = "pong"
    status: str = "ok"
