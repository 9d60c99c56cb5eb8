"""API models package."""

from user_api.models.health import HealthCheckResponse, PingResponse, StatusResponse, VersionResponse
from user_api.models.user import UserPayload

__all__ = [
    "HealthCheckResponse",
    "PingResponse",
    "StatusResponse",
    "UserPayload",
    "VersionResponse",
]
