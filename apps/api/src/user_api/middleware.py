"""Middleware setup for the FastAPI application."""

import logging
import time

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from user_api.config import Settings

logger = logging.getLogger(__name__)

DEV_ENVIRONMENTS = frozenset({"development", "dev", "local", "test"})

# Vite and CRA dev servers
LOCAL_UI_PORTS = (5173, 3000)


def _scheme_variants(url: str) -> list[str]:
    url = url.rstrip("/")
    for scheme, other in (("http://", "https://"), ("https://", "http://")):
        if url.startswith(scheme):
            return [url, other + url[len(scheme):]]
    return [url]


def get_allowed_origins(settings: Settings) -> list[str]:
    """Get the CORS origins for this deployment.

    The UI URL is allowed over both schemes. Development environments also
    allow local UI dev servers and pages served by the API itself (the
    ``/static`` mount) on ``api_port``.
    """
    allowed_origins = _scheme_variants(settings.ui_url) if settings.ui_url else []

    if settings.environment.lower() in DEV_ENVIRONMENTS:
        for port in (*LOCAL_UI_PORTS, settings.api_port):
            allowed_origins += [f"http://localhost:{port}", f"http://127.0.0.1:{port}"]

    return list(dict.fromkeys(allowed_origins))


def get_cors_headers(origin: str | None, settings: Settings) -> dict[str, str]:
    """CORS headers for responses built outside ``CORSMiddleware``; empty for disallowed origins."""
    if not origin or origin not in get_allowed_origins(settings):
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": "*",
        "Access-Control-Allow-Headers": "*",
    }


def format_request_line(request: Request) -> str:
    """Render ``<client> <METHOD> <path[?query]>`` for the access log."""
    client = f"{request.client.host}:{request.client.port}" if request.client else "-"
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    return f"{client} {request.method} {target}"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status code and duration.

    Requests that raise are logged as 500 before the exception continues to
    the catch-all error handler.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, status.HTTP_500_INTERNAL_SERVER_ERROR, start)
            raise
        self._log(request, response.status_code, start)
        return response

    @staticmethod
    def _log(request: Request, status_code: int, start: float) -> None:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %d %.2fms", format_request_line(request), status_code, elapsed_ms)


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Setup middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Application settings (UI URL, environment, API port)
    """
    allowed_origins = get_allowed_origins(settings)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    logger.info("CORS enabled for origins: %s (environment=%s)", allowed_origins, settings.environment)
