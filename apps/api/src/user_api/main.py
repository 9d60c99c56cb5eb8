"""Main FastAPI application."""

import logging
import os
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from user_api.config import Settings, get_settings
from user_api.error_handlers import register_error_handlers
from user_api.middleware import setup_middleware
from user_api.routes import api_v1_router, api_v2_router, base_router
from user_api.services import build_user_service

logger = logging.getLogger(__name__)


def configure_logging(log_level: str) -> None:
    """Configure root logging from the settings log level."""
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI application.

    The user store is created in the lifespan and lives as long as the app;
    each call returns an app with its own store.

    Args:
        settings: Application settings, loaded from the environment if omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Handle application lifespan events."""
        app.state.started_at = time.monotonic()
        app.state.user_service = build_user_service(settings)
        logger.info(f"{settings.app_name} v{settings.app_version} started")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Log level: {settings.log_level}")

        yield

        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(
        title=settings.app_name,
        description="Hanacaraka - user management REST API",
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.dependency_overrides[get_settings] = lambda: settings

    # Setup middleware (must be before exception handlers)
    setup_middleware(app, settings)
    register_error_handlers(app, settings)

    app.include_router(base_router)
    app.include_router(api_v1_router)
    app.include_router(api_v2_router)

    # Mounted after the API routes so they take precedence
    if os.path.isdir(settings.static_dir):
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")
        logger.info("Serving static files from %s", settings.static_dir)

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "user_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment.lower() in {"development", "dev", "local"},
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
