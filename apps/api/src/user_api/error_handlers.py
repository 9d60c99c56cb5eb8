"""Global exception handlers mapping user domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.responses import JSONResponse

from user_api.config import Settings
from user_api.middleware import get_cors_headers
from user_core.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ValidationError)
    async def user_validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("Validation error on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info("User %r not found on %s", exc.user_id, request.url.path)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "User not found"})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed request bodies are reported as 400, not FastAPI's default 422."""
        logger.warning("Invalid request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid JSON",
                "errors": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            },
        )

    # Exception handler to ensure CORS headers are present on all error responses
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all handler; never leaks internal details."""
        # Let FastAPI handle HTTPException normally (CORS middleware handles it)
        if isinstance(exc, HTTPException):
            raise exc

        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)

        origin = request.headers.get("origin")
        cors_headers = get_cors_headers(origin, settings)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
            headers=cors_headers,
        )
