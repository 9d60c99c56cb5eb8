"""Service initialization and dependency injection."""

import logging

from fastapi import Request

from user_api.config import Settings
from user_core.repositories import MemoryUserRepository
from user_core.services import UserService

logger = logging.getLogger(__name__)


def build_user_service(settings: Settings) -> UserService:
    """Create the user service backed by a fresh in-memory repository.

    Args:
        settings: Application settings

    Returns:
        UserService instance
    """
    repository = MemoryUserRepository(seed=settings.seed_sample_users)
    logger.info("Initialized MemoryUserRepository with %d users", len(repository))
    return UserService(repository)


def get_user_service(request: Request) -> UserService:
    """Get the user service created for this application.

    Args:
        request: Incoming request

    Returns:
        UserService instance stored on ``app.state``
    """
    return request.app.state.user_service
