"""User services package."""

from user_core.services.user_service import UserService

__all__ = ["UserService"]
