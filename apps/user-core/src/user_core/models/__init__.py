"""User domain models package."""

from user_core.models.user import User

__all__ = ["User"]
