"""User repositories package."""

from user_core.repositories.memory_user_repository import SAMPLE_USERS, MemoryUserRepository
from user_core.repositories.user_repository import UserRepository

__all__ = ["SAMPLE_USERS", "MemoryUserRepository", "UserRepository"]
