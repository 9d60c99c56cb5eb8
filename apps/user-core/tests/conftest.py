"""Pytest configuration and fixtures for user-core tests."""

import pytest

from user_core.models.user import User
from user_core.repositories import MemoryUserRepository
from user_core.services import UserService


@pytest.fixture
def seeded_repository() -> MemoryUserRepository:
    """Repository holding the three sample users."""
    return MemoryUserRepository()


@pytest.fixture
def empty_repository() -> MemoryUserRepository:
    """Repository with no users."""
    return MemoryUserRepository(seed=False)


@pytest.fixture
def alice() -> User:
    return User.with_id("alice-1", "Alice", "alice@example.com")


@pytest.fixture
def service(seeded_repository: MemoryUserRepository) -> UserService:
    """User service over a seeded repository."""
    return UserService(seeded_repository)
