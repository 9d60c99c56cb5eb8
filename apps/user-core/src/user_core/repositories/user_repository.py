"""Abstract interface for user persistence."""

from abc import ABC, abstractmethod

from user_core.models.user import User


class UserRepository(ABC):
    """Abstract interface for user repository."""

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users in insertion order."""
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If no user has the given ID
        """
        pass

    @abstractmethod
    def create_user(self, user: User) -> User:
        """Store a user whose ID has already been generated."""
        pass

    @abstractmethod
    def update_user(self, user: User) -> User:
        """Replace the stored user that has the same ID.

        Raises:
            NotFoundError: If no user has the given ID
        """
        pass

    @abstractmethod
    def delete_user(self, user_id: str) -> None:
        """Delete a user by ID.

        Raises:
            NotFoundError: If no user has the given ID
        """
        pass
