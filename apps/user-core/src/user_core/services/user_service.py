"""User service: input validation in front of a user repository."""

import logging

from user_core.errors import INVALID_USER_DATA, INVALID_USER_ID, ValidationError
from user_core.models.user import User
from user_core.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Validate user operations and delegate them to a repository.

    ``NotFoundError`` raised by the repository propagates unchanged. The
    existence check in ``update_user`` and ``delete_user`` is a separate
    call from the mutation, so a concurrent delete between the two also
    surfaces as ``NotFoundError``.
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def list_users(self) -> list[User]:
        return self.repository.list_users()

    def get_user(self, user_id: str) -> User:
        """Get a user by ID.

        Raises:
            ValidationError: If the ID is empty
            NotFoundError: If no user has the given ID
        """
        if not user_id:
            raise ValidationError(INVALID_USER_ID)
        return self.repository.get_user(user_id)

    def create_user(self, name: str, email: str) -> User:
        """Create a user with a generated ID.

        Args:
            name: Full name, must be non-empty
            email: Email address, must be non-empty (shape is not checked)

        Returns:
            The stored user

        Raises:
            ValidationError: If name or email is empty
        """
        user = User.new(name, email)
        if not user.is_valid():
            raise ValidationError(INVALID_USER_DATA)

        created = self.repository.create_user(user)
        logger.info("Created user %s", created.id)
        return created

    def update_user(self, user_id: str, name: str, email: str) -> User:
        """Replace the name and email of an existing user.

        Raises:
            ValidationError: If the ID, name or email is empty
            NotFoundError: If no user has the given ID
        """
        if not user_id:
            raise ValidationError(INVALID_USER_ID)
        if not name or not email:
            raise ValidationError(INVALID_USER_DATA)

        user = self.repository.get_user(user_id)
        user.update_name(name)
        user.update_email(email)
        if not user.is_valid():
            raise ValidationError(INVALID_USER_DATA)

        updated = self.repository.update_user(user)
        logger.info("Updated user %s", updated.id)
        return updated

    def delete_user(self, user_id: str) -> None:
        """Delete a user by ID.

        Raises:
            ValidationError: If the ID is empty
            NotFoundError: If no user has the given ID
        """
        if not user_id:
            raise ValidationError(INVALID_USER_ID)

        self.repository.get_user(user_id)
        self.repository.delete_user(user_id)
        logger.info("Deleted user %s", user_id)
