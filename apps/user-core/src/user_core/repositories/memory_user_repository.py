"""In-memory user repository."""

import logging
from collections.abc import Iterable

from user_core.errors import NotFoundError
from user_core.infra.locks import ReadWriteLock
from user_core.models.user import User
from user_core.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

SAMPLE_USERS: tuple[tuple[str, str], ...] = (
    ("John Doe", "john@example.com"),
    ("Jane Smith", "jane@example.com"),
    ("Bob Johnson", "bob@example.com"),
)


class MemoryUserRepository(UserRepository):
    """Ordered in-process user store guarded by a reader/writer lock.

    Records live only in process memory and are lost on restart. IDs are
    trusted to be unique: ``create_user`` does not check for collisions, and
    lookups act on the first matching record.
    """

    def __init__(self, users: Iterable[User] | None = None, seed: bool = True) -> None:
        """Initialize the repository.

        Args:
            users: Initial records, stored in the given order
            seed: Load the sample users when ``users`` is not given
        """
        self._lock = ReadWriteLock()
        if users is not None:
            self._users: list[User] = [user.model_copy() for user in users]
        elif seed:
            self._users = [User.new(name, email) for name, email in SAMPLE_USERS]
        else:
            self._users = []
        logger.debug("MemoryUserRepository initialized with %d users", len(self._users))

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._users)

    def _index_of(self, user_id: str) -> int:
        # Caller must hold the lock.
        for i, user in enumerate(self._users):
            if user.id == user_id:
                return i
        raise NotFoundError(user_id)

    def list_users(self) -> list[User]:
        with self._lock.read_locked():
            return [user.model_copy() for user in self._users]

    def get_user(self, user_id: str) -> User:
        with self._lock.read_locked():
            return self._users[self._index_of(user_id)].model_copy()

    def create_user(self, user: User) -> User:
        with self._lock.write_locked():
            self._users.append(user.model_copy())
        return user

    def update_user(self, user: User) -> User:
        with self._lock.write_locked():
            self._users[self._index_of(user.id)] = user.model_copy()
        return user

    def delete_user(self, user_id: str) -> None:
        with self._lock.write_locked():
            del self._users[self._index_of(user_id)]
