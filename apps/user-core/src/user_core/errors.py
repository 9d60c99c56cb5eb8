"""Error types raised by the user domain."""

INVALID_USER_ID = "invalid user ID"
INVALID_USER_DATA = "invalid user data: name and email are required"
USER_NOT_FOUND = "user not found"


class UserError(Exception):
    """Base exception for all user domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(UserError):
    """A required field (id, name or email) is empty."""


class NotFoundError(UserError):
    """No user record matches the requested id."""

    def __init__(self, user_id: str, message: str = USER_NOT_FOUND) -> None:
        super().__init__(message)
        self.user_id = user_id
