"""User entity model."""

import uuid
from typing import ClassVar

from pydantic import BaseModel, Field


class User(BaseModel):
    """User entity model."""

    id: str = Field(..., description="Unique identifier for the user")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": "0b7f4c1e-8a52-4d59-9d0c-3f1a3c2e9b41",
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
            }
        }

    @classmethod
    def new(cls, name: str, email: str) -> "User":
        """Create a user with a freshly generated id."""
        return cls(id=str(uuid.uuid4()), name=name, email=email)

    @classmethod
    def with_id(cls, user_id: str, name: str, email: str) -> "User":
        return cls(id=user_id, name=name, email=email)

    def is_valid(self) -> bool:
        """A user is valid when both name and email are non-empty."""
        return self.name != "" and self.email != ""

    def update_name(self, name: str) -> None:
        self.name = name

    def update_email(self, email: str) -> None:
        self.email = email
