"""Request models for the user routes."""

from typing import ClassVar

from pydantic import BaseModel, Field


class UserPayload(BaseModel):
    """Body of create and update requests.

    Missing fields default to empty strings so the service, not the
    request parser, reports them as invalid user data.
    """

    name: str = Field("", description="Full name of the user")
    email: str = Field("", description="Email address of the user")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
            }
        }
