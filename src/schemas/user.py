"""User schemas."""

from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field

from src.schemas.base import CamelModel


class UserUpdate(CamelModel):
    """Partial profile update."""

    email: EmailStr | None = Field(None, max_length=255)
    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)


class UserResponse(CamelModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime
