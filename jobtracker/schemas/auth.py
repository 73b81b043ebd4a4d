"""Authentication schemas."""

import re
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_email_format(value: str) -> str:
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Please provide a valid email")
    return value


class RegisterRequest(BaseModel):
    """User registration request."""

    name: str = Field(..., min_length=3, max_length=50)
    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=6)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return validate_email_format(v)


class LoginRequest(BaseModel):
    """User login request."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UpdateUserRequest(BaseModel):
    """Profile update; every field must be supplied and non-empty."""

    email: Optional[str] = None
    name: Optional[str] = Field(default=None, max_length=50)
    last_name: Optional[str] = Field(
        default=None, max_length=20, validation_alias=AliasChoices("lastName", "last_name")
    )
    location: Optional[str] = Field(default=None, max_length=20)


class UserResponse(BaseModel):
    """User response."""

    id: int
    email: str
    name: str
    last_name: str = Field(alias="lastName")
    location: str

    model_config = {"from_attributes": True, "populate_by_name": True}


class AuthResponse(BaseModel):
    """User plus a freshly issued bearer token."""

    user: UserResponse
    token: str
