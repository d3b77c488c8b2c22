"""Authentication schemas."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserRegister(BaseModel):
    """User registration request.

    Fields are optional here so that missing values reach the user service,
    which reports them as a single "Missing required fields" error.
    """

    email: str | None = Field(None, max_length=255)
    username: str | None = Field(None, max_length=255)
    first_name: str | None = Field(
        None, max_length=255, validation_alias=AliasChoices("firstName", "first_name")
    )
    last_name: str | None = Field(
        None, max_length=255, validation_alias=AliasChoices("lastName", "last_name")
    )
    password: str | None = Field(None, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)


class UserResponse(BaseModel):
    """User information response. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    created_at: datetime | None = None


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    token: str
    user: UserResponse


class MeResponse(BaseModel):
    """Current user response."""

    user: UserResponse
