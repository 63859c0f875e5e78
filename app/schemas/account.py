"""Account and auth API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class AccountCreateRequest(BaseModel):
    """Request body for POST /accounts/register."""

    username: str = Field(..., min_length=1, max_length=255)
    display_name: str = Field(..., min_length=1, max_length=255)
    avatar: str | None = Field(default=None, max_length=5000)
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")


class AccountUpdateRequest(BaseModel):
    """Request body for PUT /accounts.

    password is optional: omit it to keep the current password.
    """

    id: int
    username: str = Field(..., min_length=1, max_length=255)
    display_name: str = Field(..., min_length=1, max_length=255)
    avatar: str | None = Field(default=None, max_length=5000)
    password: str | None = Field(default=None, min_length=8)


class AccountResponse(BaseModel):
    """Account response (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    display_name: str
    avatar: str | None = None


class LoginRequest(BaseModel):
    """Request body for POST /accounts/login."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Successful login: profile plus "Bearer <jwt>" token. password is always empty."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    display_name: str
    avatar: str | None = None
    password: str = ""
    token: str
