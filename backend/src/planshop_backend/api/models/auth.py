"""Pydantic models for authentication endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from planshop_backend.shared import UserRole


NAME_MAX_LENGTH = 128
AVATAR_MAX_LENGTH = 512
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 64


def _check_password_strength(value: str) -> str:
    if not any(char.isalpha() for char in value):
        msg = "password must contain at least one letter"
        raise ValueError(msg)
    if not any(char.isdigit() for char in value):
        msg = "password must contain at least one digit"
        raise ValueError(msg)
    return value


class UserResponse(BaseModel):
    """Public representation of a registered user."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    email: str
    name: str
    avatar: str | None
    role: UserRole
    is_admin: bool
    created_at: datetime
    updated_at: datetime


class SessionUserResponse(BaseModel):
    """The identity attached to a session, as seen by the client."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    name: str
    avatar: str | None
    role: UserRole
    is_admin: bool


class SessionResponse(BaseModel):
    """Current session: the signed-in user and when the session lapses."""

    model_config = ConfigDict(from_attributes=True)

    user: SessionUserResponse
    expires: datetime


class AuthTokenResponse(BaseModel):
    """Bearer token payload returned by the API."""

    access_token: str
    token_type: str = "bearer"


class UserRegisterRequest(BaseModel):
    """Payload for creating a new user."""

    email: EmailStr
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    avatar: str | None = Field(default=None, max_length=AVATAR_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            msg = "name must not be empty"
            raise ValueError(msg)
        return value.strip()

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password_strength(value)


class UserRegisterResponse(BaseModel):
    """Response returned after a successful registration."""

    user: UserResponse
    token: AuthTokenResponse


class UserLoginRequest(BaseModel):
    """Payload for authenticating an existing user."""

    email: EmailStr
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )


class UserLoginResponse(BaseModel):
    """Response returned after a successful authentication."""

    user: UserResponse
    token: AuthTokenResponse
