"""Pydantic models for API request bodies."""

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Registration payload."""

    login_name: str | None = None
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    location: str | None = None
    description: str | None = None
    occupation: str | None = None


class LoginRequest(BaseModel):
    """Login payload."""

    login_name: str | None = None
    password: str | None = None


class CommentRequest(BaseModel):
    """New comment payload."""

    comment: str | None = None
