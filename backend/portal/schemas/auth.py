"""
Authentication form schemas and service result types.
"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

from portal.core.errors import AuthErrorKind

MIN_PASSWORD_LENGTH = 6


def _reject_nul(value: str) -> str:
    # bcrypt cannot hash passwords containing NUL bytes
    if "\x00" in value:
        raise ValueError("must not contain NUL characters")
    return value


class SignupForm(BaseModel):
    """Registration form body."""
    name: str = Field(..., min_length=1, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="User password (min 6 characters)",
    )

    @field_validator("password")
    @classmethod
    def password_has_no_nul(cls, v: str) -> str:
        return _reject_nul(v)


class LoginForm(BaseModel):
    """Login form body."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")

    @field_validator("password")
    @classmethod
    def password_has_no_nul(cls, v: str) -> str:
        return _reject_nul(v)


def first_error_message(exc: ValidationError) -> str:
    """
    Describe the first violated rule, e.g. ``"password": String should
    have at least 6 characters``.
    """
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"])
    return f'"{field}": {error["msg"]}'


class AuthResult(BaseModel):
    """Outcome of a register or login attempt."""
    ok: bool = Field(..., description="Whether the session was established")
    error: Optional[AuthErrorKind] = Field(None, description="Failure kind")
    message: Optional[str] = Field(None, description="User-facing message")
    redirect_to: Optional[str] = Field(None, description="Where to send the user on success")

    @classmethod
    def success(cls, redirect_to: str) -> "AuthResult":
        return cls(ok=True, redirect_to=redirect_to)

    @classmethod
    def failure(cls, error: AuthErrorKind, message: str) -> "AuthResult":
        return cls(ok=False, error=error, message=message)


class HomeView(BaseModel):
    """Data for the home page; username is None for anonymous visitors."""
    username: Optional[str] = None


class MembersView(BaseModel):
    """Data for the members page."""
    username: str
    image: str
