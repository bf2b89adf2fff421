"""Pydantic schemas for the authentication API."""

from datetime import datetime
import re

from pydantic import BaseModel, Field, field_validator

from backend.models.user import User, UserRole

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_USERNAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def _normalize_email(value: str) -> str:
    email = value.strip().lower()
    if not _EMAIL_RE.fullmatch(email):
        raise ValueError("must be a valid email address")
    return email


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        return _normalize_email(value)


class RegisterRequest(BaseModel):
    email: str = Field(max_length=254)
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=6, max_length=128)

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        return _normalize_email(value)

    @field_validator("username")
    @classmethod
    def _validate_username(cls, value: str) -> str:
        name = value.strip()
        if not _USERNAME_RE.fullmatch(name):
            raise ValueError("may only contain letters, digits, '_', '.' and '-'")
        return name


class TwoFactorRequest(BaseModel):
    """Second-factor submission: a TOTP code or a recovery code."""
    user_id: int
    token: str = Field(min_length=1, max_length=32)


class UserPublic(BaseModel):
    """User info safe to return in API responses (no password, TOTP secret or recovery codes)."""
    id: int
    email: str
    username: str
    role: UserRole
    is_totp: bool
    created_at: datetime
    updated_at: datetime


def public_view(user: User) -> UserPublic:
    return UserPublic(
        id=user.id,
        email=user.email,
        username=user.username,
        role=user.role,
        is_totp=user.is_totp,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserPublic


class TOTPEnrollmentResponse(BaseModel):
    qrcode: str  # PNG data URI of the provisioning URI
    secret_key: str  # base32, for manual entry


class RecoveryCodesResponse(BaseModel):
    recovery_codes: list[str]  # plaintext, shown only here
    user: UserPublic
