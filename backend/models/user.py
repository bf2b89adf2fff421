"""User model for authentication."""

from datetime import datetime, timezone
from enum import Enum

from sqlmodel import SQLModel, Field


class UserRole(str, Enum):
    REGULAR = "regular"
    SUPERUSER = "superuser"


class User(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True)
    username: str = Field(unique=True, index=True)
    hashed_password: str
    role: UserRole = Field(default=UserRole.REGULAR)
    totp_secret_encrypted: str | None = None  # Fernet-encrypted base32 secret
    is_totp: bool = Field(default=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
