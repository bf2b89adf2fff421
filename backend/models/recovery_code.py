"""RecoveryCode model — one row per unused two-factor backup code."""

from datetime import datetime, timezone

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class RecoveryCode(SQLModel, table=True):
    __tablename__ = "recovery_code"
    __table_args__ = (UniqueConstraint("user_id", "code_hash", name="uq_recovery_code_user_code"),)

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    code_hash: str  # SHA-256 hex digest; plaintext is only shown at issuance
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
