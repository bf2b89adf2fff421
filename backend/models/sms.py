"""SMS model — issued phone verification codes."""

from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


class SMS(SQLModel, table=True):
    __tablename__ = "sms"

    id: int | None = Field(default=None, primary_key=True)
    phone_number: str = Field(index=True)
    verification_code: str
    is_used: bool = False  # set on first successful validation
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
