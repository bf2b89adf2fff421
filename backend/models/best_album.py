"""BestAlbum model."""

from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


class BestAlbum(SQLModel, table=True):
    __tablename__ = "best_album"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    artist: str
    cover_url: str
    mv_url: str
    release_date: datetime
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
