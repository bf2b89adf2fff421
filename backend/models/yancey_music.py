"""YanceyMusic model — the site owner's own releases, linked from SoundCloud."""

from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


class YanceyMusic(SQLModel, table=True):
    __tablename__ = "yancey_music"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    sound_cloud_url: str
    cover_url: str
    release_date: datetime
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
