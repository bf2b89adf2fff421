"""Player model — tracks shown in the site's music player."""

from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


class Player(SQLModel, table=True):
    __tablename__ = "player"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    artist: str
    lrc: str = ""  # LRC-format lyrics
    cover_url: str
    music_file_url: str
    is_displayed: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
