"""Pydantic schemas for Player API."""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from backend.schemas.common import trim_text, validate_url


class PlayerCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    artist: str = Field(min_length=1, max_length=200)
    lrc: str = ""
    cover_url: str
    music_file_url: str
    is_displayed: bool = True

    @field_validator("title", "artist")
    @classmethod
    def _trim_required_text(cls, value: str) -> str:
        return trim_text(value)

    @field_validator("cover_url", "music_file_url")
    @classmethod
    def _validate_urls(cls, value: str) -> str:
        return validate_url(value)


class PlayerUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    artist: str | None = Field(default=None, min_length=1, max_length=200)
    lrc: str | None = None
    cover_url: str | None = None
    music_file_url: str | None = None
    is_displayed: bool | None = None

    @field_validator("title", "artist")
    @classmethod
    def _trim_optional_text(cls, value: str | None) -> str | None:
        return None if value is None else trim_text(value)

    @field_validator("cover_url", "music_file_url")
    @classmethod
    def _validate_optional_urls(cls, value: str | None) -> str | None:
        return None if value is None else validate_url(value)


class PlayerRead(BaseModel):
    id: int
    title: str
    artist: str
    lrc: str
    cover_url: str
    music_file_url: str
    is_displayed: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
