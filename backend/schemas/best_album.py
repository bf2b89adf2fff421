"""Pydantic schemas for BestAlbum API."""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from backend.schemas.common import ensure_utc, trim_text, validate_url


class BestAlbumCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    artist: str = Field(min_length=1, max_length=200)
    cover_url: str
    mv_url: str
    release_date: datetime

    @field_validator("title", "artist")
    @classmethod
    def _trim_required_text(cls, value: str) -> str:
        return trim_text(value)

    @field_validator("cover_url", "mv_url")
    @classmethod
    def _validate_urls(cls, value: str) -> str:
        return validate_url(value)

    @field_validator("release_date")
    @classmethod
    def _aware_release_date(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class BestAlbumUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    artist: str | None = Field(default=None, min_length=1, max_length=200)
    cover_url: str | None = None
    mv_url: str | None = None
    release_date: datetime | None = None

    @field_validator("title", "artist")
    @classmethod
    def _trim_optional_text(cls, value: str | None) -> str | None:
        return None if value is None else trim_text(value)

    @field_validator("cover_url", "mv_url")
    @classmethod
    def _validate_optional_urls(cls, value: str | None) -> str | None:
        return None if value is None else validate_url(value)

    @field_validator("release_date")
    @classmethod
    def _aware_optional_release_date(cls, value: datetime | None) -> datetime | None:
        return None if value is None else ensure_utc(value)


class BestAlbumRead(BaseModel):
    id: int
    title: str
    artist: str
    cover_url: str
    mv_url: str
    release_date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
