"""Pydantic schemas for YanceyMusic API."""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from backend.schemas.common import ensure_utc, trim_text, validate_url


class YanceyMusicCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    sound_cloud_url: str
    cover_url: str
    release_date: datetime

    @field_validator("title")
    @classmethod
    def _trim_title(cls, value: str) -> str:
        return trim_text(value)

    @field_validator("sound_cloud_url", "cover_url")
    @classmethod
    def _validate_urls(cls, value: str) -> str:
        return validate_url(value)

    @field_validator("release_date")
    @classmethod
    def _aware_release_date(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class YanceyMusicUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    sound_cloud_url: str | None = None
    cover_url: str | None = None
    release_date: datetime | None = None

    @field_validator("title")
    @classmethod
    def _trim_optional_title(cls, value: str | None) -> str | None:
        return None if value is None else trim_text(value)

    @field_validator("sound_cloud_url", "cover_url")
    @classmethod
    def _validate_optional_urls(cls, value: str | None) -> str | None:
        return None if value is None else validate_url(value)

    @field_validator("release_date")
    @classmethod
    def _aware_optional_release_date(cls, value: datetime | None) -> datetime | None:
        return None if value is None else ensure_utc(value)


class YanceyMusicRead(BaseModel):
    id: int
    title: str
    sound_cloud_url: str
    cover_url: str
    release_date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
