"""Field validators shared by resource schemas."""

from datetime import datetime, timezone


def trim_text(value: str) -> str:
    text = value.strip()
    if not text:
        raise ValueError("must not be empty")
    return text


def validate_url(value: str) -> str:
    url = value.strip()
    if not (url.startswith("http://") or url.startswith("https://") or url.startswith("/")):
        raise ValueError("must be an absolute http(s) URL or a site-relative path")
    return url


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes (e.g. a bare ``"1999-03-10"``) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
