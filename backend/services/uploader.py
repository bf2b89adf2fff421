"""File upload storage on the local filesystem."""

import logging
import uuid
from pathlib import Path

from backend.config import settings

logger = logging.getLogger(__name__)


def save_upload(filename: str | None, content: bytes, upload_dir: str | None = None) -> dict:
    """Write ``content`` under a random name that keeps the original extension.

    Returns ``{"name": stored_name, "url": public_url}``.
    """
    target_dir = Path(upload_dir or settings.upload_dir)
    target_dir.mkdir(parents=True, exist_ok=True)

    suffix = Path(filename or "").suffix.lower()
    stored_name = f"{uuid.uuid4().hex}{suffix}"
    (target_dir / stored_name).write_bytes(content)

    logger.info(f"Stored upload {filename!r} as {stored_name} ({len(content)} bytes)")
    return {"name": stored_name, "url": f"{settings.upload_base_url.rstrip('/')}/{stored_name}"}
