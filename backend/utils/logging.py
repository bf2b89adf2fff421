"""Logging setup shared by the API server and the CLI."""

import logging
import sys

from backend.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str | None = None):
    """Configure the root logger once; repeated calls only adjust the level."""
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    # Avoid duplicate handlers on reload
    if not any(getattr(h, "_blog_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handler._blog_handler = True
        root.addHandler(handler)

    # Uvicorn's access log is replaced by the request-logging middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
