"""Application configuration via environment variables."""

from pathlib import Path
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    database_url: str = f"sqlite:///{PROJECT_ROOT / 'data' / 'blog.db'}"
    encryption_key: str = ""  # Fernet key; generate with: python -c "from cryptography.fernet import Fernet; print(Fernet.generate_key().decode())"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Auth
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440  # 24 hours
    totp_issuer: str = "Yancey Inc."

    # BandwagonHost (KiwiVM) API
    bandwagon_secret_key: str = ""
    bandwagon_server_id: str = ""

    # Uploads
    upload_dir: str = str(PROJECT_ROOT / "data" / "uploads")
    upload_base_url: str = "/static/uploads"
    upload_max_bytes: int = 10 * 1024 * 1024

    model_config = {"env_prefix": "BLOG_", "env_file": ".env"}


settings = Settings()
