"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_IMAGES_DIR = Path(__file__).parent / "static" / "images"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "members_portal"
    mongodb_timeout_ms: int = 5000

    # Redis (session store)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0

    # Sessions
    session_secret: str = "CHANGE_ME_IN_PRODUCTION_SESSION_SECRET"
    session_encryption_secret: str = "CHANGE_ME_IN_PRODUCTION_ENCRYPTION_SECRET"
    session_cookie_name: str = "portal_session"
    session_ttl_seconds: int = 3600
    session_cookie_secure: bool = False

    # Password hashing
    bcrypt_rounds: int = 12

    # Members page gallery
    images_dir: Path = DEFAULT_IMAGES_DIR

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
