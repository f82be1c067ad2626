"""Configuration management for typedetect."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="TYPEDETECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the ``typedetect`` logger.

    Priority for the level:
    1. ``level`` argument
    2. TYPEDETECT_LOG_LEVEL environment variable
    3. Settings.log_level default (WARNING)

    Calling it again only updates the level; no second handler is added.
    """
    settings = get_settings()
    logger = logging.getLogger("typedetect")
    logger.setLevel((level or settings.log_level).upper())

    if not any(getattr(h, "_typedetect", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.log_format))
        handler._typedetect = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
