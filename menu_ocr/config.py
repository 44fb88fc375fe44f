"""Application configuration."""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings for the menu parsing service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="MENU_OCR_"
    )

    app_name: str = "menu-ocr"
    log_level: str = "INFO"
    max_ocr_text_chars: int = 50_000
    cors_allow_origins: List[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()


settings = get_settings()
