"""Runtime settings for the word counter."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from ``WORDCOUNT_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="WORDCOUNT_", extra="ignore")

    unit_label: str = Field(default="文字", description="Unit shown after the count")
    status_icon: str = Field(
        default="$(pencil)",
        description="Icon prefix for the status item; empty disables it",
    )
    language_ids: List[str] = Field(
        default_factory=lambda: ["markdown"],
        description="Document language ids the counter is active for",
    )
    log_level: str = Field(default="INFO")

    @field_validator("language_ids")
    @classmethod
    def _normalise_language_ids(cls, value: List[str]) -> List[str]:
        cleaned = [item.strip().lower() for item in value if item and item.strip()]
        if not cleaned:
            raise ValueError("language_ids must name at least one language")
        return cleaned

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = (value or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached application settings."""

    return Settings()


def reset_settings_cache() -> None:
    """Drop the cached settings so the next call re-reads the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
