"""Application configuration."""

import os
from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    timezone: str | None = None
    free_daily_entry_limit: int = 3
    vision_provider: Literal["openai", "completion"] = "openai"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    completion_url: str = "https://toolkit.rork.com/text/llm/"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_timezone(raw: str | None) -> ZoneInfo | None:
    """Return the configured timezone, or None for the host's local time."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "local"}:
        return None
    return ZoneInfo(cleaned)
