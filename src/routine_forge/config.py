"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

IST_OFFSET_MINUTES = 330


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    timezone_offset_minutes: int = IST_OFFSET_MINUTES
    report_default_days: int = 30
    plan_streak_lookback_days: int = 90
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def normalize_email(raw: object) -> str:
    """Return a trimmed, lower-cased email or an empty string."""
    if not isinstance(raw, str):
        return ""
    return raw.strip().lower()
