"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_SUPPORTED_LOCALES = {"en", "ja"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    default_locale: str = "en"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_locale(raw: str | None) -> str:
    """Normalize a locale tag like ``ja-JP`` to a supported language code."""
    if raw is None:
        return "en"
    language = raw.strip().split("-", maxsplit=1)[0].split("_", maxsplit=1)[0]
    language = language.lower()
    if language in _SUPPORTED_LOCALES:
        return language
    return "en"
