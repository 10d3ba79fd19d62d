"""Application configuration."""

import os
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Meal Catalog"
    api_prefix: str = "/api"
    seed_sample_data: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper().strip() if isinstance(value, str) else value


def normalize_prefix(raw: str | None) -> str:
    """Return a route prefix with one leading slash and no trailing slash."""
    if raw is None:
        return ""
    cleaned = raw.strip().strip("/")
    if not cleaned:
        return ""
    return f"/{cleaned}"
