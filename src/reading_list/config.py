"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

BACKENDS = ("memory", "state")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    backend: str = "memory"
    log_level: str = "INFO"
    environment: str = Field(default=_ENVIRONMENT, validation_alias="ENVIRONMENT")

    model_config = SettingsConfigDict(
        env_prefix="READING_LIST_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_backend(raw: str | None) -> str:
    """Normalize a storage backend name, defaulting to the in-memory store."""
    if raw is None:
        return "memory"
    cleaned = raw.strip().lower()
    if not cleaned:
        return "memory"
    if cleaned not in BACKENDS:
        raise ValueError(f"Unknown storage backend: {raw!r}")
    return cleaned
