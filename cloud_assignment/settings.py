"""Runtime configuration for the greeter service."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

GREETING = "Hello! This is Tanya's Cloud Assignment."

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Configuration values mapped from CLOUD_ASSIGNMENT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLOUD_ASSIGNMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Cloud Assignment"
    app_version: str = "1.0.0"

    # Listener; port 0 asks the OS for a free port
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=0, le=65535)

    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
