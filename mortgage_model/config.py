"""
Application configuration using Pydantic Settings.
"""

import os
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_env_file() -> str:
    """Pick the env file for APP_ENV (development unless set to production)."""
    if os.getenv("APP_ENV", "development") == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Service settings, overridable through environment variables."""

    model_config = SettingsConfigDict(
        env_file=get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Mortgage Investment Model"
    debug: bool = False
    log_level: str = "INFO"

    # uvicorn bind address
    host: str = "0.0.0.0"
    port: int = 8000


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
