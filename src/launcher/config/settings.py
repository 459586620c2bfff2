# src/launcher/config/settings.py
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Names uvicorn and stdlib logging both understand
LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class Settings(BaseSettings):
    """
    Settings shared by every process role.

    Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file (if exists)
    3. Default values in this class (lowest priority)

    Usage:
        from launcher.config.settings import get_settings
        settings = get_settings()
        queue_key = settings.queue
    """

    # Application Settings
    app_name: str = Field(
        default="files-api",
        alias="APP_NAME",
        description="Application name"
    )

    # Worker Process
    queue: Optional[str] = Field(
        default=None,
        alias="QUEUE",
        description="Queue role key selecting which worker to start"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize aliases and validate the log level name."""
        level = v.upper()
        level = LOG_LEVEL_ALIASES.get(level, level)
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {v}. Must be one of {LOG_LEVELS}")
        return level

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


class ApiSettings(Settings):
    """
    Settings for the API process.

    Only the API role loads these, so a bad `PORT` never stops a worker.
    """

    host: str = Field(
        default="0.0.0.0",
        alias="HOST",
        description="Interface the API process binds to"
    )

    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        alias="PORT",
        description="Port the API process listens on"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one Settings instance per process.
    """
    return Settings()


@lru_cache()
def get_api_settings() -> ApiSettings:
    """Get cached API settings instance."""
    return ApiSettings()
