"""
Application settings module.

This module provides configuration settings for the assessment engine,
including scoring constants, database connection and remote sync endpoints.
"""

# Standard Library Imports
import logging
from functools import lru_cache

# Third-Party Imports
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings using Pydantic for validation and environment variable loading."""

    # Environment
    PROJECT_NAME: str = "MindPulse"
    ENVIRONMENT: str = "development"  # development, test, production
    VERSION: str = "0.1.0"
    API_V1_STR: str = "/api/v1"

    # Server Settings
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 8000
    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    # Database Settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./mindpulse.db"
    DB_ECHO_LOG: bool = False

    # Scoring
    SENSITIVITY_FACTOR: float = Field(
        default=3.0, gt=0.0, description="Multiplier applied to keyword density before capping at 1.0"
    )
    INTENSIFIER_MULTIPLIER: float = Field(
        default=1.5, ge=1.0, description="Weight applied to the keyword match following an intensifier"
    )
    SENTIMENT_MODEL_NAME: str | None = None  # Hugging Face model id; keyword scorer when unset

    # Remote Sync
    REMOTE_SYNC_BASE_URL: str = "https://api.mindpulse.example"
    REMOTE_SYNC_TIMEOUT_SECONDS: float = 10.0
    DEFAULT_STORAGE_PREFERENCE: str = "local"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("DEFAULT_STORAGE_PREFERENCE")
    @classmethod
    def validate_storage_preference(cls, v: str) -> str:
        """Validate the fallback data-sharing policy."""
        valid = ["server", "hybrid", "local"]
        if v.lower() not in valid:
            raise ValueError(f"Storage preference must be one of {valid}")
        return v.lower()

    @field_validator("REMOTE_SYNC_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """
    Factory function to get the application settings.

    This function enables dependency injection of settings in FastAPI.
    Tests construct their own Settings instances instead of mutating this one.

    Returns:
        The application settings instance
    """
    current_settings = Settings()
    logger.debug(f"Loaded settings for environment {current_settings.ENVIRONMENT}")
    return current_settings
