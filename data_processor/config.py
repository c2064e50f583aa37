# =============================================================================
# data_processor/config.py - Processor Settings
# =============================================================================
# Loads configuration from environment variables using pydantic-settings.
#
# Usage:
#   from data_processor.config import get_settings
#   get_settings().PROCESSOR_DEFAULT_DELAY_MS
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The processor reads settings at call time, so tests can override a value
# and call get_settings.cache_clear().
# =============================================================================

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Processor settings loaded from environment variables.

    Only the default delays are configurable; explicit delay_ms arguments
    always win over these values.
    """

    # -------------------------------------------------------------------------
    # Delays
    # -------------------------------------------------------------------------

    PROCESSOR_DEFAULT_DELAY_MS: int = Field(
        default=100,
        ge=0,
        description="Default suspension (ms) for async transformations and results"
    )

    PROCESSOR_CREATE_DELAY_MS: int = Field(
        default=200,
        ge=0,
        description="Default suspension (ms) for create_processor_async"
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    DEBUG: bool = Field(
        default=False,
        description="Log at DEBUG level in scripts (every transformation is logged)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Returns:
        Settings: The processor settings instance
    """
    return Settings()
