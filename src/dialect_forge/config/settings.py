"""
Configuration management for dialect_forge.

This module provides environment-based configuration using Pydantic BaseSettings,
so statement defaults (storage engine, charset, delete limit) and logging
behaviour can be tuned per deployment without touching calling code.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("DIALECT_FORGE_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are automatically loaded with the DIALECT_FORGE_
    prefix. For example, DIALECT_FORGE_DEFAULT_ENGINE overrides the
    default_engine setting.

    Fields without prefix:
    - LOG_LEVEL: Logging level (uppercase)
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    # CREATE TABLE defaults
    default_engine: str = Field(
        default="InnoDB", description="Storage engine used when none is given"
    )
    default_charset: Optional[str] = Field(
        default=None, description="DEFAULT CHARSET used when none is given"
    )
    default_collate: Optional[str] = Field(
        default=None, description="COLLATE used when none is given"
    )

    # DELETE defaults
    default_delete_limit: Optional[int] = Field(
        default=1,
        description="LIMIT applied to DELETE when the caller leaves it unset",
    )

    # SQL logging
    log_sql: bool = Field(
        default=False, description="Emit a debug event for every compiled statement"
    )
    log_sql_max_length: int = Field(
        default=500, description="Truncate logged SQL to this many characters"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("default_delete_limit")
    @classmethod
    def _non_negative_limit(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("default_delete_limit must be >= 0")
        return value

    model_config = SettingsConfigDict(
        env_prefix="DIALECT_FORGE_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are loaded once and reused across
    the application lifecycle.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
