"""Configuration management for dialect_forge.

This module provides centralized configuration loaded from environment variables
with validation using Pydantic BaseSettings.

Usage:
    >>> from dialect_forge.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.default_engine)
"""

from dialect_forge.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
