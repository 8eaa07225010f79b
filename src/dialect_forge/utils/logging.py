"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Automatic sanitization of sensitive fields
- Truncation of long SQL text attached to events
- Context binding support

Configuration is loaded from dialect_forge.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- DIALECT_FORGE_LOG_SQL_MAX_LENGTH: Maximum length of a logged ``sql`` field

Usage:
    >>> from dialect_forge.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("sql.compiled", statement="delete", table="users")
"""

import logging
import os
import re
from typing import Any, Dict, MutableMapping

import structlog
from structlog.types import EventDict, Processor

from dialect_forge.config import get_settings

# Sensitive key patterns for sanitization
SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r"^DATABASE_URL$", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"
TRUNCATION_MARKER = "...[truncated]"
SQL_EVENT_KEYS = ("sql", "fragment")


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values from a dictionary before logging.

    Redacts values for keys matching password, token, secret
    (case-insensitive, substring match) and DATABASE_URL (exact match).

    Args:
        data: Dictionary that may contain sensitive data

    Returns:
        New dictionary with sensitive values replaced by [REDACTED]

    Example:
        >>> sanitize_for_logging({"password": "secret123", "user": "admin"})
        {"password": "[REDACTED]", "user": "admin"}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def truncate_sql(text: str, max_length: int) -> str:
    """Shorten ``text`` to ``max_length`` characters plus a marker."""
    if max_length <= 0 or len(text) <= max_length:
        return text
    return text[:max_length] + TRUNCATION_MARKER


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that sanitizes sensitive fields in event_dict."""
    return sanitize_for_logging(dict(event_dict))


def sql_truncation_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that caps the size of SQL text carried by events."""
    max_length = _get_sql_max_length()
    for key in SQL_EVENT_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str):
            event_dict[key] = truncate_sql(value, max_length)
    return event_dict


def _get_log_level() -> int:
    """Get log level from settings, falling back to the environment."""
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except Exception:
        # Settings may fail validation on a broken .env; logging must still work
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _get_sql_max_length() -> int:
    try:
        return get_settings().log_sql_max_length
    except Exception:
        return 500


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering and sanitization.

    Sets up:
    - ISO-8601 timestamps
    - Logger name
    - Log level
    - JSON renderer
    - Sanitization and SQL truncation processors
    """
    logging.basicConfig(
        format="%(message)s",
        level=_get_log_level(),
        handlers=[],
    )

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(_get_log_level())
    logging.root.addHandler(stdout_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        sql_truncation_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering and sanitization

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("sql.compiled", statement="create_table", table="users")
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(dialect="mysql", table="users")
        >>> logger.info("sql.compiled", statement="delete")
    """
    return structlog.get_logger().bind(**kwargs)
