"""
SQL literal handling.

Provides the MySQL value escaper and the marker types that let callers
inject raw SQL fragments (``Literal``) or JSON-path conditions (``Json``)
into compiled statements.
"""

import json
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Mapping, Optional

_STRING_ESCAPES = str.maketrans(
    {
        "\0": "\\0",
        "\b": "\\b",
        "\t": "\\t",
        "\n": "\\n",
        "\r": "\\r",
        "\x1a": "\\Z",
        "\\": "\\\\",
        "'": "\\'",
        '"': '\\"',
    }
)


@dataclass(frozen=True)
class Literal:
    """A raw SQL fragment that is placed into statements verbatim."""

    val: str

    def __str__(self) -> str:
        return self.val


@dataclass(frozen=True)
class Json:
    """
    A JSON-path condition.

    Either ``conditions`` (a nested mapping whose leaves are compared with
    equality) or ``path`` (``"column.a.b"`` or a native ``->>`` expression)
    with an optional ``value``.
    """

    conditions: Optional[Mapping[str, Any]] = None
    path: Optional[str] = None
    value: Any = None


def escape_string(text: str) -> str:
    """
    Quote ``text`` as a MySQL string literal.

    Examples:
        >>> escape_string("O'Brien")
        "'O\\\\'Brien'"
    """
    return "'" + text.translate(_STRING_ESCAPES) + "'"


def _format_datetime(value: datetime) -> str:
    text = value.strftime("%Y-%m-%d %H:%M:%S")
    if value.microsecond:
        text += f".{value.microsecond:06d}"
    return text


def escape_value(value: Any) -> str:
    """
    Render a Python value as a MySQL literal.

    Args:
        value: Scalar, sequence, mapping, bytes or Literal

    Returns:
        SQL literal text

    Examples:
        >>> escape_value(None)
        'NULL'
        >>> escape_value(True)
        'true'
        >>> escape_value(42)
        '42'
        >>> escape_value([1, "a"])
        "1, 'a'"
        >>> escape_value(Literal("NOW()"))
        'NOW()'
    """
    if isinstance(value, Literal):
        return value.val
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, datetime):
        return escape_string(_format_datetime(value))
    if isinstance(value, date):
        return escape_string(value.strftime("%Y-%m-%d"))
    if isinstance(value, time):
        return escape_string(value.strftime("%H:%M:%S"))
    if isinstance(value, (bytes, bytearray)):
        return f"X'{bytes(value).hex()}'"
    if isinstance(value, (list, tuple)):
        return ", ".join(escape_value(item) for item in value)
    if isinstance(value, Mapping):
        return escape_string(json.dumps(value, separators=(",", ":")))
    return escape_string(str(value))


__all__ = [
    "Literal",
    "Json",
    "escape_string",
    "escape_value",
]
