"""Column type rendering for MySQL.

Every column type exposes ``to_sql(escape)`` plus the flags the compiler
relies on: ``is_large_object`` (TEXT/BLOB family) and ``is_binary``
(BINARY-flagged strings, BINARY/VARBINARY), which MySQL refuses a DEFAULT
for, and ``is_json``. Raw SQL strings and SQLAlchemy types are adapted to the
same interface by :func:`as_data_type`.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Optional, Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import mysql

from dialect_forge.exceptions import DescriptorError

EscapeFn = Callable[[Any], str]

_LARGE_OBJECT_RE = re.compile(
    r"^\s*(TINY|MEDIUM|LONG)?(TEXT|BLOB)\b", re.IGNORECASE
)
_JSON_RE = re.compile(r"^\s*JSON\b", re.IGNORECASE)
_BINARY_RE = re.compile(r"\b(VAR)?BINARY\b", re.IGNORECASE)


class DataType:
    """Base class for column types."""

    key: str = ""
    is_large_object: bool = False
    is_binary: bool = False
    is_json: bool = False

    def to_sql(self, escape: EscapeFn) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RawType(DataType):
    """A type given as literal SQL text, e.g. ``"VARCHAR(64)"``."""

    def __init__(self, sql: str):
        self.sql = sql
        self.key = sql.split("(")[0].strip().upper()
        self.is_large_object = bool(_LARGE_OBJECT_RE.match(sql))
        self.is_json = bool(_JSON_RE.match(sql))
        self.is_binary = bool(_BINARY_RE.search(sql))

    def to_sql(self, escape: EscapeFn) -> str:
        return self.sql

    def __repr__(self) -> str:
        return f"RawType({self.sql!r})"


def _with_length(name: str, *args: Optional[int]) -> str:
    present = [str(arg) for arg in args if arg is not None]
    if not present:
        return name
    return f"{name}({','.join(present)})"


class StringType(DataType):
    key = "STRING"

    def __init__(self, length: int = 255, binary: bool = False):
        self.length = length
        self.binary = binary
        self.is_binary = binary

    def to_sql(self, escape: EscapeFn) -> str:
        sql = f"VARCHAR({self.length})"
        return f"{sql} BINARY" if self.binary else sql


class CharType(StringType):
    key = "CHAR"

    def to_sql(self, escape: EscapeFn) -> str:
        sql = f"CHAR({self.length})"
        return f"{sql} BINARY" if self.binary else sql


class TextType(DataType):
    key = "TEXT"
    is_large_object = True
    _variants = {"tiny": "TINYTEXT", "medium": "MEDIUMTEXT", "long": "LONGTEXT"}

    def __init__(self, length: Optional[str] = None):
        if length is not None and length.lower() not in self._variants:
            raise DescriptorError(f"Unknown TEXT length {length!r}")
        self.length = length

    def to_sql(self, escape: EscapeFn) -> str:
        if self.length:
            return self._variants[self.length.lower()]
        return "TEXT"


class BlobType(TextType):
    key = "BLOB"
    _variants = {"tiny": "TINYBLOB", "medium": "MEDIUMBLOB", "long": "LONGBLOB"}

    def to_sql(self, escape: EscapeFn) -> str:
        if self.length:
            return self._variants[self.length.lower()]
        return "BLOB"


class IntegerType(DataType):
    key = "INTEGER"

    def __init__(
        self,
        length: Optional[int] = None,
        unsigned: bool = False,
        zerofill: bool = False,
    ):
        self.length = length
        self.unsigned = unsigned
        self.zerofill = zerofill

    def to_sql(self, escape: EscapeFn) -> str:
        sql = _with_length(self.key, self.length)
        if self.unsigned:
            sql += " UNSIGNED"
        if self.zerofill:
            sql += " ZEROFILL"
        return sql


class BigIntType(IntegerType):
    key = "BIGINT"


class FloatType(IntegerType):
    key = "FLOAT"

    def __init__(
        self,
        length: Optional[int] = None,
        decimals: Optional[int] = None,
        unsigned: bool = False,
        zerofill: bool = False,
    ):
        super().__init__(length, unsigned, zerofill)
        self.decimals = decimals

    def to_sql(self, escape: EscapeFn) -> str:
        sql = _with_length(self.key, self.length, self.decimals)
        if self.unsigned:
            sql += " UNSIGNED"
        if self.zerofill:
            sql += " ZEROFILL"
        return sql


class DoubleType(FloatType):
    key = "DOUBLE PRECISION"


class DecimalType(DataType):
    key = "DECIMAL"

    def __init__(self, precision: Optional[int] = None, scale: Optional[int] = None):
        self.precision = precision
        self.scale = scale

    def to_sql(self, escape: EscapeFn) -> str:
        if self.precision is None:
            return "DECIMAL"
        return _with_length("DECIMAL", self.precision, self.scale)


class BooleanType(DataType):
    key = "BOOLEAN"

    def to_sql(self, escape: EscapeFn) -> str:
        return "TINYINT(1)"


class DateType(DataType):
    key = "DATE"

    def to_sql(self, escape: EscapeFn) -> str:
        return "DATE"


class DateTimeType(DataType):
    key = "DATETIME"

    def __init__(self, fsp: Optional[int] = None):
        self.fsp = fsp

    def to_sql(self, escape: EscapeFn) -> str:
        return _with_length("DATETIME", self.fsp)


class TimeType(DataType):
    key = "TIME"

    def to_sql(self, escape: EscapeFn) -> str:
        return "TIME"


class JsonType(DataType):
    key = "JSON"
    is_json = True

    def to_sql(self, escape: EscapeFn) -> str:
        return "JSON"


class EnumType(DataType):
    key = "ENUM"

    def __init__(self, *values: str):
        if not values:
            raise DescriptorError("ENUM requires at least one value")
        self.values: Sequence[str] = values

    def to_sql(self, escape: EscapeFn) -> str:
        return f"ENUM({', '.join(escape(value) for value in self.values)})"


class UuidType(DataType):
    key = "UUID"

    def to_sql(self, escape: EscapeFn) -> str:
        return "CHAR(36) BINARY"


class DefaultMarker(DataType):
    """A default that is computed at write time, never rendered into DDL."""


class Now(DefaultMarker):
    key = "NOW"

    def to_sql(self, escape: EscapeFn) -> str:
        return "NOW"


class UuidV4(DefaultMarker):
    key = "UUIDV4"

    def to_sql(self, escape: EscapeFn) -> str:
        return "UUIDV4"


class SqlAlchemyType(DataType):
    """Adapter rendering a SQLAlchemy ``TypeEngine`` with the MySQL dialect."""

    _dialect = mysql.dialect()

    def __init__(self, type_engine: sa.types.TypeEngine):
        self.type_engine = type_engine
        self.key = type(type_engine).__name__.upper()
        self.is_json = isinstance(type_engine, sa.JSON)
        self.is_large_object = isinstance(type_engine, (sa.Text, sa.LargeBinary))
        self.is_binary = isinstance(type_engine, (sa.BINARY, sa.VARBINARY))

    def to_sql(self, escape: EscapeFn) -> str:
        return self.type_engine.compile(dialect=self._dialect)

    def __repr__(self) -> str:
        return f"SqlAlchemyType({self.type_engine!r})"


def as_data_type(value: Any) -> DataType:
    """Normalize any supported type representation into a DataType.

    Raises:
        DescriptorError: If ``value`` has no way to render itself to SQL
    """
    if isinstance(value, DataType):
        return value
    if isinstance(value, str):
        return RawType(value)
    if isinstance(value, sa.types.TypeEngine):
        return SqlAlchemyType(value)
    if isinstance(value, type):
        if issubclass(value, DataType) and value is not RawType:
            return value()
        if issubclass(value, sa.types.TypeEngine):
            return SqlAlchemyType(value())
    raise DescriptorError(f"Column type {value!r} has no SQL renderer")


__all__ = [
    "DataType",
    "RawType",
    "StringType",
    "CharType",
    "TextType",
    "BlobType",
    "IntegerType",
    "BigIntType",
    "FloatType",
    "DoubleType",
    "DecimalType",
    "BooleanType",
    "DateType",
    "DateTimeType",
    "TimeType",
    "JsonType",
    "EnumType",
    "UuidType",
    "DefaultMarker",
    "Now",
    "UuidV4",
    "SqlAlchemyType",
    "as_data_type",
]
