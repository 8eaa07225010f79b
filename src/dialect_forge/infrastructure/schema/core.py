"""Core descriptor types for table, column and index definitions.

Descriptors are plain dataclasses built by the caller and consumed by the
statement compiler. They carry primary-key and reference information as
structured fields so table DDL never has to re-derive intent from rendered
SQL text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .data_types import DataType, DefaultMarker, as_data_type


class _Unset:
    """Sentinel for "not provided", distinct from an explicit ``None``."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_Unset":
        return self


UNSET: Any = _Unset()


def is_schemable_default(value: Any) -> bool:
    """Whether ``value`` can be written into DDL as a static DEFAULT literal."""
    if value is UNSET:
        return False
    if isinstance(value, DefaultMarker):
        return False
    if isinstance(value, type) and issubclass(value, DefaultMarker):
        return False
    return not callable(value)


@dataclass(frozen=True)
class TableName:
    """A table reference, optionally qualified by a schema."""

    table_name: str
    schema: Optional[str] = None
    delimiter: str = "."

    def __str__(self) -> str:
        if self.schema:
            return f"{self.schema}{self.delimiter}{self.table_name}"
        return self.table_name


TableRef = Union[str, TableName]


def table_name_text(table: Any) -> str:
    """Return the bare (unqualified) name of a table reference."""
    if isinstance(table, TableName):
        return table.table_name
    if isinstance(table, Mapping):
        return str(table.get("table_name") or table.get("tableName"))
    return str(table)


@dataclass(frozen=True)
class ReferenceDef:
    """Foreign-key target of a column."""

    model: TableRef
    key: Optional[str] = None

    @property
    def target_key(self) -> str:
        return self.key or "id"

    @classmethod
    def coerce(cls, value: Any) -> "ReferenceDef":
        """Normalize a table name, mapping or ReferenceDef into a ReferenceDef."""
        if isinstance(value, ReferenceDef):
            return value
        if isinstance(value, (str, TableName)):
            return cls(model=value)
        if isinstance(value, Mapping):
            return cls(model=value["model"], key=value.get("key"))
        raise TypeError(f"Cannot build a reference from {value!r}")


@dataclass
class AttributeDef:
    """Definition of a single column.

    ``unique`` is either ``True`` (inline UNIQUE) or the name of a composite
    unique group shared with other columns. ``unique`` and ``primary_key``
    are independent flags.
    """

    type: Any
    allow_null: Optional[bool] = None
    default_value: Any = UNSET
    auto_increment: bool = False
    unique: Union[bool, str] = False
    primary_key: bool = False
    after: Optional[str] = None
    references: Optional[ReferenceDef] = None
    on_delete: Optional[str] = None
    on_update: Optional[str] = None
    field: Optional[str] = None

    def __post_init__(self) -> None:
        if self.references is not None:
            self.references = ReferenceDef.coerce(self.references)

    @property
    def data_type(self) -> DataType:
        return as_data_type(self.type)

    @classmethod
    def coerce(cls, value: Any) -> "AttributeDef":
        """Promote a bare type (string, DataType, SQLAlchemy type) to a descriptor."""
        if isinstance(value, AttributeDef):
            return value
        if isinstance(value, Mapping):
            return cls(**value)
        return cls(type=value)


@dataclass(frozen=True)
class IndexDef:
    """Definition of a database index."""

    fields: List[str]
    unique: bool = False
    name: Optional[str] = None
    single_field: bool = False


@dataclass
class ModelDef:
    """Complete definition of a table-backed model."""

    name: str
    attributes: Dict[str, AttributeDef] = field(default_factory=dict)
    table: Optional[TableRef] = None
    indexes: List[IndexDef] = field(default_factory=list)
    engine: Optional[str] = None
    charset: Optional[str] = None
    collate: Optional[str] = None
    comment: Optional[str] = None
    initial_auto_increment: Optional[int] = None

    def __post_init__(self) -> None:
        self.attributes = {
            key: AttributeDef.coerce(value) for key, value in self.attributes.items()
        }

    @property
    def table_ref(self) -> TableRef:
        return self.table if self.table is not None else self.name

    def get_attribute(self, key: str) -> Optional[AttributeDef]:
        """Resolve an attribute by its key, falling back to its column name."""
        if key in self.attributes:
            return self.attributes[key]
        for attribute in self.attributes.values():
            if attribute.field == key:
                return attribute
        return None

    def column_name(self, key: str) -> str:
        attribute = self.attributes.get(key)
        if attribute is not None and attribute.field:
            return attribute.field
        return key

    def primary_keys(self) -> List[str]:
        return [key for key, attr in self.attributes.items() if attr.primary_key]

    def auto_increment_fields(self) -> List[str]:
        return [key for key, attr in self.attributes.items() if attr.auto_increment]

    def unique_keys(self) -> Dict[Union[str, int], IndexDef]:
        """Collect unique keys from column flags and unique indexes.

        Columns with ``unique=True`` produce single-field keys (rendered inline
        on the column); columns sharing a ``unique`` group name are merged into
        one composite key.
        """
        table = table_name_text(self.table_ref)
        keys: Dict[Union[str, int], IndexDef] = {}
        groups: Dict[str, List[str]] = {}
        for key, attribute in self.attributes.items():
            column = self.column_name(key)
            if attribute.unique is True:
                name = f"{table}_{column}_unique"
                keys[name] = IndexDef(
                    fields=[column], unique=True, name=name, single_field=True
                )
            elif isinstance(attribute.unique, str) and attribute.unique:
                groups.setdefault(attribute.unique, []).append(column)

        for name, columns in groups.items():
            keys[name] = IndexDef(fields=columns, unique=True, name=name)

        for position, index in enumerate(self.indexes):
            if index.unique:
                # unnamed indexes keep a positional key and are auto-named later
                keys[index.name or position] = index
        return keys


__all__ = [
    "UNSET",
    "is_schemable_default",
    "TableName",
    "TableRef",
    "table_name_text",
    "ReferenceDef",
    "AttributeDef",
    "IndexDef",
    "ModelDef",
]
