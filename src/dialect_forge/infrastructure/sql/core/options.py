"""
Per-call option values for the statement compiler.

All option objects are frozen; when the compiler needs to hand derived
options to another assembler (e.g. upsert -> insert) it builds a fresh copy
with :func:`dataclasses.replace` and never touches the caller's instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Union

from dialect_forge.infrastructure.schema.core import (
    UNSET,
    AttributeDef,
    IndexDef,
    ModelDef,
    TableName,
)

from .literals import Literal

UniqueKeys = Union[Mapping[Union[str, int], IndexDef], Sequence[IndexDef]]


@dataclass(frozen=True)
class WhereOptions:
    """
    Options for predicate compilation.

    Attributes:
        model: Model used to resolve attribute types (JSON columns, dotted paths)
        prefix: Table name or raw ``Literal`` prefixed to column references
        json: ``False`` restricts JSON columns to containment checks
        field: Explicit attribute descriptor for the key
        type: Explicit column type for the key
    """

    model: Optional[ModelDef] = None
    prefix: Optional[Union[str, TableName, Literal]] = None
    json: Optional[bool] = None
    field: Optional[AttributeDef] = None
    type: Any = None


@dataclass(frozen=True)
class DeleteOptions:
    """Options for DELETE. ``limit`` left UNSET falls back to the configured default."""

    limit: Any = UNSET
    truncate: bool = False
    model: Optional[ModelDef] = None


@dataclass(frozen=True)
class InsertOptions:
    """Options for INSERT; ``on_duplicate`` is the clause after ``ON DUPLICATE KEY``."""

    on_duplicate: Optional[str] = None
    ignore_duplicates: bool = False


@dataclass(frozen=True)
class TableOptions:
    """Table-level options for CREATE TABLE.

    ``None`` for engine/charset/collate means "use the configured default".
    """

    engine: Optional[str] = None
    charset: Optional[str] = None
    collate: Optional[str] = None
    comment: Optional[str] = None
    initial_auto_increment: Optional[int] = None
    unique_keys: UniqueKeys = field(default_factory=dict)

    @classmethod
    def for_model(cls, model: ModelDef) -> "TableOptions":
        return cls(
            engine=model.engine,
            charset=model.charset,
            collate=model.collate,
            comment=model.comment,
            initial_auto_increment=model.initial_auto_increment,
            unique_keys=model.unique_keys(),
        )


__all__ = [
    "WhereOptions",
    "DeleteOptions",
    "InsertOptions",
    "TableOptions",
    "UniqueKeys",
]
