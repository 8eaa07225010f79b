"""DDL SQL generation for model definitions.

Renders registered (or directly supplied) models into MySQL DDL using the
MySQL statement compiler.
"""

from __future__ import annotations

from typing import List, Optional, Union

from dialect_forge.infrastructure.sql.core.options import TableOptions
from dialect_forge.infrastructure.sql.dialects.mysql import MySQLQueryGenerator

from .core import ModelDef
from .registry import get_model

ModelRef = Union[str, ModelDef]


def _resolve(model: ModelRef) -> ModelDef:
    return get_model(model) if isinstance(model, str) else model


def generate_create_table_ddl(
    model: ModelRef, generator: Optional[MySQLQueryGenerator] = None
) -> str:
    """Generate just the CREATE TABLE statement.

    Primary keys and references come from the attribute descriptors; unique
    column groups and unique indexes become named UNIQUE clauses.
    """
    model = _resolve(model)
    generator = generator or MySQLQueryGenerator()
    return generator.create_table_query(
        model.table_ref, model.attributes, TableOptions.for_model(model)
    )


def generate_indexes_ddl(
    model: ModelRef, generator: Optional[MySQLQueryGenerator] = None
) -> List[str]:
    """Generate CREATE INDEX statements for the non-unique indexes."""
    model = _resolve(model)
    generator = generator or MySQLQueryGenerator()

    # unique indexes are part of CREATE TABLE
    return [
        generator.add_index_query(model.table_ref, index.fields, name=index.name)
        for index in model.indexes
        if not index.unique
    ]


def generate_create_table_sql(
    model: ModelRef, generator: Optional[MySQLQueryGenerator] = None
) -> str:
    """Generate a complete DDL script (drop, create, indexes) for a model."""
    model = _resolve(model)
    generator = generator or MySQLQueryGenerator()

    parts: List[str] = []
    parts.append(f"-- DDL for model: {model.name}")
    parts.append("")
    parts.append(generator.drop_table_query(model.table_ref))
    parts.append("")
    parts.append(generate_create_table_ddl(model, generator))

    indexes = generate_indexes_ddl(model, generator)
    if indexes:
        parts.append("")
        parts.extend(indexes)

    return "\n".join(parts)


__all__ = [
    "generate_create_table_sql",
    "generate_create_table_ddl",
    "generate_indexes_ddl",
]
