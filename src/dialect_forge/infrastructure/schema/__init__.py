"""Descriptor layer: column types, table/column/index definitions and the
model registry.

DDL generation lives in :mod:`dialect_forge.infrastructure.schema.ddl_generator`
and is imported explicitly, since it depends on the SQL dialect package.
"""

from .core import (
    UNSET,
    AttributeDef,
    IndexDef,
    ModelDef,
    ReferenceDef,
    TableName,
    is_schemable_default,
)
from .data_types import as_data_type
from .registry import get_model, list_models, register_model, unregister_model

__all__ = [
    "UNSET",
    "TableName",
    "ReferenceDef",
    "AttributeDef",
    "IndexDef",
    "ModelDef",
    "is_schemable_default",
    "as_data_type",
    "register_model",
    "unregister_model",
    "get_model",
    "list_models",
]
