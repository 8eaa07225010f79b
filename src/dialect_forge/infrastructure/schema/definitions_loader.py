"""
Model definitions loaded from YAML.

A definitions file declares tables, their columns and indexes so DDL can be
generated without writing descriptors in Python:

.. code-block:: yaml

    models:
      users:
        table: users
        charset: utf8mb4
        attributes:
          id: {type: INTEGER, primary_key: true, auto_increment: true}
          email: {type: VARCHAR(255), allow_null: false, unique: true}
          profile: JSON
          org_id:
            type: INTEGER
            references: {model: orgs, key: id}
            on_delete: cascade
        indexes:
          - fields: [email, org_id]
            unique: true

The file is validated with pydantic before any descriptor is built.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from dialect_forge.exceptions import ModelDefinitionError
from dialect_forge.utils.logging import get_logger

from .core import UNSET, AttributeDef, IndexDef, ModelDef, ReferenceDef, TableName
from .registry import register_model

logger = get_logger(__name__)


class ReferenceConfig(BaseModel):
    """Schema for a column's foreign-key target."""

    model: str = Field(..., description="Referenced table")
    key: Optional[str] = Field(None, description="Referenced column (default: id)")
    schema_name: Optional[str] = Field(None, alias="schema")


class AttributeConfig(BaseModel):
    """Schema for one column."""

    type: str = Field(..., min_length=1, description="SQL column type")
    allow_null: Optional[bool] = None
    default_value: Any = Field(UNSET, alias="default")
    auto_increment: bool = False
    unique: Union[bool, str] = False
    primary_key: bool = False
    after: Optional[str] = None
    references: Optional[ReferenceConfig] = None
    on_delete: Optional[str] = None
    on_update: Optional[str] = None
    field: Optional[str] = None

    model_config = {"populate_by_name": True}

    @field_validator("references", mode="before")
    @classmethod
    def expand_reference_shorthand(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"model": value}
        return value


class IndexConfig(BaseModel):
    """Schema for one index."""

    fields: List[str] = Field(..., min_length=1)
    unique: bool = False
    name: Optional[str] = None


class ModelConfig(BaseModel):
    """Schema for one model (table)."""

    table: Optional[str] = None
    schema_name: Optional[str] = Field(None, alias="schema")
    attributes: Dict[str, AttributeConfig] = Field(..., min_length=1)
    indexes: List[IndexConfig] = Field(default_factory=list)
    engine: Optional[str] = None
    charset: Optional[str] = None
    collate: Optional[str] = None
    comment: Optional[str] = None
    initial_auto_increment: Optional[int] = Field(None, ge=1)

    model_config = {"populate_by_name": True}

    @field_validator("attributes", mode="before")
    @classmethod
    def expand_type_shorthand(cls, value: Any) -> Any:
        """Allow ``column: TYPE`` as shorthand for ``column: {type: TYPE}``."""
        if isinstance(value, dict):
            return {
                key: {"type": item} if isinstance(item, str) else item
                for key, item in value.items()
            }
        return value


class ModelDefinitionsFile(BaseModel):
    """Schema for a complete definitions file."""

    models: Dict[str, ModelConfig] = Field(..., min_length=1)


def _table_ref(name: str, schema: Optional[str]) -> Union[str, TableName]:
    return TableName(name, schema=schema) if schema else name


def _to_model_def(name: str, config: ModelConfig) -> ModelDef:
    attributes = {}
    for key, attribute in config.attributes.items():
        references = None
        if attribute.references is not None:
            references = ReferenceDef(
                model=_table_ref(attribute.references.model, attribute.references.schema_name),
                key=attribute.references.key,
            )
        attributes[key] = AttributeDef(
            type=attribute.type,
            allow_null=attribute.allow_null,
            default_value=attribute.default_value,
            auto_increment=attribute.auto_increment,
            unique=attribute.unique,
            primary_key=attribute.primary_key,
            after=attribute.after,
            references=references,
            on_delete=attribute.on_delete,
            on_update=attribute.on_update,
            field=attribute.field,
        )

    return ModelDef(
        name=name,
        attributes=attributes,
        table=_table_ref(config.table or name, config.schema_name),
        indexes=[
            IndexDef(fields=index.fields, unique=index.unique, name=index.name)
            for index in config.indexes
        ],
        engine=config.engine,
        charset=config.charset,
        collate=config.collate,
        comment=config.comment,
        initial_auto_increment=config.initial_auto_increment,
    )


def load_model_definitions(
    path: Union[str, Path], register: bool = False
) -> List[ModelDef]:
    """
    Load and validate a YAML model definitions file.

    Args:
        path: Path to the YAML file
        register: Also add every model to the model registry

    Returns:
        Model definitions in file order

    Raises:
        ModelDefinitionError: If the file is missing, is not valid YAML or
            fails validation
    """
    config_path = Path(path)

    if not config_path.exists():
        raise ModelDefinitionError(f"Model definitions file not found: {path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ModelDefinitionError(f"Invalid YAML in model definitions: {e}") from e

    if not isinstance(data, dict):
        raise ModelDefinitionError("Model definitions must be a mapping")

    try:
        definitions = ModelDefinitionsFile(**data)
    except ValidationError as e:
        raise ModelDefinitionError(f"Model definitions validation failed: {e}") from e

    models = [_to_model_def(name, config) for name, config in definitions.models.items()]

    if register:
        for model in models:
            register_model(model)

    logger.info(
        "schema.definitions_loaded",
        path=str(config_path),
        models=[model.name for model in models],
    )
    return models


__all__ = [
    "ReferenceConfig",
    "AttributeConfig",
    "IndexConfig",
    "ModelConfig",
    "ModelDefinitionsFile",
    "load_model_definitions",
]
