"""Pytest configuration shared by the unit suites.

Every test starts from default settings (no DIALECT_FORGE_* overrides, no
.env file) and an empty model registry.
"""

from __future__ import annotations

import os
from typing import Iterator

import pytest

# Keep a developer's local .env out of the test run
os.environ.setdefault("DIALECT_FORGE_ENV_FILE", os.devnull)

from dialect_forge.config import get_settings
from dialect_forge.infrastructure.schema import registry
from dialect_forge.infrastructure.schema.core import AttributeDef, ModelDef
from dialect_forge.infrastructure.schema.data_types import JsonType
from dialect_forge.infrastructure.sql.dialects.mysql import MySQLQueryGenerator


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop env overrides and the cached Settings around every test."""
    for key in list(os.environ):
        if key.startswith("DIALECT_FORGE_") and key != "DIALECT_FORGE_ENV_FILE":
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _clean_registry() -> Iterator[None]:
    """Give each test an empty model registry."""
    saved = dict(registry._MODEL_REGISTRY)
    registry._MODEL_REGISTRY.clear()
    yield
    registry._MODEL_REGISTRY.clear()
    registry._MODEL_REGISTRY.update(saved)


@pytest.fixture
def generator() -> MySQLQueryGenerator:
    return MySQLQueryGenerator()


@pytest.fixture
def events_model() -> ModelDef:
    """A model with one JSON column and one plain column."""
    return ModelDef(
        name="events",
        attributes={
            "id": AttributeDef(type="INTEGER", primary_key=True, auto_increment=True),
            "data": AttributeDef(type=JsonType()),
            "name": AttributeDef(type="VARCHAR(255)"),
        },
    )
