"""
Unit tests for the InsertBuilder.
"""

import pytest

from dialect_forge.infrastructure.schema.core import AttributeDef
from dialect_forge.infrastructure.sql.dialects.mysql import MySQLQueryGenerator
from dialect_forge.infrastructure.sql.operations.insert import InsertBuilder


@pytest.mark.unit
class TestInsertBuilder:
    """Tests for InsertBuilder class."""

    @pytest.fixture
    def builder(self):
        return InsertBuilder(MySQLQueryGenerator())

    def test_insert(self, builder):
        sql = builder.insert("users", {"id": 1, "name": "Ada"})
        assert sql == "INSERT INTO `users` (`id`, `name`) VALUES (1, 'Ada');"

    def test_insert_ignore(self, builder):
        sql = builder.insert("users", {"id": 1}, ignore_duplicates=True)
        assert sql.startswith("INSERT IGNORE INTO `users`")

    def test_upsert_explicit_columns(self, builder):
        sql = builder.upsert("users", {"id": 1, "name": "Ada"}, ["name"])
        assert sql == (
            "INSERT INTO `users` (`id`, `name`) VALUES (1, 'Ada') "
            "ON DUPLICATE KEY UPDATE `name`=VALUES(`name`);"
        )

    def test_upsert_defaults_to_non_key_columns(self, builder):
        attributes = {
            "id": AttributeDef(type="INTEGER", primary_key=True),
            "name": AttributeDef(type="VARCHAR(64)"),
            "email": {"type": "VARCHAR(255)"},
        }
        sql = builder.upsert(
            "users", {"id": 1, "name": "Ada", "email": "a@x"}, attributes=attributes
        )
        assert sql.endswith(
            "ON DUPLICATE KEY UPDATE `name`=VALUES(`name`), `email`=VALUES(`email`);"
        )
        assert "`id`=VALUES" not in sql

    def test_upsert_without_attributes_updates_everything(self, builder):
        sql = builder.upsert("t", {"a": 1, "b": 2})
        assert sql.count("=VALUES(") == 2
