"""
Unit tests for table, column and index descriptors and the model registry.
"""

import copy

import pytest

from dialect_forge.infrastructure.schema import registry
from dialect_forge.infrastructure.schema.core import (
    UNSET,
    AttributeDef,
    IndexDef,
    ModelDef,
    ReferenceDef,
    TableName,
    is_schemable_default,
    table_name_text,
)
from dialect_forge.infrastructure.schema.data_types import Now, RawType, UuidV4


@pytest.mark.unit
class TestUnset:
    def test_falsy_and_distinct_from_none(self):
        assert not UNSET
        assert UNSET is not None
        assert repr(UNSET) == "UNSET"

    def test_copies_keep_identity(self):
        assert copy.copy(UNSET) is UNSET
        assert copy.deepcopy({"default": UNSET})["default"] is UNSET


@pytest.mark.unit
class TestSchemableDefault:
    @pytest.mark.parametrize("value", [0, "", None, False, "abc"])
    def test_static_values(self, value):
        assert is_schemable_default(value)

    @pytest.mark.parametrize("value", [UNSET, Now(), Now, UuidV4, lambda: 1])
    def test_dynamic_values(self, value):
        assert not is_schemable_default(value)


@pytest.mark.unit
class TestTableName:
    def test_str(self):
        assert str(TableName("users")) == "users"
        assert str(TableName("users", schema="shop")) == "shop.users"

    def test_table_name_text(self):
        assert table_name_text(TableName("users", schema="shop")) == "users"
        assert table_name_text({"tableName": "orgs"}) == "orgs"
        assert table_name_text({"table_name": "orgs", "schema": "shop"}) == "orgs"
        assert table_name_text("plain") == "plain"


@pytest.mark.unit
class TestAttributeDef:
    def test_coerce_bare_type(self):
        attribute = AttributeDef.coerce("INT")
        assert attribute.type == "INT"
        assert attribute.default_value is UNSET
        assert isinstance(attribute.data_type, RawType)

    def test_coerce_mapping(self):
        attribute = AttributeDef.coerce({"type": "INT", "allow_null": False})
        assert attribute.allow_null is False

    def test_coerce_returns_existing(self):
        attribute = AttributeDef(type="INT")
        assert AttributeDef.coerce(attribute) is attribute

    def test_reference_shorthand(self):
        attribute = AttributeDef(type="INT", references="users")
        assert attribute.references == ReferenceDef(model="users")
        assert attribute.references.target_key == "id"

    def test_reference_mapping(self):
        attribute = AttributeDef(type="INT", references={"model": "users", "key": "uid"})
        assert attribute.references.target_key == "uid"

    def test_bad_reference_raises(self):
        with pytest.raises(TypeError):
            ReferenceDef.coerce(5)


@pytest.mark.unit
class TestModelDef:
    @pytest.fixture
    def model(self):
        return ModelDef(
            name="users",
            attributes={
                "id": AttributeDef(type="INTEGER", primary_key=True, auto_increment=True),
                "email": AttributeDef(type="VARCHAR(255)", unique=True),
                "firstName": AttributeDef(type="VARCHAR(64)", field="first_name", unique="uq_name"),
                "lastName": {"type": "VARCHAR(64)", "field": "last_name", "unique": "uq_name"},
            },
            indexes=[
                IndexDef(fields=["a", "b"], unique=True),
                IndexDef(fields=["c"]),
            ],
        )

    def test_attributes_are_coerced(self, model):
        assert isinstance(model.attributes["lastName"], AttributeDef)

    def test_table_ref_defaults_to_name(self, model):
        assert model.table_ref == "users"

    def test_get_attribute_by_key_or_field(self, model):
        assert model.get_attribute("firstName") is model.attributes["firstName"]
        assert model.get_attribute("first_name") is model.attributes["firstName"]
        assert model.get_attribute("missing") is None

    def test_column_name(self, model):
        assert model.column_name("firstName") == "first_name"
        assert model.column_name("email") == "email"

    def test_key_helpers(self, model):
        assert model.primary_keys() == ["id"]
        assert model.auto_increment_fields() == ["id"]

    def test_unique_keys(self, model):
        keys = model.unique_keys()

        assert keys["users_email_unique"].single_field
        assert keys["users_email_unique"].fields == ["email"]
        assert keys["uq_name"].fields == ["first_name", "last_name"]
        assert not keys["uq_name"].single_field
        # unnamed unique index keeps its position
        assert keys[0].fields == ["a", "b"]
        assert len(keys) == 3


@pytest.mark.unit
class TestRegistry:
    def test_register_and_get(self):
        model = ModelDef(name="users", attributes={"id": "INT"})
        registry.register_model(model)

        assert registry.get_model("users") is model
        assert registry.list_models() == ["users"]

    def test_duplicate_raises(self):
        registry.register_model(ModelDef(name="users"))
        with pytest.raises(ValueError, match="already registered"):
            registry.register_model(ModelDef(name="users"))

    def test_unknown_raises(self):
        with pytest.raises(KeyError, match="not found"):
            registry.get_model("nope")

    def test_unregister(self):
        registry.register_model(ModelDef(name="users"))
        registry.unregister_model("users")
        registry.unregister_model("users")
        assert registry.list_models() == []
