"""
Unit tests for SQL core utilities: identifiers, literals and condition tagging.
"""

from dataclasses import FrozenInstanceError
from datetime import date, datetime, time
from decimal import Decimal

import pytest

from dialect_forge.infrastructure.sql.core.conditions import (
    ConditionKind,
    ConditionValue,
    classify_condition,
    is_operator,
)
from dialect_forge.infrastructure.sql.core.identifier import (
    qualify_table,
    quote_identifier,
    quote_identifiers,
    underscore_name,
    unquote_identifier,
    wrap_single_quote,
)
from dialect_forge.infrastructure.sql.core.literals import (
    Literal,
    escape_string,
    escape_value,
)
from dialect_forge.infrastructure.sql.core.options import DeleteOptions, InsertOptions


@pytest.mark.unit
class TestQuoteIdentifier:
    """Tests for quote_identifier function."""

    def test_quote_ascii_column(self):
        """ASCII column names should be backtick-quoted."""
        assert quote_identifier("company_id") == "`company_id`"

    def test_quote_unicode_column(self):
        """Non-ASCII names are quoted the same way."""
        assert quote_identifier("年金计划号") == "`年金计划号`"

    def test_wildcard_passes_through(self):
        """``*`` is never quoted."""
        assert quote_identifier("*") == "*"

    def test_quote_with_internal_backtick(self):
        """Internal backticks should be doubled."""
        assert quote_identifier("column`name") == "`column``name`"

    @pytest.mark.parametrize(
        "name", ["users", "first name", "a`b", "``", "年金", "x.y", ""]
    )
    def test_round_trip(self, name):
        """Quoting then unquoting returns the original identifier."""
        quoted = quote_identifier(name)
        assert quoted.startswith("`") and quoted.endswith("`")
        assert unquote_identifier(quoted) == name

    def test_unquote_leaves_bare_names(self):
        assert unquote_identifier("users") == "users"

    def test_quote_identifiers_splits_on_dots(self):
        assert quote_identifiers("shop.users") == "`shop`.`users`"


@pytest.mark.unit
class TestQualifyTable:
    """Tests for qualify_table function."""

    def test_table_only(self):
        assert qualify_table("users") == "`users`"

    def test_schema_is_folded_into_one_identifier(self):
        """MySQL quotes schema and table together."""
        assert qualify_table("users", schema="shop") == "`shop.users`"

    def test_custom_delimiter(self):
        assert qualify_table("users", schema="shop", delimiter="_") == "`shop_users`"


@pytest.mark.unit
class TestNamingHelpers:
    """Tests for wrap_single_quote and underscore_name."""

    def test_wrap_single_quote_strips_quotes(self):
        assert wrap_single_quote("o'brien") == "'obrien'"

    def test_underscore_camel_case(self):
        assert underscore_name("UserAccounts_firstName") == "user_accounts_first_name"

    def test_underscore_dashes(self):
        assert underscore_name("order-items") == "order_items"

    def test_underscore_acronym(self):
        assert underscore_name("HTTPRequests") == "http_requests"


@pytest.mark.unit
class TestEscapeValue:
    """Tests for escape_value function."""

    def test_null(self):
        assert escape_value(None) == "NULL"

    def test_booleans(self):
        assert escape_value(True) == "true"
        assert escape_value(False) == "false"

    def test_numbers_are_bare(self):
        assert escape_value(42) == "42"
        assert escape_value(1.5) == "1.5"
        assert escape_value(Decimal("10.25")) == "10.25"

    def test_string_is_quoted(self):
        assert escape_value("abc") == "'abc'"

    def test_string_special_characters(self):
        """Quotes, backslashes and control characters are backslash-escaped."""
        assert escape_string("O'Brien") == "'O\\'Brien'"
        assert escape_string('say "hi"') == "'say \\\"hi\\\"'"
        assert escape_string("a\\b") == "'a\\\\b'"
        assert escape_string("line\nbreak\ttab") == "'line\\nbreak\\ttab'"
        assert escape_string("nul\0end") == "'nul\\0end'"
        assert escape_string("ctrl\x1az") == "'ctrl\\Zz'"

    def test_datetime(self):
        assert escape_value(datetime(2024, 1, 2, 3, 4, 5)) == "'2024-01-02 03:04:05'"

    def test_datetime_with_microseconds(self):
        value = datetime(2024, 1, 2, 3, 4, 5, 120)
        assert escape_value(value) == "'2024-01-02 03:04:05.000120'"

    def test_date_and_time(self):
        assert escape_value(date(2024, 1, 2)) == "'2024-01-02'"
        assert escape_value(time(13, 30)) == "'13:30:00'"

    def test_bytes(self):
        assert escape_value(b"\x01\xff") == "X'01ff'"

    def test_list_is_comma_joined(self):
        assert escape_value([1, "a", None]) == "1, 'a', NULL"

    def test_mapping_is_json_text(self):
        assert escape_value({"a": 1}) == "'{\\\"a\\\":1}'"

    def test_literal_is_raw(self):
        assert escape_value(Literal("NOW()")) == "NOW()"


@pytest.mark.unit
class TestClassifyCondition:
    """Tests for the condition value tagging."""

    def test_scalar(self):
        assert classify_condition(5).kind is ConditionKind.SCALAR
        assert classify_condition([1, 2]).kind is ConditionKind.SCALAR
        assert classify_condition(None).kind is ConditionKind.SCALAR

    def test_operator_map(self):
        assert classify_condition({"$gt": 1, "$lt": 5}).kind is ConditionKind.OPERATOR_MAP

    def test_empty_mapping_is_operator_map(self):
        assert classify_condition({}).kind is ConditionKind.OPERATOR_MAP

    def test_path_map(self):
        """Any plain key makes a path map."""
        assert classify_condition({"a": 1, "$gt": 2}).kind is ConditionKind.PATH_MAP

    def test_raw_literal(self):
        assert classify_condition(Literal("x")).kind is ConditionKind.RAW_LITERAL

    def test_already_classified_is_returned(self):
        value = ConditionValue(ConditionKind.SCALAR, 3)
        assert classify_condition(value) is value

    def test_is_mapping(self):
        assert classify_condition({"a": 1}).is_mapping
        assert not classify_condition("a").is_mapping

    def test_is_operator(self):
        assert is_operator("$eq")
        assert not is_operator("eq")
        assert not is_operator(1)


@pytest.mark.unit
class TestOptions:
    """Option values are immutable."""

    def test_insert_options_are_frozen(self):
        options = InsertOptions()
        with pytest.raises(FrozenInstanceError):
            options.on_duplicate = "UPDATE x"  # type: ignore[misc]

    def test_delete_limit_defaults_to_unset(self):
        assert not DeleteOptions().limit
        assert DeleteOptions().limit is not None
