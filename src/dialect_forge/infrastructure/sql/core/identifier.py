"""
SQL identifier handling utilities.

Provides functions for quoting and qualifying MySQL identifiers (table,
column and index names) and for deriving generated constraint names.
"""

import re
from typing import Optional

QUOTE_CHAR = "`"


def quote_identifier(name: str) -> str:
    """
    Quote a SQL identifier (table or column name) with backticks.

    The wildcard ``*`` is returned unquoted.

    Args:
        name: The identifier to quote

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("company_id")
        '`company_id`'
        >>> quote_identifier("column`name")
        '`column``name`'
        >>> quote_identifier("*")
        '*'
    """
    if name == "*":
        return name
    escaped = name.replace(QUOTE_CHAR, QUOTE_CHAR * 2)
    return f"{QUOTE_CHAR}{escaped}{QUOTE_CHAR}"


def unquote_identifier(quoted: str) -> str:
    """
    Reverse :func:`quote_identifier`.

    Examples:
        >>> unquote_identifier("`column``name`")
        'column`name'
    """
    if len(quoted) >= 2 and quoted[0] == QUOTE_CHAR and quoted[-1] == QUOTE_CHAR:
        return quoted[1:-1].replace(QUOTE_CHAR * 2, QUOTE_CHAR)
    return quoted


def quote_identifiers(name: str) -> str:
    """
    Quote every dot-separated part of a dotted identifier.

    Examples:
        >>> quote_identifiers("shop.users")
        '`shop`.`users`'
    """
    return ".".join(quote_identifier(part) for part in name.split("."))


def qualify_table(
    table: str, schema: Optional[str] = None, delimiter: str = "."
) -> str:
    """
    Create one quoted table reference with an optional schema prefix.

    MySQL has no schemas inside a database, so the schema is folded into the
    table name and the whole reference is quoted once.

    Args:
        table: Table name
        schema: Optional schema name
        delimiter: Separator between schema and table name

    Returns:
        Qualified table name

    Examples:
        >>> qualify_table("users")
        '`users`'
        >>> qualify_table("users", schema="shop")
        '`shop.users`'
    """
    if schema:
        return quote_identifier(f"{schema}{delimiter}{table}")
    return quote_identifier(table)


def wrap_single_quote(text: str) -> str:
    """
    Wrap ``text`` in single quotes, dropping any single quotes inside it.

    Used for the information-schema metadata queries, which compare against
    names rather than user data.

    Examples:
        >>> wrap_single_quote("users")
        "'users'"
    """
    return "'" + text.replace("'", "") + "'"


def underscore_name(word: str) -> str:
    """
    Convert CamelCase or dashed text to snake case.

    Examples:
        >>> underscore_name("UserAccounts_firstName")
        'user_accounts_first_name'
        >>> underscore_name("order-items")
        'order_items'
    """
    word = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", word)
    word = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", word)
    word = word.replace("-", "_")
    return word.lower()
