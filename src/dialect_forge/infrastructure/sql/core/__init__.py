"""Core SQL utilities package."""

from .conditions import ConditionKind, ConditionValue, classify_condition
from .identifier import (
    qualify_table,
    quote_identifier,
    quote_identifiers,
    underscore_name,
    unquote_identifier,
    wrap_single_quote,
)
from .literals import Json, Literal, escape_value
from .options import DeleteOptions, InsertOptions, TableOptions, WhereOptions

__all__ = [
    "quote_identifier",
    "unquote_identifier",
    "quote_identifiers",
    "qualify_table",
    "wrap_single_quote",
    "underscore_name",
    "Literal",
    "Json",
    "escape_value",
    "ConditionKind",
    "ConditionValue",
    "classify_condition",
    "WhereOptions",
    "DeleteOptions",
    "InsertOptions",
    "TableOptions",
]
