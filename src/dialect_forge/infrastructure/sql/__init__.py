"""
SQL module for MySQL statement compilation.

This module provides the MySQL statement compiler along with the identifier
quoting, literal escaping and option types it is built from.
"""

from .core.identifier import qualify_table, quote_identifier
from .core.literals import Json, Literal, escape_value
from .core.options import DeleteOptions, InsertOptions, TableOptions, WhereOptions
from .dialects.abstract import AbstractQueryGenerator
from .dialects.mysql import MySQLQueryGenerator
from .operations.insert import InsertBuilder

__all__ = [
    "quote_identifier",
    "qualify_table",
    "escape_value",
    "Literal",
    "Json",
    "WhereOptions",
    "DeleteOptions",
    "InsertOptions",
    "TableOptions",
    "AbstractQueryGenerator",
    "MySQLQueryGenerator",
    "InsertBuilder",
]
