"""
SQL INSERT statement builders.

Provides high-level builders for constructing INSERT statements
with upsert (INSERT ... ON DUPLICATE KEY UPDATE) support.
"""

from typing import Any, Iterable, List, Mapping, Optional, Protocol

from dialect_forge.infrastructure.schema.core import AttributeDef

from ..core.options import InsertOptions


class Dialect(Protocol):
    """Protocol for SQL dialects."""

    name: str

    def insert_query(
        self,
        table: Any,
        values: Mapping[str, Any],
        attributes: Optional[Mapping[str, AttributeDef]] = None,
        options: Optional[InsertOptions] = None,
    ) -> str: ...
    def upsert_query(
        self,
        table: Any,
        insert_values: Mapping[str, Any],
        update_values: Iterable[str],
        where: Any = None,
        attributes: Optional[Mapping[str, AttributeDef]] = None,
        options: Optional[InsertOptions] = None,
    ) -> str: ...


class InsertBuilder:
    """
    High-level builder for INSERT statements.

    Example:
        >>> from dialect_forge.infrastructure.sql import InsertBuilder, MySQLQueryGenerator
        >>> builder = InsertBuilder(MySQLQueryGenerator())
        >>> print(builder.upsert("users", {"id": 1, "name": "Ada"}, ["name"]))
        INSERT INTO `users` (`id`, `name`) VALUES (1, 'Ada') ON DUPLICATE KEY UPDATE `name`=VALUES(`name`);
    """

    def __init__(self, dialect: Dialect):
        """
        Initialize the InsertBuilder.

        Args:
            dialect: SQL dialect to use for statement generation
        """
        self.dialect = dialect

    def insert(
        self,
        table: Any,
        values: Mapping[str, Any],
        attributes: Optional[Mapping[str, AttributeDef]] = None,
        ignore_duplicates: bool = False,
    ) -> str:
        """
        Build a single-row INSERT statement.

        Args:
            table: Table name
            values: Column -> value
            attributes: Attribute descriptors (optional)
            ignore_duplicates: Emit INSERT IGNORE

        Returns:
            INSERT SQL statement
        """
        options = InsertOptions(ignore_duplicates=ignore_duplicates)
        return self.dialect.insert_query(table, values, attributes, options)

    def upsert(
        self,
        table: Any,
        values: Mapping[str, Any],
        update_columns: Optional[List[str]] = None,
        attributes: Optional[Mapping[str, AttributeDef]] = None,
    ) -> str:
        """
        Build an INSERT ... ON DUPLICATE KEY UPDATE (upsert) statement.

        Args:
            table: Table name
            values: Column -> value to insert
            update_columns: Columns to update on conflict
            attributes: Attribute descriptors (optional)

        Returns:
            Upsert SQL statement
        """
        if not update_columns:
            # Default: update every inserted column that is not a primary key
            primary_keys = {
                key
                for key, attribute in (attributes or {}).items()
                if AttributeDef.coerce(attribute).primary_key
            }
            update_columns = [c for c in values if c not in primary_keys]
        return self.dialect.upsert_query(
            table, values, update_columns, attributes=attributes
        )
