"""
Dialect-independent SQL generation.

Implements the generic where-clause compiler (comparisons, ranges, sets and
logical combinators) and the INSERT assembler. Dialect generators extend
this class and override the pieces their database expresses differently.
"""

import json
from typing import Any, List, Mapping, Optional

from dialect_forge.config import Settings, get_settings
from dialect_forge.exceptions import (
    DescriptorError,
    QueryGenerationError,
    UnsupportedPredicateError,
)
from dialect_forge.infrastructure.schema.core import (
    AttributeDef,
    TableName,
    table_name_text,
)
from dialect_forge.utils.logging import get_logger

from ..core.conditions import ConditionKind, classify_condition, is_operator
from ..core.identifier import (
    qualify_table,
    quote_identifier,
    quote_identifiers,
)
from ..core.literals import Literal, escape_value
from ..core.options import InsertOptions, WhereOptions

logger = get_logger(__name__)


class AbstractQueryGenerator:
    """Generic statement shapes shared by every dialect."""

    name = "abstract"

    supports_on_duplicate_key = False
    supports_insert_ignore = False
    supports_default_keyword = True

    COMPARATORS = {
        "$eq": "=",
        "$ne": "!=",
        "$gt": ">",
        "$gte": ">=",
        "$lt": "<",
        "$lte": "<=",
        "$like": "LIKE",
        "$notLike": "NOT LIKE",
        "$in": "IN",
        "$notIn": "NOT IN",
        "$between": "BETWEEN",
        "$notBetween": "NOT BETWEEN",
        "$is": "IS",
        "$not": "!=",
        "$regexp": "REGEXP",
        "$notRegexp": "NOT REGEXP",
    }
    COMBINATORS = {"$or": " OR ", "$and": " AND "}

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    # ------------------------------------------------------------------
    # Quoting and escaping
    # ------------------------------------------------------------------

    def quote_identifier(self, identifier: str) -> str:
        return quote_identifier(identifier)

    def quote_identifiers(self, identifiers: str) -> str:
        return quote_identifiers(identifiers)

    def quote_table(self, table: Any) -> str:
        """Resolve a table reference into one quoted SQL reference."""
        if isinstance(table, Literal):
            return table.val
        if isinstance(table, TableName):
            return qualify_table(table.table_name, table.schema, table.delimiter)
        if isinstance(table, Mapping):
            return qualify_table(
                table_name_text(table),
                table.get("schema"),
                table.get("delimiter", "."),
            )
        return self.quote_identifier(str(table))

    def escape(self, value: Any) -> str:
        return escape_value(value)

    def handle_literal(self, smth: Any) -> str:
        """Render a raw-SQL marker."""
        if isinstance(smth, Literal):
            return smth.val
        raise QueryGenerationError(f"Cannot render {smth!r} as SQL")

    def _attribute(
        self, attributes: Optional[Mapping[str, Any]], key: str
    ) -> Optional[AttributeDef]:
        if not attributes or key not in attributes:
            return None
        return AttributeDef.coerce(attributes[key])

    def _compiled(self, statement: str, table: Any, sql: str) -> str:
        if self.settings.log_sql:
            logger.debug(
                "sql.compiled",
                dialect=self.name,
                statement=statement,
                table=table_name_text(table) if table is not None else None,
                sql=sql,
            )
        return sql

    # ------------------------------------------------------------------
    # WHERE
    # ------------------------------------------------------------------

    def where_query(self, where: Any, options: Optional[WhereOptions] = None) -> str:
        """Return ``WHERE <conditions>`` or an empty string."""
        conditions = self.get_where_conditions(where, options)
        return f"WHERE {conditions}" if conditions else ""

    def get_where_conditions(
        self, where: Any, options: Optional[WhereOptions] = None
    ) -> str:
        """Compile a where value (mapping, list, raw SQL or marker) to a condition."""
        options = options or WhereOptions()
        if where is None:
            return ""
        if isinstance(where, str):
            return where
        if isinstance(where, Mapping):
            return self.where_items_query(where, options)
        if isinstance(where, (list, tuple)):
            return self.where_item_query("$and", list(where), options)
        return self.handle_literal(where)

    def where_items_query(
        self,
        where: Mapping[Any, Any],
        options: Optional[WhereOptions] = None,
        binding: str = " AND ",
    ) -> str:
        items = [self.where_item_query(key, value, options) for key, value in where.items()]
        return binding.join(item for item in items if item)

    def where_item_query(
        self, key: Any, value: Any, options: Optional[WhereOptions] = None
    ) -> str:
        """Compile one ``key: value`` condition."""
        options = options or WhereOptions()

        if key in self.COMBINATORS:
            return self._where_group(key, value, options)
        if key == "$not":
            group = self._where_group("$and", value, options)
            return f"NOT {group}" if group else ""

        key_sql = self._key_sql(key, options)
        condition = classify_condition(value)

        if condition.kind is ConditionKind.RAW_LITERAL:
            return f"{key_sql} = {self.handle_literal(condition.value)}"
        if condition.kind is ConditionKind.SCALAR:
            operator = "$in" if isinstance(value, (list, tuple, set)) else "$eq"
            return self._comparison(key_sql, operator, value, key)
        if condition.kind is ConditionKind.PATH_MAP:
            raise UnsupportedPredicateError(
                "Nested path conditions are only supported on JSON columns",
                key=str(key),
            )
        return self._operator_map(key_sql, condition.value, key)

    def _key_sql(self, key: Any, options: WhereOptions) -> str:
        if isinstance(key, Literal):
            return self.handle_literal(key)
        key = str(key)
        prefix = self._prefix_sql(options.prefix)
        if "." in key and not prefix:
            return self.quote_identifiers(key)
        return prefix + self.quote_identifier(key)

    def _prefix_sql(self, prefix: Any) -> str:
        if prefix is None:
            return ""
        if isinstance(prefix, Literal):
            return self.handle_literal(prefix) + "."
        return self.quote_table(prefix) + "."

    def _where_group(self, combinator: str, value: Any, options: WhereOptions) -> str:
        binding = self.COMBINATORS[combinator]
        if isinstance(value, Mapping):
            parts = [self.where_item_query(k, v, options) for k, v in value.items()]
        elif isinstance(value, (list, tuple)):
            parts = []
            for item in value:
                part = self.get_where_conditions(item, options)
                if isinstance(item, Mapping) and len(item) > 1 and part:
                    part = f"({part})"
                parts.append(part)
        else:
            raise UnsupportedPredicateError(
                "Logical combinators expect a mapping or a list", operator=combinator
            )
        parts = [part for part in parts if part]
        if not parts:
            return ""
        return f"({binding.join(parts)})"

    def _operator_map(self, key_sql: str, operators: Mapping[str, Any], key: Any) -> str:
        parts: List[str] = []
        for operator, operand in operators.items():
            if operator in self.COMBINATORS:
                parts.append(self._operator_group(key_sql, operator, operand, key))
            else:
                parts.append(self._comparison(key_sql, operator, operand, key))
        parts = [part for part in parts if part]
        joined = " AND ".join(parts)
        return f"({joined})" if len(parts) > 1 else joined

    def _operator_group(
        self, key_sql: str, combinator: str, operand: Any, key: Any
    ) -> str:
        """``{"$or": {"$lt": 1, "$gt": 9}}`` or ``{"$or": [1, 2]}`` on one column."""
        if isinstance(operand, Mapping):
            items = [{op: value} for op, value in operand.items()]
        elif isinstance(operand, (list, tuple)):
            items = list(operand)
        else:
            raise UnsupportedPredicateError(
                "Logical combinators expect a mapping or a list",
                key=str(key),
                operator=combinator,
            )
        parts = []
        for item in items:
            if isinstance(item, Mapping) and all(is_operator(op) for op in item):
                parts.append(self._operator_map(key_sql, item, key))
            else:
                parts.append(self._comparison(key_sql, "$eq", item, key))
        parts = [part for part in parts if part]
        if not parts:
            return ""
        return f"({self.COMBINATORS[combinator].join(parts)})"

    def _comparison(self, key_sql: str, operator: str, operand: Any, key: Any) -> str:
        comparator = self.COMPARATORS.get(operator)
        if comparator is None:
            raise UnsupportedPredicateError(
                "Unknown operator", key=str(key), operator=operator
            )

        if isinstance(operand, Literal):
            if operator in ("$in", "$notIn"):
                return f"{key_sql} {comparator} ({operand.val})"
            return f"{key_sql} {comparator} {operand.val}"

        if operator in ("$in", "$notIn"):
            if not isinstance(operand, (list, tuple, set)):
                raise UnsupportedPredicateError(
                    "IN operators expect a list", key=str(key), operator=operator
                )
            if not operand:
                return f"{key_sql} {comparator} (NULL)"
            return f"{key_sql} {comparator} ({self.escape(list(operand))})"

        if operator in ("$between", "$notBetween"):
            if not isinstance(operand, (list, tuple)) or len(operand) != 2:
                raise UnsupportedPredicateError(
                    "BETWEEN operators expect exactly two values",
                    key=str(key),
                    operator=operator,
                )
            low, high = operand
            return f"{key_sql} {comparator} {self.escape(low)} AND {self.escape(high)}"

        if operand is None or (operator in ("$is", "$not") and isinstance(operand, bool)):
            if operator in ("$eq", "$is"):
                return f"{key_sql} IS {self.escape(operand)}"
            if operator in ("$ne", "$not"):
                return f"{key_sql} IS NOT {self.escape(operand)}"

        if operator == "$is":
            raise UnsupportedPredicateError(
                "IS expects NULL or a boolean", key=str(key), operator=operator
            )
        if isinstance(operand, (list, tuple, set, Mapping)):
            raise UnsupportedPredicateError(
                "Operator does not accept a collection operand",
                key=str(key),
                operator=operator,
            )
        return f"{key_sql} {comparator} {self.escape(operand)}"

    # ------------------------------------------------------------------
    # INSERT
    # ------------------------------------------------------------------

    def insert_query(
        self,
        table: Any,
        values: Mapping[str, Any],
        attributes: Optional[Mapping[str, AttributeDef]] = None,
        options: Optional[InsertOptions] = None,
    ) -> str:
        """
        Build a single-row INSERT statement.

        Args:
            table: Target table
            values: Column key -> value
            attributes: Attribute descriptors used for field renames and
                auto-increment handling (optional)
            options: IGNORE / ON DUPLICATE KEY behaviour

        Returns:
            INSERT SQL statement

        Raises:
            DescriptorError: If no values are given or the options need a
                feature this dialect lacks
        """
        options = options or InsertOptions()
        table_text = table_name_text(table)
        if not values:
            raise DescriptorError(
                "INSERT requires at least one value", statement="insert", table=table_text
            )

        columns: List[str] = []
        rendered: List[str] = []
        for key, value in values.items():
            attribute = self._attribute(attributes, key)
            column = attribute.field if attribute is not None and attribute.field else key
            columns.append(self.quote_identifier(column))
            if attribute is not None and attribute.auto_increment and value is None:
                rendered.append("DEFAULT" if self.supports_default_keyword else "NULL")
            elif isinstance(value, (list, tuple, Mapping)):
                rendered.append(self.escape(json.dumps(value, separators=(",", ":"))))
            else:
                rendered.append(self.escape(value))

        ignore = ""
        if options.ignore_duplicates:
            if not self.supports_insert_ignore:
                raise DescriptorError(
                    f"{self.name} cannot ignore duplicate rows",
                    statement="insert",
                    table=table_text,
                )
            ignore = " IGNORE"

        on_duplicate = ""
        if options.on_duplicate:
            if not self.supports_on_duplicate_key:
                raise DescriptorError(
                    f"{self.name} has no ON DUPLICATE KEY clause",
                    statement="insert",
                    table=table_text,
                )
            on_duplicate = f" ON DUPLICATE KEY {options.on_duplicate}"

        sql = (
            f"INSERT{ignore} INTO {self.quote_table(table)} "
            f"({', '.join(columns)}) VALUES ({', '.join(rendered)}){on_duplicate};"
        )
        return self._compiled("insert", table, sql)


__all__ = ["AbstractQueryGenerator"]
