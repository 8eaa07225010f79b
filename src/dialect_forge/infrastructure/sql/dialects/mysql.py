"""
MySQL-specific SQL dialect implementation.

Provides the MySQL statement compiler: column definitions, CREATE/ALTER/DROP
TABLE, JSON-path predicates, INSERT ... ON DUPLICATE KEY UPDATE upserts,
DELETE/TRUNCATE, index management and information-schema introspection.
"""

import json
import re
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from dialect_forge.exceptions import DescriptorError, UnsupportedPredicateError
from dialect_forge.infrastructure.schema.core import (
    UNSET,
    AttributeDef,
    IndexDef,
    ModelDef,
    is_schemable_default,
    table_name_text,
)
from dialect_forge.infrastructure.schema.data_types import as_data_type
from dialect_forge.utils.logging import get_logger

from ..core.conditions import classify_condition, is_operator
from ..core.identifier import underscore_name, wrap_single_quote
from ..core.literals import Json, Literal
from ..core.options import (
    DeleteOptions,
    InsertOptions,
    TableOptions,
    UniqueKeys,
    WhereOptions,
)
from .abstract import AbstractQueryGenerator

logger = get_logger(__name__)

Definition = Union[str, AttributeDef, Mapping[str, Any]]

_NATIVE_CAST_RE = re.compile(
    r"^(BINARY|CHAR|NCHAR|DATE|DATETIME|TIME|YEAR|DECIMAL|DOUBLE|FLOAT|REAL|JSON|"
    r"SIGNED|UNSIGNED)(\s+INTEGER)?(\(\d+(,\s*\d+)?\))?$",
    re.IGNORECASE,
)
_PRIMARY_KEY_RE = re.compile(r"\s*PRIMARY KEY")


class MySQLQueryGenerator(AbstractQueryGenerator):
    """MySQL SQL dialect implementation."""

    name = "mysql"

    supports_on_duplicate_key = True
    supports_insert_ignore = True

    # JSON path casts: ``{"price::float": {"$gt": 10}}``
    CAST_TYPES = {
        "int": "SIGNED",
        "integer": "SIGNED",
        "bigint": "SIGNED",
        "unsigned": "UNSIGNED",
        "float": "DECIMAL(65,30)",
        "double": "DECIMAL(65,30)",
        "decimal": "DECIMAL(65,30)",
        "numeric": "DECIMAL(65,30)",
        "boolean": "UNSIGNED",
        "text": "CHAR",
        "string": "CHAR",
        "varchar": "CHAR",
        "date": "DATE",
        "datetime": "DATETIME",
        "timestamp": "DATETIME",
        "time": "TIME",
        "json": "JSON",
    }

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def create_schema_query(self, *_: Any) -> str:
        """MySQL has no schemas inside a database; listing tables stands in."""
        return "SHOW TABLES"

    def show_schemas_query(self) -> str:
        return "SHOW TABLES"

    def show_tables_query(self) -> str:
        return "SHOW TABLES;"

    def version_query(self) -> str:
        return "SELECT VERSION() as `version`"

    def show_indexes_query(self, table: Any, database: Optional[str] = None) -> str:
        sql = f"SHOW INDEX FROM {self.quote_table(table)}"
        if database:
            sql += f" FROM {self.quote_identifier(database)}"
        return self._compiled("show_indexes", table, sql)

    def get_foreign_keys_query(self, table: Any, schema_name: str) -> str:
        """
        Build a query returning every foreign key constraint of a table.

        Args:
            table: Table name
            schema_name: Database (constraint schema) name

        Returns:
            SQL selecting ``constraint_name`` rows
        """
        return (
            "SELECT CONSTRAINT_NAME as constraint_name "
            "FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE "
            f"where TABLE_NAME = {wrap_single_quote(table_name_text(table))} "
            "AND CONSTRAINT_NAME!='PRIMARY' "
            f"AND CONSTRAINT_SCHEMA={wrap_single_quote(schema_name)} "
            "AND REFERENCED_TABLE_NAME IS NOT NULL;"
        )

    def get_foreign_key_query(self, table: Any, column_name: str) -> str:
        """
        Build a query returning the foreign key constraint on one column,
        whether the column references another table or is referenced.
        """
        name = str(table) if not isinstance(table, Mapping) else table_name_text(table)
        if isinstance(table, Mapping) and table.get("schema"):
            name = f"{table['schema']}.{name}"
        quoted_table = wrap_single_quote(name)
        quoted_column = wrap_single_quote(column_name)
        return " ".join(
            [
                "SELECT CONSTRAINT_NAME as constraint_name",
                "FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE",
                f"WHERE (REFERENCED_TABLE_NAME = {quoted_table}",
                f"AND REFERENCED_COLUMN_NAME = {quoted_column}",
                f") OR (TABLE_NAME = {quoted_table}",
                f"AND COLUMN_NAME = {quoted_column}",
                ")",
            ]
        )

    def drop_foreign_key_query(self, table: Any, foreign_key: str) -> str:
        sql = (
            f"ALTER TABLE {self.quote_table(table)} "
            f"DROP FOREIGN KEY {self.quote_identifier(foreign_key)};"
        )
        return self._compiled("drop_foreign_key", table, sql)

    # ------------------------------------------------------------------
    # Column definitions
    # ------------------------------------------------------------------

    def attribute_to_sql(
        self,
        attribute: Any,
        *,
        context: Optional[str] = None,
        foreign_key: Optional[str] = None,
        inline_primary_key: bool = True,
        inline_references: bool = True,
    ) -> str:
        """
        Render one column definition (type plus constraints).

        Args:
            attribute: AttributeDef, attribute mapping or bare type
            context: ``"addColumn"`` when rendering for ALTER TABLE ... ADD
            foreign_key: Column name used for the ADD CONSTRAINT clause in
                ``addColumn`` context
            inline_primary_key: Emit ``PRIMARY KEY`` on the column
            inline_references: Emit the ``REFERENCES`` clause on the column

        Returns:
            Column definition without the column name

        Raises:
            DescriptorError: If the type cannot be rendered
        """
        attribute = AttributeDef.coerce(attribute)
        data_type = attribute.data_type

        template = data_type.to_sql(self.escape)

        if attribute.allow_null is False:
            template += " NOT NULL"

        if attribute.auto_increment:
            template += " auto_increment"

        # TEXT/BLOB and binary columns cannot have a default
        no_default = data_type.is_large_object or data_type.is_binary
        if not no_default and is_schemable_default(attribute.default_value):
            template += f" DEFAULT {self.escape(attribute.default_value)}"

        if attribute.unique is True:
            template += " UNIQUE"

        if attribute.primary_key and inline_primary_key:
            template += " PRIMARY KEY"

        if attribute.after:
            template += f" AFTER {self.quote_identifier(attribute.after)}"

        if attribute.references is not None and inline_references:
            if context == "addColumn" and foreign_key:
                template += (
                    f", ADD CONSTRAINT {self.quote_identifier(foreign_key + '_foreign_idx')}"
                    f" FOREIGN KEY ({self.quote_identifier(foreign_key)})"
                )
            template += " " + self.render_references(attribute)

        return template

    def render_references(self, attribute: AttributeDef) -> str:
        """Render ``REFERENCES <table> (<key>) [ON DELETE ..] [ON UPDATE ..]``."""
        references = attribute.references
        if references is None:
            raise DescriptorError("Attribute has no references to render")
        sql = (
            f"REFERENCES {self.quote_table(references.model)} "
            f"({self.quote_identifier(references.target_key)})"
        )
        if attribute.on_delete:
            sql += f" ON DELETE {attribute.on_delete.upper()}"
        if attribute.on_update:
            sql += f" ON UPDATE {attribute.on_update.upper()}"
        return sql

    def attributes_to_sql(
        self, attributes: Mapping[str, Any], **options: Any
    ) -> Dict[str, str]:
        """Render every attribute, keyed by its column name."""
        result: Dict[str, str] = {}
        for key, value in attributes.items():
            attribute = AttributeDef.coerce(value)
            result[attribute.field or key] = self.attribute_to_sql(attribute, **options)
        return result

    def find_auto_increment_field(
        self, model: Union[ModelDef, Mapping[str, Any]]
    ) -> List[str]:
        attributes = model.attributes if isinstance(model, ModelDef) else model
        return [
            name
            for name, definition in attributes.items()
            if definition is not None and AttributeDef.coerce(definition).auto_increment
        ]

    # ------------------------------------------------------------------
    # CREATE / ALTER / DROP TABLE
    # ------------------------------------------------------------------

    def _split_raw_definition(
        self, column: str, definition: str, table: Any
    ) -> Tuple[str, bool, Optional[str]]:
        """Split a rendered definition into (inline part, is primary key, references)."""
        is_primary_key = "PRIMARY KEY" in definition
        reference = None
        if "REFERENCES" in definition:
            position = definition.index("REFERENCES")
            head = definition[:position].rstrip()
            if not head:
                raise DescriptorError(
                    f"Definition of column '{column}' has no type before REFERENCES",
                    statement="create_table",
                    table=table_name_text(table),
                )
            reference = definition[position:]
            definition = head
        if is_primary_key:
            definition = _PRIMARY_KEY_RE.sub("", definition, count=1).strip()
        return definition, is_primary_key, reference

    def _unique_key_clauses(self, table: Any, unique_keys: UniqueKeys) -> List[str]:
        if isinstance(unique_keys, Mapping):
            entries: Iterable[Tuple[Any, Any]] = unique_keys.items()
        else:
            entries = enumerate(unique_keys)

        clauses = []
        for index_name, index in entries:
            if isinstance(index, Mapping):
                index = IndexDef(
                    fields=list(index["fields"]),
                    unique=True,
                    name=index.get("name"),
                    single_field=index.get("single_field", index.get("singleField", False)),
                )
            # single-field keys are rendered inline on the column
            if index.single_field:
                continue
            if not isinstance(index_name, str):
                index_name = index.name or (
                    f"uniq_{table_name_text(table)}_{'_'.join(index.fields)}"
                )
            columns = ", ".join(self.quote_identifier(f) for f in index.fields)
            clauses.append(f"UNIQUE {self.quote_identifier(index_name)} ({columns})")
        return clauses

    def create_table_query(
        self,
        table: Any,
        attributes: Mapping[str, Definition],
        options: Optional[TableOptions] = None,
    ) -> str:
        """
        Build a CREATE TABLE IF NOT EXISTS statement.

        Raw string definitions are scanned for ``PRIMARY KEY`` and
        ``REFERENCES``; structured definitions carry both as fields. Either
        way, primary keys end up in one trailing ``PRIMARY KEY (...)`` clause
        and references in trailing ``FOREIGN KEY`` clauses, since MySQL
        ignores inline REFERENCES.

        Args:
            table: Table name
            attributes: Column name -> raw SQL definition or AttributeDef
            options: Table options; engine/charset/collate fall back to settings

        Returns:
            CREATE TABLE SQL statement
        """
        options = options or TableOptions()

        primary_keys: List[str] = []
        foreign_keys: Dict[str, str] = {}
        columns: List[str] = []

        for key, definition in attributes.items():
            if isinstance(definition, str):
                column = key
                inline, is_primary_key, reference = self._split_raw_definition(
                    column, definition, table
                )
            else:
                attribute = AttributeDef.coerce(definition)
                column = attribute.field or key
                inline = self.attribute_to_sql(
                    attribute, inline_primary_key=False, inline_references=False
                )
                is_primary_key = attribute.primary_key
                reference = (
                    self.render_references(attribute) if attribute.references else None
                )

            if is_primary_key:
                primary_keys.append(column)
            if reference:
                foreign_keys[column] = reference
            columns.append(f"{self.quote_identifier(column)} {inline}")

        columns.extend(self._unique_key_clauses(table, options.unique_keys))

        if primary_keys:
            pk_columns = ", ".join(self.quote_identifier(pk) for pk in primary_keys)
            columns.append(f"PRIMARY KEY ({pk_columns})")

        for column, reference in foreign_keys.items():
            columns.append(f"FOREIGN KEY ({self.quote_identifier(column)}) {reference}")

        engine = options.engine or self.settings.default_engine
        charset = options.charset or self.settings.default_charset
        collate = options.collate or self.settings.default_collate

        suffix = f"ENGINE={engine}"
        if isinstance(options.comment, str) and options.comment:
            suffix += f" COMMENT {self.escape(options.comment)}"
        if charset:
            suffix += f" DEFAULT CHARSET={charset}"
        if collate:
            suffix += f" COLLATE {collate}"
        if options.initial_auto_increment:
            suffix += f" AUTO_INCREMENT={options.initial_auto_increment}"

        sql = (
            f"CREATE TABLE IF NOT EXISTS {self.quote_table(table)} "
            f"({', '.join(columns)}) {suffix};"
        )
        return self._compiled("create_table", table, sql)

    def drop_table_query(self, table: Any) -> str:
        return self._compiled(
            "drop_table", table, f"DROP TABLE IF EXISTS {self.quote_table(table)};"
        )

    def add_column_query(self, table: Any, key: str, attribute: Any) -> str:
        definition = self.attribute_to_sql(
            attribute, context="addColumn", foreign_key=key
        )
        sql = (
            f"ALTER TABLE {self.quote_table(table)} "
            f"ADD {self.quote_identifier(key)} {definition};"
        )
        return self._compiled("add_column", table, sql)

    def remove_column_query(self, table: Any, column: str) -> str:
        sql = f"ALTER TABLE {self.quote_table(table)} DROP {self.quote_identifier(column)};"
        return self._compiled("remove_column", table, sql)

    def _foreign_key_constraint(self, column: str, reference: str) -> str:
        return (
            f"ADD CONSTRAINT {self.quote_identifier(column + '_foreign_idx')} "
            f"FOREIGN KEY ({self.quote_identifier(column)}) {reference}"
        )

    def change_column_query(self, table: Any, attributes: Mapping[str, Definition]) -> str:
        """
        Build ALTER TABLE ... CHANGE for one or more columns.

        Raw definitions containing ``REFERENCES`` become ADD CONSTRAINT
        clauses only. Structured definitions with references produce both a
        CHANGE clause for the column and an ADD CONSTRAINT clause.
        """
        changes: List[str] = []
        constraints: List[str] = []

        for column, definition in attributes.items():
            quoted = self.quote_identifier(column)
            if isinstance(definition, str):
                if "REFERENCES" in definition:
                    reference = definition[definition.index("REFERENCES"):]
                    constraints.append(self._foreign_key_constraint(column, reference))
                else:
                    changes.append(f"CHANGE {quoted} {quoted} {definition}")
                continue

            attribute = AttributeDef.coerce(definition)
            inline = self.attribute_to_sql(attribute, inline_references=False)
            changes.append(f"CHANGE {quoted} {quoted} {inline}")
            if attribute.references is not None:
                constraints.append(
                    self._foreign_key_constraint(column, self.render_references(attribute))
                )

        if not changes and not constraints:
            raise DescriptorError(
                "No columns to change", statement="change_column", table=table_name_text(table)
            )

        sql = f"ALTER TABLE {self.quote_table(table)} {', '.join(changes + constraints)};"
        return self._compiled("change_column", table, sql)

    def rename_column_query(
        self, table: Any, attr_before: str, attributes: Mapping[str, Definition]
    ) -> str:
        clauses = []
        for new_name, definition in attributes.items():
            if not isinstance(definition, str):
                definition = self.attribute_to_sql(definition)
            clauses.append(
                f"CHANGE {self.quote_identifier(attr_before)} "
                f"{self.quote_identifier(new_name)} {definition}"
            )
        sql = f"ALTER TABLE {self.quote_table(table)} {', '.join(clauses)};"
        return self._compiled("rename_column", table, sql)

    # ------------------------------------------------------------------
    # Indexes
    # ------------------------------------------------------------------

    def _index_name(self, table: Any, fields: Sequence[str]) -> str:
        return underscore_name(f"{table_name_text(table)}_{'_'.join(fields)}")

    def add_index_query(
        self,
        table: Any,
        fields: Sequence[str],
        name: Optional[str] = None,
        unique: bool = False,
    ) -> str:
        index_name = name or self._index_name(table, fields)
        columns = ", ".join(self.quote_identifier(f) for f in fields)
        kind = "UNIQUE INDEX" if unique else "INDEX"
        sql = (
            f"CREATE {kind} {self.quote_identifier(index_name)} "
            f"ON {self.quote_table(table)} ({columns});"
        )
        return self._compiled("add_index", table, sql)

    def remove_index_query(self, table: Any, index_name_or_fields: Union[str, Sequence[str]]) -> str:
        if isinstance(index_name_or_fields, str):
            index_name = index_name_or_fields
        else:
            index_name = self._index_name(table, index_name_or_fields)
        sql = (
            f"DROP INDEX {self.quote_identifier(index_name)} "
            f"ON {self.quote_table(table)};"
        )
        return self._compiled("remove_index", table, sql)

    # ------------------------------------------------------------------
    # JSON predicates
    # ------------------------------------------------------------------

    def handle_literal(self, smth: Any) -> str:
        """Render ``Literal`` markers and ``Json`` path conditions."""
        if not isinstance(smth, Json):
            return super().handle_literal(smth)

        if smth.conditions:
            conditions = [
                AbstractQueryGenerator.where_item_query(
                    self,
                    Literal(f"{self.quote_identifier(path[0])}->>{self._json_path(path[1:])}"),
                    {"$eq": self._json_text(value)},
                )
                for path, value in self._parse_condition_object(smth.conditions)
            ]
            return " and ".join(conditions)

        if smth.path:
            if "->" in smth.path:
                # native MySQL JSON syntax, used as given
                sql = smth.path
            else:
                path = smth.path.split(".")
                sql = f"{self.quote_identifier(path[0])}->>{self._json_path(path[1:])}"
            if smth.value is not None:
                sql += f" = {self.escape(smth.value)}"
            return sql

        raise DescriptorError("Json marker needs conditions or a path")

    def _parse_condition_object(
        self, conditions: Mapping[str, Any], path: Tuple[str, ...] = ()
    ) -> List[Tuple[Tuple[str, ...], Any]]:
        leaves = []
        for key, value in conditions.items():
            if isinstance(value, Mapping):
                leaves.extend(self._parse_condition_object(value, path + (key,)))
            else:
                leaves.append((path + (key,), value))
        return leaves

    def _json_path(self, segments: Sequence[str]) -> str:
        return self.escape("$." + ".".join(segments))

    def _json_text(self, value: Any) -> Any:
        """Text form of a value as returned by the ``->>`` operator."""
        if value is None or isinstance(value, Literal):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (Mapping, list, tuple)):
            return json.dumps(value, separators=(",", ":"))
        return str(value)

    def _cast_target(self, cast: str) -> str:
        mapped = self.CAST_TYPES.get(cast.lower())
        if mapped:
            return mapped
        if not _NATIVE_CAST_RE.match(cast):
            logger.warning("sql.json_cast_unknown", cast=cast, dialect=self.name)
        return cast.upper()

    def _is_json_type(self, field_type: Any) -> bool:
        if field_type is None:
            return False
        return as_data_type(field_type).is_json

    def where_item_query(
        self, key: Any, value: Any, options: Optional[WhereOptions] = None
    ) -> str:
        """
        Compile one condition, with MySQL JSON-column support.

        For JSON columns a nested mapping is compiled into ``->>`` path
        comparisons: plain keys descend one path segment, ``$``-prefixed keys
        compare the current path, and bare leaf values compare by equality
        against the extracted text. ``data.a.b`` keys on a JSON attribute
        are folded into the same nested form.

        Examples:
            ``where_item_query("data", {"a": {"b": 5}}, opts)`` ->
            ``"`data`->>'$.a.b' = '5'"``
        """
        options = options or WhereOptions()

        field = options.field
        if field is None and options.model is not None and isinstance(key, str):
            field = options.model.get_attribute(key)
        field_type = options.type or (field.type if field is not None else None)

        if isinstance(key, str) and "." in key and options.model is not None:
            base, _, rest = key.partition(".")
            base_attribute = options.model.attributes.get(base)
            if base_attribute is not None and base_attribute.data_type.is_json:
                field = base_attribute
                field_type = base_attribute.type
                folded: Any = value
                for segment in reversed(rest.split(".")):
                    folded = {segment: folded}
                value = folded
                key = base_attribute.field or base

        if self._is_json_type(field_type):
            condition = classify_condition(value)
            if condition.is_mapping:
                options = replace(options, field=field, type=field_type)
                return self._json_where_query(key, condition.value, options)

        return super().where_item_query(key, value, options)

    def _json_where_query(
        self, key: str, value: Mapping[str, Any], options: WhereOptions
    ) -> str:
        column_sql = self._prefix_sql(options.prefix) + self.quote_identifier(key)

        if options.json is False:
            return self._json_operator_query(key, column_sql, value, options)

        items: List[str] = []
        for prop, item in value.items():
            if is_operator(prop):
                items.append(
                    self.where_item_query(key, {prop: item}, replace(options, json=False))
                )
            else:
                self._traverse_json(column_sql, item, [prop], items)

        result = " AND ".join(items)
        return f"({result})" if len(items) > 1 else result

    def _json_operator_query(
        self,
        key: str,
        column_sql: str,
        operators: Mapping[str, Any],
        options: WhereOptions,
    ) -> str:
        items = []
        for operator, operand in operators.items():
            if not is_operator(operator):
                raise UnsupportedPredicateError(
                    "Path conditions are disabled for this JSON column",
                    key=key,
                    operator=operator,
                )
            if operator == "$contains":
                document = self.escape(json.dumps(operand, separators=(",", ":")))
                items.append(f"JSON_CONTAINS({column_sql}, {document})")
            else:
                items.append(
                    AbstractQueryGenerator.where_item_query(
                        self, key, {operator: operand}, options
                    )
                )
        result = " AND ".join(item for item in items if item)
        return f"({result})" if len(items) > 1 else result

    def _traverse_json(
        self, column_sql: str, item: Any, path: List[str], items: List[str]
    ) -> None:
        path = list(path)
        cast = None
        if "::" in path[-1]:
            path[-1], cast = path[-1].split("::", 1)

        path_sql = f"{column_sql}->>{self._json_path(path)}"
        if cast:
            path_sql = f"CAST({path_sql} AS {self._cast_target(cast)})"
        base_key = Literal(path_sql)

        if isinstance(item, Mapping):
            for prop, sub_item in item.items():
                if is_operator(prop):
                    items.append(
                        AbstractQueryGenerator.where_item_query(
                            self, base_key, {prop: sub_item}
                        )
                    )
                else:
                    self._traverse_json(column_sql, sub_item, path + [prop], items)
        else:
            leaf = item if cast else self._json_text(item)
            items.append(
                AbstractQueryGenerator.where_item_query(self, base_key, {"$eq": leaf})
            )

    # ------------------------------------------------------------------
    # INSERT / UPSERT / DELETE
    # ------------------------------------------------------------------

    def upsert_query(
        self,
        table: Any,
        insert_values: Mapping[str, Any],
        update_values: Iterable[str],
        where: Any = None,
        attributes: Optional[Mapping[str, AttributeDef]] = None,
        options: Optional[InsertOptions] = None,
    ) -> str:
        """
        Build ``INSERT ... ON DUPLICATE KEY UPDATE col=VALUES(col), ...``.

        MySQL resolves the conflict from the table's unique keys, so ``where``
        is accepted for call compatibility and not rendered.

        Args:
            table: Target table
            insert_values: Column key -> value for the INSERT
            update_values: Keys (or a mapping whose keys) to update on conflict
            where: Unused
            attributes: Attribute descriptors for field renames
            options: Base insert options; never modified

        Returns:
            Upsert SQL statement
        """
        columns = []
        for key in update_values:
            attribute = self._attribute(attributes, key)
            columns.append(
                self.quote_identifier(attribute.field if attribute and attribute.field else key)
            )
        if not columns:
            raise DescriptorError(
                "Upsert requires at least one column to update",
                statement="upsert",
                table=table_name_text(table),
            )

        on_duplicate = "UPDATE " + ", ".join(f"{col}=VALUES({col})" for col in columns)
        derived = replace(options or InsertOptions(), on_duplicate=on_duplicate)
        return self.insert_query(table, insert_values, attributes, derived)

    def delete_query(
        self,
        table: Any,
        where: Any = None,
        options: Optional[DeleteOptions] = None,
    ) -> str:
        """
        Build a DELETE (or TRUNCATE) statement.

        ``truncate=True`` yields ``TRUNCATE <table>``; MySQL accepts neither
        WHERE nor LIMIT there. Otherwise the limit defaults to the configured
        ``default_delete_limit`` when left unset; ``None`` or ``0`` disables it.
        """
        options = options or DeleteOptions()
        quoted_table = self.quote_table(table)

        if options.truncate is True:
            return self._compiled("truncate", table, f"TRUNCATE {quoted_table}")

        conditions = self.get_where_conditions(where, WhereOptions(model=options.model))
        limit = self.settings.default_delete_limit if options.limit is UNSET else options.limit

        sql = f"DELETE FROM {quoted_table}"
        if conditions:
            sql += f" WHERE {conditions}"
        if limit:
            sql += f" LIMIT {self.escape(limit)}"
        return self._compiled("delete", table, sql)


__all__ = ["MySQLQueryGenerator"]
