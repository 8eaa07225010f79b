"""
Infrastructure Layer

Components:
- sql: identifier/value escaping, predicate compilation and the MySQL
  statement compiler
- schema: column types, table/column/index descriptors, model registry,
  YAML model definitions and DDL scripts

Usage:
    from dialect_forge.infrastructure.sql import MySQLQueryGenerator
    from dialect_forge.infrastructure.schema import AttributeDef, ModelDef
"""

__all__: list[str] = []
