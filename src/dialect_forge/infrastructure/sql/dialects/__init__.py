"""SQL dialect implementations."""

from .abstract import AbstractQueryGenerator
from .mysql import MySQLQueryGenerator

__all__ = ["AbstractQueryGenerator", "MySQLQueryGenerator"]
