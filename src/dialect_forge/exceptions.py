"""
Exception hierarchy for SQL statement compilation.

Descriptors are built by calling code rather than end users, so the taxonomy
is narrow: malformed descriptors, predicate shapes the dialect cannot
express, and model definition files that fail validation.
"""

from typing import Optional


class QueryGenerationError(Exception):
    """
    Base exception for all statement compilation errors.

    Args:
        message: Error description
        statement: Kind of statement being compiled (optional)
        table: Table the statement targets (optional)
    """

    def __init__(
        self,
        message: str,
        statement: Optional[str] = None,
        table: Optional[str] = None,
    ):
        self.statement = statement
        self.table = table

        context_parts = []
        if statement:
            context_parts.append(f"statement='{statement}'")
        if table:
            context_parts.append(f"table='{table}'")

        if context_parts:
            full_message = f"{message} ({', '.join(context_parts)})"
        else:
            full_message = message

        super().__init__(full_message)


class DescriptorError(QueryGenerationError):
    """Raised when a table, column or type descriptor cannot be rendered."""

    pass


class UnsupportedPredicateError(QueryGenerationError):
    """
    Raised when a where-condition has a shape the dialect cannot express.

    Args:
        message: Error description
        key: Condition key being compiled (optional)
        operator: Offending operator (optional)
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        operator: Optional[str] = None,
    ):
        self.key = key
        self.operator = operator

        context_parts = []
        if key:
            context_parts.append(f"key='{key}'")
        if operator:
            context_parts.append(f"operator='{operator}'")

        if context_parts:
            message = f"{message} ({', '.join(context_parts)})"

        super().__init__(message, statement="where")


class ModelDefinitionError(Exception):
    """Raised when a model definition file cannot be loaded or validated."""

    pass


__all__ = [
    "QueryGenerationError",
    "DescriptorError",
    "UnsupportedPredicateError",
    "ModelDefinitionError",
]
