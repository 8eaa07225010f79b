"""
Classification of where-condition values.

A condition value is tagged once, at the point it enters the predicate
compiler, and the compiler then matches on the tag instead of re-inspecting
the runtime shape at every branch.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .literals import Literal


class ConditionKind(Enum):
    """Shape of a where-condition value."""

    SCALAR = "scalar"
    OPERATOR_MAP = "operator_map"
    PATH_MAP = "path_map"
    RAW_LITERAL = "raw_literal"


@dataclass(frozen=True)
class ConditionValue:
    """A condition value together with its shape."""

    kind: ConditionKind
    value: Any

    @property
    def is_mapping(self) -> bool:
        return self.kind in (ConditionKind.OPERATOR_MAP, ConditionKind.PATH_MAP)


def is_operator(key: Any) -> bool:
    """Whether ``key`` is a ``$``-prefixed operator key."""
    return isinstance(key, str) and key.startswith("$")


def classify_condition(value: Any) -> ConditionValue:
    """
    Tag a condition value.

    - ``Literal`` -> RAW_LITERAL
    - mapping with only ``$`` keys (or empty) -> OPERATOR_MAP
    - mapping with any plain key -> PATH_MAP
    - anything else -> SCALAR

    Examples:
        >>> classify_condition({"$gt": 5}).kind
        <ConditionKind.OPERATOR_MAP: 'operator_map'>
        >>> classify_condition({"a": {"b": 1}}).kind
        <ConditionKind.PATH_MAP: 'path_map'>
    """
    if isinstance(value, ConditionValue):
        return value
    if isinstance(value, Literal):
        return ConditionValue(ConditionKind.RAW_LITERAL, value)
    if isinstance(value, Mapping):
        if all(is_operator(key) for key in value):
            return ConditionValue(ConditionKind.OPERATOR_MAP, value)
        return ConditionValue(ConditionKind.PATH_MAP, value)
    return ConditionValue(ConditionKind.SCALAR, value)


__all__ = [
    "ConditionKind",
    "ConditionValue",
    "classify_condition",
    "is_operator",
]
