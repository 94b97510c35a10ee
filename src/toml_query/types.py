"""Tag checks on resolved values."""

from __future__ import annotations

import enum
from typing import TypeVar, overload

from .errors import TypeMismatchError
from .value import Value, ValueRef, name_of_value

R = TypeVar("R")


class ValueType(enum.Enum):
    """The seven tags a document value can carry."""

    STRING = "String"
    INTEGER = "Integer"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    DATETIME = "Datetime"
    ARRAY = "Array"
    TABLE = "Table"

    @property
    def display_name(self) -> str:
        return self.value

    def matches(self, value: Value) -> bool:
        return name_of_value(value) == self.value


@overload
def as_type(result: None, expected: ValueType) -> None: ...


@overload
def as_type(result: R, expected: ValueType) -> R: ...


def as_type(result: R | None, expected: ValueType) -> R | None:
    """Check the tag of ``result`` against ``expected``.

    ``result`` may be a plain value, a ``ValueRef`` or ``None``. Matching
    results and ``None`` pass through unchanged; absence is not a type
    error. A mismatch raises ``TypeMismatchError``.
    """
    if result is None:
        return None
    actual = result.value if isinstance(result, ValueRef) else result
    if not expected.matches(actual):
        raise TypeMismatchError(expected.display_name, name_of_value(actual))
    return result


__all__ = ["ValueType", "as_type"]
