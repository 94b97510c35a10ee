"""The in-memory document model: native values as a TOML parser yields them."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import TypeAlias, Union

Datetime: TypeAlias = datetime.datetime | datetime.date | datetime.time
Scalar: TypeAlias = str | int | float | bool | Datetime
Value: TypeAlias = Union[Scalar, list["Value"], dict[str, "Value"]]
Table: TypeAlias = dict[str, Value]
Array: TypeAlias = list[Value]


def name_of_value(value: object) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, int):
        return "Integer"
    if isinstance(value, float):
        return "Float"
    if isinstance(value, str):
        return "String"
    if isinstance(value, datetime.datetime | datetime.date | datetime.time):
        return "Datetime"
    if isinstance(value, list):
        return "Array"
    if isinstance(value, dict):
        return "Table"
    raise TypeError(f"not a document value: {type(value).__name__}")


def is_table(value: object) -> bool:
    return isinstance(value, dict)


def is_array(value: object) -> bool:
    return isinstance(value, list)


@dataclass(frozen=True)
class ValueRef:
    """Writable handle onto one node of a document.

    Holds the parent container and the key or index of the node inside it,
    so scalars can be replaced as well as containers mutated.
    """

    container: Table | Array
    key: str | int

    @property
    def value(self) -> Value:
        return self.container[self.key]  # type: ignore[index]

    def set(self, new: Value) -> Value:
        """Replace the referenced node, returning what was there before."""
        old = self.value
        self.container[self.key] = new  # type: ignore[index]
        return old


__all__ = [
    "Array",
    "Datetime",
    "Scalar",
    "Table",
    "Value",
    "ValueRef",
    "is_array",
    "is_table",
    "name_of_value",
]
