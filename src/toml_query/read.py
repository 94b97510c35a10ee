"""Reading values out of a document by path."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import DeserializeError, NotAvailableError, TypeMismatchError
from .resolver import resolve, resolve_mut
from .tokenizer import tokenize
from .types import ValueType
from .value import Value, ValueRef, name_of_value

T = TypeVar("T")


def read(document: Value, path: str, separator: str | None = None) -> Value | None:
    """Return the value at ``path`` or ``None`` when it is absent.

    Raises if the path is malformed or does not fit the document's shape.
    """
    return resolve(document, tokenize(path, separator))


def read_with_separator(document: Value, path: str, separator: str) -> Value | None:
    return read(document, path, separator)


def read_mut(
    document: Value, path: str, separator: str | None = None
) -> ValueRef | None:
    """Return a writable reference to the value at ``path``, or ``None``."""
    return resolve_mut(document, tokenize(path, separator))


def read_mut_with_separator(
    document: Value, path: str, separator: str
) -> ValueRef | None:
    return read_mut(document, path, separator)


def _read_typed(document: Value, path: str, expected: ValueType) -> Any:
    found = read(document, path)
    if found is None:
        raise NotAvailableError(path)
    if not expected.matches(found):
        raise TypeMismatchError(expected.display_name, name_of_value(found))
    return found


def read_string(document: Value, path: str) -> str:
    return _read_typed(document, path, ValueType.STRING)


def read_int(document: Value, path: str) -> int:
    return _read_typed(document, path, ValueType.INTEGER)


def read_float(document: Value, path: str) -> float:
    return _read_typed(document, path, ValueType.FLOAT)


def read_bool(document: Value, path: str) -> bool:
    return _read_typed(document, path, ValueType.BOOLEAN)


def read_deserialized(
    document: Value,
    path: str,
    target: type[T] | Any,
    separator: str | None = None,
) -> T | None:
    """Read ``path`` and validate it into ``target`` with pydantic.

    ``target`` may be anything ``pydantic.TypeAdapter`` accepts: a model,
    a dataclass, or an annotated type such as ``list[int]``. Absent values
    yield ``None``.
    """
    found = read(document, path, separator)
    if found is None:
        return None
    try:
        return TypeAdapter(target).validate_python(found)
    except ValidationError as exc:
        raise DeserializeError(path, str(exc)) from exc


__all__ = [
    "read",
    "read_bool",
    "read_deserialized",
    "read_float",
    "read_int",
    "read_mut",
    "read_mut_with_separator",
    "read_string",
    "read_with_separator",
]
