"""Composable document queries.

A ``Query[P, O]`` is a small immutable step: given the document and the
output of the previous step (``P``, or ``None`` for the first step) it
produces an ``O``. Steps compose left to right with ``chain`` (or ``>>``)
into a ``Chain``, which is itself a query:

    step = Read(path="a") >> Insert(path="b")
    query(document, step)

A chain stops at the first step that raises. Run it through a
``ResetExecutor`` to also undo whatever the earlier steps wrote.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .delete import delete
from .insert import insert
from .read import read
from .runtime.logging import get_logger
from .set import set_value
from .types import ValueType, as_type
from .value import Value

P = TypeVar("P")
O = TypeVar("O")
R = TypeVar("R")


class Query(Generic[P, O], ABC):
    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "__dataclass_params__" not in cls.__dict__:
            dataclass(frozen=True, kw_only=True)(cls)

    @abstractmethod
    def execute(self, document: Value, prev: P | None) -> O:
        raise NotImplementedError

    def chain(self, other: Query[O, R]) -> Chain[P, R]:
        return Chain(first=self, second=other)

    def __rshift__(self, other: Query[O, R]) -> Chain[P, R]:
        return self.chain(other)


class Chain(Query[P, R]):
    first: Query[P, Any]
    second: Query[Any, R]

    def execute(self, document: Value, prev: P | None) -> R:
        intermediate = self.first.execute(document, prev)
        return self.second.execute(document, intermediate)


class FnQuery(Query[P, O]):
    """Wraps a plain ``fn(document, prev)`` callable as a step."""

    fn: Callable[[Value, P | None], O]

    def execute(self, document: Value, prev: P | None) -> O:
        return self.fn(document, prev)


class Read(Query[Any, Value | None]):
    path: str
    separator: str | None = None

    def execute(self, document: Value, prev: Any) -> Value | None:
        return read(document, self.path, self.separator)


class ReadType(Query[Any, Value | None]):
    path: str
    expected: ValueType
    separator: str | None = None

    def execute(self, document: Value, prev: Any) -> Value | None:
        return as_type(read(document, self.path, self.separator), self.expected)


def _value_or_prev(value: Value | None, prev: Any, step: str) -> Value:
    if value is not None:
        return value
    if prev is None:
        raise ValueError(f"{step} step needs a value or a previous result")
    return prev


class Insert(Query[Any, Value | None]):
    """Insert ``value``, or the previous step's output when ``value`` is unset."""

    path: str
    value: Value | None = None
    separator: str | None = None

    def execute(self, document: Value, prev: Any) -> Value | None:
        value = _value_or_prev(self.value, prev, "insert")
        return insert(document, self.path, value, self.separator)


class Set(Query[Any, Value | None]):
    """Set ``value``, or the previous step's output when ``value`` is unset."""

    path: str
    value: Value | None = None
    separator: str | None = None

    def execute(self, document: Value, prev: Any) -> Value | None:
        value = _value_or_prev(self.value, prev, "set")
        return set_value(document, self.path, value, self.separator)


class Delete(Query[Any, Value | None]):
    path: str
    separator: str | None = None

    def execute(self, document: Value, prev: Any) -> Value | None:
        return delete(document, self.path, self.separator)


class QueryExecutor:
    """Runs queries directly against a live document."""

    def __init__(self, document: Value) -> None:
        self.document = document

    def query(self, step: Query[Any, O]) -> O:
        return step.execute(self.document, None)


def _restore(document: Value, snapshot: Value) -> None:
    if isinstance(document, dict):
        document.clear()
        document.update(snapshot)  # type: ignore[arg-type]
    elif isinstance(document, list):
        document[:] = snapshot  # type: ignore[index]


class ResetExecutor(QueryExecutor):
    """Runs queries all-or-nothing.

    Every ``query`` call deep-copies the document first. If the step raises,
    the copy is written back into the live document before the error
    propagates, so callers holding the document see it as it was.
    """

    def query(self, step: Query[Any, O]) -> O:
        snapshot = copy.deepcopy(self.document)
        try:
            return super().query(step)
        except Exception:
            get_logger().debug("query: step failed, restoring document snapshot")
            _restore(self.document, snapshot)
            raise


def query(document: Value, step: Query[Any, O]) -> O:
    return QueryExecutor(document).query(step)


__all__ = [
    "Chain",
    "Delete",
    "FnQuery",
    "Insert",
    "Query",
    "QueryExecutor",
    "Read",
    "ReadType",
    "ResetExecutor",
    "Set",
    "query",
]
