"""Inserting values by path, creating missing tables and arrays on the way."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import TypeAdapter

from .errors import (
    NoIdentifierInArrayError,
    NoIndexInTableError,
    QueryingValueAsArrayError,
    QueryingValueAsTableError,
    SerializeError,
)
from .resolver import child_key
from .runtime.logging import get_logger
from .tokenizer import Identifier, Index, Token, render_path, tokenize
from .value import Array, Table, Value, name_of_value


def _new_container(next_token: Token) -> Table | Array:
    return [] if isinstance(next_token, Index) else {}


def _attach(container: Table | Array, token: Token, child: Table | Array) -> None:
    if isinstance(token, Identifier):
        container[token.ident] = child  # type: ignore[index]
    else:
        container.append(child)  # type: ignore[union-attr]


def _insert_last(container: Value, token: Token, value: Value) -> Value | None:
    if isinstance(token, Identifier):
        if isinstance(container, dict):
            previous = container.get(token.ident)
            container[token.ident] = value
            return previous
        if isinstance(container, list):
            raise NoIdentifierInArrayError(token.ident)
        raise QueryingValueAsTableError(token.ident)

    if isinstance(container, list):
        if 0 <= token.idx < len(container):
            container.insert(token.idx, value)
        else:
            container.append(value)
        return None
    if isinstance(container, dict):
        raise NoIndexInTableError(token.idx)
    raise QueryingValueAsArrayError(token.idx)


def insert(
    document: Value, path: str, value: Value, separator: str | None = None
) -> Value | None:
    """Insert ``value`` at ``path``, creating intermediate structure.

    Missing tables are created for identifiers; a missing node followed by
    an index becomes an empty array. An index past the end of an array
    (or a negative one) appends instead. An index inside an array inserts
    before the element currently there.

    Returns the value previously stored under a final identifier, else
    ``None``. Containers are only created after every pre-existing node on
    the path has been checked, so a failing insert leaves ``document`` as
    it was.
    """
    logger = get_logger()
    tokens = tokenize(path, separator)
    current = document
    for position, token in enumerate(tokens[:-1]):
        key = child_key(current, token)
        if key is None:
            created = _new_container(tokens[position + 1])
            _attach(current, token, created)  # type: ignore[arg-type]
            logger.debug(
                "insert: created %s at %s",
                "array" if isinstance(created, list) else "table",
                render_path(tokens[: position + 1]),
            )
            current = created
        else:
            current = current[key]  # type: ignore[index]
    return _insert_last(current, tokens[-1], value)


def insert_with_separator(
    document: Value, path: str, separator: str, value: Value
) -> Value | None:
    return insert(document, path, value, separator)


def _key(key: Any) -> str:
    if isinstance(key, enum.Enum):
        key = key.value
    return str(key)


def _to_document(data: Any, path: str) -> Any:
    if isinstance(data, enum.Enum):
        return _to_document(data.value, path)
    if isinstance(data, dict):
        return {
            _key(k): _to_document(v, path) for k, v in data.items() if v is not None
        }
    if isinstance(data, list | tuple | set | frozenset):
        return [_to_document(v, path) for v in data if v is not None]
    try:
        name_of_value(data)
    except TypeError as exc:
        raise SerializeError(path, str(exc)) from exc
    return data


def insert_serialized(
    document: Value, path: str, obj: Any, separator: str | None = None
) -> Value | None:
    """Dump ``obj`` with pydantic and insert the result at ``path``.

    ``None`` fields are left out since a document has no null value. Enum
    members become their values and sets become arrays; anything else that
    is not a document value raises ``SerializeError`` before the document
    is touched.
    """
    dumped = TypeAdapter(type(obj)).dump_python(obj, mode="python")
    return insert(document, path, _to_document(dumped, path), separator)


__all__ = ["insert", "insert_serialized", "insert_with_separator"]
