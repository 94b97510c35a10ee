"""Replacing values at paths that already exist."""

from __future__ import annotations

from .errors import NoIdentifierInArrayError, QueryingValueAsTableError
from .resolver import child_key, resolve
from .tokenizer import Identifier, tokenize
from .value import Value


def set_value(
    document: Value, path: str, value: Value, separator: str | None = None
) -> Value | None:
    """Store ``value`` at ``path`` without creating intermediate structure.

    Every node before the last must exist. A final identifier sets the
    table entry and returns what it held, if anything. A final index must
    address an existing array element, which is replaced and returned.
    """
    tokens = tokenize(path, separator)
    parent = resolve(document, tokens[:-1], error_if_not_found=True)
    last = tokens[-1]

    if isinstance(last, Identifier):
        if isinstance(parent, dict):
            previous = parent.get(last.ident)
            parent[last.ident] = value
            return previous
        if isinstance(parent, list):
            raise NoIdentifierInArrayError(last.ident)
        raise QueryingValueAsTableError(last.ident)

    key = child_key(parent, last, error_if_not_found=True)
    previous = parent[key]  # type: ignore[index]
    parent[key] = value  # type: ignore[index]
    return previous


def set_with_separator(
    document: Value, path: str, separator: str, value: Value
) -> Value | None:
    return set_value(document, path, value, separator)


__all__ = ["set_value", "set_with_separator"]
