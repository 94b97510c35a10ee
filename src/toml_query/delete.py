"""Removing values by path."""

from __future__ import annotations

from .errors import CannotDeleteNonEmptyArrayError, CannotDeleteNonEmptyTableError
from .resolver import child_key, resolve
from .runtime.logging import get_logger
from .tokenizer import Identifier, tokenize
from .value import Value


def delete(document: Value, path: str, separator: str | None = None) -> Value | None:
    """Remove the value at ``path`` and return it.

    Nodes before the last must exist. A missing final table key yields
    ``None``; a final index must be in range. Non-empty tables and arrays
    are refused.
    """
    tokens = tokenize(path, separator)
    parent = resolve(document, tokens[:-1], error_if_not_found=True)
    last = tokens[-1]

    if isinstance(last, Identifier):
        key = child_key(parent, last)
        if key is None:
            return None
    else:
        key = child_key(parent, last, error_if_not_found=True)

    target = parent[key]  # type: ignore[index]
    if isinstance(target, dict) and target:
        raise CannotDeleteNonEmptyTableError(path)
    if isinstance(target, list) and target:
        raise CannotDeleteNonEmptyArrayError(path)

    get_logger().debug("delete: removing %s", path)
    return parent.pop(key)  # type: ignore[union-attr, arg-type]


def delete_with_separator(
    document: Value, path: str, separator: str
) -> Value | None:
    return delete(document, path, separator)


__all__ = ["delete", "delete_with_separator"]
