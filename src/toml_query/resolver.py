"""Walks a document along a token chain."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import (
    ArrayIndexOutOfBoundsError,
    IdentifierNotFoundInDocumentError,
    NoIdentifierInArrayError,
    NoIndexInTableError,
    QueryingValueAsArrayError,
    QueryingValueAsTableError,
)
from .runtime.logging import get_logger
from .tokenizer import Identifier, Token, render_path
from .value import Value, ValueRef


def child_key(
    current: Value, token: Token, *, error_if_not_found: bool = False
) -> str | int | None:
    """Return the key or index ``token`` addresses inside ``current``.

    ``None`` means the container has the right shape but no such entry.
    Shape mismatches raise. Negative indices are always out of range.
    """
    if isinstance(token, Identifier):
        if isinstance(current, dict):
            if token.ident in current:
                return token.ident
            if error_if_not_found:
                raise IdentifierNotFoundInDocumentError(token.ident)
            return None
        if isinstance(current, list):
            raise NoIdentifierInArrayError(token.ident)
        raise QueryingValueAsTableError(token.ident)

    if isinstance(current, list):
        if 0 <= token.idx < len(current):
            return token.idx
        if error_if_not_found:
            raise ArrayIndexOutOfBoundsError(token.idx, len(current))
        return None
    if isinstance(current, dict):
        raise NoIndexInTableError(token.idx)
    raise QueryingValueAsArrayError(token.idx)


def resolve(
    document: Value, tokens: Sequence[Token], *, error_if_not_found: bool = False
) -> Value | None:
    """Return the node ``tokens`` address, or ``None`` if it is absent.

    An empty token sequence addresses the document itself.
    """
    current = document
    for token in tokens:
        key = child_key(current, token, error_if_not_found=error_if_not_found)
        if key is None:
            get_logger().debug("resolve: %s absent at %s", render_path(tokens), token)
            return None
        current = current[key]  # type: ignore[index]
    return current


def resolve_mut(
    document: Value, tokens: Sequence[Token], *, error_if_not_found: bool = False
) -> ValueRef | None:
    """Like ``resolve`` but return a writable ``ValueRef`` to the node."""
    if not tokens:
        raise ValueError("cannot take a reference to the document root")
    parent = resolve(document, tokens[:-1], error_if_not_found=error_if_not_found)
    if parent is None:
        return None
    key = child_key(parent, tokens[-1], error_if_not_found=error_if_not_found)
    if key is None:
        return None
    return ValueRef(parent, key)  # type: ignore[arg-type]


__all__ = ["child_key", "resolve", "resolve_mut"]
