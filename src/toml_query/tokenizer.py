"""Turns a path string such as ``"a.b.[0].c"`` into typed tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias

from .config import default_separator
from .errors import (
    ArrayAccessWithInvalidIndexError,
    ArrayAccessWithoutIndexError,
    EmptyIdentifierError,
    EmptyQueryError,
)
from .runtime.logging import get_logger

_INDEX_RE = re.compile(r"^\[(-?\d+)\]$", re.ASCII)
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Identifier:
    ident: str

    def __str__(self) -> str:
        return self.ident


@dataclass(frozen=True)
class Index:
    idx: int

    def __str__(self) -> str:
        return f"[{self.idx}]"


Token: TypeAlias = Identifier | Index
Tokens: TypeAlias = tuple[Token, ...]


def _make_token(segment: str) -> Token:
    if segment.startswith("[") and segment.endswith("]"):
        match = _INDEX_RE.match(segment)
        if match is None:
            raise ArrayAccessWithoutIndexError(segment)
        idx = int(match.group(1))
        if not _I64_MIN <= idx <= _I64_MAX:
            raise ArrayAccessWithInvalidIndexError(segment)
        return Index(idx)
    return Identifier(segment)


def tokenize(path: str, separator: str | None = None) -> Tokens:
    """Split ``path`` on ``separator`` and classify every segment.

    A segment of the form ``[N]`` becomes an ``Index``, anything else an
    ``Identifier``. The result is never empty.
    """
    sep = default_separator(separator)
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if not path:
        raise EmptyQueryError()

    tokens: list[Token] = []
    for segment in path.split(sep):
        if not segment:
            raise EmptyIdentifierError(path)
        tokens.append(_make_token(segment))

    get_logger().debug("tokenize: %r -> %s", path, render_path(tokens, sep))
    return tuple(tokens)


def tokenize_with_separator(path: str, separator: str) -> Tokens:
    return tokenize(path, separator)


def render_path(tokens: tuple[Token, ...] | list[Token], separator: str = ".") -> str:
    return separator.join(str(token) for token in tokens)


__all__ = [
    "Identifier",
    "Index",
    "Token",
    "Tokens",
    "render_path",
    "tokenize",
    "tokenize_with_separator",
]
