"""Exception hierarchy for path tokenizing, resolution and typed access."""

from __future__ import annotations


class TomlQueryError(Exception):
    """Base class for every error raised by toml_query."""


class TokenizeError(TomlQueryError, ValueError):
    """A path string could not be turned into tokens."""


class EmptyQueryError(TokenizeError):
    def __init__(self) -> None:
        super().__init__("query path is empty")


class EmptyIdentifierError(TokenizeError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"query path {path!r} contains an empty identifier")


class ArrayAccessWithoutIndexError(TokenizeError):
    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"array access {segment!r} has no valid integer index")


class ArrayAccessWithInvalidIndexError(TokenizeError):
    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"array index in {segment!r} does not fit in 64 bits")


class ResolveError(TomlQueryError):
    """The path does not fit the shape of the document."""


class NoIndexInTableError(ResolveError):
    def __init__(self, idx: int) -> None:
        self.idx = idx
        super().__init__(f"cannot use index [{idx}] on a table")


class NoIdentifierInArrayError(ResolveError):
    def __init__(self, ident: str) -> None:
        self.ident = ident
        super().__init__(f"cannot use identifier {ident!r} on an array")


class QueryingValueAsTableError(ResolveError):
    def __init__(self, ident: str) -> None:
        self.ident = ident
        super().__init__(f"cannot look up {ident!r}: value is not a table")


class QueryingValueAsArrayError(ResolveError):
    def __init__(self, idx: int) -> None:
        self.idx = idx
        super().__init__(f"cannot look up [{idx}]: value is not an array")


class IdentifierNotFoundInDocumentError(ResolveError):
    def __init__(self, ident: str) -> None:
        self.ident = ident
        super().__init__(f"identifier {ident!r} not found in document")


class ArrayIndexOutOfBoundsError(ResolveError):
    def __init__(self, idx: int, length: int) -> None:
        self.idx = idx
        self.length = length
        super().__init__(f"array index {idx} out of bounds for length {length}")


class CannotDeleteNonEmptyTableError(ResolveError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"cannot delete non-empty table at {path!r}")


class CannotDeleteNonEmptyArrayError(ResolveError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"cannot delete non-empty array at {path!r}")


class TypeMismatchError(TomlQueryError, TypeError):
    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"type error: requested {expected}, but found {actual}")


class NotAvailableError(TomlQueryError, LookupError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"value at {path!r} not there")


class DeserializeError(TomlQueryError):
    """A resolved value could not be validated into the requested type."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot deserialize value at {path!r}: {reason}")


class SerializeError(TomlQueryError):
    """An object dumped for insertion contains something a document cannot hold."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot serialize value for {path!r}: {reason}")


__all__ = [
    "ArrayAccessWithInvalidIndexError",
    "ArrayAccessWithoutIndexError",
    "ArrayIndexOutOfBoundsError",
    "CannotDeleteNonEmptyArrayError",
    "CannotDeleteNonEmptyTableError",
    "DeserializeError",
    "EmptyIdentifierError",
    "EmptyQueryError",
    "IdentifierNotFoundInDocumentError",
    "NoIdentifierInArrayError",
    "NoIndexInTableError",
    "NotAvailableError",
    "QueryingValueAsArrayError",
    "QueryingValueAsTableError",
    "ResolveError",
    "SerializeError",
    "TokenizeError",
    "TomlQueryError",
    "TypeMismatchError",
]
