"""
toml_query: read, insert, set and delete values in a TOML document by path.

This package uses a src-layout. Import the package as `toml_query`.
"""

from importlib.metadata import version

__version__ = version("toml-query")

from .config import QueryConfig, get_config, set_config
from .convert import from_value
from .delete import delete, delete_with_separator
from .errors import (
    ArrayAccessWithInvalidIndexError,
    ArrayAccessWithoutIndexError,
    ArrayIndexOutOfBoundsError,
    CannotDeleteNonEmptyArrayError,
    CannotDeleteNonEmptyTableError,
    DeserializeError,
    EmptyIdentifierError,
    EmptyQueryError,
    IdentifierNotFoundInDocumentError,
    NoIdentifierInArrayError,
    NoIndexInTableError,
    NotAvailableError,
    QueryingValueAsArrayError,
    QueryingValueAsTableError,
    ResolveError,
    SerializeError,
    TokenizeError,
    TomlQueryError,
    TypeMismatchError,
)
from .insert import insert, insert_serialized, insert_with_separator
from .query import (
    Chain,
    Delete,
    FnQuery,
    Insert,
    Query,
    QueryExecutor,
    Read,
    ReadType,
    ResetExecutor,
    Set,
    query,
)
from .read import (
    read,
    read_bool,
    read_deserialized,
    read_float,
    read_int,
    read_mut,
    read_mut_with_separator,
    read_string,
    read_with_separator,
)
from .runtime import configure_logging, get_logger
from .set import set_value, set_with_separator
from .tokenizer import Identifier, Index, Token, tokenize, tokenize_with_separator
from .types import ValueType, as_type
from .value import Value, ValueRef, name_of_value

__all__ = [
    "__version__",
    "ArrayAccessWithInvalidIndexError",
    "ArrayAccessWithoutIndexError",
    "ArrayIndexOutOfBoundsError",
    "CannotDeleteNonEmptyArrayError",
    "CannotDeleteNonEmptyTableError",
    "Chain",
    "Delete",
    "DeserializeError",
    "EmptyIdentifierError",
    "EmptyQueryError",
    "FnQuery",
    "Identifier",
    "IdentifierNotFoundInDocumentError",
    "Index",
    "Insert",
    "NoIdentifierInArrayError",
    "NoIndexInTableError",
    "NotAvailableError",
    "Query",
    "QueryConfig",
    "QueryExecutor",
    "QueryingValueAsArrayError",
    "QueryingValueAsTableError",
    "Read",
    "ReadType",
    "ResetExecutor",
    "ResolveError",
    "SerializeError",
    "Set",
    "Token",
    "TokenizeError",
    "TomlQueryError",
    "TypeMismatchError",
    "Value",
    "ValueRef",
    "ValueType",
    "as_type",
    "configure_logging",
    "delete",
    "delete_with_separator",
    "from_value",
    "get_config",
    "get_logger",
    "insert",
    "insert_serialized",
    "insert_with_separator",
    "name_of_value",
    "query",
    "read",
    "read_bool",
    "read_deserialized",
    "read_float",
    "read_int",
    "read_mut",
    "read_mut_with_separator",
    "read_string",
    "read_with_separator",
    "set_config",
    "set_value",
    "set_with_separator",
    "tokenize",
    "tokenize_with_separator",
]
