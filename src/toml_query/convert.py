"""Recursive conversion of owned document values into native shapes."""

from __future__ import annotations

import datetime
from typing import Any, TypeVar, cast, get_args, get_origin

from .errors import TypeMismatchError
from .types import ValueType
from .value import Value, name_of_value

T = TypeVar("T")

_SCALARS: dict[type, ValueType] = {
    bool: ValueType.BOOLEAN,
    int: ValueType.INTEGER,
    float: ValueType.FLOAT,
    str: ValueType.STRING,
}
_DATETIMES = (datetime.datetime, datetime.date, datetime.time)


def _expect(value: Value, expected: ValueType) -> None:
    if not expected.matches(value):
        raise TypeMismatchError(expected.display_name, name_of_value(value))


def from_value(value: Value, target: type[T] | Any) -> T:
    """Convert ``value`` into ``target``.

    Supported targets are ``str``, ``int``, ``float``, ``bool``, the
    ``datetime`` types, ``Value``/``object``/``Any`` (returned as is),
    ``list[X]`` and ``dict[str, X]`` for any supported ``X``. Tags must
    match exactly; an integer is not converted to a float. Containers fail
    on their first element that does not convert.
    """
    if target is Any or target is object or target is Value:
        name_of_value(value)
        return cast(T, value)

    if target in _SCALARS:
        _expect(value, _SCALARS[target])
        return cast(T, value)

    if target in _DATETIMES:
        _expect(value, ValueType.DATETIME)
        if type(value) is not target:
            raise TypeMismatchError(target.__name__, type(value).__name__)
        return cast(T, value)

    origin = get_origin(target)
    args = get_args(target)

    if target is list or origin is list:
        _expect(value, ValueType.ARRAY)
        item_type = args[0] if args else Any
        return cast(T, [from_value(item, item_type) for item in cast(list, value)])

    if target is dict or origin is dict:
        _expect(value, ValueType.TABLE)
        if args and args[0] is not str:
            raise TypeError(f"table keys are strings, cannot convert to {target!r}")
        item_type = args[1] if args else Any
        return cast(
            T,
            {key: from_value(item, item_type) for key, item in cast(dict, value).items()},
        )

    raise TypeError(f"unsupported conversion target {target!r}")


__all__ = ["from_value"]
