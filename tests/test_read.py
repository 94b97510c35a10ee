"""Tests for reading values by path."""

import pytest

from toml_query.errors import (
    NoIdentifierInArrayError,
    NoIndexInTableError,
    NotAvailableError,
    QueryingValueAsArrayError,
    QueryingValueAsTableError,
    TypeMismatchError,
)
from toml_query.read import (
    read,
    read_bool,
    read_float,
    read_int,
    read_mut,
    read_mut_with_separator,
    read_string,
    read_with_separator,
)
from toml_query.value import ValueRef


def test_read_empty(toml_doc) -> None:
    assert read(toml_doc(""), "a") is None


def test_read_table(toml_doc) -> None:
    doc = toml_doc(
        """
        [table]
        """
    )

    assert read(doc, "table") == {}


def test_read_table_value(toml_doc) -> None:
    doc = toml_doc(
        """
        [table]
        a = 1
        """
    )

    assert read(doc, "table.a") == 1


def test_read_empty_table_value(toml_doc) -> None:
    doc = toml_doc(
        """
        [table]
        """
    )

    assert read(doc, "table.a") is None


def test_read_table_index(toml_doc) -> None:
    doc = toml_doc(
        """
        [table]
        """
    )

    with pytest.raises(NoIndexInTableError) as excinfo:
        read(doc, "table.[0]")
    assert excinfo.value.idx == 0


def test_read_array_elements(toml_doc) -> None:
    doc = toml_doc(
        """
        values = [10, 20]
        [[items]]
        name = "first"
        [[items]]
        name = "second"
        """
    )

    assert read(doc, "values.[1]") == 20
    assert read(doc, "items.[1].name") == "second"
    assert read(doc, "values.[2]") is None


def test_read_negative_index_is_absent(toml_doc) -> None:
    doc = toml_doc("values = [10, 20]")

    assert read(doc, "values.[-1]") is None


def test_read_identifier_in_array_is_error(toml_doc) -> None:
    doc = toml_doc("values = [10, 20]")

    with pytest.raises(NoIdentifierInArrayError):
        read(doc, "values.first")


def test_read_through_scalar_is_error(toml_doc) -> None:
    doc = toml_doc('name = "x"')

    with pytest.raises(QueryingValueAsTableError):
        read(doc, "name.inner")
    with pytest.raises(QueryingValueAsArrayError):
        read(doc, "name.[0]")


def test_read_with_separator(toml_doc) -> None:
    doc = toml_doc(
        """
        [table]
        "a.b" = 1
        """
    )

    assert read_with_separator(doc, "table/a.b", "/") == 1


def test_read_mut_replaces_scalar(toml_doc) -> None:
    doc = toml_doc(
        """
        [table]
        a = 1
        """
    )

    ref = read_mut(doc, "table.a")
    assert isinstance(ref, ValueRef)
    assert ref.set(2) == 1
    assert doc["table"]["a"] == 2


def test_read_mut_mutates_container_in_place(toml_doc) -> None:
    doc = toml_doc("values = [1]")

    ref = read_mut_with_separator(doc, "values", "/")
    assert ref is not None
    ref.value.append(2)
    assert doc["values"] == [1, 2]


def test_read_mut_returns_none_when_absent(toml_doc) -> None:
    doc = toml_doc("values = [1]")

    assert read_mut(doc, "values.[3]") is None
    assert read_mut(doc, "missing.key") is None


def test_typed_getters(toml_doc) -> None:
    doc = toml_doc(
        """
        [table]
        s = "text"
        i = 1
        f = 1.5
        b = true
        """
    )

    assert read_string(doc, "table.s") == "text"
    assert read_int(doc, "table.i") == 1
    assert read_float(doc, "table.f") == 1.5
    assert read_bool(doc, "table.b") is True


def test_typed_getter_reports_missing_path(toml_doc) -> None:
    doc = toml_doc("[table]")

    with pytest.raises(NotAvailableError) as excinfo:
        read_int(doc, "table.a")
    assert excinfo.value.path == "table.a"


def test_typed_getter_reports_wrong_tag(toml_doc) -> None:
    doc = toml_doc(
        """
        flag = true
        count = 3
        """
    )

    with pytest.raises(TypeMismatchError) as excinfo:
        read_int(doc, "flag")
    assert (excinfo.value.expected, excinfo.value.actual) == ("Integer", "Boolean")

    with pytest.raises(TypeMismatchError):
        read_float(doc, "count")
    with pytest.raises(TypeMismatchError):
        read_bool(doc, "count")
