"""Tests for replacing values at existing paths."""

import pytest

from toml_query.errors import (
    ArrayIndexOutOfBoundsError,
    IdentifierNotFoundInDocumentError,
    NoIdentifierInArrayError,
    NoIndexInTableError,
    QueryingValueAsTableError,
)
from toml_query.set import set_value, set_with_separator


def test_set_replaces_table_entry(toml_doc) -> None:
    doc = toml_doc(
        """
        [table]
        a = 1
        """
    )

    assert set_value(doc, "table.a", 2) == 1
    assert doc == {"table": {"a": 2}}


def test_set_adds_key_to_existing_table(toml_doc) -> None:
    doc = toml_doc("[table]")

    assert set_value(doc, "table.a", 1) is None
    assert doc == {"table": {"a": 1}}


def test_set_replaces_array_element(toml_doc) -> None:
    doc = toml_doc("array = [1, 2]")

    assert set_with_separator(doc, "array/[1]", "/", 5) == 2
    assert doc["array"] == [1, 5]


def test_set_requires_intermediate_nodes(toml_doc) -> None:
    doc = toml_doc("[table]")

    with pytest.raises(IdentifierNotFoundInDocumentError) as excinfo:
        set_value(doc, "table.missing.a", 1)
    assert excinfo.value.ident == "missing"
    assert doc == {"table": {}}


def test_set_index_out_of_bounds(toml_doc) -> None:
    doc = toml_doc("array = [1]")

    with pytest.raises(ArrayIndexOutOfBoundsError) as excinfo:
        set_value(doc, "array.[1]", 2)
    assert (excinfo.value.idx, excinfo.value.length) == (1, 1)


def test_set_structural_errors(toml_doc) -> None:
    doc = toml_doc(
        """
        name = "n"
        array = [1]
        [table]
        """
    )

    with pytest.raises(NoIndexInTableError):
        set_value(doc, "table.[0]", 1)
    with pytest.raises(NoIdentifierInArrayError):
        set_value(doc, "array.a", 1)
    with pytest.raises(QueryingValueAsTableError):
        set_value(doc, "name.a", 1)
