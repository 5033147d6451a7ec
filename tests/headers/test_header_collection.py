# topmark:header:start
#
#   project      : Mimic
#   file         : test_header_collection.py
#   file_relpath : tests/headers/test_header_collection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the ordered, multi-valued `HeaderCollection`."""

from __future__ import annotations

import pytest

from mimic.headers.model import HeaderCollection, HeaderEntry
from tests.conftest import parametrize


def test_collection_keeps_order_and_repeats() -> None:
    """Entries are neither merged nor reordered."""
    headers = HeaderCollection()
    headers.add("B", ["2"])
    headers.add("A", ["1"])
    headers.add("B", ["3", "4"])

    assert headers.names() == ["B", "A", "B"]
    assert list(headers) == [
        HeaderEntry("B", ("2",)),
        HeaderEntry("A", ("1",)),
        HeaderEntry("B", ("3", "4")),
    ]
    assert headers.get_all("B") == ["2", "3", "4"]


def test_names_are_case_sensitive() -> None:
    """Names are kept exactly as given and matched exactly."""
    headers = HeaderCollection([("Accept", ["a"]), ("accept", ["b"])])

    assert headers.get_all("Accept") == ["a"]
    assert headers.get_all("ACCEPT") == []


def test_entry_without_values() -> None:
    """An entry may carry no values."""
    headers = HeaderCollection()

    entry: HeaderEntry = headers.add("X-Empty")

    assert entry.values == ()
    assert len(headers) == 1


def test_indexing_and_slicing() -> None:
    """Integer indexes yield entries, slices yield collections."""
    headers = HeaderCollection([("A", ["1"]), ("B", ["2"]), ("C", [])])

    assert headers[1] == HeaderEntry("B", ("2",))
    assert headers[-1].name == "C"
    assert headers[:2] == HeaderCollection([("A", ["1"]), ("B", ["2"])])


def test_equality_compares_entries() -> None:
    """Collections compare equal when their entries match in order."""
    assert HeaderCollection([("A", ["1"])]) == HeaderCollection([("A", ("1",))])
    assert HeaderCollection([("A", ["1"]), ("B", [])]) != HeaderCollection(
        [("B", []), ("A", ["1"])]
    )
    assert HeaderCollection() != []


def test_collection_is_unhashable() -> None:
    """Collections are mutable, so they cannot be hashed."""
    with pytest.raises(TypeError):
        hash(HeaderCollection())


@parametrize(
    "name, values",
    [
        (None, ["v"]),
        (42, ["v"]),
        ("A", "value"),
        ("A", ["ok", 7]),
    ],
)
def test_add_rejects_non_string_input(name: object, values: object) -> None:
    """Names must be str and values an iterable of str."""
    with pytest.raises(TypeError):
        HeaderCollection().add(name, values)  # type: ignore[arg-type]


def test_repr_lists_entries() -> None:
    """repr() shows the entries in order."""
    assert repr(HeaderCollection([("A", ["1"])])) == "HeaderCollection([('A', ['1'])])"
