# topmark:header:start
#
#   project      : Mimic
#   file         : model.py
#   file_relpath : src/mimic/headers/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered, multi-valued header collection.

Unlike a mapping, a [`HeaderCollection`][mimic.headers.model.HeaderCollection]
keeps every entry it is given: names are neither deduplicated nor case-folded,
and both the entry order and each entry's value order are preserved.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple, overload


class HeaderEntry(NamedTuple):
    """One header name with its ordered values (possibly none)."""

    name: str
    values: tuple[str, ...]


class HeaderCollection(Sequence[HeaderEntry]):
    """An ordered sequence of [`HeaderEntry`][mimic.headers.model.HeaderEntry] items.

    Args:
        entries (Iterable[tuple[str, Iterable[str]]]): Initial ``(name, values)`` pairs.

    Examples:
        >>> headers = HeaderCollection([("A", ["ABC", "DEF"]), ("A", ["GHI"])])
        >>> len(headers)
        2
        >>> headers.get_all("A")
        ['ABC', 'DEF', 'GHI']
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[tuple[str, Iterable[str]]] = ()) -> None:
        self._entries: list[HeaderEntry] = []
        for name, values in entries:
            self.add(name, values)

    def add(self, name: str, values: Iterable[str] = ()) -> HeaderEntry:
        """Append a new entry at the end of the collection.

        Args:
            name (str): Header name, kept exactly as given.
            values (Iterable[str]): Header values, in order.

        Returns:
            HeaderEntry: The appended entry.

        Raises:
            TypeError: If the name or a value is not a string.
        """
        if not isinstance(name, str):
            raise TypeError(f"Header name must be a str, got {type(name).__name__}")
        if isinstance(values, str):
            # A bare string would otherwise be split into characters
            raise TypeError(f"Values of header {name!r} must be an iterable of str, got str")
        frozen: tuple[str, ...] = tuple(values)
        for value in frozen:
            if not isinstance(value, str):
                raise TypeError(
                    f"Values of header {name!r} must be str, got {type(value).__name__}"
                )
        entry = HeaderEntry(name, frozen)
        self._entries.append(entry)
        return entry

    def get_all(self, name: str) -> list[str]:
        """Return the values of every entry named exactly ``name``, in order."""
        return [value for entry in self._entries if entry.name == name for value in entry.values]

    def names(self) -> list[str]:
        """Return the entry names in order, including repeats."""
        return [entry.name for entry in self._entries]

    @overload
    def __getitem__(self, index: int) -> HeaderEntry: ...

    @overload
    def __getitem__(self, index: slice) -> HeaderCollection: ...

    def __getitem__(self, index: int | slice) -> HeaderEntry | HeaderCollection:
        if isinstance(index, slice):
            return HeaderCollection(self._entries[index])
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HeaderEntry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderCollection):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"({e.name!r}, {list(e.values)!r})" for e in self._entries)
        return f"HeaderCollection([{items}])"
