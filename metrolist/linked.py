"""Doubly linked lists of cities, each holding a doubly linked list of names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

MAX_CITIES = 20
STR_MAX = 50


@dataclass(eq=False)
class NameNode:
    """A person's name inside a city's list."""

    name: str
    prev: Optional["NameNode"] = field(default=None, repr=False)
    next: Optional["NameNode"] = field(default=None, repr=False)


@dataclass(eq=False)
class CityNode:
    """A city together with the list of people living in it."""

    name: str
    people: "NameList" = field(default_factory=lambda: NameList())
    prev: Optional["CityNode"] = field(default=None, repr=False)
    next: Optional["CityNode"] = field(default=None, repr=False)


_N = TypeVar("_N", NameNode, CityNode)


class _LinkedList(Generic[_N]):
    """Shared doubly linked list machinery keyed by node name."""

    _node_type: type

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._head: Optional[_N] = None
        self._tail: Optional[_N] = None
        self._size = 0
        for name in names:
            self._append(name)

    def _nodes(self) -> Iterator[_N]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _nodes_reversed(self) -> Iterator[_N]:
        node = self._tail
        while node is not None:
            yield node
            node = node.prev

    def _find(self, name: str) -> Optional[_N]:
        return next((node for node in self._nodes() if node.name == name), None)

    def _require(self, name: str) -> _N:
        node = self._find(name)
        if node is None:
            raise KeyError(name)
        return node

    def _append(self, name: str) -> _N:
        node = self._node_type(name)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._size += 1
        return node

    def _insert_after(self, before: str, name: str) -> _N:
        anchor = self._require(before)
        node = self._node_type(name)
        node.prev = anchor
        node.next = anchor.next
        if anchor.next is not None:
            anchor.next.prev = node
        else:
            self._tail = node
        anchor.next = node
        self._size += 1
        return node

    def _remove(self, name: str) -> _N:
        node = self._require(name)
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node

    def _rename(self, old: str, new: str) -> _N:
        node = self._require(old)
        node.name = new
        return node

    def clear(self) -> None:
        """Drop every node."""
        for node in list(self._nodes()):
            node.prev = node.next = None
        self._head = self._tail = None
        self._size = 0


class NameList(_LinkedList[NameNode]):
    """Ordered list of people's names; iterates over the names."""

    _node_type = NameNode

    def append(self, name: str) -> NameNode:
        """Add ``name`` at the end and return its node."""
        return self._append(name)

    def insert_after(self, before: str, name: str) -> NameNode:
        """Insert ``name`` right after ``before``; raises KeyError if absent."""
        return self._insert_after(before, name)

    def remove(self, name: str) -> NameNode:
        """Unlink and return the first node called ``name``; raises KeyError if absent."""
        return self._remove(name)

    def clear(self) -> None:
        """Drop every name."""
        super().clear()

    def rename(self, old: str, new: str) -> NameNode:
        """Rename the first node called ``old``; raises KeyError if absent."""
        return self._rename(old, new)

    def find(self, name: str) -> Optional[NameNode]:
        """Return the first node called ``name``, or None."""
        return self._find(name)

    def __iter__(self) -> Iterator[str]:
        return (node.name for node in self._nodes())

    def __reversed__(self) -> Iterator[str]:
        return (node.name for node in self._nodes_reversed())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._find(name) is not None

    def __repr__(self) -> str:
        return f"NameList({list(self)!r})"


class CityList(_LinkedList[CityNode]):
    """Ordered list of cities; iterates over the city nodes."""

    _node_type = CityNode

    def append(self, name: str) -> CityNode:
        """Add a city called ``name`` at the end and return it."""
        return self._append(name)

    def insert_after(self, before: str, name: str) -> CityNode:
        """Insert a city right after ``before``; raises KeyError if absent."""
        return self._insert_after(before, name)

    def remove(self, name: str) -> CityNode:
        """Unlink and return the city called ``name``; raises KeyError if absent."""
        return self._remove(name)

    def rename(self, old: str, new: str) -> CityNode:
        """Rename the city called ``old``; raises KeyError if absent."""
        return self._rename(old, new)

    def find(self, name: str) -> Optional[CityNode]:
        """Return the first city called ``name``, or None."""
        return self._find(name)

    def __iter__(self) -> Iterator[CityNode]:
        return self._nodes()

    def __reversed__(self) -> Iterator[CityNode]:
        return self._nodes_reversed()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._find(name) is not None

    def __repr__(self) -> str:
        return f"CityList({[city.name for city in self]!r})"


def format_names(names: Iterable[str]) -> str:
    """One indented bullet line per name, in order."""
    return "".join(f"   - {name}\n" for name in names)


def format_names_reversed(names: NameList) -> str:
    """Names from last to first, or an empty-list marker."""
    if not len(names):
        return "  (Kosong)\n"
    return "".join(f"  - {name}\n" for name in reversed(names))


def format_cities(cities: Iterable[CityNode]) -> str:
    """Every city with the names of its people."""
    return "".join(
        f"\n? Kota: {city.name}\n" + format_names(city.people) for city in cities
    )


def format_cities_reversed(cities: CityList) -> str:
    """City names only, from last to first."""
    return "".join(f"\n? Kota: {city.name}\n" for city in reversed(cities))