"""Fixed-size arrays addressed through an indexer instead of plain positions."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .indexers import Indexer, MultiIndexer, make_indexer
from .safe_arg import SafeArg, check_safe_args
from .span import IndexedSpan


def _resolve_indexer(indexer: Any) -> Indexer:
    if isinstance(indexer, Indexer):
        return indexer
    if isinstance(indexer, (tuple, list)):
        return make_indexer(*indexer)
    return make_indexer(indexer)


def _key_args(key: Any) -> tuple:
    return key if isinstance(key, tuple) else (key,)


class IndexedArray:
    """An array of ``indexer.size`` items, accessed by index values.

    ``indexer`` is an Indexer, an enum type, or a tuple of index descriptions
    (one per dimension). ``values`` may be plain values, stored in order and
    padded with None when fewer than the size, or ``safe_arg`` initializers,
    which must then cover every slot in storage order.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, indexer, values: Iterable | None = None):
        self._indexer = _resolve_indexer(indexer)
        size = self._indexer.size
        if values is None:
            self._data: list = [None] * size
            return
        items = list(values)
        tagged = [isinstance(item, SafeArg) for item in items]
        if any(tagged):
            if not all(tagged):
                raise TypeError("safe_arg initializers cannot be mixed with plain values")
            self._data = check_safe_args(self._indexer, items)
            return
        if len(items) > size:
            raise ValueError("Too many initializers provided")
        self._data = items + [None] * (size - len(items))

    @property
    def indexer(self) -> Indexer:
        return self._indexer

    @property
    def is_o1(self) -> bool:
        return self._indexer.is_o1

    def _position(self, args: tuple) -> int:
        return self._indexer.at(*args)

    def at(self, *args):
        """Return the item for the index arguments; raises OutOfRangeError if invalid."""
        return self._data[self._position(args)]

    def __getitem__(self, key):
        return self._data[self._position(_key_args(key))]

    def __setitem__(self, key, value) -> None:
        self._data[self._position(_key_args(key))] = value

    def __call__(self, *args):
        return self._data[self._position(args)]

    def _sub_span(self, key) -> IndexedSpan:
        if not isinstance(self._indexer, MultiIndexer):
            raise TypeError(f"{self._indexer!r} has no dimension to slice along")
        sub = self._indexer.slice_indexer
        start = self._indexer.root_indexer.at(key) * sub.size
        return IndexedSpan(self._data, sub, start)

    def slice(self, key) -> IndexedSpan:
        """Return a view over the remaining dimensions for one first-dimension value."""
        return self._sub_span(key)

    def slice_at(self, key) -> IndexedSpan:
        """Same as slice; raises OutOfRangeError for an invalid first-dimension value."""
        return self._sub_span(key)

    def in_range(self, *args) -> bool:
        return self._indexer.in_range(*args)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __reversed__(self) -> Iterator:
        return reversed(self._data)

    def __len__(self) -> int:
        return self._indexer.size

    def _comparable(self, other: object) -> bool:
        return isinstance(other, IndexedArray) and self._indexer == other._indexer

    def __eq__(self, other: object):
        if not self._comparable(other):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: object):
        if not self._comparable(other):
            return NotImplemented
        return self._data < other._data

    def __le__(self, other: object):
        if not self._comparable(other):
            return NotImplemented
        return self._data <= other._data

    def __gt__(self, other: object):
        if not self._comparable(other):
            return NotImplemented
        return self._data > other._data

    def __ge__(self, other: object):
        if not self._comparable(other):
            return NotImplemented
        return self._data >= other._data

    def front(self):
        if self.empty():
            raise IndexError("front() of an empty array")
        return self._data[0]

    def back(self):
        if self.empty():
            raise IndexError("back() of an empty array")
        return self._data[-1]

    def size(self) -> int:
        return self._indexer.size

    def empty(self) -> bool:
        return self._indexer.size == 0

    def fill(self, value) -> None:
        """Set every item to ``value``."""
        self._data[:] = [value] * len(self._data)

    def swap(self, other: IndexedArray) -> None:
        """Exchange contents with another array using the same indexer."""
        if not self._comparable(other):
            raise TypeError("can only swap with an array using the same indexer")
        self._data, other._data = other._data, self._data

    def copy(self) -> IndexedArray:
        """Return a shallow copy."""
        return IndexedArray(self._indexer, self._data)

    def __repr__(self) -> str:
        return f"IndexedArray({self._indexer!r}, {self._data!r})"


def for_each(container, func: Callable[[Any, Any], Any]) -> None:
    """Call ``func(key, value)`` for each item of an array or span, in storage order."""
    indexer = getattr(container, "indexer", None)
    if not isinstance(indexer, Indexer):
        raise TypeError(f"{container!r} is not an indexed container")
    for key, value in zip(indexer.keys(), container):
        func(key, value)