"""A view giving indexed access to a region of a mutable sequence."""

from __future__ import annotations

import itertools
from collections.abc import Iterator, MutableSequence
from typing import Any

from .indexers import Indexer, MultiIndexer, make_indexer


def _key_args(key: Any) -> tuple:
    return key if isinstance(key, tuple) else (key,)


class IndexedSpan:
    """Indexed view over ``indexer.size`` items of ``data`` starting at ``offset``."""

    def __init__(self, data: MutableSequence, indexer, offset: int = 0):
        if not isinstance(indexer, Indexer):
            indexer = make_indexer(indexer)
        if offset < 0 or offset + indexer.size > len(data):
            raise ValueError("the span does not fit inside the underlying data")
        self.data = data
        self.indexer = indexer
        self.offset = offset
        self.is_o1 = indexer.is_o1

    def _position(self, args: tuple) -> int:
        return self.offset + self.indexer.at(*args)

    def at(self, *args):
        """Return the item for the index arguments."""
        return self.data[self._position(args)]

    def __getitem__(self, key):
        return self.data[self._position(_key_args(key))]

    def __setitem__(self, key, value) -> None:
        self.data[self._position(_key_args(key))] = value

    def __call__(self, *args):
        return self.data[self._position(args)]

    def _sub_span(self, key) -> IndexedSpan:
        if not isinstance(self.indexer, MultiIndexer):
            raise TypeError(f"{self.indexer!r} has no dimension to slice along")
        sub = self.indexer.slice_indexer
        start = self.offset + self.indexer.root_indexer.at(key) * sub.size
        return IndexedSpan(self.data, sub, start)

    def slice(self, key) -> IndexedSpan:
        """Return the view of the remaining dimensions for one first-dimension value."""
        return self._sub_span(key)

    def slice_at(self, key) -> IndexedSpan:
        """Same as slice; raises OutOfRangeError for an invalid first-dimension value."""
        return self._sub_span(key)

    def in_range(self, *args) -> bool:
        return self.indexer.in_range(*args)

    def __iter__(self) -> Iterator:
        return itertools.islice(self.data, self.offset, self.offset + self.indexer.size)

    def __reversed__(self) -> Iterator:
        positions = range(self.offset, self.offset + self.indexer.size)
        return (self.data[i] for i in reversed(positions))

    def __len__(self) -> int:
        return self.indexer.size

    def front(self):
        if self.empty():
            raise IndexError("front() of an empty span")
        return self.data[self.offset]

    def back(self):
        if self.empty():
            raise IndexError("back() of an empty span")
        return self.data[self.offset + self.indexer.size - 1]

    def size(self) -> int:
        return self.indexer.size

    def empty(self) -> bool:
        return self.indexer.size == 0

    def __repr__(self) -> str:
        return f"IndexedSpan({list(self)!r}, {self.indexer!r})"