"""Indexers: map index values onto positions in flat, contiguous storage."""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum
from typing import Any


class OutOfRangeError(IndexError):
    """Raised when an index value is not handled by an indexer."""


def integral_value(value: Any) -> int:
    """Return the integer behind an integer or an integer-valued enum member."""
    if isinstance(value, Enum):
        raw = value.value
        if isinstance(raw, int) and not isinstance(raw, Enum):
            return int(raw)
        raise TypeError(f"enum member {value!r} has no integral value")
    if isinstance(value, int):
        return int(value)
    raise TypeError(f"{value!r} is neither an integer nor an enum member")


def is_contiguous(values) -> bool:
    """Tell whether values are of one type, non-decreasing, with steps of at most one.

    An empty sequence is not contiguous; a single value is.
    """
    items = list(values)
    if not items:
        return False
    try:
        numbers = [integral_value(v) for v in items]
    except TypeError:
        return False
    for (a, na), (b, nb) in itertools.pairwise(zip(items, numbers)):
        if type(a) is not type(b) or nb - na > 1 or na > nb:
            return False
    return True


def _index_type(value: Any) -> type:
    if isinstance(value, Enum):
        return type(value)
    if isinstance(value, int):
        return int
    raise TypeError(f"{value!r} cannot be used as an index value")


def _matches(kind: type, value: Any) -> bool:
    if kind is int:
        return isinstance(value, int) and not isinstance(value, Enum)
    return isinstance(value, kind)


class Indexer(ABC):
    """Turns index arguments into a position in ``range(size)``."""

    size: int
    is_o1: bool

    @abstractmethod
    def at(self, *args) -> int:
        """Return the position for the arguments, raising OutOfRangeError if invalid."""

    @abstractmethod
    def in_range(self, *args) -> bool:
        """Tell whether the arguments designate a valid position."""

    @abstractmethod
    def accepts(self, *args) -> bool:
        """Tell whether the indexer can be called with arguments of these types."""

    def keys(self) -> Iterator:
        """Iterate over the index values in storage order."""
        raise TypeError(f"{type(self).__name__} does not enumerate its index values")

    def _require(self, args: tuple) -> None:
        if not self.accepts(*args):
            raise TypeError(f"{self!r} cannot be indexed with {args!r}")

    def _identity(self) -> tuple:
        return (id(self),)

    def __eq__(self, other: object):
        if type(self) is not type(other):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((type(self), self._identity()))


class _ScalarIndexer(Indexer):
    """An indexer taking exactly one argument."""

    @abstractmethod
    def _accepts_value(self, value: Any) -> bool: ...

    @abstractmethod
    def _contains(self, value: Any) -> bool: ...

    @abstractmethod
    def _offset(self, value: Any) -> int: ...

    def accepts(self, *args) -> bool:
        return len(args) == 1 and self._accepts_value(args[0])

    def in_range(self, *args) -> bool:
        self._require(args)
        return self._contains(args[0])

    def at(self, *args) -> int:
        self._require(args)
        value = args[0]
        if not self._contains(value):
            raise OutOfRangeError(f"Invalid index: {value!r}")
        return self._offset(value)


class IndexRange(_ScalarIndexer):
    """All values from minimum to maximum, both inclusive."""

    def __init__(self, minimum, maximum):
        kind = _index_type(minimum)
        if not _matches(kind, maximum):
            raise TypeError(f"bounds {minimum!r} and {maximum!r} are not of the same type")
        low, high = integral_value(minimum), integral_value(maximum)
        if low > high:
            raise ValueError("Bounds must form a non-empty range, min <= max")
        self.minimum = minimum
        self.maximum = maximum
        self._kind = kind
        self._low = low
        self._high = high
        self.size = high - low + 1
        self.is_o1 = True

    def _accepts_value(self, value: Any) -> bool:
        return _matches(self._kind, value)

    def _contains(self, value: Any) -> bool:
        return self._low <= integral_value(value) <= self._high

    def _offset(self, value: Any) -> int:
        return integral_value(value) - self._low

    def keys(self) -> Iterator:
        """Iterate over the range; enum values without a member raise ValueError."""
        numbers = range(self._low, self._high + 1)
        if self._kind is int:
            yield from numbers
        else:
            yield from (self._kind(n) for n in numbers)

    def _identity(self) -> tuple:
        return (self._kind, self.minimum, self.maximum)

    def __repr__(self) -> str:
        return f"IndexRange({self.minimum!r}, {self.maximum!r})"


class ValueSequence(_ScalarIndexer):
    """An explicit list of index values, stored in the given order."""

    def __init__(self, *args):
        values = tuple(args)
        kind = _index_type(values[0]) if values else int
        for value in values:
            if not _matches(kind, value):
                raise TypeError(f"{value!r} does not have the type of the other values")
        self.values = values
        self._kind = kind
        self.is_o1 = is_contiguous(values)
        if self.is_o1:
            self._low = integral_value(values[0])
            self._high = integral_value(values[-1])
            self._positions: dict[Any, int] = {}
            self.size = self._high - self._low + 1
        else:
            self._positions = {v: i for i, v in enumerate(dict.fromkeys(values))}
            self.size = len(self._positions)

    def _accepts_value(self, value: Any) -> bool:
        return _matches(self._kind, value)

    def _contains(self, value: Any) -> bool:
        if self.is_o1:
            return self._low <= integral_value(value) <= self._high
        return value in self._positions

    def _offset(self, value: Any) -> int:
        if self.is_o1:
            return integral_value(value) - self._low
        return self._positions[value]

    def keys(self) -> Iterator:
        return iter(dict.fromkeys(self.values))

    def _identity(self) -> tuple:
        return (self._kind, self.values)

    def __repr__(self) -> str:
        return f"ValueSequence{self.values!r}"


class EnumIndexer(_ScalarIndexer):
    """Indexes by the members of an enum, in declaration order."""

    def __init__(self, enum_type):
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise TypeError(f"{enum_type!r} is not an enum type")
        self.enum_type = enum_type
        self._sequence = ValueSequence(*enum_type)
        self.size = self._sequence.size
        self.is_o1 = self._sequence.is_o1

    def _accepts_value(self, value: Any) -> bool:
        return isinstance(value, self.enum_type)

    def _contains(self, value: Any) -> bool:
        return self._sequence._contains(value)

    def _offset(self, value: Any) -> int:
        return self._sequence._offset(value)

    def keys(self) -> Iterator:
        return self._sequence.keys()

    def _identity(self) -> tuple:
        return (self.enum_type,)

    def __repr__(self) -> str:
        return f"EnumIndexer({self.enum_type.__name__})"


def _as_indexer(arg: Any) -> Indexer:
    if isinstance(arg, Indexer):
        return arg
    if isinstance(arg, type) and issubclass(arg, Enum):
        return EnumIndexer(arg)
    raise TypeError(f"{arg!r} cannot be turned into an indexer")


class MultiIndexer(Indexer):
    """Row-major combination of several indexers, one argument per dimension."""

    def __init__(self, *args):
        if len(args) < 2:
            raise ValueError("a multi-dimensional indexer needs at least two indexers")
        self.indexers = tuple(_as_indexer(a) for a in args)
        self.root_indexer = self.indexers[0]
        self.slice_indexer = make_indexer(*self.indexers[1:])
        self.size = math.prod(ix.size for ix in self.indexers)
        self.is_o1 = all(ix.is_o1 for ix in self.indexers)
        strides = []
        stride = 1
        for ix in reversed(self.indexers):
            strides.append(stride)
            stride *= ix.size
        self._strides = tuple(reversed(strides))

    def accepts(self, *args) -> bool:
        return len(args) == len(self.indexers) and all(
            ix.accepts(a) for ix, a in zip(self.indexers, args)
        )

    def in_range(self, *args) -> bool:
        self._require(args)
        return all(ix.in_range(a) for ix, a in zip(self.indexers, args))

    def at(self, *args) -> int:
        self._require(args)
        return sum(
            ix.at(a) * stride for ix, a, stride in zip(self.indexers, args, self._strides)
        )

    def keys(self) -> Iterator:
        return itertools.product(*(ix.keys() for ix in self.indexers))

    def _identity(self) -> tuple:
        return self.indexers

    def __repr__(self) -> str:
        return "MultiIndexer(" + ", ".join(repr(ix) for ix in self.indexers) + ")"


def make_indexer(*args) -> Indexer:
    """Build one indexer from indexers and enum types; several give a MultiIndexer."""
    if not args:
        raise TypeError("make_indexer() needs at least one index description")
    if len(args) == 1:
        return _as_indexer(args[0])
    return MultiIndexer(*args)