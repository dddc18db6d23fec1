"""Fixed-size bit sets addressed through an indexer instead of bit positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .indexers import Indexer, make_indexer
from .safe_arg import SafeArg, check_safe_args


def _resolve_indexer(indexer: Any) -> Indexer:
    if isinstance(indexer, Indexer):
        return indexer
    if isinstance(indexer, (tuple, list)):
        return make_indexer(*indexer)
    return make_indexer(indexer)


def _key_args(key: Any) -> tuple:
    return key if isinstance(key, tuple) else (key,)


class IndexedBitset:
    """A set of ``indexer.size`` bits, each addressed by index values.

    ``bits`` is either a non-negative integer, whose low ``size`` bits give the
    initial content (bit 0 being the first position of the indexer), or an
    iterable of ``safe_arg`` initializers covering every slot in storage order.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, indexer, bits: int | Iterable[SafeArg] = 0):
        self._indexer = _resolve_indexer(indexer)
        self._mask = (1 << self._indexer.size) - 1
        if isinstance(bits, int):
            if bits < 0:
                raise ValueError("initial bits must be a non-negative integer")
            self._bits = int(bits) & self._mask
            return
        values = check_safe_args(self._indexer, bits)
        self._bits = sum(int(bool(v)) << position for position, v in enumerate(values))

    @property
    def indexer(self) -> Indexer:
        return self._indexer

    @property
    def is_o1(self) -> bool:
        return self._indexer.is_o1

    def _bit(self, args: tuple) -> int:
        return 1 << self._indexer.at(*args)

    def test(self, *args) -> bool:
        """Return the bit for the index arguments; raises OutOfRangeError if invalid."""
        return bool(self._bits & self._bit(args))

    def set(self, *args) -> IndexedBitset:
        """Set the bit for the index arguments to one."""
        self._bits |= self._bit(args)
        return self

    def reset(self, *args) -> IndexedBitset:
        """Set the bit for the index arguments to zero."""
        self._bits &= ~self._bit(args)
        return self

    def flip(self, *args) -> IndexedBitset:
        """Invert the bit for the index arguments."""
        self._bits ^= self._bit(args)
        return self

    def __getitem__(self, key) -> bool:
        return self.test(*_key_args(key))

    def __setitem__(self, key, value) -> None:
        args = _key_args(key)
        if value:
            self.set(*args)
        else:
            self.reset(*args)

    def __call__(self, *args) -> bool:
        return self.test(*args)

    def in_range(self, *args) -> bool:
        return self._indexer.in_range(*args)

    def size(self) -> int:
        return self._indexer.size

    def __len__(self) -> int:
        return self._indexer.size

    def __iter__(self) -> Iterator[bool]:
        return (bool(self._bits >> i & 1) for i in range(self._indexer.size))

    def count(self) -> int:
        """Return the number of bits set."""
        return bin(self._bits).count("1")

    def all(self) -> bool:
        return self._bits == self._mask

    def any(self) -> bool:
        return self._bits != 0

    def none(self) -> bool:
        return self._bits == 0

    def to_int(self) -> int:
        """Return the bits as an integer, the first position being bit 0."""
        return self._bits

    def __eq__(self, other: object):
        if not isinstance(other, IndexedBitset) or self._indexer != other._indexer:
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        width = self._indexer.size
        return f"IndexedBitset({self._indexer!r}, 0b{self._bits:0{max(width, 1)}b})"