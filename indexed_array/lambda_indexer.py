"""Indexer built from a function that maps index arguments to positions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .indexers import Indexer, IndexRange


class LambdaIndexer(Indexer):
    """Indexer delegating the computation of the position to a function.

    The function receives the index arguments and returns an integer position,
    which must lie in ``range(size)`` for the arguments to be valid. A function
    that cannot handle its arguments is expected to raise TypeError (an
    AttributeError is treated the same way).
    """

    def __init__(self, func: Callable[..., int], size: int, is_o1: bool = True):
        if not callable(func):
            raise TypeError(f"{func!r} is not callable")
        if size < 1:
            raise ValueError("a function indexer needs a size of at least one")
        self.func = func
        self._positions = IndexRange(0, size - 1)
        self.size = self._positions.size
        self.is_o1 = bool(is_o1)

    def _position(self, args: tuple) -> int:
        try:
            result: Any = self.func(*args)
        except (TypeError, AttributeError) as exc:
            raise TypeError(f"{self!r} cannot be indexed with {args!r}") from exc
        if isinstance(result, bool) or not isinstance(result, int):
            raise TypeError(f"index function returned {result!r}, not an integer")
        return result

    def at(self, *args) -> int:
        return self._positions.at(self._position(args))

    def in_range(self, *args) -> bool:
        return self._positions.in_range(self._position(args))

    def accepts(self, *args) -> bool:
        try:
            self._position(args)
        except TypeError:
            return False
        return True

    def _identity(self) -> tuple:
        return (self.func, self.size, self.is_o1)

    def __repr__(self) -> str:
        return f"LambdaIndexer({self.func!r}, {self.size})"