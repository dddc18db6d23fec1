"""Initializers tagged with the index they are meant for."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .indexers import Indexer, make_indexer


@dataclass(frozen=True)
class SafeArg:
    """A value together with the index arguments of the slot it initializes."""

    index: tuple
    value: Any


def safe_arg(*args, value) -> SafeArg:
    """Tag ``value`` with the index arguments of the slot it belongs to."""
    if not args:
        raise TypeError("safe_arg() needs at least one index value")
    return SafeArg(tuple(args), value)


def check_safe_args(indexer, args: Iterable[SafeArg]) -> list:
    """Check that tagged initializers cover every slot in storage order.

    Returns the bare values. Raises ValueError on a count or order mismatch.
    """
    if not isinstance(indexer, Indexer):
        indexer = make_indexer(indexer)
    items = list(args)
    for item in items:
        if not isinstance(item, SafeArg):
            raise TypeError(f"{item!r} is not a safe_arg initializer")
    if len(items) < indexer.size:
        raise ValueError("Not enough initializers provided")
    if len(items) > indexer.size:
        raise ValueError("Too many initializers provided")
    for position, item in enumerate(items):
        if indexer.at(*item.index) != position:
            raise ValueError(f"Invalid value for initializer: {item.index!r}")
    return [item.value for item in items]