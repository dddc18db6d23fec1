"""Indexers made of the union of several ranges and single values."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .indexers import IndexRange, ValueSequence, integral_value


def single_value(value: Any) -> ValueSequence:
    """Return an indexer holding exactly one index value."""
    integral_value(value)
    return ValueSequence(value)


def union_of(*args) -> ValueSequence:
    """Concatenate ranges, single values and value sequences into one indexer.

    The values keep the order in which they are given.
    """
    values: list[Any] = []
    for arg in args:
        if isinstance(arg, IndexRange):
            values.extend(arg.keys())
        elif isinstance(arg, ValueSequence):
            values.extend(arg.values)
        elif isinstance(arg, (int, Enum)):
            integral_value(arg)
            values.append(arg)
        else:
            raise TypeError(f"{arg!r} cannot be part of a union of indexes")
    return ValueSequence(*values)