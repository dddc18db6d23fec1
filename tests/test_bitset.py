from enum import Enum

import pytest

from indexed_array.bitset import IndexedBitset
from indexed_array.indexers import IndexRange, OutOfRangeError
from indexed_array.lambda_indexer import LambdaIndexer
from indexed_array.safe_arg import safe_arg


class Color(Enum):
    Red = -1
    Green = 0
    Blue = 1


class Weekday(Enum):
    Monday = 1
    Tuesday = 2
    Wednesday = 3
    Thursday = 4
    Friday = 5
    Saturday = 6
    Sunday = 7


class Month(Enum):
    January = 1
    February = 2
    March = 3
    April = 4
    May = 5
    June = 6
    July = 7
    August = 8
    September = 9
    October = 10
    November = 11
    December = 12


def _heterogeneous(value):
    if isinstance(value, Weekday):
        return value.value - 1
    if isinstance(value, Month):
        return value.value + 6
    raise TypeError(f"unsupported index {value!r}")


def test_indexed_bitset1():
    b = IndexedBitset(IndexRange(2, 10), 0b001001001)
    assert b.size() == 9
    assert b.test(2)
    assert not b.test(3)
    b.set(4)
    b.reset(5)
    b.flip(6)
    b.flip(7)
    b.set(10)
    assert b.test(4)
    assert not b.test(5)
    assert b.test(6)
    assert b.test(7)
    assert b.test(10)
    assert b.to_int() == 0b101110101


def test_internal_bits():
    b = IndexedBitset(IndexRange(2, 10), 0x11)
    assert b.size() == 9
    assert b.test(2)
    assert not b.test(3)
    assert b.test(6)
    assert b.to_int() == 0x11


def test_operator_brackets():
    b = IndexedBitset(IndexRange(2, 10), 0x11)
    assert b.size() == 9
    assert b[2]
    assert not b[3]
    b[3] = 1
    assert b[3]


def test_count():
    b = IndexedBitset(IndexRange(2, 10), 0x11)
    assert b.count() == 2
    b[7] = True
    assert b.count() == 3
    b[2] = True
    assert b.count() == 3
    b[2] = False
    assert b.count() == 2


def test_all():
    b = IndexedBitset(IndexRange(2, 10), 0x11)
    assert not b.all()
    for i in range(2, 11):
        b[i] = True
    assert b.all()
    b[5] = False
    assert not b.all()


def test_none():
    b = IndexedBitset(IndexRange(2, 10), 0x11)
    assert not b.none()
    for i in range(2, 11):
        b[i] = False
    assert b.none()
    b[5] = True
    assert not b.none()


def test_any():
    b = IndexedBitset(IndexRange(2, 10), 0x11)
    assert b.any()
    for i in range(2, 11):
        b[i] = False
    assert not b.any()
    b[5] = True
    assert b.any()


def test_safe_arg_init():
    b = IndexedBitset(
        Color,
        [
            safe_arg(Color.Red, value=True),
            safe_arg(Color.Green, value=False),
            safe_arg(Color.Blue, value=True),
        ],
    )
    assert b.to_int() == 0b101


def test_safe_arg_wrong_order():
    with pytest.raises(ValueError):
        IndexedBitset(
            Color,
            [
                safe_arg(Color.Green, value=True),
                safe_arg(Color.Red, value=False),
                safe_arg(Color.Blue, value=True),
            ],
        )


def test_safe_arg_not_enough():
    with pytest.raises(ValueError):
        IndexedBitset(Color, [safe_arg(Color.Red, value=True)])


def test_multidimensional():
    b = IndexedBitset(
        (Color, IndexRange(2, 3)),
        [
            safe_arg(Color.Red, 2, value=True),
            safe_arg(Color.Red, 3, value=True),
            safe_arg(Color.Green, 2, value=False),
            safe_arg(Color.Green, 3, value=True),
            safe_arg(Color.Blue, 2, value=True),
            safe_arg(Color.Blue, 3, value=False),
        ],
    )
    assert b.test(Color.Red, 2)
    assert not b.test(Color.Green, 2)
    assert not b.test(Color.Blue, 3)
    assert b.to_int() == 0b011011
    assert b[(Color.Red, 2)]
    assert b(Color.Red, 3)
    assert b.test(Color.Green, 3)


def test_out_of_range_access():
    b = IndexedBitset(IndexRange(2, 10), 0)
    with pytest.raises(OutOfRangeError):
        b.test(11)
    with pytest.raises(OutOfRangeError):
        b.set(1)
    with pytest.raises(OutOfRangeError):
        b[0] = True
    assert b.to_int() == 0


def test_in_range():
    b = IndexedBitset(IndexRange(2, 10))
    assert b.in_range(2)
    assert b.in_range(10)
    assert not b.in_range(11)


def test_initial_bits_are_truncated_to_size():
    b = IndexedBitset(IndexRange(0, 3), 0xFF)
    assert b.to_int() == 0xF
    assert b.all()


def test_negative_initial_bits_rejected():
    with pytest.raises(ValueError):
        IndexedBitset(IndexRange(0, 3), -1)


def test_setters_chain():
    b = IndexedBitset(IndexRange(0, 3))
    assert b.set(0).set(2).flip(3).reset(0).to_int() == 0b1100


def test_chrono_heterogeneous_bitset():
    indexer = LambdaIndexer(_heterogeneous, 19)
    bits = IndexedBitset(indexer, 0xAAAAAAAA)
    assert not bits[Weekday.Monday]
    assert bits[Weekday.Tuesday]
    assert bits[Month.January]
    assert not bits[Month.December]


def test_chrono_heterogeneous_wrong_type():
    bits = IndexedBitset(LambdaIndexer(_heterogeneous, 19), 0)
    with pytest.raises(TypeError):
        bits.test("Monday")