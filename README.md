# indexed_array

Fixed-size containers whose positions are named by something other than
`0..n-1`: an integer interval, an enum, an explicit sequence of values, a
function, or a combination of these for several dimensions.

The package is a library only; it has no command-line tool and needs nothing
outside the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Indexers (`indexed_array.indexers`, `indexed_array.lambda_indexer`, `indexed_array.union`)

An indexer maps keys to positions `0..size-1`. Every indexer has `size`,
`is_o1`, `at(*args)`, `in_range(*args)` and `accepts(*args)`; most also have
`keys()`, which yields the keys in storage order.

- `IndexRange(minimum, maximum)`: every value from `minimum` to `maximum`
  inclusive. Bounds are integers or members of one enum; enum members are
  taken by their integer value. `minimum > maximum` raises `ValueError`.
- `ValueSequence(*values)`: an explicit list of keys, in the given order.
  When the values are contiguous (see `is_contiguous`) lookup is arithmetic
  and `is_o1` is true; otherwise duplicates are dropped and a dictionary is
  used.
- `EnumIndexer(enum_type)`: the members of an enum, in declaration order.
- `MultiIndexer(*indexers)`: several dimensions in row-major order. It
  exposes `indexers`, `root_indexer` (the first dimension) and
  `slice_indexer` (the remaining ones); its `keys()` yields tuples.
- `LambdaIndexer(func, size, is_o1=True)`: positions computed by `func`,
  which must return an integer in `range(size)`. A function that cannot
  handle its arguments should raise `TypeError`. It does not enumerate its
  keys.
- `union_of(*parts)` and `single_value(value)`: build a `ValueSequence`
  from ranges, value sequences and single values, keeping their order.
- `make_indexer(*args)` turns indexers and enum types into one indexer;
  several arguments give a `MultiIndexer`.
- `integral_value(value)` and `is_contiguous(values)` are the helpers the
  indexers use.

Every lookup is checked. A key of the right type that the indexer does not
handle raises `OutOfRangeError` (a subclass of `IndexError`); a key of the
wrong type, or the wrong number of keys, raises `TypeError`.

## IndexedArray (`indexed_array.array`)

```python
import enum
from indexed_array.array import IndexedArray, for_each
from indexed_array.indexers import IndexRange, EnumIndexer, make_indexer


class Color(enum.Enum):
    RED = -4
    GREEN = -1
    BLUE = 0
    BLACK = 6
    WHITE = 8


arr = IndexedArray(EnumIndexer(Color), [10, -4, 1, 2, 3])
arr[Color.BLACK]          # 2
arr.at(Color.WHITE)       # 3

grid = IndexedArray(make_indexer(Color, IndexRange(3, 8)))
len(grid)                 # 30, every item None
grid[Color.WHITE, 8] = "x"
grid(Color.WHITE, 8)      # "x"
row = grid.slice(Color.GREEN)   # an IndexedSpan over one row
row[4] = "y"

for_each(arr, lambda key, value: print(key, value))
```

The first argument may be an indexer, an enum type, or a tuple of index
descriptions, one per dimension. Plain initial values are stored in order and
padded with `None`; more values than the size raise `ValueError`.

Arrays with the same indexer compare item by item (`==`, `<`, `<=`, `>`,
`>=`). They also offer `fill`, `swap`, `copy`, `front`, `back`, `size`,
`empty`, `in_range`, `slice`, `slice_at`, iteration and reverse iteration.

`for_each(container, func)` calls `func(key, value)` for each item of an
array or span whose indexer can enumerate its keys.

## IndexedSpan (`indexed_array.span`)

`IndexedSpan(data, indexer, offset=0)` is an indexed view over
`indexer.size` items of a mutable sequence, starting at `offset`. Writes go
through to the underlying sequence. It offers the same access methods as
`IndexedArray` (`at`, `[]`, call, `slice`, `slice_at`, `in_range`,
iteration, `reversed`, `front`, `back`, `size`, `empty`).

## Safe initialisation (`indexed_array.safe_arg`)

`safe_arg(*keys, value=...)` tags each initial value with the key it is meant
for. The container checks that every position is given, in storage order,
and raises `ValueError` otherwise:

```python
from indexed_array.safe_arg import safe_arg

arr = IndexedArray(
    IndexRange(0, 2),
    [safe_arg(0, value="a"), safe_arg(1, value="b"), safe_arg(2, value="c")],
)
```

Tagged and plain values cannot be mixed. `check_safe_args(indexer, args)`
performs the check on its own and returns the bare values.

## IndexedBitset (`indexed_array.bitset`)

```python
from indexed_array.bitset import IndexedBitset
from indexed_array.indexers import IndexRange

bits = IndexedBitset(IndexRange(2, 10), 0b001001001)
bits.test(2)              # True
bits.set(4).reset(5).flip(6)
bits[3] = True
bits.count(), bits.all(), bits.any(), bits.none()
bits.to_int()
```

The initial content is either a non-negative integer, whose low `size` bits
are used (bit 0 is the first position), or a list of `safe_arg`
initializers. Bitsets also support calling, `in_range`, `size`, `len`,
iteration over the bits and equality.