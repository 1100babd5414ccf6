# xtkit

Small helpers for working with fixed-size tuples, zipping and unzipping
sequences, cartesian products, and "empty" or optional values. The
package has no dependencies outside the standard library.

## Installation

```
pip install xtkit
```

## Tuples

`xtkit.types` provides `Tuple2` to `Tuple9`, frozen dataclasses whose
fields are named `a`, `b`, `c` and so on, plus `Entry`, a frozen
key/value pair with fields `key` and `value`. Each tuple class has an
`unpack()` method returning its values as a plain tuple, and tuples can
be iterated, so they unpack directly in assignments.
`tuple_class(arity)` returns the class for a size from 2 to 9 and raises
`ValueError` for any other size.

```python
from xtkit.types import Tuple2

pair = Tuple2("a", 1)
first, second = pair.unpack()
first, second = pair            # iteration works too
```

`xtkit.tuples` builds and takes apart tuples of any supported size:

```python
from xtkit.tuples import make_tuple, unpack, zip_fill, zip_by

t = make_tuple("a", 1, 2.0)         # Tuple3("a", 1, 2.0)
unpack(t)                           # ("a", 1, 2.0)

zip_fill(["a", "b"], [1])
# [Tuple2("a", 1), Tuple2("b", None)]

zip_by(lambda x, y: f"{x}{y}", ["a", "b"], [1, 2])
# ["a1", "b2"]
```

`zip_fill` and `zip_by` pad shorter sequences with the keyword argument
`fillvalue` (default `None`), so the result is as long as the longest
input. `make_tuple`, `zip_fill` and `zip_by` accept 2 to 9 values or
sequences and raise `ValueError` otherwise; `unpack` raises `TypeError`
for anything that is not one of the tuple classes.

## Unzipping and cross joins

```python
from xtkit.joins import unzip, unzip_by, cross_join, cross_join_by
from xtkit.types import Tuple2

unzip([Tuple2("a", 1), Tuple2("b", 2)], 2)       # (["a", "b"], [1, 2])
unzip_by(["a", "bb"], lambda s: (s, len(s)), 2)  # (["a", "bb"], [1, 2])

cross_join(["a", "b"], [1, 2])
# [Tuple2("a", 1), Tuple2("a", 2), Tuple2("b", 1), Tuple2("b", 2)]
cross_join_by(lambda x, y: x * y, [1, 2], [3, 4])   # [3, 4, 6, 8]
```

`unzip` and `unzip_by` raise `ValueError` when a row does not hold
exactly `arity` values. Cross joins vary the last sequence fastest, and
a cross join with any empty input is an empty list.

## Empty and optional values

`xtkit.type_manipulation` treats `None`, and any value equal to what its
type returns when called with no arguments (zero, `""`, empty
containers), as "empty". A dataclass instance is empty when all of its
fields are empty.

```python
from xtkit.type_manipulation import coalesce, coalesce_list, from_optional_or

coalesce(0, None, 3, 4)              # (3, True)
coalesce_list([], [1], [2])          # ([1], True)
from_optional_or(None, "fallback")   # "fallback"
```

The module also provides:

- `is_nil` / `is_not_nil`: whether a value is `None`.
- `empty(kind)`: the zero value of a type, `kind()`; raises `TypeError`
  when the type cannot be called without arguments.
- `is_empty` / `is_not_empty`, and `emptyable_or_none`, which turns an
  empty value into `None`.
- `from_optional(value, kind)` and `from_optional_list(items, kind)`,
  replacing `None` with `empty(kind)`; `from_optional_list_or(items,
  fallback)` replaces it with a fallback.
- `to_any_list` and `from_any_list(items, kind)`, which returns
  `(items, True)` when every item is an instance of `kind` and
  `([], False)` otherwise.
- `coalesce_or_empty`, `coalesce_list_or_empty`, `coalesce_map` and
  `coalesce_map_or_empty`.

## Running the tests

```
pip install -e ".[test]"
pytest
```