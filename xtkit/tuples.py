"""Building, unpacking and zipping the fixed-size tuple classes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from itertools import zip_longest
from typing import Any, TypeVar

from xtkit.types import _TupleBase, tuple_class

Out = TypeVar("Out")

_MIN_ARITY = 2
_MAX_ARITY = 9


def _check_arity(count: int, what: str) -> None:
    if not _MIN_ARITY <= count <= _MAX_ARITY:
        raise ValueError(
            f"{what} takes {_MIN_ARITY} to {_MAX_ARITY} arguments, got {count}"
        )


def make_tuple(*args: Any) -> _TupleBase:
    """Group 2 to 9 values into the tuple class of matching size."""
    _check_arity(len(args), "make_tuple")
    return tuple_class(len(args))(*args)


def unpack(tup: _TupleBase) -> tuple[Any, ...]:
    """Return the values held by a tuple, in field order."""
    if not isinstance(tup, _TupleBase):
        raise TypeError(f"expected a Tuple2 to Tuple9, got {type(tup).__name__}")
    return tup.unpack()


def zip_fill(*args: Iterable[Any], fillvalue: Any = None) -> list[_TupleBase]:
    """Group the n-th elements of 2 to 9 sequences into tuples.

    Shorter sequences are padded with ``fillvalue`` up to the longest one.
    """
    _check_arity(len(args), "zip_fill")
    cls = tuple_class(len(args))
    return [cls(*values) for values in zip_longest(*args, fillvalue=fillvalue)]


def zip_by(
    iteratee: Callable[..., Out],
    *args: Sequence[Any],
    fillvalue: Any = None,
) -> list[Out]:
    """Apply ``iteratee`` to the n-th elements of 2 to 9 sequences.

    Shorter sequences are padded with ``fillvalue`` up to the longest one.
    """
    _check_arity(len(args), "zip_by")
    return [iteratee(*values) for values in zip_longest(*args, fillvalue=fillvalue)]