"""Unzipping tuples back into sequences and cartesian products of sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from itertools import product
from typing import Any, TypeVar

from xtkit.types import _TupleBase, tuple_class

Out = TypeVar("Out")

_MIN_ARITY = 2
_MAX_ARITY = 9


def _check_arity(count: int, what: str) -> None:
    if not _MIN_ARITY <= count <= _MAX_ARITY:
        raise ValueError(
            f"{what} takes {_MIN_ARITY} to {_MAX_ARITY} groups, got {count}"
        )


def _regroup(rows: Iterable[Iterable[Any]], arity: int) -> tuple[list[Any], ...]:
    columns: tuple[list[Any], ...] = tuple([] for _ in range(arity))
    for row in rows:
        values = tuple(row)
        if len(values) != arity:
            raise ValueError(f"expected {arity} values, got {len(values)}")
        for column, value in zip(columns, values):
            column.append(value)
    return columns


def unzip(tuples: Iterable[_TupleBase], arity: int) -> tuple[list[Any], ...]:
    """Split tuples of ``arity`` elements into ``arity`` lists.

    The n-th list holds the n-th element of every tuple, in order.
    """
    _check_arity(arity, "unzip")
    return _regroup(tuples, arity)


def unzip_by(
    items: Iterable[Any],
    iteratee: Callable[[Any], Sequence[Any]],
    arity: int,
) -> tuple[list[Any], ...]:
    """Map each item to ``arity`` values and split them into ``arity`` lists."""
    _check_arity(arity, "unzip_by")
    return _regroup((iteratee(item) for item in items), arity)


def cross_join(*args: Sequence[Any]) -> list[_TupleBase]:
    """Return the cartesian product of 2 to 9 sequences as tuples.

    The result is empty when any sequence is empty.
    """
    _check_arity(len(args), "cross_join")
    cls = tuple_class(len(args))
    return cross_join_by(cls, *args)


def cross_join_by(project: Callable[..., Out], *args: Sequence[Any]) -> list[Out]:
    """Apply ``project`` to every combination of 2 to 9 sequences.

    Combinations are produced with the last sequence varying fastest.
    The result is empty when any sequence is empty.
    """
    _check_arity(len(args), "cross_join_by")
    return [project(*values) for values in product(*args)]