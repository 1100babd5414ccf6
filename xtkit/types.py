"""Key/value entries and fixed-size tuples with named fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")
H = TypeVar("H")
I = TypeVar("I")  # noqa: E741


@dataclass(frozen=True)
class Entry(Generic[K, V]):
    """A key/value pair."""

    key: K
    value: V


class _TupleBase:
    """Shared behaviour of the fixed-size tuple classes."""

    def unpack(self) -> tuple[Any, ...]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:
        return iter(self.unpack())


@dataclass(frozen=True)
class Tuple2(_TupleBase, Generic[A, B]):
    """A group of 2 elements (pair)."""

    a: A
    b: B

    def unpack(self) -> tuple[A, B]:
        """Return the values held by the tuple, in field order."""
        return self.a, self.b


@dataclass(frozen=True)
class Tuple3(_TupleBase, Generic[A, B, C]):
    """A group of 3 elements."""

    a: A
    b: B
    c: C

    def unpack(self) -> tuple[A, B, C]:
        """Return the values held by the tuple, in field order."""
        return self.a, self.b, self.c


@dataclass(frozen=True)
class Tuple4(_TupleBase, Generic[A, B, C, D]):
    """A group of 4 elements."""

    a: A
    b: B
    c: C
    d: D

    def unpack(self) -> tuple[A, B, C, D]:
        """Return the values held by the tuple, in field order."""
        return self.a, self.b, self.c, self.d


@dataclass(frozen=True)
class Tuple5(_TupleBase, Generic[A, B, C, D, E]):
    """A group of 5 elements."""

    a: A
    b: B
    c: C
    d: D
    e: E

    def unpack(self) -> tuple[A, B, C, D, E]:
        """Return the values held by the tuple, in field order."""
        return self.a, self.b, self.c, self.d, self.e


@dataclass(frozen=True)
class Tuple6(_TupleBase, Generic[A, B, C, D, E, F]):
    """A group of 6 elements."""

    a: A
    b: B
    c: C
    d: D
    e: E
    f: F

    def unpack(self) -> tuple[A, B, C, D, E, F]:
        """Return the values held by the tuple, in field order."""
        return self.a, self.b, self.c, self.d, self.e, self.f


@dataclass(frozen=True)
class Tuple7(_TupleBase, Generic[A, B, C, D, E, F, G]):
    """A group of 7 elements."""

    a: A
    b: B
    c: C
    d: D
    e: E
    f: F
    g: G

    def unpack(self) -> tuple[A, B, C, D, E, F, G]:
        """Return the values held by the tuple, in field order."""
        return self.a, self.b, self.c, self.d, self.e, self.f, self.g


@dataclass(frozen=True)
class Tuple8(_TupleBase, Generic[A, B, C, D, E, F, G, H]):
    """A group of 8 elements."""

    a: A
    b: B
    c: C
    d: D
    e: E
    f: F
    g: G
    h: H

    def unpack(self) -> tuple[A, B, C, D, E, F, G, H]:
        """Return the values held by the tuple, in field order."""
        return self.a, self.b, self.c, self.d, self.e, self.f, self.g, self.h


@dataclass(frozen=True)
class Tuple9(_TupleBase, Generic[A, B, C, D, E, F, G, H, I]):
    """A group of 9 elements."""

    a: A
    b: B
    c: C
    d: D
    e: E
    f: F
    g: G
    h: H
    i: I

    def unpack(self) -> tuple[A, B, C, D, E, F, G, H, I]:
        """Return the values held by the tuple, in field order."""
        return self.a, self.b, self.c, self.d, self.e, self.f, self.g, self.h, self.i


_BY_ARITY: dict[int, type] = {
    2: Tuple2,
    3: Tuple3,
    4: Tuple4,
    5: Tuple5,
    6: Tuple6,
    7: Tuple7,
    8: Tuple8,
    9: Tuple9,
}


def tuple_class(arity: int) -> type:
    """Return the tuple class holding ``arity`` elements (2 to 9)."""
    try:
        return _BY_ARITY[arity]
    except KeyError:
        raise ValueError(f"unsupported tuple arity: {arity} (expected 2 to 9)") from None