"""Helpers around None, zero values and first-non-empty selection."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional, TypeVar

T = TypeVar("T")


def is_nil(x: Any) -> bool:
    """Return True when ``x`` is None."""
    return x is None


def is_not_nil(x: Any) -> bool:
    """Return True when ``x`` is not None."""
    return not is_nil(x)


def empty(kind: type[T]) -> T:
    """Return the zero value of ``kind``, built by calling it with no arguments."""
    try:
        return kind()
    except TypeError as exc:
        raise TypeError(f"{kind!r} has no zero value: {exc}") from exc


def is_empty(value: Any) -> bool:
    """Return True when ``value`` is None or the zero value of its type.

    A dataclass instance is empty when all of its fields are empty.
    """
    if value is None:
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(is_empty(getattr(value, f.name)) for f in dataclasses.fields(value))
    try:
        zero = type(value)()
    except TypeError:
        return False
    return value == zero


def is_not_empty(value: Any) -> bool:
    """Return True when ``value`` is not a zero value."""
    return not is_empty(value)


def emptyable_or_none(value: Optional[T]) -> Optional[T]:
    """Return ``value``, or None when it is a zero value."""
    return None if is_empty(value) else value


def from_optional(value: Optional[T], kind: type[T]) -> T:
    """Return ``value``, or the zero value of ``kind`` when it is None."""
    return empty(kind) if value is None else value


def from_optional_or(value: Optional[T], fallback: T) -> T:
    """Return ``value``, or ``fallback`` when it is None."""
    return fallback if value is None else value


def from_optional_list(items: Iterable[Optional[T]], kind: type[T]) -> list[T]:
    """Replace every None in ``items`` with the zero value of ``kind``."""
    return [from_optional(item, kind) for item in items]


def from_optional_list_or(items: Iterable[Optional[T]], fallback: T) -> list[T]:
    """Replace every None in ``items`` with ``fallback``."""
    return [from_optional_or(item, fallback) for item in items]


def to_any_list(items: Iterable[Any]) -> list[Any]:
    """Return the items as a new list."""
    return list(items)


def from_any_list(items: Iterable[Any], kind: type[T]) -> tuple[list[T], bool]:
    """Return ``(items, True)`` when every item is a ``kind``, else ``([], False)``."""
    result = list(items)
    if all(isinstance(item, kind) for item in result):
        return result, True
    return [], False


def coalesce(*args: Any) -> tuple[Any, bool]:
    """Return the first non-empty argument and True, or an empty value and False."""
    for value in args:
        if is_not_empty(value):
            return value, True
    return (args[0] if args else None), False


def coalesce_or_empty(*args: Any) -> Any:
    """Return the first non-empty argument, or an empty value."""
    return coalesce(*args)[0]


def coalesce_list(*args: Optional[Sequence[T]]) -> tuple[Sequence[T], bool]:
    """Return the first non-empty sequence and True, or ``([], False)``."""
    for items in args:
        if items is not None and len(items) > 0:
            return items, True
    return [], False


def coalesce_list_or_empty(*args: Optional[Sequence[T]]) -> Sequence[T]:
    """Return the first non-empty sequence, or a new empty list."""
    return coalesce_list(*args)[0]


def coalesce_map(*args: Optional[Mapping[Any, Any]]) -> tuple[Mapping[Any, Any], bool]:
    """Return the first non-empty mapping and True, or ``({}, False)``."""
    for mapping in args:
        if mapping is not None and len(mapping) > 0:
            return mapping, True
    return {}, False


def coalesce_map_or_empty(*args: Optional[Mapping[Any, Any]]) -> Mapping[Any, Any]:
    """Return the first non-empty mapping, or a new empty dict."""
    return coalesce_map(*args)[0]