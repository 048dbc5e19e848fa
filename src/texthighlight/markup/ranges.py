"""Highlight range value type and coercion helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

RangeLike: TypeAlias = "Range | tuple[int, int] | list[int] | Mapping[str, Any]"


@dataclass(frozen=True, order=True)
class Range:
    """A half-open interval ``[lower, upper)`` over code point indices.

    Attributes:
        lower: First highlighted character (inclusive).
        upper: One past the last highlighted character (exclusive).
    """

    lower: int
    upper: int


def _check_position(value: object) -> int:
    # bool is an int subclass but never a position
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Range positions must be integers, got {value!r}"
        raise TypeError(msg)
    return value


def make_range(a: int, b: int) -> Range:
    """Build a Range from two positions given in either order.

    Raises:
        TypeError: If either position is not an ``int``.
    """
    a, b = _check_position(a), _check_position(b)
    if a <= b:
        return Range(a, b)
    return Range(b, a)


def _range_from_highlight(hl: Mapping[str, Any]) -> Range:
    if "start_char" not in hl or "end_char" not in hl:
        msg = f"Highlight {dict(hl)!r} needs both start_char and end_char"
        raise TypeError(msg)
    return make_range(hl["start_char"], hl["end_char"])


def coerce_range(item: RangeLike) -> Range:
    """Convert a Range, ``(lower, upper)`` pair or highlight dict to a Range.

    Raises:
        TypeError: If *item* is none of the supported shapes.
    """
    if isinstance(item, Range):
        return item
    if isinstance(item, Mapping):
        return _range_from_highlight(item)
    if isinstance(item, (tuple, list)) and len(item) == 2:
        return make_range(item[0], item[1])
    msg = f"Cannot interpret {item!r} as a highlight range"
    raise TypeError(msg)


def coerce_ranges(items: Iterable[RangeLike]) -> list[Range]:
    """Normalise every item into a fresh list of Range objects."""
    return [coerce_range(item) for item in items]
