"""Typed failures raised by the highlighting pipeline.

All errors derive from ``HighlightingError`` (itself a ``ValueError``) so
callers can reject bad input with a single ``except`` at their boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from texthighlight.markup.ranges import Range


class HighlightingError(ValueError):
    """Base class for highlight validation and marker parsing failures."""


class RangesOutOfBoundsError(HighlightingError):
    """Raised when a range does not address real characters of the input."""

    def __init__(self, range_: Range, input_length: int) -> None:
        self.range = range_
        self.input_length = input_length
        super().__init__(
            f"Range [{range_.lower}, {range_.upper}) is out of bounds "
            f"for input of length {input_length}"
        )


class OverlappingRangesError(HighlightingError):
    """Raised when two ranges share at least one character."""

    def __init__(self, first: Range, second: Range) -> None:
        self.first = first
        self.second = second
        super().__init__(
            f"Range [{second.lower}, {second.upper}) overlaps "
            f"[{first.lower}, {first.upper})"
        )


class MarkerSyntaxError(HighlightingError):
    """Raised when marked text has unbalanced or nested markers."""

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(f"{message} at offset {position}")
