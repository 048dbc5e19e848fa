"""Range validation: bounds first, then pairwise overlap."""

# Pattern: Functional Core (pure check, raises on the first violation)

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from texthighlight.errors import OverlappingRangesError, RangesOutOfBoundsError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from texthighlight.markup.ranges import Range

logger = logging.getLogger(__name__)


def _is_out_of_bounds(r: Range, input_length: int) -> bool:
    # lower must address a real character; upper may equal the length.
    # Zero-width ranges break the lower < upper invariant.
    return (
        r.lower < 0
        or r.lower >= input_length
        or r.upper > input_length
        or r.lower >= r.upper
    )


def validate_ranges(input_length: int, ranges: Sequence[Range]) -> None:
    """Check that every range is in bounds and no two ranges overlap.

    The bounds check runs over the whole set before any overlap check, so an
    out-of-bounds range is reported even when an overlapping pair also exists.
    Ranges that touch (``a.upper == b.lower``) are not overlapping.

    Args:
        input_length: Length of the text the ranges index into.
        ranges: Ranges to check. Not modified.

    Raises:
        RangesOutOfBoundsError: A range reaches past the input or is empty.
        OverlappingRangesError: Two ranges share at least one character.
    """
    for r in ranges:
        if _is_out_of_bounds(r, input_length):
            logger.debug(
                "Rejected range [%d, %d) for input length %d",
                r.lower,
                r.upper,
                input_length,
            )
            raise RangesOutOfBoundsError(r, input_length)

    ordered = sorted(ranges, key=lambda r: r.lower)
    for previous, current in zip(ordered, ordered[1:], strict=False):
        if current.lower < previous.upper:
            logger.debug(
                "Rejected overlapping ranges [%d, %d) and [%d, %d)",
                previous.lower,
                previous.upper,
                current.lower,
                current.upper,
            )
            raise OverlappingRangesError(previous, current)
