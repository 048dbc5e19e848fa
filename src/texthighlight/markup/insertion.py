"""Marker insertion: boundary events, touch coalescing and the output fold.

Architecture:
    ``validate_ranges`` runs first and nothing is built if it raises.
    Each range then yields a START event at ``lower`` and an END event at
    ``upper``. Events are sorted by position with END before START, so at a
    touch point (``a.upper == b.lower``) the earlier range closes before the
    next one opens. The touch policy decides whether that END/START pair is
    emitted or cancelled. A single left-to-right walk then interleaves input
    slices with marker strings.

    ``strip_markers`` and ``extract_ranges`` are the inverses used to check
    and recover highlights from marked text.
"""

# Pattern: Functional Core (pure functions, no shared state)

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from texthighlight.errors import MarkerSyntaxError
from texthighlight.markup.marker_constants import (
    DEFAULT_CLOSE_MARKER,
    DEFAULT_OPEN_MARKER,
    DEFAULT_TOUCH_POLICY,
    TOUCH_POLICIES,
    TouchPolicy,
    marker_pattern,
)
from texthighlight.markup.ranges import Range
from texthighlight.markup.validation import validate_ranges

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class BoundaryKind(enum.Enum):
    """Whether an event opens or closes a highlight."""

    START = "start"
    END = "end"


# END sorts before START at the same position
_KIND_RANK: dict[BoundaryKind, int] = {BoundaryKind.END: 0, BoundaryKind.START: 1}


@dataclass(frozen=True)
class BoundaryEvent:
    """A marker to emit before the character at *position*."""

    position: int
    kind: BoundaryKind


def build_boundary_events(ranges: Sequence[Range]) -> list[BoundaryEvent]:
    """Return START/END events for *ranges*, sorted for emission.

    Assumes *ranges* already passed ``validate_ranges``: with no overlaps and
    no empty ranges, two events only share a position where one range ends
    and the next begins.
    """
    events: list[BoundaryEvent] = []
    for r in ranges:
        events.append(BoundaryEvent(r.lower, BoundaryKind.START))
        events.append(BoundaryEvent(r.upper, BoundaryKind.END))

    events.sort(key=lambda e: (e.position, _KIND_RANK[e.kind]))
    return events


def _merge_touching(events: list[BoundaryEvent]) -> list[BoundaryEvent]:
    """Drop each END that is immediately reopened by a START at its position."""
    merged: list[BoundaryEvent] = []
    for event in events:
        if (
            event.kind is BoundaryKind.START
            and merged
            and merged[-1].kind is BoundaryKind.END
            and merged[-1].position == event.position
        ):
            merged.pop()
            continue
        merged.append(event)
    return merged


def insert_markers(
    text: str,
    ranges: Sequence[Range],
    *,
    open_marker: str = DEFAULT_OPEN_MARKER,
    close_marker: str = DEFAULT_CLOSE_MARKER,
    touching: TouchPolicy = DEFAULT_TOUCH_POLICY,
) -> str:
    """Insert *open_marker*/*close_marker* around each range of *text*.

    Positions are code point indices into *text*. The output contains every
    character of *text* in order, interleaved with marker strings.

    Args:
        text: Plain text to annotate.
        ranges: Non-overlapping half-open ranges over *text*.
        open_marker: String inserted where a range starts.
        close_marker: String inserted where a range ends.
        touching: ``"merge"`` renders touching ranges as one marker pair,
            ``"adjacent"`` closes and reopens at the shared boundary.

    Returns:
        The annotated text.

    Raises:
        RangesOutOfBoundsError: From validation; no output is produced.
        OverlappingRangesError: From validation; no output is produced.
        ValueError: If *touching* is not a known policy.
    """
    if touching not in TOUCH_POLICIES:
        msg = f"Unknown touch policy {touching!r}; expected one of {TOUCH_POLICIES}"
        raise ValueError(msg)

    validate_ranges(len(text), ranges)

    events = build_boundary_events(ranges)
    if touching == "merge":
        events = _merge_touching(events)

    markers = {BoundaryKind.START: open_marker, BoundaryKind.END: close_marker}
    parts: list[str] = []
    cursor = 0
    for event in events:
        parts.append(text[cursor : event.position])
        parts.append(markers[event.kind])
        cursor = event.position
    parts.append(text[cursor:])

    logger.debug(
        "Inserted %d markers for %d ranges (touching=%s)",
        len(events),
        len(ranges),
        touching,
    )
    return "".join(parts)


def strip_markers(
    marked: str,
    *,
    open_marker: str = DEFAULT_OPEN_MARKER,
    close_marker: str = DEFAULT_CLOSE_MARKER,
) -> str:
    """Remove every occurrence of both markers from *marked*."""
    return marker_pattern(open_marker, close_marker).sub("", marked)


def extract_ranges(
    marked: str,
    *,
    open_marker: str = DEFAULT_OPEN_MARKER,
    close_marker: str = DEFAULT_CLOSE_MARKER,
) -> list[Range]:
    """Recover highlight ranges from marker-annotated text.

    Positions are returned in the coordinates of the text with all markers
    removed. Every marker pair becomes its own range, so
    ``insert_markers(strip_markers(m), extract_ranges(m), touching="adjacent")``
    reproduces well-formed *m*. Under ``touching="merge"`` pairs that touch
    come back as one pair.

    Raises:
        MarkerSyntaxError: On a close without an open, an open inside an open,
            an open immediately closed, or an open that is never closed.
    """
    ranges: list[Range] = []
    removed = 0
    open_at: int | None = None
    open_offset = 0

    for match in marker_pattern(open_marker, close_marker).finditer(marked):
        token = match.group()
        position = match.start() - removed
        removed += len(token)

        if token == open_marker:
            if open_at is not None:
                msg = "Open marker inside an open highlight"
                raise MarkerSyntaxError(msg, match.start())
            open_at = position
            open_offset = match.start()
        else:
            if open_at is None:
                msg = "Close marker without a matching open marker"
                raise MarkerSyntaxError(msg, match.start())
            if position == open_at:
                msg = "Empty highlight between open and close markers"
                raise MarkerSyntaxError(msg, open_offset)
            ranges.append(Range(open_at, position))
            open_at = None

    if open_at is not None:
        msg = "Open marker is never closed"
        raise MarkerSyntaxError(msg, open_offset)

    return ranges
