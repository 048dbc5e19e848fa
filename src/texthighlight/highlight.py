"""Entry point binding marker configuration to the insertion core."""

from __future__ import annotations

from typing import TYPE_CHECKING

from texthighlight.config import get_settings
from texthighlight.markup.insertion import insert_markers
from texthighlight.markup.ranges import coerce_ranges

if TYPE_CHECKING:
    from collections.abc import Iterable

    from texthighlight.markup.marker_constants import TouchPolicy
    from texthighlight.markup.ranges import RangeLike


def highlight(
    text: str,
    ranges: Iterable[RangeLike],
    *,
    open_marker: str | None = None,
    close_marker: str | None = None,
    touching: TouchPolicy | None = None,
) -> str:
    """Wrap each range of *text* in highlight markers.

    >>> highlight("Hello world", [(0, 5)])
    '<em>Hello</em> world'

    Options left as ``None`` come from ``get_settings().markers``.

    Args:
        text: Plain text to annotate.
        ranges: ``Range`` objects, ``(a, b)`` pairs in either order, or
            highlight dicts with ``start_char``/``end_char``.
        open_marker: Overrides the configured open marker.
        close_marker: Overrides the configured close marker.
        touching: Overrides the configured touch policy.

    Raises:
        RangesOutOfBoundsError: A range is empty or reaches past *text*.
        OverlappingRangesError: Two ranges share a character.
    """
    config = get_settings().markers
    return insert_markers(
        text,
        coerce_ranges(ranges),
        open_marker=config.open_marker if open_marker is None else open_marker,
        close_marker=config.close_marker if close_marker is None else close_marker,
        touching=config.touching if touching is None else touching,
    )
