"""Range validation and marker insertion for plain text."""

from texthighlight.markup.insertion import (
    BoundaryEvent,
    BoundaryKind,
    build_boundary_events,
    extract_ranges,
    insert_markers,
    strip_markers,
)
from texthighlight.markup.marker_constants import (
    DEFAULT_CLOSE_MARKER,
    DEFAULT_OPEN_MARKER,
    TOUCH_POLICIES,
    TouchPolicy,
)
from texthighlight.markup.ranges import Range, RangeLike, coerce_ranges, make_range
from texthighlight.markup.validation import validate_ranges

__all__ = [
    "DEFAULT_CLOSE_MARKER",
    "DEFAULT_OPEN_MARKER",
    "TOUCH_POLICIES",
    "BoundaryEvent",
    "BoundaryKind",
    "Range",
    "RangeLike",
    "TouchPolicy",
    "build_boundary_events",
    "coerce_ranges",
    "extract_ranges",
    "insert_markers",
    "make_range",
    "strip_markers",
    "validate_ranges",
]
