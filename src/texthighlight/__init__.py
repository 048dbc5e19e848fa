"""texthighlight - Insert highlight markers into plain text.

Validates caller-supplied character ranges and wraps each one in a pair of
marker strings (``<em>``/``</em>`` by default).
"""

from texthighlight.errors import (
    HighlightingError,
    MarkerSyntaxError,
    OverlappingRangesError,
    RangesOutOfBoundsError,
)
from texthighlight.highlight import highlight
from texthighlight.markup import (
    Range,
    extract_ranges,
    insert_markers,
    make_range,
    strip_markers,
    validate_ranges,
)

__version__ = "0.1.0"

__all__ = [
    "HighlightingError",
    "MarkerSyntaxError",
    "OverlappingRangesError",
    "Range",
    "RangesOutOfBoundsError",
    "extract_ranges",
    "highlight",
    "insert_markers",
    "make_range",
    "strip_markers",
    "validate_ranges",
]
