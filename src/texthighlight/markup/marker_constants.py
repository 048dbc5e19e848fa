"""Marker format constants for highlight boundaries.

The open marker is inserted where a highlight starts and the close marker
where it ends. Both are configurable via ``MarkerConfig``; these are the
defaults.

Shared between:
- markup/insertion.py (insert, strip, extract)
- config.py (MarkerConfig defaults)
"""

from __future__ import annotations

import re
from typing import Literal

DEFAULT_OPEN_MARKER = "<em>"
DEFAULT_CLOSE_MARKER = "</em>"

# How to render two ranges that touch (a.upper == b.lower):
#   merge    -> one marker pair spanning both ranges
#   adjacent -> close the first range, then open the second
TOUCH_POLICIES = ("merge", "adjacent")
TouchPolicy = Literal["merge", "adjacent"]
DEFAULT_TOUCH_POLICY: TouchPolicy = "merge"


def marker_pattern(open_marker: str, close_marker: str) -> re.Pattern[str]:
    """Compile a pattern matching either marker, longest first.

    Longest-first alternation keeps a marker that is a prefix of the other
    (e.g. ``"<"`` and ``"<<"``) from shadowing it.
    """
    alternatives = sorted((open_marker, close_marker), key=len, reverse=True)
    return re.compile("|".join(re.escape(marker) for marker in alternatives))
