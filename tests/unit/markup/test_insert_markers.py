"""Tests for insert_markers and build_boundary_events.

Verifies:
- Single, disjoint, and touching ranges produce the expected markup
- Touch policy: "merge" joins touching ranges, "adjacent" closes then reopens
- Length growth and content preservation properties
- End boundary at len(text) does not index past the input
- Validation failures produce no output
- Non-ASCII text is indexed by code point
"""

from __future__ import annotations

import pytest

from texthighlight.errors import OverlappingRangesError, RangesOutOfBoundsError
from texthighlight.markup.insertion import (
    BoundaryEvent,
    BoundaryKind,
    build_boundary_events,
    insert_markers,
    strip_markers,
)
from texthighlight.markup.ranges import Range, make_range

HELLO = "Hello world"

# Valid, non-touching range sets over HELLO
_DISJOINT_CASES: list[list[Range]] = [
    [],
    [Range(0, 1)],
    [Range(0, 5)],
    [Range(10, 11)],
    [Range(0, 11)],
    [Range(0, 5), Range(6, 11)],
    [Range(6, 11), Range(0, 5)],
    [Range(0, 1), Range(2, 3), Range(4, 5), Range(6, 7)],
]


class TestBuildBoundaryEvents:
    """Event list construction and ordering."""

    def test_two_events_per_range(self) -> None:
        events = build_boundary_events([Range(6, 11), Range(0, 5)])
        assert events == [
            BoundaryEvent(0, BoundaryKind.START),
            BoundaryEvent(5, BoundaryKind.END),
            BoundaryEvent(6, BoundaryKind.START),
            BoundaryEvent(11, BoundaryKind.END),
        ]

    def test_end_before_start_at_touch_point(self) -> None:
        """At a shared boundary the earlier range closes first."""
        events = build_boundary_events([Range(5, 11), Range(0, 5)])
        assert [(e.position, e.kind) for e in events] == [
            (0, BoundaryKind.START),
            (5, BoundaryKind.END),
            (5, BoundaryKind.START),
            (11, BoundaryKind.END),
        ]

    def test_empty(self) -> None:
        assert build_boundary_events([]) == []


class TestInsertMarkers:
    """Basic marker placement with default markers."""

    def test_no_ranges_is_noop(self) -> None:
        assert insert_markers(HELLO, []) == HELLO

    def test_empty_text_no_ranges(self) -> None:
        assert insert_markers("", []) == ""

    def test_single_range(self) -> None:
        assert insert_markers(HELLO, [make_range(0, 5)]) == "<em>Hello</em> world"

    def test_reversed_range(self) -> None:
        assert insert_markers(HELLO, [make_range(5, 0)]) == "<em>Hello</em> world"

    def test_two_disjoint_ranges(self) -> None:
        result = insert_markers(HELLO, [make_range(0, 5), make_range(6, 11)])
        assert result == "<em>Hello</em> <em>world</em>"

    def test_range_ending_at_text_end(self) -> None:
        """An END at len(text) is valid and leaves no trailing remainder."""
        assert insert_markers(HELLO, [Range(6, 11)]) == "Hello <em>world</em>"

    def test_whole_text(self) -> None:
        assert insert_markers(HELLO, [Range(0, 11)]) == "<em>Hello world</em>"

    def test_single_character_text(self) -> None:
        assert insert_markers("x", [Range(0, 1)]) == "<em>x</em>"

    def test_whitespace_preserved(self) -> None:
        """No trimming or padding of the input."""
        text = "  padded  "
        assert insert_markers(text, [Range(2, 8)]) == "  <em>padded</em>  "

    def test_input_ranges_not_mutated(self) -> None:
        ranges = [Range(6, 11), Range(0, 5)]
        insert_markers(HELLO, ranges)
        assert ranges == [Range(6, 11), Range(0, 5)]


class TestTouchingRanges:
    """Touch policy pins the rendering of a.upper == b.lower."""

    def test_merge_is_default(self) -> None:
        result = insert_markers(HELLO, [make_range(0, 5), make_range(5, 11)])
        assert result == "<em>Hello world</em>"

    def test_adjacent(self) -> None:
        result = insert_markers(
            HELLO, [make_range(0, 5), make_range(5, 11)], touching="adjacent"
        )
        assert result == "<em>Hello</em><em> world</em>"

    def test_merge_chain_of_three(self) -> None:
        ranges = [Range(0, 2), Range(2, 5), Range(5, 8)]
        assert insert_markers(HELLO, ranges) == "<em>Hello wo</em>rld"

    def test_adjacent_chain_of_three(self) -> None:
        ranges = [Range(5, 8), Range(0, 2), Range(2, 5)]
        result = insert_markers(HELLO, ranges, touching="adjacent")
        assert result == "<em>He</em><em>llo</em><em> wo</em>rld"

    def test_merge_only_affects_touch_points(self) -> None:
        ranges = [Range(0, 2), Range(2, 5), Range(6, 11)]
        assert insert_markers(HELLO, ranges) == "<em>Hello</em> <em>world</em>"

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValueError, match="touch policy"):
            insert_markers(HELLO, [Range(0, 5)], touching="nested")  # type: ignore[arg-type]


class TestCustomMarkers:
    """Configurable marker strings."""

    def test_mark_tags(self) -> None:
        result = insert_markers(
            HELLO, [Range(6, 11)], open_marker="<mark>", close_marker="</mark>"
        )
        assert result == "Hello <mark>world</mark>"

    def test_single_char_markers(self) -> None:
        result = insert_markers(
            HELLO, [Range(0, 5), Range(6, 11)], open_marker="[", close_marker="]"
        )
        assert result == "[Hello] [world]"


class TestProperties:
    """Length growth and content preservation."""

    @pytest.mark.parametrize("ranges", _DISJOINT_CASES)
    def test_length_growth(self, ranges: list[Range]) -> None:
        result = insert_markers(HELLO, ranges)
        assert len(result) == len(HELLO) + len(ranges) * (len("<em>") + len("</em>"))

    def test_length_growth_adjacent_touching(self) -> None:
        ranges = [Range(0, 5), Range(5, 11)]
        result = insert_markers(HELLO, ranges, touching="adjacent")
        assert len(result) == len(HELLO) + 2 * 9

    @pytest.mark.parametrize("ranges", _DISJOINT_CASES)
    def test_content_preserved(self, ranges: list[Range]) -> None:
        assert strip_markers(insert_markers(HELLO, ranges)) == HELLO

    def test_content_preserved_when_merged(self) -> None:
        result = insert_markers(HELLO, [Range(0, 5), Range(5, 11)])
        assert strip_markers(result) == HELLO


class TestFailures:
    """Validation errors abort before any output is built."""

    def test_out_of_bounds(self) -> None:
        with pytest.raises(RangesOutOfBoundsError):
            insert_markers(HELLO, [make_range(0, 50)])

    def test_overlapping(self) -> None:
        with pytest.raises(OverlappingRangesError):
            insert_markers(HELLO, [make_range(0, 5), make_range(3, 11)])

    def test_deterministic(self) -> None:
        """Retrying the same input gives the same error."""
        for _ in range(3):
            with pytest.raises(OverlappingRangesError):
                insert_markers(HELLO, [Range(0, 5), Range(4, 6)])


class TestUnicode:
    """Positions are code point indices."""

    def test_cjk(self) -> None:
        text = "你好世界"
        assert insert_markers(text, [Range(2, 4)]) == "你好<em>世界</em>"

    def test_accented_bounds_use_code_points(self) -> None:
        """'é' is one position even though it is two UTF-8 bytes."""
        text = "café au lait"
        assert insert_markers(text, [Range(0, 4)]) == "<em>café</em> au lait"
        with pytest.raises(RangesOutOfBoundsError):
            insert_markers(text, [Range(0, len(text.encode()))])

    def test_emoji(self) -> None:
        text = "ok 🎉 done"
        assert insert_markers(text, [Range(3, 4)]) == "ok <em>🎉</em> done"
