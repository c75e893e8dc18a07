"""Unit tests for layout classification."""

from __future__ import annotations

import unittest

from tests.helpers import duplo_table, lillabo_table, track_from_code
from trainloops.analysis import (
    LayoutShape,
    classify_layout,
    filter_by_shape,
    total_turning,
)
from trainloops.track import Track, format_track
from trainloops.utils.exceptions import LayoutError


class LayoutClassifierTests(unittest.TestCase):
    """Validate total turning and shape classification."""

    def test_total_turning_counts_left_minus_right(self) -> None:
        """Ignore straights and bridges when summing turns."""
        track = track_from_code("BSLLRLS", duplo_table())

        self.assertEqual(total_turning(track), 2)

    def test_circle_is_a_single_loop(self) -> None:
        """Classify a full circle as an O-shaped loop with one turn."""
        result = classify_layout(track_from_code("L" * 12, duplo_table()))

        self.assertIs(result.shape, LayoutShape.LOOP)
        self.assertEqual(result.total_turning, 12)
        self.assertEqual(result.net_turns, 1)

    def test_two_opposite_circles_form_a_figure_eight(self) -> None:
        """Classify zero net rotation as a figure-eight."""
        table = lillabo_table()
        track = track_from_code("L" * 8 + "R" * 8, table)

        self.assertTrue(track.is_closed(table))
        result = classify_layout(track)
        self.assertIs(result.shape, LayoutShape.FIGURE_EIGHT)
        self.assertEqual(result.net_turns, 0)

    def test_double_circle_counts_two_turns(self) -> None:
        """Report net turns for loops that wind more than once."""
        result = classify_layout(track_from_code("L" * 16, lillabo_table()))

        self.assertIs(result.shape, LayoutShape.LOOP)
        self.assertEqual(result.net_turns, 2)

    def test_unclosed_or_empty_layouts_are_rejected(self) -> None:
        """Raise when turning is not a whole number of circles."""
        with self.assertRaises(LayoutError):
            classify_layout(track_from_code("LLL", duplo_table()))
        with self.assertRaises(LayoutError):
            classify_layout(Track(parts=()))

    def test_filter_by_shape_keeps_input_order(self) -> None:
        """Keep only matching shapes, or everything when no shape is given."""
        table = lillabo_table()
        tracks = [
            track_from_code("L" * 8, table),
            track_from_code("L" * 8 + "R" * 8, table),
            track_from_code("L" * 16, table),
        ]

        loops = [format_track(track) for track in filter_by_shape(tracks, LayoutShape.LOOP)]
        eight_shape = LayoutShape.FIGURE_EIGHT
        eights = [format_track(track) for track in filter_by_shape(tracks, eight_shape)]

        self.assertEqual(loops, ["L" * 8, "L" * 16])
        self.assertEqual(eights, ["L" * 8 + "R" * 8])
        self.assertEqual(len(list(filter_by_shape(tracks, None))), 3)


if __name__ == "__main__":
    unittest.main()
