"""Unit tests for layout letter codes."""

from __future__ import annotations

import unittest

from tests.helpers import duplo_table, track_from_code
from trainloops.track import PieceKind, format_track, parse_letter_code
from trainloops.utils.exceptions import LayoutError


class LetterCodeTests(unittest.TestCase):
    """Validate formatting and parsing of compact layout codes."""

    def test_each_kind_has_a_distinct_letter(self) -> None:
        """Map the five piece kinds to five letters."""
        letters = {kind: kind.letter for kind in PieceKind}

        self.assertEqual(letters[PieceKind.END], "E")
        self.assertEqual(letters[PieceKind.BRIDGE], "B")
        self.assertEqual(letters[PieceKind.STRAIGHT], "S")
        self.assertEqual(letters[PieceKind.LEFT_CURVE], "L")
        self.assertEqual(letters[PieceKind.RIGHT_CURVE], "R")
        self.assertEqual(len(set(letters.values())), len(PieceKind))

    def test_format_track_writes_one_letter_per_part(self) -> None:
        """Summarize tracks and raw part sequences alike."""
        track = track_from_code("BSSLLR", duplo_table())

        self.assertEqual(format_track(track), "BSSLLR")
        self.assertEqual(format_track(track.parts[:2]), "BS")
        self.assertEqual(track.letter_code, "BSSLLR")

    def test_parse_ignores_whitespace_and_case(self) -> None:
        """Accept loosely formatted codes."""
        self.assertEqual(
            parse_letter_code(" b s\tlr "),
            [PieceKind.BRIDGE, PieceKind.STRAIGHT, PieceKind.LEFT_CURVE, PieceKind.RIGHT_CURVE],
        )
        self.assertEqual(parse_letter_code(""), [])

    def test_parse_rejects_unknown_letters(self) -> None:
        """Raise on characters that do not name a piece."""
        with self.assertRaises(LayoutError):
            parse_letter_code("SLX")


if __name__ == "__main__":
    unittest.main()
