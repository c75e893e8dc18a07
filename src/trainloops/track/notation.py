"""Compact letter codes for track layouts."""

from __future__ import annotations

from collections.abc import Iterable

from trainloops.track.models import PieceKind, PlacedPart, Track
from trainloops.utils.exceptions import LayoutError

_LETTER_TO_KIND = {kind.letter: kind for kind in PieceKind}


def format_track(track: Track | Iterable[PlacedPart]) -> str:
    """Format a layout as one letter per piece.

    Args:
        track: Track or iterable of placed parts.

    Returns:
        Letter code such as ``"BSLLLR"``.
    """
    return "".join(part.kind.letter for part in track)


def parse_letter_code(code: str) -> list[PieceKind]:
    """Parse a letter code back into piece kinds.

    Whitespace is ignored and letters are case-insensitive.

    Args:
        code: Letter code, e.g. ``"B S LLLL"``.

    Returns:
        Piece kinds in traversal order.

    Raises:
        trainloops.utils.exceptions.LayoutError: If the code contains a
            character that is not a piece letter.
    """
    kinds: list[PieceKind] = []
    for position, char in enumerate(code):
        if char.isspace():
            continue
        kind = _LETTER_TO_KIND.get(char.upper())
        if kind is None:
            valid = "".join(_LETTER_TO_KIND)
            msg = f"unknown piece letter {char!r} at position {position}; expected one of {valid}"
            raise LayoutError(msg)
        kinds.append(kind)
    return kinds
