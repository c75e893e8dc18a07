"""Shared test helpers."""

from __future__ import annotations

from trainloops.track import (
    PlacedPart,
    Track,
    TransitionTable,
    build_transition_table,
    duplo_parameters,
    lillabo_parameters,
    parse_letter_code,
    place_pieces,
)


def duplo_table() -> TransitionTable:
    """Build the transition table for LEGO Duplo piece geometry.

    Returns:
        Table for 12 angle steps, radius 2, bridge 8, straight 1.
    """
    return build_transition_table(duplo_parameters())


def lillabo_table() -> TransitionTable:
    """Build the transition table for IKEA LILLABO piece geometry.

    Returns:
        Table for 8 angle steps, radius 1, bridge 2, straight 1.
    """
    return build_transition_table(lillabo_parameters())


def chain(code: str, table: TransitionTable) -> list[PlacedPart]:
    """Lay out the pieces of a letter code starting at the origin.

    Args:
        code: Letter code, e.g. ``"LLRE"``.
        table: Transition table used for placement.

    Returns:
        Placed parts, one per letter.
    """
    return place_pieces(parse_letter_code(code), table)


def track_from_code(code: str, table: TransitionTable) -> Track:
    """Build a track from a letter code of physical pieces.

    Args:
        code: Letter code without the ``END`` terminator.
        table: Transition table used for placement.

    Returns:
        Track with one placed part per letter.
    """
    return Track(parts=tuple(chain(code, table)))
