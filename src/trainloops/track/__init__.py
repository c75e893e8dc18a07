"""Track pieces, geometry, transition tables, and letter codes."""

from trainloops.track.angle import Angle
from trainloops.track.models import PieceKind, PlacedPart, Track
from trainloops.track.notation import format_track, parse_letter_code
from trainloops.track.params import (
    PieceParameters,
    build_piece_parameters,
    duplo_parameters,
    lillabo_parameters,
)
from trainloops.track.transitions import (
    TransitionDelta,
    TransitionTable,
    build_transition_table,
    place_pieces,
    transition_delta,
)

__all__ = [
    "Angle",
    "PieceKind",
    "PieceParameters",
    "PlacedPart",
    "Track",
    "TransitionDelta",
    "TransitionTable",
    "build_piece_parameters",
    "build_transition_table",
    "duplo_parameters",
    "format_track",
    "lillabo_parameters",
    "parse_letter_code",
    "place_pieces",
    "transition_delta",
]
