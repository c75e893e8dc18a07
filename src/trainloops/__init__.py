"""Enumeration of closed toy-train track layouts."""

from trainloops.analysis.classify import LayoutShape, classify_layout
from trainloops.search.engine import find_tracks
from trainloops.track.params import PieceParameters, build_piece_parameters
from trainloops.track.transitions import build_transition_table

__all__ = [
    "LayoutShape",
    "PieceParameters",
    "build_piece_parameters",
    "build_transition_table",
    "classify_layout",
    "find_tracks",
]
