"""Piece transition model and precomputed transition tables."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from trainloops.track.angle import Angle
from trainloops.track.models import KIND_COUNT, PieceKind, PlacedPart
from trainloops.track.params import PieceParameters

FloatArray = npt.NDArray[np.float64]
IntArray = npt.NDArray[np.int64]


@dataclass(frozen=True)
class TransitionDelta:
    """Pose change caused by traversing one piece.

    Args:
        dx: Displacement along x.
        dy: Displacement along y.
        dangle: Heading change in angle steps.
    """

    dx: float
    dy: float
    dangle: int


def _piece_length(kind: PieceKind, params: PieceParameters) -> float:
    """Return the travel length of a straight-line piece.

    Args:
        kind: ``BRIDGE`` or ``STRAIGHT``.
        params: Active piece parameters.

    Returns:
        Configured length of the piece.
    """
    if kind is PieceKind.BRIDGE:
        return params.bridge_length
    return params.straight_length


def transition_delta(kind: PieceKind, angle: Angle, params: PieceParameters) -> TransitionDelta:
    """Compute the pose change of one piece traversed at a given heading.

    Curves move along their chord, whose direction is the start heading
    rotated by half a step towards the turn.

    Args:
        kind: Piece kind being traversed.
        angle: Heading at the piece origin.
        params: Active piece parameters.

    Returns:
        Displacement and heading change for the piece.
    """
    theta = angle.radians
    if kind in (PieceKind.BRIDGE, PieceKind.STRAIGHT):
        length = _piece_length(kind, params)
        return TransitionDelta(dx=math.cos(theta) * length, dy=math.sin(theta) * length, dangle=0)
    if kind in (PieceKind.LEFT_CURVE, PieceKind.RIGHT_CURVE):
        direction = theta + kind.turn * params.curve_half_angle
        chord = params.chord_length
        return TransitionDelta(
            dx=math.cos(direction) * chord,
            dy=math.sin(direction) * chord,
            dangle=kind.turn,
        )
    return TransitionDelta(dx=0.0, dy=0.0, dangle=0)


@dataclass(frozen=True)
class TransitionTable:
    """Read-only pose deltas for every ``(kind, angle)`` combination.

    Args:
        params: Piece parameters the table was built from.
        dx: X displacement array of shape ``(kind_count, angle_steps)``.
        dy: Y displacement array of shape ``(kind_count, angle_steps)``.
        dangle: Heading change array of shape ``(kind_count, angle_steps)``.
    """

    params: PieceParameters
    dx: FloatArray
    dy: FloatArray
    dangle: IntArray

    @property
    def angle_steps(self) -> int:
        """Number of angle steps per full circle.

        Returns:
            Angle step count of the underlying parameters.
        """
        return self.params.angle_steps

    def delta(self, kind: PieceKind, angle: Angle) -> TransitionDelta:
        """Look up the pose change of one piece.

        Args:
            kind: Piece kind being traversed.
            angle: Heading at the piece origin.

        Returns:
            Precomputed displacement and heading change.
        """
        row = int(kind)
        col = angle.value
        return TransitionDelta(
            dx=float(self.dx[row, col]),
            dy=float(self.dy[row, col]),
            dangle=int(self.dangle[row, col]),
        )

    def advance(self, part: PlacedPart, next_kind: PieceKind = PieceKind.END) -> PlacedPart:
        """Place the part that follows ``part``.

        Args:
            part: Already placed part.
            next_kind: Kind assigned to the new part.

        Returns:
            Part positioned at the end of ``part``.
        """
        delta = self.delta(part.kind, part.angle)
        return PlacedPart(
            x=part.x + delta.dx,
            y=part.y + delta.dy,
            angle=part.angle.add(delta.dangle),
            kind=next_kind,
        )


def build_transition_table(params: PieceParameters) -> TransitionTable:
    """Precompute pose deltas for every piece kind and heading.

    Args:
        params: Piece parameters; validated before use.

    Returns:
        Transition table with non-writeable arrays.

    Raises:
        trainloops.utils.exceptions.ConfigurationError: If ``params`` is
            invalid.
    """
    params.validate()
    steps = params.angle_steps
    heading = 2.0 * np.pi * np.arange(steps, dtype=np.float64) / steps
    half = params.curve_half_angle
    chord = params.chord_length

    dx = np.zeros((KIND_COUNT, steps), dtype=np.float64)
    dy = np.zeros((KIND_COUNT, steps), dtype=np.float64)
    dangle = np.zeros((KIND_COUNT, steps), dtype=np.int64)

    dx[PieceKind.BRIDGE] = np.cos(heading) * params.bridge_length
    dy[PieceKind.BRIDGE] = np.sin(heading) * params.bridge_length
    dx[PieceKind.STRAIGHT] = np.cos(heading) * params.straight_length
    dy[PieceKind.STRAIGHT] = np.sin(heading) * params.straight_length
    dx[PieceKind.LEFT_CURVE] = np.cos(heading + half) * chord
    dy[PieceKind.LEFT_CURVE] = np.sin(heading + half) * chord
    dangle[PieceKind.LEFT_CURVE] = 1
    dx[PieceKind.RIGHT_CURVE] = np.cos(heading - half) * chord
    dy[PieceKind.RIGHT_CURVE] = np.sin(heading - half) * chord
    dangle[PieceKind.RIGHT_CURVE] = -1

    for array in (dx, dy, dangle):
        array.setflags(write=False)
    return TransitionTable(params=params, dx=dx, dy=dy, dangle=dangle)


def place_pieces(kinds: Iterable[PieceKind], table: TransitionTable) -> list[PlacedPart]:
    """Lay out a chain of pieces starting at the origin with heading zero.

    Args:
        kinds: Piece kinds in traversal order. A trailing ``END`` yields the
            pose reached after the last physical piece.
        table: Transition table for the active piece parameters.

    Returns:
        Placed parts, one per kind.
    """
    parts: list[PlacedPart] = []
    for kind in kinds:
        if not parts:
            parts.append(PlacedPart(x=0.0, y=0.0, angle=Angle(0, table.angle_steps), kind=kind))
            continue
        parts.append(table.advance(parts[-1], next_kind=kind))
    return parts
