"""Physical piece parameters and manufacturer presets."""

from __future__ import annotations

import math
from dataclasses import dataclass

from trainloops.track.angle import DEFAULT_ANGLE_STEPS
from trainloops.utils.exceptions import ConfigurationError

DEFAULT_CURVE_RADIUS = 2.0
DEFAULT_BRIDGE_LENGTH = 8.0
DEFAULT_STRAIGHT_LENGTH = 1.0

LILLABO_ANGLE_STEPS = 8
LILLABO_CURVE_RADIUS = 1.0
LILLABO_BRIDGE_LENGTH = 2.0
LILLABO_STRAIGHT_LENGTH = 1.0


@dataclass(frozen=True)
class PieceParameters:
    """Geometry of the available track pieces.

    Lengths share one arbitrary unit, typically the straight-piece length.

    Args:
        angle_steps: Number of curve pieces forming a full circle.
        curve_radius: Radius of the circle formed by curve pieces.
        bridge_length: Length of the bridge piece.
        straight_length: Length of one straight piece.
    """

    angle_steps: int = DEFAULT_ANGLE_STEPS
    curve_radius: float = DEFAULT_CURVE_RADIUS
    bridge_length: float = DEFAULT_BRIDGE_LENGTH
    straight_length: float = DEFAULT_STRAIGHT_LENGTH

    @property
    def chord_length(self) -> float:
        """Straight-line distance between start and end of one curve piece.

        Returns:
            ``2*R*sin(pi/N)``.
        """
        return 2.0 * self.curve_radius * math.sin(math.pi / self.angle_steps)

    @property
    def curve_half_angle(self) -> float:
        """Angle between a curve's start heading and its chord direction.

        Returns:
            ``pi/N`` in radians.
        """
        return math.pi / self.angle_steps

    def validate(self) -> None:
        """Validate piece geometry.

        Raises:
            trainloops.utils.exceptions.ConfigurationError: If the angle step
                count is below one or any length is not strictly positive.
        """
        if self.angle_steps < 1:
            msg = "angle_steps must be at least 1"
            raise ConfigurationError(msg)
        if self.curve_radius <= 0.0:
            msg = "curve_radius must be positive"
            raise ConfigurationError(msg)
        if self.bridge_length <= 0.0:
            msg = "bridge_length must be positive"
            raise ConfigurationError(msg)
        if self.straight_length <= 0.0:
            msg = "straight_length must be positive"
            raise ConfigurationError(msg)


def build_piece_parameters(
    angle_steps: int = DEFAULT_ANGLE_STEPS,
    curve_radius: float = DEFAULT_CURVE_RADIUS,
    bridge_length: float = DEFAULT_BRIDGE_LENGTH,
    straight_length: float = DEFAULT_STRAIGHT_LENGTH,
) -> PieceParameters:
    """Build validated piece parameters.

    Args:
        angle_steps: Number of curve pieces forming a full circle.
        curve_radius: Radius of the circle formed by curve pieces.
        bridge_length: Length of the bridge piece.
        straight_length: Length of one straight piece.

    Returns:
        Validated parameter set.

    Raises:
        trainloops.utils.exceptions.ConfigurationError: If any value violates
            its bound.
    """
    params = PieceParameters(
        angle_steps=int(angle_steps),
        curve_radius=float(curve_radius),
        bridge_length=float(bridge_length),
        straight_length=float(straight_length),
    )
    params.validate()
    return params


def duplo_parameters() -> PieceParameters:
    """Piece geometry of the LEGO Duplo basic train set.

    Returns:
        Default parameter set.
    """
    return build_piece_parameters()


def lillabo_parameters() -> PieceParameters:
    """Piece geometry of the IKEA LILLABO 20-piece train set.

    Returns:
        LILLABO parameter set.
    """
    return build_piece_parameters(
        angle_steps=LILLABO_ANGLE_STEPS,
        curve_radius=LILLABO_CURVE_RADIUS,
        bridge_length=LILLABO_BRIDGE_LENGTH,
        straight_length=LILLABO_STRAIGHT_LENGTH,
    )
