"""Discrete heading arithmetic for track pieces."""

from __future__ import annotations

import math
from dataclasses import dataclass

from trainloops.utils.exceptions import ConfigurationError

DEFAULT_ANGLE_STEPS = 12


@dataclass(frozen=True)
class Angle:
    """Heading expressed as an integer number of angle steps.

    One step is ``2*pi/steps`` radians, i.e. the heading change of one curve
    piece.

    Args:
        value: Step count in ``[0, steps)``.
        steps: Number of angle steps per full circle.
    """

    value: int = 0
    steps: int = DEFAULT_ANGLE_STEPS

    def __post_init__(self) -> None:
        """Validate step count and value range.

        Raises:
            trainloops.utils.exceptions.ConfigurationError: If ``steps`` is
                below one or ``value`` lies outside ``[0, steps)``.
        """
        if self.steps < 1:
            msg = "steps must be at least 1"
            raise ConfigurationError(msg)
        if not 0 <= self.value < self.steps:
            msg = f"angle value must lie in [0, {self.steps}), got: {self.value}"
            raise ConfigurationError(msg)

    @classmethod
    def normalized(cls, value: int, steps: int = DEFAULT_ANGLE_STEPS) -> Angle:
        """Build an angle from an arbitrary integer by wrapping modulo ``steps``.

        Args:
            value: Any integer step count, possibly negative.
            steps: Number of angle steps per full circle.

        Returns:
            Angle with value wrapped into ``[0, steps)``.

        Raises:
            trainloops.utils.exceptions.ConfigurationError: If ``steps`` is
                below one.
        """
        if steps < 1:
            msg = "steps must be at least 1"
            raise ConfigurationError(msg)
        return cls(value=value % steps, steps=steps)

    def add(self, delta: int | Angle) -> Angle:
        """Rotate by ``delta`` steps modulo a full circle.

        Args:
            delta: Step count or another angle to add.

        Returns:
            New angle with the wrapped sum.

        Raises:
            trainloops.utils.exceptions.ConfigurationError: If ``delta`` is an
                angle with a different step count.
        """
        if isinstance(delta, Angle):
            if delta.steps != self.steps:
                msg = f"cannot add an angle of {delta.steps} steps to one of {self.steps} steps"
                raise ConfigurationError(msg)
            delta = delta.value
        return Angle.normalized(self.value + int(delta), self.steps)

    @property
    def radians(self) -> float:
        """Heading in radians.

        Returns:
            ``2*pi*value/steps``.
        """
        return 2.0 * math.pi * self.value / self.steps

    @property
    def degrees(self) -> float:
        """Heading in degrees.

        Returns:
            ``360*value/steps``.
        """
        return self.value * 360.0 / self.steps
