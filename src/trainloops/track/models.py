"""Track piece and layout data models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from trainloops.track.angle import Angle
from trainloops.utils.constants import CLOSURE_TOLERANCE

if TYPE_CHECKING:
    from trainloops.track.transitions import TransitionTable


class PieceKind(IntEnum):
    """Kinds of track pieces.

    ``END`` is a chain terminator used by fixtures and never placed by the
    search.
    """

    END = 0
    BRIDGE = 1
    STRAIGHT = 2
    LEFT_CURVE = 3
    RIGHT_CURVE = 4

    @property
    def letter(self) -> str:
        """One-letter code used by compact track summaries.

        Returns:
            Letter code for this kind.
        """
        return _KIND_LETTERS[self]

    @property
    def turn(self) -> int:
        """Heading change in angle steps caused by this kind.

        Returns:
            ``+1`` for left curves, ``-1`` for right curves, ``0`` otherwise.
        """
        if self is PieceKind.LEFT_CURVE:
            return 1
        if self is PieceKind.RIGHT_CURVE:
            return -1
        return 0


_KIND_LETTERS = {
    PieceKind.END: "E",
    PieceKind.BRIDGE: "B",
    PieceKind.STRAIGHT: "S",
    PieceKind.LEFT_CURVE: "L",
    PieceKind.RIGHT_CURVE: "R",
}

KIND_COUNT = len(PieceKind)


@dataclass(frozen=True)
class PlacedPart:
    """One piece placed in a layout.

    Args:
        x: X coordinate of the piece origin.
        y: Y coordinate of the piece origin.
        angle: Heading at the piece origin.
        kind: Piece kind.
    """

    x: float
    y: float
    angle: Angle
    kind: PieceKind = PieceKind.END

    def at_same_place_as(self, other: PlacedPart, tolerance: float = CLOSURE_TOLERANCE) -> bool:
        """Check whether ``other`` starts at the same pose as this part.

        Args:
            other: Part to compare against.
            tolerance: Maximum absolute coordinate difference per axis.

        Returns:
            ``True`` if both coordinates are within tolerance and headings match.
        """
        return (
            abs(self.x - other.x) < tolerance
            and abs(self.y - other.y) < tolerance
            and self.angle == other.angle
        )


@dataclass(frozen=True)
class Track:
    """Ordered sequence of placed parts forming a layout.

    Args:
        parts: Placed parts in traversal order.
    """

    parts: tuple[PlacedPart, ...]

    def __len__(self) -> int:
        """Number of placed parts.

        Returns:
            Part count.
        """
        return len(self.parts)

    def __iter__(self) -> Iterator[PlacedPart]:
        """Iterate over parts in traversal order.

        Returns:
            Iterator over placed parts.
        """
        return iter(self.parts)

    @property
    def kinds(self) -> tuple[PieceKind, ...]:
        """Piece kinds in traversal order.

        Returns:
            Tuple of kinds.
        """
        return tuple(part.kind for part in self.parts)

    @property
    def letter_code(self) -> str:
        """Compact one-letter-per-piece summary such as ``"BSLLR"``.

        Returns:
            Letter code string.
        """
        return "".join(part.kind.letter for part in self.parts)

    def trailing_part(self, table: TransitionTable) -> PlacedPart:
        """Compute the pose reached after traversing the last part.

        Args:
            table: Transition table for the active piece parameters.

        Returns:
            Virtual ``END`` part placed after the last part.
        """
        return table.advance(self.parts[-1])

    def is_closed(self, table: TransitionTable, tolerance: float = CLOSURE_TOLERANCE) -> bool:
        """Check whether the layout returns to its first pose.

        Args:
            table: Transition table for the active piece parameters.
            tolerance: Maximum absolute coordinate difference per axis.

        Returns:
            ``True`` if the trailing pose coincides with the first part.
        """
        if not self.parts:
            return False
        return self.parts[0].at_same_place_as(self.trailing_part(table), tolerance)
