"""Topological classification of closed layouts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from trainloops.track.models import Track
from trainloops.utils.exceptions import LayoutError


class LayoutShape(Enum):
    """Shape families distinguished by net rotation."""

    FIGURE_EIGHT = "8"
    LOOP = "O"


@dataclass(frozen=True)
class LayoutClassification:
    """Classification of one closed layout.

    Args:
        shape: Figure-eight for zero net rotation, loop otherwise.
        total_turning: Signed curve count (left ``+1``, right ``-1``).
        net_turns: Full turns made while traversing the layout.
    """

    shape: LayoutShape
    total_turning: int
    net_turns: int


def total_turning(track: Track) -> int:
    """Sum the heading changes of all curves in a layout.

    For a closed layout the result is a multiple of the angle step count.

    Args:
        track: Layout to inspect.

    Returns:
        Number of left curves minus number of right curves.
    """
    return sum(part.kind.turn for part in track)


def classify_layout(track: Track) -> LayoutClassification:
    """Classify a closed layout as a figure-eight or a loop.

    Args:
        track: Closed layout with at least one part.

    Returns:
        Shape, total turning and net full turns.

    Raises:
        trainloops.utils.exceptions.LayoutError: If the layout is empty or its
            total turning is not a whole number of turns.
    """
    if len(track) == 0:
        msg = "cannot classify an empty layout"
        raise LayoutError(msg)
    steps = track.parts[0].angle.steps
    turning = total_turning(track)
    if turning % steps != 0:
        msg = f"total turning {turning} is not a multiple of {steps}; layout is not closed"
        raise LayoutError(msg)
    shape = LayoutShape.FIGURE_EIGHT if turning == 0 else LayoutShape.LOOP
    return LayoutClassification(shape=shape, total_turning=turning, net_turns=turning // steps)


def filter_by_shape(tracks: Iterable[Track], shape: LayoutShape | None) -> Iterator[Track]:
    """Lazily keep layouts of one shape family.

    Args:
        tracks: Closed layouts, e.g. search results.
        shape: Shape to keep; ``None`` keeps every layout.

    Returns:
        Iterator over matching layouts in input order.
    """
    for track in tracks:
        if shape is None or classify_layout(track).shape is shape:
            yield track
