"""Depth-first enumeration of closed track layouts."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator

from trainloops.track.angle import Angle
from trainloops.track.models import PieceKind, PlacedPart, Track
from trainloops.track.transitions import TransitionTable
from trainloops.utils.constants import CLOSURE_TOLERANCE, PRUNE_SLACK
from trainloops.utils.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

MAX_BRIDGE_COUNT = 1


def validate_inventory(bridges: int, straights: int, curves: int) -> None:
    """Validate the piece counts requested for a search.

    Args:
        bridges: Number of bridge pieces.
        straights: Number of straight pieces.
        curves: Number of curve pieces.

    Raises:
        trainloops.utils.exceptions.InvalidInputError: If ``bridges`` is not
            0 or 1, or any count is negative.
    """
    if not 0 <= bridges <= MAX_BRIDGE_COUNT:
        msg = f"bridges must be 0 or {MAX_BRIDGE_COUNT}, got: {bridges}"
        raise InvalidInputError(msg)
    if straights < 0:
        msg = f"straights must be non-negative, got: {straights}"
        raise InvalidInputError(msg)
    if curves < 0:
        msg = f"curves must be non-negative, got: {curves}"
        raise InvalidInputError(msg)


class _TrackSearch:
    """Backtracking state for one enumeration run.

    Poses live in parallel lists indexed by depth. A branch only writes its
    own slot and the slot after it, and never reads beyond that frontier, so
    siblings cannot see each other's placements.
    """

    def __init__(
        self,
        table: TransitionTable,
        bridges: int,
        straights: int,
        curves: int,
        should_stop: Callable[[], bool] | None,
    ) -> None:
        """Allocate the working buffer.

        Args:
            table: Transition table for the active piece parameters.
            bridges: Number of bridge pieces (0 or 1).
            straights: Number of straight pieces.
            curves: Number of curve pieces.
            should_stop: Optional cancellation predicate.
        """
        self._steps = table.angle_steps
        self._bridges = bridges
        self._straights = straights
        self._curves = curves
        self._should_stop = should_stop
        self._straight_length = table.params.straight_length
        self._chord_length = table.params.chord_length

        self._dx = table.dx.tolist()
        self._dy = table.dy.tolist()
        self._dangle = table.dangle.tolist()

        slots = bridges + straights + curves + 1
        self._last = slots - 1
        self._xs = [0.0] * slots
        self._ys = [0.0] * slots
        self._angles = [0] * slots
        self._kinds = [PieceKind.END] * slots

        self.placements = 0
        self.pruned = 0
        self.emitted = 0
        self.cancelled = False

    def run(self) -> Iterator[Track]:
        """Enumerate closed layouts in depth-first order.

        Returns:
            Iterator over closed tracks.
        """
        logger.debug(
            "Searching tracks: bridges=%d straights=%d curves=%d angle_steps=%d",
            self._bridges,
            self._straights,
            self._curves,
            self._steps,
        )
        yield from self._search_from_start()
        logger.debug(
            "Search finished: %d tracks, %d placements, %d pruned branches%s",
            self.emitted,
            self.placements,
            self.pruned,
            " (cancelled)" if self.cancelled else "",
        )

    def _search_from_start(self) -> Iterator[Track]:
        """Place the fixed bridge and branch on the first free piece.

        Returns:
            Iterator over closed tracks.
        """
        start = 0
        if self._bridges:
            self._place(0, PieceKind.BRIDGE)
            start = 1

        if self._straights == 0 and self._curves == 0:
            if self._bridges and self._is_closed():
                yield self._snapshot()
            return

        straights, curves = self._straights, self._curves
        if straights > 0:
            yield from self._extend(start, PieceKind.STRAIGHT, straights - 1, curves, False)
        if curves > 0:
            yield from self._extend(start, PieceKind.LEFT_CURVE, straights, curves - 1, True)

    def _extend(
        self,
        pos: int,
        kind: PieceKind,
        straights: int,
        curves: int,
        curve_placed: bool,
    ) -> Iterator[Track]:
        """Place ``kind`` at ``pos`` and explore every continuation.

        Args:
            pos: Slot index receiving the piece.
            kind: Piece kind to place.
            straights: Straight pieces left after this placement.
            curves: Curve pieces left after this placement.
            curve_placed: Whether a curve occupies any slot up to ``pos``.

        Returns:
            Iterator over closed tracks found below this branch.
        """
        if self._should_stop is not None and self._should_stop():
            self.cancelled = True
            return
        self._place(pos, kind)

        if straights == 0 and curves == 0:
            if self._is_closed():
                yield self._snapshot()
            return

        nxt = pos + 1
        reach = straights * self._straight_length + curves * self._chord_length + PRUNE_SLACK
        if math.hypot(self._xs[nxt], self._ys[nxt]) > reach:
            self.pruned += 1
            return

        if straights > 0:
            yield from self._extend(nxt, PieceKind.STRAIGHT, straights - 1, curves, curve_placed)
        if curves > 0:
            yield from self._extend(nxt, PieceKind.LEFT_CURVE, straights, curves - 1, True)
            # the first curve of a layout always turns left
            if curve_placed:
                yield from self._extend(nxt, PieceKind.RIGHT_CURVE, straights, curves - 1, True)

    def _place(self, pos: int, kind: PieceKind) -> None:
        """Assign ``kind`` to slot ``pos`` and compute the pose of the next slot.

        Args:
            pos: Slot index receiving the piece.
            kind: Piece kind to place.
        """
        self.placements += 1
        angle = self._angles[pos]
        self._kinds[pos] = kind
        self._xs[pos + 1] = self._xs[pos] + self._dx[kind][angle]
        self._ys[pos + 1] = self._ys[pos] + self._dy[kind][angle]
        self._angles[pos + 1] = (angle + self._dangle[kind][angle]) % self._steps

    def _is_closed(self) -> bool:
        """Check whether the trailing pose returns to the first part.

        Returns:
            ``True`` if positions agree within tolerance and headings match.
        """
        last = self._last
        return (
            abs(self._xs[0] - self._xs[last]) < CLOSURE_TOLERANCE
            and abs(self._ys[0] - self._ys[last]) < CLOSURE_TOLERANCE
            and self._angles[0] == self._angles[last]
        )

    def _snapshot(self) -> Track:
        """Copy the placed parts, excluding the virtual closing slot.

        Returns:
            Immutable track.
        """
        self.emitted += 1
        return Track(
            parts=tuple(
                PlacedPart(
                    x=self._xs[i],
                    y=self._ys[i],
                    angle=Angle(self._angles[i], self._steps),
                    kind=self._kinds[i],
                )
                for i in range(self._last)
            )
        )


def find_tracks(
    bridges: int,
    straights: int,
    curves: int,
    table: TransitionTable,
    *,
    should_stop: Callable[[], bool] | None = None,
) -> Iterator[Track]:
    """Enumerate every closed layout that uses exactly the given pieces.

    A bridge, if requested, is always the first piece, and the first curve
    always turns left, so rotations to the bridge and mirror images are not
    reported twice. Results come in deterministic depth-first order with
    straights tried before left curves and left curves before right curves.

    Input is validated eagerly, before the returned iterator is consumed.

    Args:
        bridges: Number of bridge pieces (0 or 1).
        straights: Number of straight pieces.
        curves: Number of curve pieces.
        table: Transition table for the active piece parameters.
        should_stop: Optional predicate polled between placements; when it
            returns ``True`` the iterator ends early.

    Returns:
        Lazy, non-restartable iterator over closed tracks.

    Raises:
        trainloops.utils.exceptions.InvalidInputError: If the piece counts are
            unsupported.
    """
    validate_inventory(bridges, straights, curves)
    search = _TrackSearch(
        table=table,
        bridges=bridges,
        straights=straights,
        curves=curves,
        should_stop=should_stop,
    )
    return search.run()
