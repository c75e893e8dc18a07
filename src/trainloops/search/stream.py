"""Background-thread producer for track enumeration with bounded handoff."""

from __future__ import annotations

import contextlib
import logging
import queue
import threading
from collections.abc import Iterator
from types import TracebackType
from typing import cast

from trainloops.search.engine import find_tracks, validate_inventory
from trainloops.track.models import Track
from trainloops.track.transitions import TransitionTable
from trainloops.utils.constants import DEFAULT_STREAM_BUFFER_SIZE
from trainloops.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.1
JOIN_TIMEOUT = 2.0

_DONE = object()


class TrackStream:
    """Run :func:`find_tracks` in a worker thread and hand results over a queue.

    The producer blocks while ``buffer_size`` results wait to be consumed, so
    memory stays bounded. :meth:`stop` cancels cooperatively between piece
    placements. Exceptions raised by the producer are re-raised in the
    consuming thread. Leaving the iteration early, by ``break`` or by an
    exception in the loop body, cancels the producer as well. The stream can
    be iterated only once.

    Args:
        bridges: Number of bridge pieces (0 or 1).
        straights: Number of straight pieces.
        curves: Number of curve pieces.
        table: Transition table for the active piece parameters.
        buffer_size: Maximum number of results buffered ahead of the consumer.
    """

    def __init__(
        self,
        bridges: int,
        straights: int,
        curves: int,
        table: TransitionTable,
        buffer_size: int = DEFAULT_STREAM_BUFFER_SIZE,
    ) -> None:
        """Validate the inventory and prepare the handoff queue.

        Args:
            bridges: Number of bridge pieces (0 or 1).
            straights: Number of straight pieces.
            curves: Number of curve pieces.
            table: Transition table for the active piece parameters.
            buffer_size: Maximum number of results buffered ahead of the
                consumer.

        Raises:
            trainloops.utils.exceptions.InvalidInputError: If the piece
                counts are unsupported.
            trainloops.utils.exceptions.ConfigurationError: If
                ``buffer_size`` is below one.
        """
        validate_inventory(bridges, straights, curves)
        if buffer_size < 1:
            msg = "buffer_size must be at least 1"
            raise ConfigurationError(msg)
        self._bridges = bridges
        self._straights = straights
        self._curves = curves
        self._table = table
        self._queue: queue.Queue[object] = queue.Queue(maxsize=buffer_size)
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._error: Exception | None = None
        self._consumed = False

    def start(self) -> None:
        """Start the producer thread if it is not running yet."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, daemon=True, name="TrackSearch")
        self._thread.start()

    def stop(self) -> None:
        """Cancel the search and wait for the producer thread to exit."""
        self._stop_event.set()
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break
        self._join()

    @property
    def stopped(self) -> bool:
        """Whether :meth:`stop` has been requested.

        Returns:
            ``True`` after cancellation.
        """
        return self._stop_event.is_set()

    @property
    def running(self) -> bool:
        """Whether the producer thread is still alive.

        Returns:
            ``True`` while the worker thread runs.
        """
        return self._thread is not None and self._thread.is_alive()

    def __iter__(self) -> Iterator[Track]:
        """Consume tracks in search order until completion or cancellation.

        Returns:
            Iterator over closed tracks.

        Raises:
            Exception: Any exception raised by the producer thread.
        """
        if self._consumed:
            return
        self._consumed = True
        self.start()
        finished = False
        try:
            while not self._stop_event.is_set():
                try:
                    item = self._queue.get(timeout=POLL_INTERVAL)
                except queue.Empty:
                    continue
                if item is _DONE:
                    finished = True
                    break
                yield cast(Track, item)
        finally:
            # consumer left early: release a producer blocked on the queue
            if not finished:
                self._stop_event.set()
            self._join()
        if self._error is not None:
            raise self._error

    def __enter__(self) -> TrackStream:
        """Start the producer when entering a ``with`` block.

        Returns:
            This stream.
        """
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """Stop the producer when leaving a ``with`` block.

        Args:
            exc_type: Exception type raised inside the block, if any.
            exc: Exception instance raised inside the block, if any.
            traceback: Traceback of the exception, if any.
        """
        self.stop()

    def _run(self) -> None:
        """Producer loop executed in the worker thread."""
        try:
            tracks = find_tracks(
                self._bridges,
                self._straights,
                self._curves,
                self._table,
                should_stop=self._stop_event.is_set,
            )
            for track in tracks:
                if not self._put(track):
                    return
        except Exception as exc:  # forwarded to the consumer
            logger.debug("Track search failed: %s", exc)
            self._error = exc
        finally:
            self._put(_DONE)

    def _put(self, item: object) -> bool:
        """Block until ``item`` is queued or the stream is stopped.

        Args:
            item: Track or completion sentinel.

        Returns:
            ``True`` if the item was queued, ``False`` after cancellation.
        """
        while not self._stop_event.is_set():
            with contextlib.suppress(queue.Full):
                self._queue.put(item, timeout=POLL_INTERVAL)
                return True
        return False

    def _join(self) -> None:
        """Join the producer thread if it was started from another thread."""
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=JOIN_TIMEOUT)
