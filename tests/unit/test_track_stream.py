"""Unit tests for the threaded track stream."""

from __future__ import annotations

import unittest
from unittest import mock

from tests.helpers import lillabo_table
from trainloops.search import TrackStream, find_tracks
from trainloops.track import format_track
from trainloops.utils.exceptions import ConfigurationError, InvalidInputError


class TrackStreamTests(unittest.TestCase):
    """Validate ordering, cancellation, and error forwarding of ``TrackStream``."""

    def test_stream_matches_generator_order(self) -> None:
        """Deliver the same layouts in the same order as ``find_tracks``."""
        table = lillabo_table()
        expected = [format_track(track) for track in find_tracks(1, 2, 8, table)]
        streamed = [format_track(track) for track in TrackStream(1, 2, 8, table, buffer_size=3)]

        self.assertEqual(streamed, expected)

    def test_invalid_inventory_is_rejected_on_construction(self) -> None:
        """Validate counts before any thread is started."""
        with self.assertRaises(InvalidInputError):
            TrackStream(2, 0, 8, lillabo_table())

    def test_buffer_size_must_be_positive(self) -> None:
        """Reject an unbounded or empty handoff buffer."""
        with self.assertRaises(ConfigurationError):
            TrackStream(0, 2, 8, lillabo_table(), buffer_size=0)

    def test_stop_cancels_remaining_results(self) -> None:
        """Deliver nothing further after ``stop`` is requested."""
        with TrackStream(0, 2, 8, lillabo_table()) as stream:
            tracks = iter(stream)
            first = next(tracks)
            stream.stop()
            rest = list(tracks)

        self.assertTrue(stream.stopped)
        self.assertEqual(format_track(first)[0], "S")
        self.assertEqual(rest, [])

    def test_leaving_loop_early_stops_producer(self) -> None:
        """Cancel and join the producer when the consumer breaks out."""
        stream = TrackStream(0, 2, 8, lillabo_table())
        for _ in stream:
            break

        self.assertTrue(stream.stopped)
        self.assertFalse(stream.running)

    def test_consumer_error_stops_producer(self) -> None:
        """Cancel and join the producer when the loop body raises.

        Raises:
            OSError: Raised inside the loop body to simulate a consumer failure.
        """
        stream = TrackStream(0, 2, 8, lillabo_table())
        with self.assertRaises(OSError):
            for _ in stream:
                raise OSError("disk full")

        self.assertTrue(stream.stopped)
        self.assertFalse(stream.running)

    def test_exhausted_stream_is_not_cancelled(self) -> None:
        """Finish without a stop request once every layout was delivered."""
        stream = TrackStream(1, 2, 8, lillabo_table())
        list(stream)

        self.assertFalse(stream.stopped)
        self.assertFalse(stream.running)

    def test_stream_is_not_restartable(self) -> None:
        """Yield nothing on a second iteration."""
        stream = TrackStream(1, 2, 8, lillabo_table())
        first_pass = list(stream)
        second_pass = list(stream)

        self.assertGreater(len(first_pass), 0)
        self.assertEqual(second_pass, [])

    def test_producer_errors_are_reraised_in_consumer(self) -> None:
        """Forward producer exceptions to the consuming thread."""
        table = mock.Mock()
        table.dx.tolist.side_effect = RuntimeError("broken table")

        with self.assertRaises(RuntimeError):
            list(TrackStream(0, 1, 1, table))


if __name__ == "__main__":
    unittest.main()
