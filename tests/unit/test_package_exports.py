"""Tests for public package exports."""

from __future__ import annotations

import unittest

import trainloops
import trainloops.analysis as analysis_pkg
import trainloops.search as search_pkg
import trainloops.track as track_pkg
import trainloops.utils as utils_pkg


class PackageExportTests(unittest.TestCase):
    """Validate that every name in ``__all__`` resolves."""

    def test_all_exports_resolve(self) -> None:
        """Resolve each advertised symbol of every public package."""
        for module in (trainloops, analysis_pkg, search_pkg, track_pkg, utils_pkg):
            for name in module.__all__:
                with self.subTest(module=module.__name__, name=name):
                    self.assertIsNotNone(getattr(module, name))

    def test_core_entry_points_are_shared(self) -> None:
        """Expose the same search function from the root and search packages."""
        self.assertIs(trainloops.find_tracks, search_pkg.find_tracks)
        self.assertIs(trainloops.build_transition_table, track_pkg.build_transition_table)


if __name__ == "__main__":
    unittest.main()
