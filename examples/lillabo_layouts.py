"""Enumerate IKEA LILLABO layouts and report figure-eight versus loop counts."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

from trainloops.analysis import classify_layout, export_tracks_json
from trainloops.search import find_tracks
from trainloops.track import build_transition_table, format_track, lillabo_parameters
from trainloops.utils import configure_logging

EXAMPLE_BRIDGES = 1
EXAMPLE_STRAIGHTS = 4
EXAMPLE_CURVES = 12


def main() -> None:
    """Run the LILLABO enumeration and export a JSON summary."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("lillabo_example")

    params = lillabo_parameters()
    table = build_transition_table(params)
    tracks = list(find_tracks(EXAMPLE_BRIDGES, EXAMPLE_STRAIGHTS, EXAMPLE_CURVES, table))

    shapes = Counter(classify_layout(track).shape for track in tracks)
    for shape, count in sorted(shapes.items(), key=lambda item: item[0].value):
        logger.info("Shape %s: %d layouts", shape.value, count)
    if tracks:
        logger.info("First layout: %s", format_track(tracks[0]))

    output_path = Path(__file__).resolve().parent / "output" / "lillabo_tracks.json"
    export_tracks_json(tracks, output_path)
    logger.info("Saved %d layouts to %s", len(tracks), output_path)


if __name__ == "__main__":
    main()
