"""Enumerate closed train-track layouts and export SVG images plus an HTML index."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from trainloops.analysis import (
    LayoutShape,
    export_track_index_html,
    export_tracks_json,
    filter_by_shape,
    save_track_svg,
)
from trainloops.search import TrackStream, find_tracks
from trainloops.track import (
    PieceParameters,
    Track,
    build_transition_table,
    duplo_parameters,
    format_track,
    lillabo_parameters,
)
from trainloops.utils import configure_logging
from trainloops.utils.exceptions import TrainLoopsError

DEFAULT_BRIDGES = 0
DEFAULT_STRAIGHTS = 2
DEFAULT_CURVES = 12
DEFAULT_OUTPUT_DIR = Path("output")
IMAGE_DIR_NAME = "svg"
INDEX_FILE_NAME = "all.html"
JSON_FILE_NAME = "tracks.json"
SEARCH_COST_NOTE = (
    "Search time grows exponentially with the piece count. The default inventory "
    "finishes within seconds, while 1 bridge, 5 straights and 20 Duplo curves "
    "runs for many minutes."
)

logger = logging.getLogger("enumerate_tracks")


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(description=__doc__, epilog=SEARCH_COST_NOTE)
    parser.add_argument(
        "-b",
        "--bridges",
        type=int,
        default=DEFAULT_BRIDGES,
        help="Number of bridge pieces (0 or 1).",
    )
    parser.add_argument(
        "-s", "--straights", type=int, default=DEFAULT_STRAIGHTS, help="Number of straight pieces."
    )
    parser.add_argument(
        "-c", "--curves", type=int, default=DEFAULT_CURVES, help="Number of curve pieces."
    )
    parser.add_argument(
        "--ikea",
        action="store_true",
        help="Use IKEA LILLABO piece geometry instead of LEGO Duplo.",
    )
    shape = parser.add_mutually_exclusive_group()
    shape.add_argument(
        "-8",
        "--only-eight",
        dest="only_eight",
        action="store_true",
        help="Output only figure-eight layouts.",
    )
    shape.add_argument(
        "-O",
        "--only-loop",
        dest="only_loop",
        action="store_true",
        help="Output only O-shaped layouts.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help="Directory receiving SVG images, the HTML index, and JSON output.",
    )
    parser.add_argument("--no-images", action="store_true", help="Skip SVG and HTML output.")
    parser.add_argument("--json", action="store_true", help="Also write a JSON summary.")
    parser.add_argument(
        "--threaded",
        action="store_true",
        help="Run the search in a background thread feeding a bounded queue.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _selected_shape(args: argparse.Namespace) -> LayoutShape | None:
    """Map shape flags to a layout shape filter.

    Args:
        args: Parsed command-line namespace.

    Returns:
        Shape to keep, or ``None`` to keep every layout.
    """
    if args.only_eight:
        return LayoutShape.FIGURE_EIGHT
    if args.only_loop:
        return LayoutShape.LOOP
    return None


def run_enumeration(
    bridges: int,
    straights: int,
    curves: int,
    params: PieceParameters,
    output_dir: Path,
    shape: LayoutShape | None = None,
    write_images: bool = True,
    write_json: bool = False,
    threaded: bool = False,
) -> list[Track]:
    """Search layouts, print their letter codes, and write output files.

    Args:
        bridges: Number of bridge pieces (0 or 1).
        straights: Number of straight pieces.
        curves: Number of curve pieces.
        params: Piece geometry.
        output_dir: Directory receiving generated files.
        shape: Optional shape filter.
        write_images: Whether to write SVG images and the HTML index.
        write_json: Whether to write a JSON summary.
        threaded: Whether to run the search in a background thread.

    Returns:
        Accepted layouts in search order.

    Raises:
        trainloops.utils.exceptions.TrainLoopsError: If the inventory or the
            piece geometry is invalid.
    """
    table = build_transition_table(params)
    tracks: Iterable[Track]
    if threaded:
        tracks = TrackStream(bridges, straights, curves, table)
    else:
        tracks = find_tracks(bridges, straights, curves, table)

    accepted: list[Track] = []
    image_paths: list[Path] = []
    for track in filter_by_shape(tracks, shape):
        print(format_track(track))
        if write_images:
            image_path = output_dir / IMAGE_DIR_NAME / f"img_{len(accepted):05d}.svg"
            image_paths.append(save_track_svg(track, params, image_path))
        accepted.append(track)

    if write_images:
        export_track_index_html(image_paths, output_dir / INDEX_FILE_NAME)
    if write_json:
        export_tracks_json(accepted, output_dir / JSON_FILE_NAME)
    return accepted


def main(argv: Sequence[str] | None = None) -> None:
    """Run the enumeration from the command line.

    Args:
        argv: Argument list; ``None`` reads ``sys.argv``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    params = lillabo_parameters() if args.ikea else duplo_parameters()
    try:
        tracks = run_enumeration(
            bridges=int(args.bridges),
            straights=int(args.straights),
            curves=int(args.curves),
            params=params,
            output_dir=args.output_dir,
            shape=_selected_shape(args),
            write_images=not bool(args.no_images),
            write_json=bool(args.json),
            threaded=bool(args.threaded),
        )
    except TrainLoopsError as exc:
        parser.error(str(exc))
    logger.info("Found %d layouts", len(tracks))
    if not args.no_images:
        logger.info("Index written to %s", args.output_dir / INDEX_FILE_NAME)


if __name__ == "__main__":
    main()
