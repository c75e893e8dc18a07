"""Export helpers for enumeration results."""

from __future__ import annotations

import html
import json
import os
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from pathlib import Path

from trainloops.analysis.classify import classify_layout
from trainloops.track.models import Track
from trainloops.track.notation import format_track


@dataclass(frozen=True)
class TrackSummary:
    """Serializable summary of one layout.

    Args:
        index: Position of the layout in the exported sequence.
        code: Letter code of the layout.
        shape: Shape family symbol (``"8"`` or ``"O"``).
        net_turns: Full turns made while traversing the layout.
    """

    index: int
    code: str
    shape: str
    net_turns: int


def summarize_tracks(tracks: Iterable[Track]) -> list[TrackSummary]:
    """Summarize layouts for serialization.

    Args:
        tracks: Closed layouts.

    Returns:
        One summary per layout, in input order.
    """
    summaries = []
    for index, track in enumerate(tracks):
        classification = classify_layout(track)
        summaries.append(
            TrackSummary(
                index=index,
                code=format_track(track),
                shape=classification.shape.value,
                net_turns=classification.net_turns,
            )
        )
    return summaries


def export_tracks_json(tracks: Iterable[Track], path: str | Path) -> None:
    """Persist layout summaries as JSON.

    Args:
        tracks: Closed layouts.
        path: Output file path for the JSON document.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    payload = [asdict(item) for item in summarize_tracks(tracks)]
    out.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def export_track_index_html(image_paths: Iterable[str | Path], path: str | Path) -> None:
    """Write an HTML page listing layout images.

    Image sources are written relative to the page location.

    Args:
        image_paths: Paths of rendered layout images.
        path: Output file path for the HTML page.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    base = out.parent.resolve()
    body = []
    for image in image_paths:
        src = Path(os.path.relpath(Path(image).resolve(), base)).as_posix()
        body.append(f'<img src="{html.escape(src)}"><br>')
    out.write_text("<html><body>" + "".join(body) + "</body></html>", encoding="utf-8")
