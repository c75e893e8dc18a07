"""Layout classification, rendering, and export tools."""

from trainloops.analysis.classify import (
    LayoutClassification,
    LayoutShape,
    classify_layout,
    filter_by_shape,
    total_turning,
)
from trainloops.analysis.export import (
    TrackSummary,
    export_track_index_html,
    export_tracks_json,
    summarize_tracks,
)
from trainloops.analysis.plots import plot_track, save_track_svg, track_bounds

__all__ = [
    "LayoutClassification",
    "LayoutShape",
    "TrackSummary",
    "classify_layout",
    "export_track_index_html",
    "export_tracks_json",
    "filter_by_shape",
    "plot_track",
    "save_track_svg",
    "summarize_tracks",
    "total_turning",
    "track_bounds",
]
