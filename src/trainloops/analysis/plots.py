"""Vector rendering of track layouts."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.patches import Arc

from trainloops.track.models import PieceKind, Track
from trainloops.track.params import PieceParameters

matplotlib.use("Agg")

PIECE_COLORS = {
    PieceKind.STRAIGHT: "red",
    PieceKind.BRIDGE: "orange",
    PieceKind.LEFT_CURVE: "green",
    PieceKind.RIGHT_CURVE: "blue",
}
PIECE_LINE_WIDTH = 3.0
PIECE_GAP = 0.125
INCHES_PER_UNIT = 0.5
MIN_FIGURE_INCHES = 2.0


def track_bounds(track: Track) -> tuple[float, float, float, float]:
    """Bounding box of all part origins, always including the origin.

    Args:
        track: Layout to measure.

    Returns:
        Tuple ``(min_x, min_y, max_x, max_y)``.
    """
    xs = np.array([0.0] + [part.x for part in track], dtype=float)
    ys = np.array([0.0] + [part.y for part in track], dtype=float)
    return float(np.min(xs)), float(np.min(ys)), float(np.max(xs)), float(np.max(ys))


def plot_track(track: Track, params: PieceParameters, ax: Axes | None = None) -> Axes:
    """Draw every piece of a layout.

    Straight pieces are drawn slightly shortened so piece joints stay visible.

    Args:
        track: Layout to draw.
        params: Piece geometry used to build the layout.
        ax: Target axes; a new figure is created when omitted.

    Returns:
        Axes containing the drawing.
    """
    if ax is None:
        _, ax = plt.subplots()

    radius = params.curve_radius
    step_deg = 360.0 / params.angle_steps
    for part in track:
        theta = part.angle.radians
        color = PIECE_COLORS.get(part.kind)
        if color is None:
            continue
        if part.kind in (PieceKind.STRAIGHT, PieceKind.BRIDGE):
            length = params.straight_length
            if part.kind is PieceKind.BRIDGE:
                length = params.bridge_length
            drawn = max(length - PIECE_GAP, 0.0)
            ax.plot(
                [part.x, part.x + drawn * np.cos(theta)],
                [part.y, part.y + drawn * np.sin(theta)],
                color=color,
                lw=PIECE_LINE_WIDTH,
                solid_capstyle="butt",
            )
            continue

        side = part.kind.turn
        center = (part.x - side * radius * np.sin(theta), part.y + side * radius * np.cos(theta))
        if side > 0:
            start = part.angle.degrees - 90.0
            end = start + step_deg
        else:
            end = part.angle.degrees + 90.0
            start = end - step_deg
        ax.add_patch(
            Arc(
                center,
                width=2.0 * radius,
                height=2.0 * radius,
                theta1=start,
                theta2=end,
                edgecolor=color,
                lw=PIECE_LINE_WIDTH,
            )
        )

    min_x, min_y, max_x, max_y = track_bounds(track)
    ax.set_xlim(min_x - radius, max_x + radius)
    ax.set_ylim(min_y - radius, max_y + radius)
    ax.set_aspect("equal")
    ax.axis("off")
    return ax


def save_track_svg(track: Track, params: PieceParameters, path: str | Path) -> Path:
    """Render one layout to an SVG file.

    Args:
        track: Layout to draw.
        params: Piece geometry used to build the layout.
        path: Output file path.

    Returns:
        Path of the written file.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    min_x, min_y, max_x, max_y = track_bounds(track)
    margin = 2.0 * params.curve_radius
    width = max((max_x - min_x + margin) * INCHES_PER_UNIT, MIN_FIGURE_INCHES)
    height = max((max_y - min_y + margin) * INCHES_PER_UNIT, MIN_FIGURE_INCHES)

    fig, ax = plt.subplots(figsize=(width, height))
    plot_track(track, params, ax)
    fig.savefig(out, format="svg", bbox_inches="tight")
    plt.close(fig)
    return out
