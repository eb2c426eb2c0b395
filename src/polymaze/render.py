from typing import Any, Dict, List, Optional, Tuple
import math

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection

from .graph import Grid
from .hexgrid import HexGrid
from .irregular import IrregularGrid
from .polar import PolarGrid, PolarPosition
from .rect import RectGrid
from .trigrid import TriGrid, is_even

Polyline = np.ndarray

H = math.sqrt(3.0) / 2.0

# Hex corners around a unit circumradius centre, y grows downwards
HEX_CORNERS = {
    "top": (0.0, -1.0),
    "upper_right": (H, -0.5),
    "lower_right": (H, 0.5),
    "bottom": (0.0, 1.0),
    "lower_left": (-H, 0.5),
    "upper_left": (-H, -0.5),
}
HEX_SIDES = {
    "northwest": ("upper_left", "top"),
    "northeast": ("top", "upper_right"),
    "east": ("upper_right", "lower_right"),
    "southeast": ("lower_right", "bottom"),
    "southwest": ("bottom", "lower_left"),
    "west": ("lower_left", "upper_left"),
}

# Chords per unit of arc length when approximating polar arcs
ARC_RESOLUTION = 4.0


# --- Per topology side geometry ---
def _rect_sides(node) -> Dict[str, Polyline]:
    x, y = node.x, node.y
    return {
        "north": np.array([(x, y), (x + 1, y)], dtype=float),
        "east": np.array([(x + 1, y), (x + 1, y + 1)], dtype=float),
        "south": np.array([(x, y + 1), (x + 1, y + 1)], dtype=float),
        "west": np.array([(x, y), (x, y + 1)], dtype=float),
    }


def hex_center(node) -> Tuple[float, float]:
    return (2.0 * H * node.x + H * node.y, 1.5 * node.y)


def _hex_sides(node) -> Dict[str, Polyline]:
    cx, cy = hex_center(node)
    result = {}
    for label, (start, end) in HEX_SIDES.items():
        sx, sy = HEX_CORNERS[start]
        ex, ey = HEX_CORNERS[end]
        result[label] = np.array([(cx + sx, cy + sy), (cx + ex, cy + ey)])
    return result


def _tri_sides(node) -> Dict[str, Polyline]:
    # unit side triangles, row ``y`` spans [y * H, (y + 1) * H] with y growing downwards
    cx = node.x / 2.0
    top = node.y * H
    bottom = (node.y + 1) * H
    if is_even(node):
        apex, left, right = (cx, top), (cx - 0.5, bottom), (cx + 0.5, bottom)
        return {
            "left": np.array([left, apex]),
            "right": np.array([apex, right]),
            "bottom": np.array([left, right]),
        }
    left, right, apex = (cx - 0.5, top), (cx + 0.5, top), (cx, bottom)
    return {
        "left": np.array([left, apex]),
        "right": np.array([right, apex]),
        "top": np.array([left, right]),
    }


def _arc(radius: float, start: float, end: float) -> Polyline:
    chords = max(1, int(math.ceil(abs(end - start) * radius * ARC_RESOLUTION)))
    angles = np.linspace(start, end, chords + 1)
    return np.column_stack((radius * np.cos(angles), radius * np.sin(angles)))


def _polar_sides(grid: PolarGrid, node) -> Dict[str, Polyline]:
    node = PolarPosition(*node)
    count = grid.counts[node.layer]
    start = 2.0 * math.pi * node.cell / count
    end = 2.0 * math.pi * (node.cell + 1) / count
    inner, outer = float(node.layer), float(node.layer + 1)
    result: Dict[str, Polyline] = {}
    if node.layer != 0:
        result["inward"] = _arc(inner, start, end)
        result["counterclockwise"] = np.array([(inner * math.cos(start), inner * math.sin(start)),
                                               (outer * math.cos(start), outer * math.sin(start))])
        result["clockwise"] = np.array([(inner * math.cos(end), inner * math.sin(end)),
                                        (outer * math.cos(end), outer * math.sin(end))])
    ratio = grid.outward_count(node.layer)
    step = (end - start) / ratio
    for index in range(ratio):
        result[f"outward-{index}"] = _arc(outer, start + index * step, start + (index + 1) * step)
    return result


def _irregular_sides(grid: IrregularGrid, node) -> Dict[str, Polyline]:
    corners = grid.corner_positions(node)
    return {f"side-{i}": np.array([corners[i], corners[(i + 1) % 4]]) for i in range(4)}


def side_geometry(grid: Grid, node: Any) -> Dict[str, Polyline]:
    """Polyline of every side of ``node``, keyed by the labels of ``grid.sides``."""
    if isinstance(grid, RectGrid):
        return _rect_sides(node)
    if isinstance(grid, HexGrid):
        return _hex_sides(node)
    if isinstance(grid, TriGrid):
        return _tri_sides(node)
    if isinstance(grid, PolarGrid):
        return _polar_sides(grid, node)
    if isinstance(grid, IrregularGrid):
        return _irregular_sides(grid, node)
    raise TypeError(f"no geometry for {type(grid).__name__}")


def y_grows_down(grid: Grid) -> bool:
    return isinstance(grid, (RectGrid, HexGrid, TriGrid))


# --- Segments ---
def wall_segments(grid: Grid) -> List[Polyline]:
    """Polylines of every wall still standing, each shared wall once."""
    segments: List[Polyline] = []
    seen = set()
    for node in grid.nodes():
        geometry = side_geometry(grid, node)
        for label, is_wall in grid.sides(node):
            if not is_wall:
                continue
            line = geometry[label]
            ends = frozenset((tuple(np.round(line[0], 6)), tuple(np.round(line[-1], 6))))
            if ends in seen:
                continue
            seen.add(ends)
            segments.append(line)
    return segments


def render_grid(grid: Grid, savepath: Optional[str] = None, figsize: Tuple[float, float] = (6, 6), line_width: float = 1.5) -> int:
    """Draw the walls of ``grid`` and save the figure if ``savepath`` is given.

    The output format follows the file suffix (``.svg`` gives vector line art).
    Returns the number of wall segments drawn.
    """
    segments = wall_segments(grid)
    fig, ax = plt.subplots(figsize=figsize)
    ax.add_collection(LineCollection(segments, colors="black", linewidths=line_width, capstyle="round"))
    ax.autoscale_view()
    ax.set_aspect("equal")
    if y_grows_down(grid):
        ax.invert_yaxis()
    ax.set_axis_off()
    if savepath:
        fig.savefig(savepath, bbox_inches="tight")
        print(f"Saved maze to {savepath}")
    plt.close(fig)
    return len(segments)
