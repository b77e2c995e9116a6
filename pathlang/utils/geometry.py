"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area. Positive = CCW in y-up coordinates."""
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 for positive signed area, -1 for negative, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def polygon_vertices(sides: int, radius: float, cx: float, cy: float) -> NDArray[np.float64]:
    """Vertices of a regular polygon inscribed in a circle, Nx2.

    y grows downwards. Odd polygons put their first vertex straight up;
    even polygons rotate by half a step so a flat edge sits on top.
    """
    step = 2 * math.pi / sides
    start = math.pi / 2 if sides % 2 == 1 else math.pi / 2 - step / 2
    angles = start + step * np.arange(sides)
    return np.column_stack((cx + radius * np.cos(angles), cy - radius * np.sin(angles)))


def clamp_corner_radii(
    width: float,
    height: float,
    radii: list[tuple[float, float]],
) -> list[tuple[float, float]]:
    """Shrink per-corner (rx, ry) radii so neighbouring corners never overlap.

    ``radii`` is ordered top-left, top-right, bottom-right, bottom-left. For
    every edge whose two corner radii add up to more than the edge length,
    both radii along that edge are scaled by length / sum.
    """
    rx = [abs(r[0]) for r in radii]
    ry = [abs(r[1]) for r in radii]

    # (corner a, corner b, edge length, radius list)
    edges = (
        (0, 1, width, rx),   # top
        (3, 2, width, rx),   # bottom
        (0, 3, height, ry),  # left
        (1, 2, height, ry),  # right
    )
    for a, b, length, values in edges:
        total = values[a] + values[b]
        if total > length and total > 0:
            scale = length / total
            values[a] *= scale
            values[b] *= scale

    return list(zip(rx, ry))
