"""Write emitted geometry back out as SVG path data and SVG markup."""

from __future__ import annotations

import math

from pathlang.engine.geometry import (
    ArcSegment,
    CubicSegment,
    Geometry,
    LineSegment,
    Point,
    QuadraticSegment,
    Segment,
)
from pathlang.engine.kinds import FillRule


def _num(value: float, precision: int) -> str:
    text = f"{round(value, precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _pt(point: Point, precision: int) -> str:
    return f"{_num(point.x, precision)},{_num(point.y, precision)}"


def _segment_command(seg: Segment, precision: int) -> str:
    if isinstance(seg, LineSegment):
        return f"L{_pt(seg.end, precision)}"
    if isinstance(seg, QuadraticSegment):
        return f"Q{_pt(seg.control, precision)} {_pt(seg.end, precision)}"
    if isinstance(seg, CubicSegment):
        return f"C{_pt(seg.control1, precision)} {_pt(seg.control2, precision)} {_pt(seg.end, precision)}"
    if isinstance(seg, ArcSegment):
        if seg.is_degenerate:
            return f"L{_pt(seg.end, precision)}"
        return (
            f"A{_num(seg.radius_x, precision)},{_num(seg.radius_y, precision)} "
            f"{_num(math.degrees(seg.rotation), precision)} "
            f"{int(seg.large_arc)},{int(seg.sweep_clockwise)} {_pt(seg.end, precision)}"
        )
    raise TypeError(f"Unknown segment: {seg!r}")


def serialize_path_data(geometry: Geometry, precision: int = 6, include_fill_rule: bool = False) -> str:
    """Absolute SVG path data (M/L/Q/C/A/Z) for ``geometry``.

    With ``include_fill_rule`` the output is prefixed with F0/F1 so it can be
    fed back to the path mini-language parser.
    """
    parts: list[str] = []
    if include_fill_rule:
        parts.append("F1" if geometry.fill_rule is FillRule.NONZERO else "F0")

    for sp in geometry.subpaths:
        parts.append(f"M{_pt(sp.start, precision)}")
        parts.extend(_segment_command(seg, precision) for seg in sp.segments)
        if sp.closed:
            parts.append("Z")

    return " ".join(parts)


def serialize_svg(
    geometry: Geometry,
    canvas_w: float | None = None,
    canvas_h: float | None = None,
    fill: str = "currentColor",
    stroke: str = "none",
    precision: int = 6,
) -> str:
    """Standalone SVG document with one <path> for the whole geometry.

    The viewBox defaults to the geometry's bounding box.
    """
    xmin, ymin, xmax, ymax = geometry.bbox
    if canvas_w is None or canvas_h is None:
        view_box = f"{_num(xmin, 3)} {_num(ymin, 3)} {_num(xmax - xmin, 3)} {_num(ymax - ymin, 3)}"
    else:
        view_box = f"0 0 {_num(canvas_w, 3)} {_num(canvas_h, 3)}"

    d = serialize_path_data(geometry, precision=precision)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{view_box}" xmlns="http://www.w3.org/2000/svg" role="img">',
        f'  <path d="{d}" fill="{fill}" stroke="{stroke}" fill-rule="{geometry.fill_rule.value}" />',
        "</svg>",
    ]
    return "\n".join(lines)
