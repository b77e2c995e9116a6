"""Geometry emitter — folds a parsed document into sub-paths of absolute segments."""

from __future__ import annotations

import logging
import time

from pathlang.engine.config import ParserConfig
from pathlang.engine.document import PathDocument, parse_path_data
from pathlang.engine.elements.base import LastControl
from pathlang.engine.geometry import (
    ORIGIN,
    ArcSegment,
    BeginFigure,
    CubicSegment,
    EndFigure,
    Geometry,
    LineSegment,
    PathOp,
    Point,
    QuadraticSegment,
    SetFillRule,
    SubPath,
)

logger = logging.getLogger(__name__)


class _GeometryBuilder:
    """Receives path operations in order, like a rendering backend would."""

    def __init__(self, trace: bool = False, samples_per_segment: int = 12) -> None:
        self.geometry = Geometry()
        self.samples_per_segment = samples_per_segment
        self.trace: list[str] | None = [] if trace else None
        self._open: SubPath | None = None

    def apply(self, op: PathOp) -> None:
        if self.trace is not None:
            self.trace.append(describe_op(op))

        if isinstance(op, SetFillRule):
            self.geometry.fill_rule = op.fill_rule
        elif isinstance(op, BeginFigure):
            self._open = SubPath(start=op.point, samples_per_segment=self.samples_per_segment)
            self.geometry.subpaths.append(self._open)
        elif isinstance(op, EndFigure):
            if self._open is not None:
                self._open.closed = op.closed
            self._open = None
        else:
            if self._open is None:
                # Unreachable for a sequenced document; start implicitly anyway
                self._open = SubPath(start=op.start, samples_per_segment=self.samples_per_segment)
                self.geometry.subpaths.append(self._open)
            self._open.segments.append(op)


def _fmt(value: float) -> str:
    return f"{value:g}"


def _pt(point: Point) -> str:
    return f"({_fmt(point.x)}, {_fmt(point.y)})"


def describe_op(op: PathOp) -> str:
    """One human-readable line per drawing call."""
    if isinstance(op, SetFillRule):
        return f"set_fill_rule({op.fill_rule.value})"
    if isinstance(op, BeginFigure):
        return f"begin_figure{_pt(op.point)}"
    if isinstance(op, EndFigure):
        return f"end_figure({'closed' if op.closed else 'open'})"
    if isinstance(op, LineSegment):
        return f"add_line{_pt(op.end)}"
    if isinstance(op, QuadraticSegment):
        return f"add_quadratic_bezier({_pt(op.control)}, {_pt(op.end)})"
    if isinstance(op, CubicSegment):
        return f"add_cubic_bezier({_pt(op.control1)}, {_pt(op.control2)}, {_pt(op.end)})"
    if isinstance(op, ArcSegment):
        return (
            f"add_arc({_pt(op.end)}, rx={_fmt(op.radius_x)}, ry={_fmt(op.radius_y)}, "
            f"rotation={_fmt(op.rotation)}, large={int(op.large_arc)}, "
            f"clockwise={int(op.sweep_clockwise)})"
        )
    raise TypeError(f"Unknown path operation: {op!r}")


def emit_geometry(document: PathDocument, trace: bool = False) -> tuple[Geometry, list[str] | None]:
    """Single pass over the flattened elements.

    The current point and the last bezier control are threaded through each
    element's ``emit``; the document itself is never mutated.
    """
    start = time.perf_counter()
    builder = _GeometryBuilder(trace=trace, samples_per_segment=document.config.samples_per_segment)

    current: Point = ORIGIN
    last_control: LastControl | None = None
    for element in document.elements:
        current, last_control, ops = element.emit(current, last_control)
        for op in ops:
            builder.apply(op)

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(
        "Emitted %d sub-paths (%d segments) in %.2fms",
        len(builder.geometry.subpaths),
        len(builder.geometry.segments),
        elapsed,
    )
    return builder.geometry, builder.trace


def build_geometry(
    text: str,
    config: ParserConfig | None = None,
    trace: bool = False,
) -> tuple[Geometry, list[str] | None]:
    """Parse ``text`` and emit its geometry in one call."""
    return emit_geometry(parse_path_data(text, config), trace=trace)
