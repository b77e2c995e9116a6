"""Emitted geometry — the renderer-agnostic output of the engine.

Elements emit path operations (BeginFigure / segments / EndFigure /
SetFillRule); the emitter folds them into a Geometry of sub-paths. Every
coordinate here is absolute.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Union

import numpy as np
import svgpathtools
from numpy.typing import NDArray

from pathlang.engine.kinds import FillRule
from pathlang.utils.geometry import bbox, winding_direction


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def reflect(self, about: Point) -> Point:
        """Mirror this point through ``about`` (2·about − self)."""
        return Point(2 * about.x - self.x, 2 * about.y - self.y)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_complex(self) -> complex:
        return complex(self.x, self.y)


ORIGIN = Point(0.0, 0.0)


# --- Segments ---------------------------------------------------------------


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point

    kind: ClassVar[str] = "line"

    def to_svgpathtools(self) -> svgpathtools.Line:
        return svgpathtools.Line(self.start.as_complex(), self.end.as_complex())


@dataclass(frozen=True)
class QuadraticSegment:
    start: Point
    control: Point
    end: Point

    kind: ClassVar[str] = "quadratic"

    def to_svgpathtools(self) -> svgpathtools.QuadraticBezier:
        return svgpathtools.QuadraticBezier(
            self.start.as_complex(), self.control.as_complex(), self.end.as_complex()
        )


@dataclass(frozen=True)
class CubicSegment:
    start: Point
    control1: Point
    control2: Point
    end: Point

    kind: ClassVar[str] = "cubic"

    def to_svgpathtools(self) -> svgpathtools.CubicBezier:
        return svgpathtools.CubicBezier(
            self.start.as_complex(),
            self.control1.as_complex(),
            self.control2.as_complex(),
            self.end.as_complex(),
        )


@dataclass(frozen=True)
class ArcSegment:
    """Elliptical arc. ``rotation`` is in radians."""

    start: Point
    end: Point
    radius_x: float
    radius_y: float
    rotation: float = 0.0
    large_arc: bool = False
    sweep_clockwise: bool = True

    kind: ClassVar[str] = "arc"

    @property
    def is_degenerate(self) -> bool:
        """Zero radius or zero chord: drawn as a straight line."""
        return self.radius_x == 0 or self.radius_y == 0 or self.start == self.end

    def to_svgpathtools(self) -> svgpathtools.Arc | svgpathtools.Line:
        if self.is_degenerate:
            return svgpathtools.Line(self.start.as_complex(), self.end.as_complex())
        # svgpathtools takes degrees; sweep=True is the positive-angle
        # direction, which is clockwise on a y-down canvas
        return svgpathtools.Arc(
            start=self.start.as_complex(),
            radius=complex(self.radius_x, self.radius_y),
            rotation=math.degrees(self.rotation),
            large_arc=self.large_arc,
            sweep=self.sweep_clockwise,
            end=self.end.as_complex(),
        )


Segment = Union[LineSegment, QuadraticSegment, CubicSegment, ArcSegment]


# --- Path operations --------------------------------------------------------


@dataclass(frozen=True)
class BeginFigure:
    point: Point


@dataclass(frozen=True)
class EndFigure:
    closed: bool


@dataclass(frozen=True)
class SetFillRule:
    fill_rule: FillRule


PathOp = Union[BeginFigure, EndFigure, SetFillRule, Segment]


# --- Output -----------------------------------------------------------------


@dataclass
class SubPath:
    """One figure: a start point, its segments and whether it loops back."""

    start: Point
    segments: list[Segment] = field(default_factory=list)
    closed: bool = False
    # Flattening density used by sample(), bbox and winding
    samples_per_segment: int = 12

    @property
    def end(self) -> Point:
        return self.segments[-1].end if self.segments else self.start

    def to_svgpathtools(self) -> svgpathtools.Path:
        return svgpathtools.Path(*[seg.to_svgpathtools() for seg in self.segments])

    def sample(self, samples_per_segment: int | None = None) -> NDArray[np.float64]:
        """Flatten to an Nx2 point array, start point first.

        Closed sub-paths end back on their start point.
        """
        if samples_per_segment is None:
            samples_per_segment = self.samples_per_segment
        points: list[tuple[float, float]] = [(self.start.x, self.start.y)]
        ts = np.linspace(0.0, 1.0, samples_per_segment + 1)[1:]
        for seg in self.segments:
            native = seg.to_svgpathtools()
            for t in ts:
                pt = native.point(float(t))
                points.append((pt.real, pt.imag))
        if self.closed and self.end != self.start:
            points.append((self.start.x, self.start.y))
        return np.array(points, dtype=np.float64)

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        return bbox(self.sample())

    @property
    def winding(self) -> int:
        """Sign of the shoelace area: 1, -1, or 0 for open/degenerate sub-paths."""
        if not self.closed:
            return 0
        return winding_direction(self.sample())


@dataclass
class Geometry:
    """Everything a rendering backend needs to build a fillable shape."""

    fill_rule: FillRule = FillRule.NONZERO
    subpaths: list[SubPath] = field(default_factory=list)

    @property
    def segments(self) -> list[Segment]:
        return [seg for sp in self.subpaths for seg in sp.segments]

    @property
    def is_nonzero(self) -> bool:
        return self.fill_rule is FillRule.NONZERO

    def to_svgpathtools(self) -> list[svgpathtools.Path]:
        return [sp.to_svgpathtools() for sp in self.subpaths]

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        boxes = [sp.bbox for sp in self.subpaths]
        if not boxes:
            return (0.0, 0.0, 0.0, 0.0)
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )
