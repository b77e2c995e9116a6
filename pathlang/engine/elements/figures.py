"""Self-contained figures (O, P, R, U).

Each expands into its own closed sub-path of lines and arcs. Relative
figures are positioned against the current point; none of them moves it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import regex

from pathlang.engine.config import ParserConfig
from pathlang.engine.elements.base import Emission, LastControl, PathElement, read_float
from pathlang.engine.errors import ParseErrorKind, PathParseError
from pathlang.engine.geometry import ArcSegment, BeginFigure, EndFigure, LineSegment, PathOp, Point
from pathlang.engine.kinds import FigureKind
from pathlang.engine.registry import path_element
from pathlang.utils.geometry import clamp_corner_radii, polygon_vertices


class _Outline:
    """Collects the ops of one closed figure, tracking the pen position."""

    def __init__(self, start: Point) -> None:
        self.cursor = start
        self.ops: list[PathOp] = [BeginFigure(start)]

    def line_to(self, point: Point, keep_empty: bool = False) -> None:
        if point == self.cursor and not keep_empty:
            return
        self.ops.append(LineSegment(self.cursor, point))
        self.cursor = point

    def arc_to(self, point: Point, radius_x: float, radius_y: float, large_arc: bool = False) -> None:
        if point == self.cursor:
            return
        if radius_x <= 0 or radius_y <= 0:
            self.line_to(point)
            return
        self.ops.append(ArcSegment(self.cursor, point, radius_x, radius_y, 0.0, large_arc, True))
        self.cursor = point

    def close(self) -> tuple[PathOp, ...]:
        self.ops.append(EndFigure(True))
        return tuple(self.ops)


@path_element(FigureKind.ELLIPSE_FIGURE)
@dataclass(frozen=True)
class EllipseFigureElement(PathElement):
    """O rx ry cx,cy — two half-arcs starting at the rightmost point."""

    radius_x: float = 0.0
    radius_y: float = 0.0
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {
            "radius_x": abs(read_float(match, "RadiusX", config)),
            "radius_y": abs(read_float(match, "RadiusY", config)),
            "x": read_float(match, "X", config),
            "y": read_float(match, "Y", config),
        }

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        center = self.resolve(self.x, self.y, current)
        right = Point(center.x + self.radius_x, center.y)
        left = Point(center.x - self.radius_x, center.y)

        start = right
        ops: list[PathOp] = [BeginFigure(start)]
        for a, b in ((right, left), (left, right)):
            ops.append(ArcSegment(a, b, self.radius_x, self.radius_y, 0.0, True, True))
        ops.append(EndFigure(True))
        return Emission(current, None, tuple(ops))


@path_element(FigureKind.POLYGON_FIGURE)
@dataclass(frozen=True)
class PolygonFigureElement(PathElement):
    """P sides radius cx,cy — regular polygon on its circumradius."""

    sides: int = 0
    radius: float = 0.0
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        sides = int(match.group("Sides"))
        if sides < config.min_polygon_sides:
            raise PathParseError(
                ParseErrorKind.GRAMMAR_MISMATCH,
                f"A polygon should have at least {config.min_polygon_sides} sides, got {sides}",
                source=match.group(0),
            )
        if sides > config.max_polygon_sides:
            raise PathParseError(
                ParseErrorKind.GRAMMAR_MISMATCH,
                f"A polygon can have at most {config.max_polygon_sides} sides, got {sides}",
                source=match.group(0),
            )
        return {
            "sides": sides,
            "radius": abs(read_float(match, "Radius", config)),
            "x": read_float(match, "X", config),
            "y": read_float(match, "Y", config),
        }

    def vertices(self, current: Point) -> list[Point]:
        center = self.resolve(self.x, self.y, current)
        return [Point(float(vx), float(vy)) for vx, vy in polygon_vertices(self.sides, self.radius, center.x, center.y)]

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        vertices = self.vertices(current)
        outline = _Outline(vertices[0])
        for vertex in vertices[1:]:
            outline.line_to(vertex, keep_empty=True)
        # Explicit edge back to the first vertex so the joins line up
        outline.line_to(vertices[0], keep_empty=True)
        return Emission(current, None, outline.close())


@path_element(FigureKind.RECTANGLE_FIGURE)
@dataclass(frozen=True)
class RectangleFigureElement(PathElement):
    """R x,y width height — from the top-left corner, clockwise."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {
            "x": read_float(match, "X", config),
            "y": read_float(match, "Y", config),
            "width": abs(read_float(match, "Width", config)),
            "height": abs(read_float(match, "Height", config)),
        }

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        top_left = self.resolve(self.x, self.y, current)
        right = top_left.x + self.width
        bottom = top_left.y + self.height

        outline = _Outline(top_left)
        for corner in (Point(right, top_left.y), Point(right, bottom), Point(top_left.x, bottom), top_left):
            outline.line_to(corner, keep_empty=True)
        return Emission(current, None, outline.close())


@path_element(FigureKind.ROUNDED_RECTANGLE_FIGURE)
@dataclass(frozen=True)
class RoundedRectangleFigureElement(PathElement):
    """U x,y width height rx ry — four edges joined by quarter arcs.

    Radii are clamped per edge (see ``clamp_corner_radii``) so opposite
    corners never overlap. Corners left with a zero radius are square.
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    radius_x: float = 0.0
    radius_y: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {
            "x": read_float(match, "X", config),
            "y": read_float(match, "Y", config),
            "width": abs(read_float(match, "Width", config)),
            "height": abs(read_float(match, "Height", config)),
            "radius_x": abs(read_float(match, "RadiusX", config)),
            "radius_y": abs(read_float(match, "RadiusY", config)),
        }

    def corner_radii(self) -> list[tuple[float, float]]:
        """Clamped (rx, ry) for top-left, top-right, bottom-right, bottom-left."""
        return clamp_corner_radii(self.width, self.height, [(self.radius_x, self.radius_y)] * 4)

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        origin = self.resolve(self.x, self.y, current)
        left, top = origin.x, origin.y
        right, bottom = left + self.width, top + self.height
        tl, tr, br, bl = self.corner_radii()

        start = Point(left + tl[0], top)
        outline = _Outline(start)
        outline.line_to(Point(right - tr[0], top))
        outline.arc_to(Point(right, top + tr[1]), *tr)
        outline.line_to(Point(right, bottom - br[1]))
        outline.arc_to(Point(right - br[0], bottom), *br)
        outline.line_to(Point(left + bl[0], bottom))
        outline.arc_to(Point(left, bottom - bl[1]), *bl)
        outline.line_to(Point(left, top + tl[1]))
        outline.arc_to(start, *tl)
        return Emission(current, None, outline.close())
