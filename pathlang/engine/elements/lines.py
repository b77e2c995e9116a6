"""Move-to and straight-line elements (M, L, H, V)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import regex

from pathlang.engine.config import ParserConfig
from pathlang.engine.elements.base import Emission, LastControl, PathElement, read_float
from pathlang.engine.geometry import BeginFigure, LineSegment, Point
from pathlang.engine.kinds import ElementKind
from pathlang.engine.registry import path_element


@path_element(ElementKind.MOVE_TO)
@dataclass(frozen=True)
class MoveToElement(PathElement):
    """Starts a figure at (x, y). Draws nothing."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {"x": read_float(match, "X", config), "y": read_float(match, "Y", config)}

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        target = self.resolve(self.x, self.y, current)
        return Emission(target, None, (BeginFigure(target),))


@path_element(ElementKind.LINE)
@dataclass(frozen=True)
class LineElement(PathElement):
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {"x": read_float(match, "X", config), "y": read_float(match, "Y", config)}

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        end = self.resolve(self.x, self.y, current)
        return Emission(end, None, (LineSegment(current, end),))


@path_element(ElementKind.HORIZONTAL_LINE)
@dataclass(frozen=True)
class HorizontalLineElement(PathElement):
    """Line to x, keeping the current y."""

    x: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {"x": read_float(match, "X", config)}

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        x = current.x + self.x if self.is_relative else self.x
        end = Point(x, current.y)
        return Emission(end, None, (LineSegment(current, end),))


@path_element(ElementKind.VERTICAL_LINE)
@dataclass(frozen=True)
class VerticalLineElement(PathElement):
    """Line to y, keeping the current x."""

    y: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {"y": read_float(match, "Y", config)}

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        y = current.y + self.y if self.is_relative else self.y
        end = Point(current.x, y)
        return Emission(end, None, (LineSegment(current, end),))
