"""Bezier elements (Q, T, C, S).

Quadratic and smooth-quadratic share one smooth-curve slot, cubic and
smooth-cubic another. A smooth curve only mirrors a control point left by
its own family; anything else in between resets the slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import regex

from pathlang.engine.config import ParserConfig
from pathlang.engine.elements.base import (
    Emission,
    LastControl,
    PathElement,
    mirrored_control,
    read_float,
)
from pathlang.engine.geometry import CubicSegment, Point, QuadraticSegment
from pathlang.engine.kinds import CurveFamily, ElementKind
from pathlang.engine.registry import path_element


@path_element(ElementKind.QUADRATIC_BEZIER)
@dataclass(frozen=True)
class QuadraticBezierElement(PathElement):
    x1: float = 0.0
    y1: float = 0.0
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {
            "x1": read_float(match, "X1", config),
            "y1": read_float(match, "Y1", config),
            "x": read_float(match, "X", config),
            "y": read_float(match, "Y", config),
        }

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        control = self.resolve(self.x1, self.y1, current)
        end = self.resolve(self.x, self.y, current)
        return Emission(
            end,
            LastControl(CurveFamily.QUADRATIC, control),
            (QuadraticSegment(current, control, end),),
        )


@path_element(ElementKind.SMOOTH_QUADRATIC_BEZIER)
@dataclass(frozen=True)
class SmoothQuadraticBezierElement(PathElement):
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {"x": read_float(match, "X", config), "y": read_float(match, "Y", config)}

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        control = mirrored_control(current, last_control, CurveFamily.QUADRATIC)
        end = self.resolve(self.x, self.y, current)
        return Emission(
            end,
            LastControl(CurveFamily.QUADRATIC, control),
            (QuadraticSegment(current, control, end),),
        )


@path_element(ElementKind.CUBIC_BEZIER)
@dataclass(frozen=True)
class CubicBezierElement(PathElement):
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {
            "x1": read_float(match, "X1", config),
            "y1": read_float(match, "Y1", config),
            "x2": read_float(match, "X2", config),
            "y2": read_float(match, "Y2", config),
            "x": read_float(match, "X", config),
            "y": read_float(match, "Y", config),
        }

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        control1 = self.resolve(self.x1, self.y1, current)
        control2 = self.resolve(self.x2, self.y2, current)
        end = self.resolve(self.x, self.y, current)
        return Emission(
            end,
            LastControl(CurveFamily.CUBIC, control2),
            (CubicSegment(current, control1, control2, end),),
        )


@path_element(ElementKind.SMOOTH_CUBIC_BEZIER)
@dataclass(frozen=True)
class SmoothCubicBezierElement(PathElement):
    x2: float = 0.0
    y2: float = 0.0
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {
            "x2": read_float(match, "X2", config),
            "y2": read_float(match, "Y2", config),
            "x": read_float(match, "X", config),
            "y": read_float(match, "Y", config),
        }

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        control1 = mirrored_control(current, last_control, CurveFamily.CUBIC)
        control2 = self.resolve(self.x2, self.y2, current)
        end = self.resolve(self.x, self.y, current)
        return Emission(
            end,
            LastControl(CurveFamily.CUBIC, control2),
            (CubicSegment(current, control1, control2, end),),
        )
