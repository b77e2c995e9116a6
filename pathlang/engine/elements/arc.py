"""Elliptical arc element (A)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import regex

from pathlang.engine.config import ParserConfig
from pathlang.engine.elements.base import Emission, LastControl, PathElement, read_float
from pathlang.engine.geometry import ArcSegment, Point
from pathlang.engine.kinds import ElementKind
from pathlang.engine.registry import path_element


@path_element(ElementKind.ARC)
@dataclass(frozen=True)
class ArcElement(PathElement):
    """A rx ry angle large-arc sweep x,y.

    ``angle`` is held in radians whatever unit the source text used
    (``ParserConfig.arc_angle_units``, degrees by default). Degenerate arcs
    are emitted as-is and flagged by ``ArcSegment.is_degenerate``.
    """

    radius_x: float = 0.0
    radius_y: float = 0.0
    angle: float = 0.0
    is_large_arc: bool = False
    sweep_clockwise: bool = False
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        angle = read_float(match, "Angle", config)
        if config.arc_angle_units == "degrees":
            angle = math.radians(angle)
        return {
            "radius_x": abs(read_float(match, "RadiusX", config)),
            "radius_y": abs(read_float(match, "RadiusY", config)),
            "angle": angle,
            "is_large_arc": match.group("IsLargeArc") == "1",
            "sweep_clockwise": match.group("SweepDirection") == "1",
            "x": read_float(match, "X", config),
            "y": read_float(match, "Y", config),
        }

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        end = self.resolve(self.x, self.y, current)
        segment = ArcSegment(
            start=current,
            end=end,
            radius_x=self.radius_x,
            radius_y=self.radius_y,
            rotation=self.angle,
            large_arc=self.is_large_arc,
            sweep_clockwise=self.sweep_clockwise,
        )
        return Emission(end, None, (segment,))
