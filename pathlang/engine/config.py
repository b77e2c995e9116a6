"""Parser configuration — controls numeric strictness and unit conventions."""

from __future__ import annotations

from dataclasses import dataclass

ANGLE_UNITS = ("degrees", "radians")


@dataclass
class ParserConfig:
    """Engine-level knobs shared by parsing and emission."""

    # Raise on numeric literals that do not resolve to a finite float.
    # When False the value falls back to 0 and a warning is logged.
    strict_numbers: bool = True

    # Units of the arc rotation angle in source text. Stored as radians.
    arc_angle_units: str = "degrees"

    # Polygon figures need at least a triangle
    min_polygon_sides: int = 3
    # Each side becomes one emitted segment
    max_polygon_sides: int = 1024

    # Flattening density for SubPath.sample()
    samples_per_segment: int = 12

    def __post_init__(self) -> None:
        if self.arc_angle_units not in ANGLE_UNITS:
            raise ValueError(
                f"arc_angle_units must be one of {ANGLE_UNITS}, got {self.arc_angle_units!r}"
            )
