"""PathElement — the atomic parsed unit shared by every command variant.

A variant is built from a regex match (``initialize``) or from one bare
repeated tuple that follows the same command letter (``initialize_additional``).
At emission time it receives the running current point and the last bezier
control point and returns the updated pair plus the path operations it draws.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, ClassVar, NamedTuple, Union

import regex

from pathlang.engine.config import ParserConfig
from pathlang.engine.errors import ParseErrorKind, PathParseError
from pathlang.engine.geometry import PathOp, Point
from pathlang.engine.grammar import attributes_regex, significant_length
from pathlang.engine.kinds import CurveFamily, ElementKind, FigureKind

logger = logging.getLogger(__name__)


class LastControl(NamedTuple):
    """Final control point of the previous bezier, tagged with its family."""

    family: CurveFamily
    point: Point


class Emission(NamedTuple):
    current: Point
    last_control: LastControl | None
    ops: tuple[PathOp, ...] = ()


@dataclass(frozen=True)
class PathElement:
    kind: ClassVar[Union[FigureKind, ElementKind]]

    # Character offset in the source text; orders the document
    index: int = -1
    # Source text this element was read from
    data: str = ""
    is_relative: bool = False
    # Non-whitespace characters of source text this element accounts for
    validation_count: int = 0

    @classmethod
    def initialize(cls, match: regex.Match, index: int, config: ParserConfig) -> "PathElement":
        main = match.group("Main")
        return cls(
            index=index,
            data=main,
            is_relative=match.group("Command").islower(),
            validation_count=significant_length(main),
            **cls.read_attributes(match, config),
        )

    @classmethod
    def initialize_additional(
        cls, capture: str, index: int, is_relative: bool, config: ParserConfig
    ) -> "PathElement":
        pattern = attributes_regex(cls.kind)
        if pattern is None:
            raise TypeError(f"{cls.__name__} does not take additional tuples")
        match = pattern.match(capture)
        if match is None:
            # Accounts for nothing, so document validation rejects the text
            return cls(index=index, data=capture, is_relative=is_relative)
        return cls(
            index=index,
            data=capture,
            is_relative=is_relative,
            validation_count=significant_length(capture),
            **cls.read_attributes(match, config),
        )

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        """Kind-specific numeric payload, keyed by dataclass field name."""
        return {}

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        raise NotImplementedError

    def resolve(self, x: float, y: float, current: Point) -> Point:
        """Absolute point for (x, y), offset by ``current`` when relative."""
        point = Point(x, y)
        return point + current if self.is_relative else point


def read_float(match: regex.Match, group: str, config: ParserConfig) -> float:
    """Parse a captured numeric literal.

    Literals that do not resolve to a finite float (``1e999``) raise in strict
    mode and fall back to 0 otherwise.
    """
    raw = match.group(group)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        value = math.nan
    if math.isfinite(value):
        return value
    if config.strict_numbers:
        raise PathParseError(
            ParseErrorKind.NUMERIC,
            f"Invalid numeric value {raw!r} for {group}",
            source=raw or "",
        )
    logger.warning("Invalid numeric value %r for %s, using 0", raw, group)
    return 0.0


def mirrored_control(current: Point, last_control: LastControl | None, family: CurveFamily) -> Point:
    """Implicit first control point of a smooth curve.

    Reflection of the previous curve's control point through the current
    point when that curve is of the same family; the current point otherwise.
    """
    if last_control is not None and last_control.family is family:
        return last_control.point.reflect(current)
    return current
