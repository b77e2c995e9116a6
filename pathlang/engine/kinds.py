"""Command kinds of the path mini-language.

Enum values double as the named groups of the grammar, so a kind can be used
directly to pull its captures out of a match.
"""

from __future__ import annotations

import enum


class FigureKind(enum.Enum):
    FILL_RULE = "FillRule"
    PATH_FIGURE = "PathFigure"
    ELLIPSE_FIGURE = "EllipseFigure"
    POLYGON_FIGURE = "PolygonFigure"
    RECTANGLE_FIGURE = "RectangleFigure"
    ROUNDED_RECTANGLE_FIGURE = "RoundedRectangleFigure"


class ElementKind(enum.Enum):
    MOVE_TO = "MoveTo"
    LINE = "Line"
    HORIZONTAL_LINE = "HorizontalLine"
    VERTICAL_LINE = "VerticalLine"
    QUADRATIC_BEZIER = "QuadraticBezier"
    SMOOTH_QUADRATIC_BEZIER = "SmoothQuadraticBezier"
    CUBIC_BEZIER = "CubicBezier"
    SMOOTH_CUBIC_BEZIER = "SmoothCubicBezier"
    ARC = "Arc"
    CLOSE_PATH = "ClosePath"


class FillRule(str, enum.Enum):
    """Winding convention for the interior of closed figures. F0 / F1 in source."""

    EVEN_ODD = "evenodd"
    NONZERO = "nonzero"


class CurveFamily(enum.Enum):
    """Bezier families that share a smooth-curve control point slot."""

    QUADRATIC = "quadratic"
    CUBIC = "cubic"


# Kinds that start a new figure when emitted
FIGURE_STARTERS = frozenset({
    ElementKind.MOVE_TO,
    FigureKind.ELLIPSE_FIGURE,
    FigureKind.POLYGON_FIGURE,
    FigureKind.RECTANGLE_FIGURE,
    FigureKind.ROUNDED_RECTANGLE_FIGURE,
})
