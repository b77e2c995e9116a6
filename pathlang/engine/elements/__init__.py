"""Path element variants. Importing this package registers every kind."""

from pathlang.engine.elements.arc import ArcElement
from pathlang.engine.elements.base import Emission, LastControl, PathElement
from pathlang.engine.elements.curves import (
    CubicBezierElement,
    QuadraticBezierElement,
    SmoothCubicBezierElement,
    SmoothQuadraticBezierElement,
)
from pathlang.engine.elements.figures import (
    EllipseFigureElement,
    PolygonFigureElement,
    RectangleFigureElement,
    RoundedRectangleFigureElement,
)
from pathlang.engine.elements.lines import (
    HorizontalLineElement,
    LineElement,
    MoveToElement,
    VerticalLineElement,
)
from pathlang.engine.elements.structure import ClosePathElement, FillRuleElement, PathFigureElement

__all__ = [
    "ArcElement",
    "ClosePathElement",
    "CubicBezierElement",
    "EllipseFigureElement",
    "Emission",
    "FillRuleElement",
    "HorizontalLineElement",
    "LastControl",
    "LineElement",
    "MoveToElement",
    "PathElement",
    "PathFigureElement",
    "PolygonFigureElement",
    "QuadraticBezierElement",
    "RectangleFigureElement",
    "RoundedRectangleFigureElement",
    "SmoothCubicBezierElement",
    "SmoothQuadraticBezierElement",
    "VerticalLineElement",
]
