"""Tests for individual element emission."""

import math

import pytest

from pathlang.engine.config import ParserConfig
from pathlang.engine.elements import (
    ArcElement,
    ClosePathElement,
    CubicBezierElement,
    EllipseFigureElement,
    FillRuleElement,
    HorizontalLineElement,
    LineElement,
    MoveToElement,
    PolygonFigureElement,
    QuadraticBezierElement,
    RectangleFigureElement,
    RoundedRectangleFigureElement,
    SmoothCubicBezierElement,
    SmoothQuadraticBezierElement,
    VerticalLineElement,
)
from pathlang.engine.elements.base import LastControl, mirrored_control, read_float
from pathlang.engine.errors import ParseErrorKind, PathParseError
from pathlang.engine.geometry import (
    ArcSegment,
    BeginFigure,
    EndFigure,
    LineSegment,
    Point,
    QuadraticSegment,
    SetFillRule,
)
from pathlang.engine.grammar import element_regex, figure_regex
from pathlang.engine.kinds import CurveFamily, ElementKind, FigureKind, FillRule

HERE = Point(10.0, 10.0)


def test_move_to_begins_figure_and_resets_control():
    last = LastControl(CurveFamily.CUBIC, Point(1, 1))
    current, control, ops = MoveToElement(x=5, y=5, is_relative=True).emit(HERE, last)
    assert current == Point(15, 15)
    assert control is None
    assert ops == (BeginFigure(Point(15, 15)),)


def test_relative_line():
    current, _, ops = LineElement(x=5, y=5, is_relative=True).emit(HERE, None)
    assert current == Point(15, 15)
    assert ops == (LineSegment(HERE, Point(15, 15)),)


def test_horizontal_and_vertical_keep_other_axis():
    current, _, _ = HorizontalLineElement(x=3).emit(HERE, None)
    assert current == Point(3, 10)
    current, _, _ = VerticalLineElement(y=-2, is_relative=True).emit(HERE, None)
    assert current == Point(10, 8)


def test_quadratic_records_control():
    current, control, ops = QuadraticBezierElement(x1=10, y1=0, x=10, y=10).emit(Point(0, 0), None)
    assert current == Point(10, 10)
    assert control == LastControl(CurveFamily.QUADRATIC, Point(10, 0))
    assert ops == (QuadraticSegment(Point(0, 0), Point(10, 0), Point(10, 10)),)


def test_smooth_quadratic_mirrors_previous_control():
    last = LastControl(CurveFamily.QUADRATIC, Point(10, 0))
    _, control, ops = SmoothQuadraticBezierElement(x=20, y=20).emit(Point(10, 10), last)
    assert ops[0].control == Point(10, 20)
    assert control.point == Point(10, 20)


def test_smooth_cubic_ignores_quadratic_control():
    last = LastControl(CurveFamily.QUADRATIC, Point(3, 3))
    _, _, ops = SmoothCubicBezierElement(x2=1, y2=1, x=2, y=2).emit(Point(5, 5), last)
    assert ops[0].control1 == Point(5, 5)


def test_cubic_last_control_is_second_control():
    _, control, _ = CubicBezierElement(x1=1, y1=1, x2=2, y2=2, x=3, y=3).emit(Point(0, 0), None)
    assert control == LastControl(CurveFamily.CUBIC, Point(2, 2))


def test_mirrored_control_falls_back_to_current():
    assert mirrored_control(Point(4, 4), None, CurveFamily.CUBIC) == Point(4, 4)


def test_arc_angle_read_in_degrees_by_default():
    match = element_regex(ElementKind.ARC).match("A 10 5 90 0 1 20,0")
    element = ArcElement.initialize(match, 0, ParserConfig())
    assert element.angle == pytest.approx(math.pi / 2)
    assert element.radius_y == 5.0
    assert element.sweep_clockwise
    assert not element.is_large_arc


def test_arc_angle_in_radians():
    match = element_regex(ElementKind.ARC).match("A 10 5 1.5 1 0 20,0")
    element = ArcElement.initialize(match, 0, ParserConfig(arc_angle_units="radians"))
    assert element.angle == 1.5
    assert element.is_large_arc
    assert not element.sweep_clockwise


def test_degenerate_arc_is_kept_and_flagged():
    current, control, ops = ArcElement(radius_x=0, radius_y=5, x=20, y=0).emit(Point(0, 0), None)
    assert current == Point(20, 0)
    assert control is None
    (segment,) = ops
    assert isinstance(segment, ArcSegment)
    assert segment.is_degenerate


def test_close_path_keeps_current_point():
    current, control, ops = ClosePathElement(is_closed=True).emit(HERE, LastControl(CurveFamily.CUBIC, HERE))
    assert current == HERE
    assert control is None
    assert ops == (EndFigure(True),)


def test_fill_rule_values():
    f0 = FillRuleElement.initialize(figure_regex(FigureKind.FILL_RULE).match("F0"), 0, ParserConfig())
    f1 = FillRuleElement.initialize(figure_regex(FigureKind.FILL_RULE).match("f1"), 0, ParserConfig())
    assert f0.fill_rule is FillRule.EVEN_ODD
    assert f1.fill_rule is FillRule.NONZERO
    assert f1.emit(HERE, None).ops == (SetFillRule(FillRule.NONZERO),)


def test_read_float_strict_rejects_overflow():
    match = element_regex(ElementKind.LINE).match("L 1e999,0")
    with pytest.raises(PathParseError) as exc:
        read_float(match, "X", ParserConfig())
    assert exc.value.kind is ParseErrorKind.NUMERIC


def test_read_float_lenient_defaults_to_zero(caplog):
    match = element_regex(ElementKind.LINE).match("L 1e999,0")
    with caplog.at_level("WARNING"):
        assert read_float(match, "X", ParserConfig(strict_numbers=False)) == 0.0
    assert "1e999" in caplog.text


# --- Figures ----------------------------------------------------------------


def test_ellipse_two_half_arcs():
    current, control, ops = EllipseFigureElement(radius_x=20, radius_y=10, x=50, y=50).emit(HERE, None)
    assert current == HERE
    assert control is None
    begin, first, second, end = ops
    assert begin == BeginFigure(Point(70, 50))
    assert first.end == Point(30, 50)
    assert second.end == Point(70, 50)
    assert first.large_arc and first.sweep_clockwise
    assert end == EndFigure(True)


def test_relative_ellipse_centered_on_current_point():
    _, _, ops = EllipseFigureElement(radius_x=1, radius_y=1, is_relative=True).emit(HERE, None)
    assert ops[0] == BeginFigure(Point(11, 10))


def test_polygon_vertices_on_circumradius():
    hexagon = PolygonFigureElement(sides=6, radius=10, x=50, y=50)
    current, _, ops = hexagon.emit(HERE, None)
    assert current == HERE

    segments = [op for op in ops if isinstance(op, LineSegment)]
    assert len(segments) == 6
    assert segments[-1].end == ops[0].point
    for seg in segments:
        assert seg.end.distance_to(Point(50, 50)) == pytest.approx(10)
    # Even polygons have a flat top edge
    assert segments[-1].end.y == pytest.approx(segments[0].end.y)


def test_odd_polygon_points_up():
    triangle = PolygonFigureElement(sides=3, radius=10, x=0, y=0)
    first = triangle.vertices(Point(0, 0))[0]
    assert first.x == pytest.approx(0)
    assert first.y == pytest.approx(-10)


def test_polygon_needs_three_sides():
    match = figure_regex(FigureKind.POLYGON_FIGURE).match("P 2 10 0,0")
    with pytest.raises(PathParseError) as exc:
        PolygonFigureElement.initialize(match, 0, ParserConfig())
    assert exc.value.kind is ParseErrorKind.GRAMMAR_MISMATCH


def test_polygon_sides_have_upper_bound():
    match = figure_regex(FigureKind.POLYGON_FIGURE).match("P 1000000000000 1 0,0")
    with pytest.raises(PathParseError) as exc:
        PolygonFigureElement.initialize(match, 0, ParserConfig())
    assert exc.value.kind is ParseErrorKind.GRAMMAR_MISMATCH


def test_rectangle_outline():
    _, _, ops = RectangleFigureElement(x=1, y=2, width=10, height=20).emit(HERE, None)
    ends = [op.end for op in ops if isinstance(op, LineSegment)]
    assert ends == [Point(11, 2), Point(11, 22), Point(1, 22), Point(1, 2)]
    assert ops[-1] == EndFigure(True)


def test_rounded_rectangle_radii_clamped():
    rect = RoundedRectangleFigureElement(x=0, y=0, width=100, height=60, radius_x=40, radius_y=40)
    assert rect.corner_radii() == [(40.0, 30.0)] * 4

    _, _, ops = rect.emit(HERE, None)
    arcs = [op for op in ops if isinstance(op, ArcSegment)]
    lines = [op for op in ops if isinstance(op, LineSegment)]
    assert len(arcs) == 4
    # Left and right edges collapse to nothing once ry fills the height
    assert len(lines) == 2
    assert ops[0] == BeginFigure(Point(40, 0))
    assert arcs[-1].end == Point(40, 0)


def test_rounded_rectangle_zero_radius_is_square():
    rect = RoundedRectangleFigureElement(x=0, y=0, width=10, height=10)
    _, _, ops = rect.emit(HERE, None)
    assert not any(isinstance(op, ArcSegment) for op in ops)
    assert sum(isinstance(op, LineSegment) for op in ops) == 4
