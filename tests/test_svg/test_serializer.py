"""Tests for path data and SVG serialization."""

import pytest
import svgpathtools

from pathlang.engine.emitter import build_geometry
from pathlang.svg.serializer import serialize_path_data, serialize_svg
from tests.conftest import BADGE_PATH, ELLIPSE_PATH, HEXAGON_PATH, SIMPLE_PATH


def test_simple_path_data():
    geometry, _ = build_geometry(SIMPLE_PATH)
    assert serialize_path_data(geometry) == "M0,0 L1,1 Z"


def test_fill_rule_prefix():
    geometry, _ = build_geometry(BADGE_PATH)
    assert serialize_path_data(geometry, include_fill_rule=True).startswith("F0 M")


def test_curves_and_arcs():
    geometry, _ = build_geometry("M 0,0 Q 1,2 3,4 C 5,6 7,8 9,10 A 5 5 30 1 0 20,0")
    assert serialize_path_data(geometry) == "M0,0 Q1,2 3,4 C5,6 7,8 9,10 A5,5 30 1,0 20,0"


def test_degenerate_arc_written_as_line():
    geometry, _ = build_geometry("M 0,0 A 0 5 0 0 1 20,0")
    assert serialize_path_data(geometry) == "M0,0 L20,0"


def test_precision():
    geometry, _ = build_geometry("M 0.123456789,-0.0000001 L 2.5,3")
    assert serialize_path_data(geometry, precision=3) == "M0.123,0 L2.5,3"


def test_output_reparses_to_same_geometry():
    geometry, _ = build_geometry(f"{BADGE_PATH} {HEXAGON_PATH}")
    again, _ = build_geometry(serialize_path_data(geometry, include_fill_rule=True))

    assert again.fill_rule is geometry.fill_rule
    assert len(again.subpaths) == len(geometry.subpaths)
    for a, b in zip(again.segments, geometry.segments):
        assert a.kind == b.kind
        assert a.end.x == pytest.approx(b.end.x, abs=1e-5)
        assert a.end.y == pytest.approx(b.end.y, abs=1e-5)


def test_output_parses_with_svgpathtools():
    geometry, _ = build_geometry(f"{HEXAGON_PATH} {ELLIPSE_PATH}")
    parsed = svgpathtools.parse_path(serialize_path_data(geometry))
    ours = [seg for path in geometry.to_svgpathtools() for seg in path]

    assert len(parsed) == len(ours)
    for a, b in zip(parsed, ours):
        assert type(a) is type(b)
        assert abs(a.start - b.start) < 1e-5
        assert abs(a.end - b.end) < 1e-5
        assert abs(a.point(0.5) - b.point(0.5)) < 1e-4


def test_serialize_svg_document():
    geometry, _ = build_geometry(ELLIPSE_PATH)
    svg = serialize_svg(geometry)
    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'viewBox="30 40 40 20"' in svg
    assert 'fill-rule="nonzero"' in svg
    assert "<path d=\"M70,50 A20,10 0 1,1 30,50 A20,10 0 1,1 70,50 Z\"" in svg


def test_serialize_svg_fixed_canvas():
    geometry, _ = build_geometry(SIMPLE_PATH)
    svg = serialize_svg(geometry, canvas_w=24, canvas_h=24, fill="none", stroke="black")
    assert 'viewBox="0 0 24 24"' in svg
    assert 'stroke="black"' in svg
