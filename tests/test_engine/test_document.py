"""Tests for path document parsing."""

import pytest

from pathlang.engine.config import ParserConfig
from pathlang.engine.document import PathDocument, check_figure_sequence, parse_path_data
from pathlang.engine.elements import (
    ClosePathElement,
    EllipseFigureElement,
    LineElement,
    MoveToElement,
    PathFigureElement,
)
from pathlang.engine.errors import ParseErrorKind, PathParseError
from pathlang.engine.grammar import significant_length
from pathlang.engine.kinds import ElementKind, FigureKind, FillRule
from tests.conftest import (
    BADGE_PATH,
    COMPACT_PATH,
    DOUBLE_FILL_RULE_PATH,
    HEART_PATH,
    ICON_PATH,
    MALFORMED_PATH,
    SIMPLE_PATH,
)


def test_default_fill_rule_synthesized_first():
    doc = parse_path_data(SIMPLE_PATH)
    first = doc.figures[0]
    assert first.kind is FigureKind.FILL_RULE
    assert first.index == 0
    assert first.validation_count == 0
    assert doc.fill_rule is FillRule.NONZERO


def test_explicit_fill_rule():
    doc = parse_path_data(BADGE_PATH)
    assert doc.fill_rule is FillRule.EVEN_ODD
    assert doc.figures[0].data == "F0"


def test_elements_in_source_order():
    doc = parse_path_data(ICON_PATH)
    indices = [e.index for e in doc.elements[1:]]
    assert indices == sorted(indices)
    kinds = [e.kind for e in doc.elements]
    assert kinds[:3] == [FigureKind.FILL_RULE, ElementKind.MOVE_TO, ElementKind.LINE]
    assert kinds[-1] is FigureKind.ELLIPSE_FIGURE


def test_compaction_yields_absolute_lines():
    doc = parse_path_data(COMPACT_PATH)
    lines = [e for e in doc.elements if e.kind is ElementKind.LINE]
    assert len(lines) == 3
    assert [(e.x, e.y) for e in lines] == [(1, 1), (2, 2), (3, 3)]
    assert lines[0].index < lines[1].index < lines[2].index
    assert not any(e.is_relative for e in lines)


def test_additional_move_to_tuples_are_lines():
    doc = parse_path_data("m 1,1 2,2")
    kinds = [e.kind for e in doc.elements]
    assert kinds == [FigureKind.FILL_RULE, ElementKind.MOVE_TO, ElementKind.LINE, ElementKind.CLOSE_PATH]
    assert doc.elements[2].is_relative


def test_close_path_synthesized_open():
    doc = parse_path_data("M 0,0 L 1,1")
    close = doc.elements[-1]
    assert close.kind is ElementKind.CLOSE_PATH
    assert not close.is_closed
    assert close.index == len("M 0,0 L 1,1")


def test_written_close_path_is_closed():
    doc = parse_path_data(SIMPLE_PATH)
    close = doc.elements[-1]
    assert close.is_closed
    assert close.data == "Z"


def test_path_figure_owns_elements():
    doc = parse_path_data(SIMPLE_PATH)
    figure = doc.figures[1]
    assert isinstance(figure, PathFigureElement)
    assert len(figure.elements) == 3
    assert figure.validation_count == sum(e.validation_count for e in figure.elements)


@pytest.mark.parametrize("text", [SIMPLE_PATH, COMPACT_PATH, HEART_PATH, BADGE_PATH, ICON_PATH])
def test_validation_counts_cover_input(text):
    doc = parse_path_data(text)
    assert doc.validation_count == significant_length(text)


def test_whitespace_and_commas_are_flexible():
    a = parse_path_data("M0,0L10,10")
    b = parse_path_data("  M 0 , 0\n\tL 10 10  ")
    assert [(e.kind, getattr(e, "x", None)) for e in a.elements] == [
        (e.kind, getattr(e, "x", None)) for e in b.elements
    ]


def test_malformed_text_fails_validation():
    with pytest.raises(PathParseError) as exc:
        parse_path_data(MALFORMED_PATH)
    assert exc.value.kind is ParseErrorKind.VALIDATION_MISMATCH
    assert exc.value.offset == MALFORMED_PATH.index("X")
    assert MALFORMED_PATH in exc.value.message


def test_empty_text_is_grammar_mismatch():
    with pytest.raises(PathParseError) as exc:
        parse_path_data("   ")
    assert exc.value.kind is ParseErrorKind.GRAMMAR_MISMATCH


def test_second_fill_rule_rejected():
    with pytest.raises(PathParseError) as exc:
        parse_path_data(DOUBLE_FILL_RULE_PATH)
    assert exc.value.kind is ParseErrorKind.GRAMMAR_MISMATCH
    assert "Multiple FillRule" in exc.value.message
    assert exc.value.offset == DOUBLE_FILL_RULE_PATH.index("F1")


def test_leading_fill_rules_rejected():
    text = "F1 F0 M 0 0 L 1 1"
    with pytest.raises(PathParseError) as exc:
        parse_path_data(text)
    assert exc.value.kind is ParseErrorKind.GRAMMAR_MISMATCH
    assert "Multiple FillRule" in exc.value.message
    assert exc.value.offset == text.index("F0")


def test_text_splitting_figures_rejected():
    text = "M 0,0 L 1,1 ?? M 2,2"
    with pytest.raises(PathParseError) as exc:
        parse_path_data(text)
    assert exc.value.kind is ParseErrorKind.GRAMMAR_MISMATCH
    assert exc.value.offset == text.index("??")


def test_small_polygon_rejected_with_offset():
    text = "M 0,0 Z P 2 10 0,0"
    with pytest.raises(PathParseError) as exc:
        parse_path_data(text)
    assert exc.value.kind is ParseErrorKind.GRAMMAR_MISMATCH
    assert exc.value.offset == text.index("P")
    assert exc.value.source == text


def test_huge_polygon_rejected_before_emission():
    text = "P 1000000000000 1 0,0"
    with pytest.raises(PathParseError) as exc:
        parse_path_data(text)
    assert exc.value.kind is ParseErrorKind.GRAMMAR_MISMATCH
    assert exc.value.offset == 0
    assert "at most 1024 sides" in exc.value.message


def test_polygon_side_limit_is_configurable():
    config = ParserConfig(max_polygon_sides=4)
    parse_path_data("P 4 1 0,0", config)
    with pytest.raises(PathParseError) as exc:
        parse_path_data("P 5 1 0,0", config)
    assert exc.value.kind is ParseErrorKind.GRAMMAR_MISMATCH


def test_numeric_overflow_strict():
    with pytest.raises(PathParseError) as exc:
        parse_path_data("M 0,0 L 1e999,0")
    assert exc.value.kind is ParseErrorKind.NUMERIC


def test_numeric_overflow_lenient(lenient_config):
    doc = parse_path_data("M 0,0 L 1e999,0", lenient_config)
    line = doc.elements[2]
    assert (line.x, line.y) == (0.0, 0.0)


def test_classmethod_parse_matches_function():
    config = ParserConfig()
    assert PathDocument.parse(HEART_PATH, config) == parse_path_data(HEART_PATH, config)


def test_figure_sequence_accepts_closed_figures():
    elements = [
        MoveToElement(index=0),
        LineElement(index=5, x=1, y=1),
        ClosePathElement(index=9),
        EllipseFigureElement(index=11),
        MoveToElement(index=20),
    ]
    check_figure_sequence(elements)


def test_figure_sequence_rejects_open_figure():
    elements = [
        MoveToElement(index=0),
        LineElement(index=5, x=1, y=1),
        EllipseFigureElement(index=10),
    ]
    with pytest.raises(PathParseError) as exc:
        check_figure_sequence(elements, "M 0,0 L 1,1 O 1 1 0,0")
    assert exc.value.kind is ParseErrorKind.STRUCTURAL_SEQUENCE
    assert exc.value.offset == 10
