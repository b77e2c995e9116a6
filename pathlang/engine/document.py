"""Path document — parses path data text into an ordered list of elements."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from pathlang.engine.config import ParserConfig
from pathlang.engine.elements.base import PathElement
from pathlang.engine.elements.structure import PathFigureElement
from pathlang.engine.errors import ParseErrorKind, PathParseError
from pathlang.engine.grammar import GEOMETRY_REGEX, WHITESPACE_REGEX, captures_with_offsets, figure_regex
from pathlang.engine.kinds import FIGURE_STARTERS, ElementKind, FigureKind, FillRule
from pathlang.engine.registry import create_additional_figure, create_default, create_figure

if TYPE_CHECKING:
    from pathlang.engine.geometry import Geometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathDocument:
    """Immutable parse result: the source text and its top-level figures.

    ``figures`` starts with a FillRule and is ordered by source index. Path
    figures own their drawing elements; ``elements`` flattens them.
    """

    source: str
    figures: tuple[PathElement, ...]
    # Settings the text was parsed with; emission reads its sampling density
    config: ParserConfig = field(default_factory=ParserConfig, compare=False)

    @classmethod
    def parse(cls, text: str, config: ParserConfig | None = None) -> "PathDocument":
        return parse_path_data(text, config)

    @property
    def elements(self) -> list[PathElement]:
        flat: list[PathElement] = []
        for figure in self.figures:
            if isinstance(figure, PathFigureElement):
                flat.extend(figure.elements)
            else:
                flat.append(figure)
        return flat

    @property
    def fill_rule(self) -> FillRule:
        return self.figures[0].fill_rule

    @property
    def validation_count(self) -> int:
        return sum(f.validation_count for f in self.figures)

    def emit(self, trace: bool = False) -> tuple["Geometry", list[str] | None]:
        from pathlang.engine.emitter import emit_geometry

        return emit_geometry(self, trace=trace)


def parse_path_data(text: str, config: ParserConfig | None = None) -> PathDocument:
    """Parse path mini-language text.

    Raises:
        PathParseError: on any grammar, validation, numeric or sequencing
            failure. Nothing is partially returned.
    """
    config = config or ParserConfig()
    start = time.perf_counter()

    match = _single_match(text)

    figures: list[PathElement] = []
    for kind in FigureKind:
        for capture, offset in captures_with_offsets(match, kind.value):
            figures.extend(_read_figure(kind, capture, offset, text, config))

    figures.sort(key=lambda f: f.index)
    if not figures or figures[0].kind is not FigureKind.FILL_RULE:
        figures.insert(0, replace(create_default(FigureKind.FILL_RULE), index=0))

    document = PathDocument(source=text, figures=tuple(figures), config=config)
    _validate_counts(document)
    check_figure_sequence(document.elements, text)

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(
        "Parsed %d figures (%d elements) in %.2fms",
        len(document.figures),
        len(document.elements),
        elapsed,
    )
    return document


def _single_match(text: str):
    matches = list(GEOMETRY_REGEX.finditer(text))
    if not matches:
        raise PathParseError(
            ParseErrorKind.GRAMMAR_MISMATCH,
            "Path data does not contain any figure",
            source=text,
            offset=0,
        )
    if len(matches) > 1:
        first, second = matches[0], matches[1]
        fill_rules = second.starts(FigureKind.FILL_RULE.value)
        if fill_rules:
            message = "Multiple FillRule elements present in path data"
            offset = fill_rules[0]
        else:
            message = "Unrecognized text splits the path data"
            offset = first.end() + len(text[first.end():]) - len(text[first.end():].lstrip())
        raise PathParseError(ParseErrorKind.GRAMMAR_MISMATCH, message, source=text, offset=offset)

    match = matches[0]
    # A fill rule left unmatched ahead of the one the match starts with
    fill_rules = match.starts(FigureKind.FILL_RULE.value)
    if fill_rules and figure_regex(FigureKind.FILL_RULE).search(text, 0, match.start()):
        raise PathParseError(
            ParseErrorKind.GRAMMAR_MISMATCH,
            "Multiple FillRule elements present in path data",
            source=text,
            offset=fill_rules[0],
        )
    return match


def _read_figure(
    kind: FigureKind, capture: str, offset: int, text: str, config: ParserConfig
) -> list[PathElement]:
    """Main figure plus one figure per additional compacted tuple."""
    figure_match = figure_regex(kind).match(capture)
    if figure_match is None:
        raise PathParseError(
            ParseErrorKind.GRAMMAR_MISMATCH,
            f"Could not read {kind.value} from {capture!r}",
            source=text,
            offset=offset,
        )

    try:
        main = create_figure(kind, figure_match, offset, config)
        result = [main]
        for extra, extra_offset in captures_with_offsets(figure_match, "Additional"):
            result.append(
                create_additional_figure(kind, extra, offset + extra_offset, main.is_relative, config)
            )
    except PathParseError as e:
        # Element-level errors only know their own fragment
        raise PathParseError(e.kind, e.message, source=text, offset=offset) from e
    return result


def _validate_counts(document: PathDocument) -> None:
    expected = len(WHITESPACE_REGEX.sub("", document.source))
    actual = document.validation_count
    if expected == actual:
        return
    offset = _first_unaccounted(document)
    raise PathParseError(
        ParseErrorKind.VALIDATION_MISMATCH,
        f"Path data contains invalid characters or elements: expected {expected} "
        f"significant characters, read {actual}. Data: {document.source!r}",
        source=document.source,
        offset=offset,
    )


def _first_unaccounted(document: PathDocument) -> int | None:
    """Offset of the first non-whitespace character no element accounts for."""
    covered = [False] * len(document.source)
    for element in document.elements:
        if element.validation_count == 0:
            continue
        for i in range(element.index, min(element.index + len(element.data), len(covered))):
            covered[i] = True
    for i, ch in enumerate(document.source):
        if not covered[i] and not ch.isspace():
            return i
    return None


def check_figure_sequence(elements: list[PathElement], source: str = "") -> None:
    """Reject a figure that begins while the previous one is still open.

    A MoveTo opens a figure that only a ClosePath ends; the self-contained
    figures open and close in one element.
    """
    open_since: PathElement | None = None
    for element in elements:
        if element.kind in FIGURE_STARTERS and open_since is not None:
            raise PathParseError(
                ParseErrorKind.STRUCTURAL_SEQUENCE,
                f"{element.kind.value} at {element.index} begins while the figure "
                f"started at {open_since.index} is still open",
                source=source,
                offset=element.index,
            )
        if element.kind is ElementKind.MOVE_TO:
            open_since = element
        elif element.kind is ElementKind.CLOSE_PATH:
            open_since = None
