"""Structural elements: fill rule (F), close path (Z) and the M…Z path figure."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

import regex

from pathlang.engine.config import ParserConfig
from pathlang.engine.elements.base import Emission, LastControl, PathElement
from pathlang.engine.geometry import EndFigure, Point, SetFillRule
from pathlang.engine.grammar import captures_with_offsets, element_regex
from pathlang.engine.kinds import ElementKind, FigureKind, FillRule
from pathlang.engine.registry import create_additional_element, create_default, create_element, path_element

logger = logging.getLogger(__name__)


@path_element(FigureKind.FILL_RULE)
@dataclass(frozen=True)
class FillRuleElement(PathElement):
    """F0 = even-odd, F1 = nonzero. Default-constructed as nonzero."""

    fill_rule: FillRule = FillRule.NONZERO

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        value = match.group("FillValue")
        return {"fill_rule": FillRule.NONZERO if value == "1" else FillRule.EVEN_ODD}

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        return Emission(current, None, (SetFillRule(self.fill_rule),))


@path_element(ElementKind.CLOSE_PATH)
@dataclass(frozen=True)
class ClosePathElement(PathElement):
    """Ends the current figure.

    Closed when a Z was written; the synthesized default leaves the figure
    open. The current point is not moved.
    """

    is_closed: bool = False

    @classmethod
    def read_attributes(cls, match: regex.Match, config: ParserConfig) -> dict[str, Any]:
        return {"is_closed": match.group("Command") is not None}

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        return Emission(current, None, (EndFigure(self.is_closed),))


@path_element(FigureKind.PATH_FIGURE)
@dataclass(frozen=True)
class PathFigureElement(PathElement):
    """An M-started sub-path owning its drawing elements.

    Children are ordered by source index and always end with a ClosePath.
    The figure's validation count is the sum of its children's.
    """

    elements: tuple[PathElement, ...] = ()

    @classmethod
    def initialize(cls, match: regex.Match, index: int, config: ParserConfig) -> "PathFigureElement":
        main = match.group("Main")
        children: list[PathElement] = []

        for kind in ElementKind:
            for capture, offset in captures_with_offsets(match, kind.value):
                root = index + offset
                element_match = element_regex(kind).match(capture)
                if element_match is None:
                    continue
                # 'Main' holds the command letter and its first tuple
                element = create_element(kind, element_match, root, config)
                children.append(element)

                # 'Additional' holds the compacted tuples that follow it
                for extra, extra_offset in captures_with_offsets(element_match, "Additional"):
                    children.append(
                        create_additional_element(kind, extra, root + extra_offset, element.is_relative, config)
                    )

        children.sort(key=lambda e: e.index)
        if not children or children[-1].kind is not ElementKind.CLOSE_PATH:
            close = create_default(ElementKind.CLOSE_PATH)
            children.append(replace(close, index=index + len(main)))

        logger.debug("Path figure at %d: %d elements", index, len(children))
        return cls(
            index=index,
            data=main,
            elements=tuple(children),
            validation_count=sum(e.validation_count for e in children),
        )

    @classmethod
    def initialize_additional(
        cls, capture: str, index: int, is_relative: bool, config: ParserConfig
    ) -> "PathFigureElement":
        raise TypeError("Path figures do not take additional tuples")

    def emit(self, current: Point, last_control: LastControl | None) -> Emission:
        ops = []
        for element in self.elements:
            current, last_control, element_ops = element.emit(current, last_control)
            ops.extend(element_ops)
        return Emission(current, last_control, tuple(ops))
