"""Element registry — every path element variant is a class registered via decorator.

Usage:
    @path_element(ElementKind.LINE)
    @dataclass(frozen=True)
    class LineElement(PathElement):
        x: float = 0.0
        y: float = 0.0

The parser never names a variant class: it asks the factory functions below
for the variant of a figure or element kind. Adding a kind = one enum member,
one grammar pattern and one decorated class.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Union

import regex

from pathlang.engine.config import ParserConfig
from pathlang.engine.kinds import ElementKind, FigureKind

if TYPE_CHECKING:
    from pathlang.engine.elements.base import PathElement

logger = logging.getLogger(__name__)

Kind = Union[FigureKind, ElementKind]

# Only these kinds have a meaningful default-constructed variant
_DEFAULTABLE = (FigureKind.FILL_RULE, ElementKind.CLOSE_PATH)


class ElementRegistry:
    """Kind → variant class table."""

    def __init__(self) -> None:
        self._variants: dict[Kind, type["PathElement"]] = {}

    def register(self, kind: Kind, variant: type["PathElement"]) -> None:
        if kind in self._variants:
            raise ValueError(f"Duplicate element kind: {kind.value}")
        self._variants[kind] = variant
        logger.debug("Registered element %s (%s)", kind.value, variant.__name__)

    def get(self, kind: Kind) -> type["PathElement"]:
        return self._variants[kind]

    def kinds(self) -> list[Kind]:
        return list(self._variants)

    def missing_kinds(self) -> list[Kind]:
        """Kinds with no registered variant. Empty once all elements are imported."""
        return [k for k in (*FigureKind, *ElementKind) if k not in self._variants]

    @property
    def count(self) -> int:
        return len(self._variants)


# Module-level singleton
_registry = ElementRegistry()


def get_registry() -> ElementRegistry:
    return _registry


def path_element(kind: Kind) -> Callable[[type["PathElement"]], type["PathElement"]]:
    """Class decorator binding a variant to its kind."""

    def decorator(cls: type["PathElement"]) -> type["PathElement"]:
        cls.kind = kind
        _registry.register(kind, cls)
        return cls

    return decorator


def create_default(kind: Kind) -> "PathElement":
    """Default FillRule (nonzero) or ClosePath (open)."""
    if kind not in _DEFAULTABLE:
        raise ValueError(f"No default element for kind {kind.value}")
    return _registry.get(kind)()


def create_figure(kind: FigureKind, match: regex.Match, index: int, config: ParserConfig) -> "PathElement":
    return _registry.get(kind).initialize(match, index, config)


def create_additional_figure(
    kind: FigureKind, capture: str, index: int, is_relative: bool, config: ParserConfig
) -> "PathElement":
    return _registry.get(kind).initialize_additional(capture, index, is_relative, config)


def create_element(kind: ElementKind, match: regex.Match, index: int, config: ParserConfig) -> "PathElement":
    return _registry.get(kind).initialize(match, index, config)


def create_additional_element(
    kind: ElementKind, capture: str, index: int, is_relative: bool, config: ParserConfig
) -> "PathElement":
    # Extra coordinate pairs after a move-to are implicit line-tos
    if kind is ElementKind.MOVE_TO:
        kind = ElementKind.LINE
    return _registry.get(kind).initialize_additional(capture, index, is_relative, config)
