"""Pathlang path mini-language engine."""

from pathlang.engine.registry import path_element, get_registry
from pathlang.engine.config import ParserConfig
from pathlang.engine.errors import ParseErrorKind, PathParseError
from pathlang.engine.kinds import ElementKind, FigureKind, FillRule
from pathlang.engine.geometry import Geometry, Point, SubPath
from pathlang.engine.document import PathDocument, parse_path_data
from pathlang.engine.emitter import build_geometry, emit_geometry

# Registers every element variant
import pathlang.engine.elements  # noqa: E402,F401

__all__ = [
    "path_element",
    "get_registry",
    "ParserConfig",
    "ParseErrorKind",
    "PathParseError",
    "ElementKind",
    "FigureKind",
    "FillRule",
    "Geometry",
    "Point",
    "SubPath",
    "PathDocument",
    "parse_path_data",
    "build_geometry",
    "emit_geometry",
]
