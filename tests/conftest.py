"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathlang.engine.config import ParserConfig


# Small path strings with hand-checked results

SIMPLE_PATH = "M 0,0 L 1,1 Z"
RELATIVE_PATH = "M 10,10 l 5,5"
SMOOTH_QUADRATIC_PATH = "M 0,0 Q 10,0 10,10 T 20,20"
SMOOTH_FALLBACK_PATH = "M 0,0 L 5,5 T 10,10"
SMOOTH_CUBIC_PATH = "M 0,0 C 0,10 10,10 10,0 S 20,-10 20,0"
COMPACT_PATH = "M 0,0 L 1,1 2,2 3,3"
MALFORMED_PATH = "M 0,0 X 1,1"
HEXAGON_PATH = "P 6 10 50,50"
ELLIPSE_PATH = "O 20 10 50,50"
RECTANGLE_PATH = "R 0,0 10 20"
ROUNDED_RECTANGLE_PATH = "U 0,0 100 60 40 40"
DOUBLE_FILL_RULE_PATH = "F0 M 0,0 L 1,1 F1 M 2,2 L 3,3"

# Larger strings mixing every command family

HEART_PATH = (
    "F1 M 656.500,400.500 C 656.500,350.637 598.572,307.493 528.500,307.493 "
    "C 476.500,307.493 431.800,338.729 412.500,382.500 "
    "C 393.200,338.729 348.500,307.493 296.500,307.493 "
    "C 226.428,307.493 168.500,350.637 168.500,400.500 "
    "C 168.500,490.573 412.500,660.500 412.500,660.500 "
    "C 412.500,660.500 656.500,490.573 656.500,400.500 Z"
)
BADGE_PATH = (
    "F0 U 0,0 256 256 32 32 O 96 96 128,128 P 5 48 128,128 "
    "M 64,200 h 128 v 16 h -128 z"
)
ICON_PATH = (
    "M 4,4 L 20,4 20,20 4,20 Z "
    "m 6,6 q 2,-4 4,0 t 4,0 "
    "M 2,22 A 10 10 0 0 1 22,22 "
    "o 3 3 0,0"
)


@pytest.fixture
def config() -> ParserConfig:
    return ParserConfig()


@pytest.fixture
def lenient_config() -> ParserConfig:
    return ParserConfig(strict_numbers=False)
