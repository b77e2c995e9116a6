"""Regular grammar of the path mini-language.

Two levels:
  * figure grammar — fill rule, path figures (M ... Z), ellipse, polygon,
    rectangle and rounded-rectangle figures, in any order after the fill rule
  * element grammar — the drawing commands inside a path figure

Every command has two patterns: a locator (``figure_regex`` / ``element_regex``)
that splits its text into a ``Main`` group (command letter + first tuple) and
repeated ``Additional`` tuples, and a narrower attributes pattern
(``attributes_regex``) that re-reads the numbers of one additional tuple.

Repeated groups must report every capture with its offset, which the stdlib
``re`` module does not do, hence ``regex``. Number and repetition fragments
are written so that no two alternatives can match the same text; a failing
input therefore backtracks linearly.
"""

from __future__ import annotations

import regex

from pathlang.engine.kinds import ElementKind, FigureKind

# Whitespace
SPACER = r"\s*"
# Whitespace or comma
SOC = r"(?:\s+|\s*,\s*)"
# Whitespace or comma, or nothing when a minus sign follows
SEP = r"(?:\s+|\s*,\s*|(?=-))"

_DIGITS = r"(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
POSITIVE_INTEGER = r"[0-9]+"
FLOAT = rf"[-+]?{_DIGITS}"
POSITIVE_FLOAT = rf"[+]?{_DIGITS}"
POS = rf"{FLOAT}{SEP}{FLOAT}"

# Repeatable tuples (anonymous)
_ARC_TUPLE = rf"{POSITIVE_FLOAT}{SEP}{POSITIVE_FLOAT}{SEP}{FLOAT}{SOC}[01]{SOC}[01]{SEP}{POS}"
_ELLIPSE_TUPLE = rf"{POSITIVE_FLOAT}{SEP}{POSITIVE_FLOAT}{SEP}{POS}"
_POLYGON_TUPLE = rf"{POSITIVE_INTEGER}{SEP}{POSITIVE_FLOAT}{SEP}{POS}"
_RECTANGLE_TUPLE = rf"{POS}{SEP}{POSITIVE_FLOAT}{SEP}{POSITIVE_FLOAT}"
_ROUNDED_RECTANGLE_TUPLE = rf"{_RECTANGLE_TUPLE}{SEP}{POSITIVE_FLOAT}{SEP}{POSITIVE_FLOAT}"

# --- Element locators -------------------------------------------------------

MOVE_TO = rf"(?P<MoveTo>[Mm]{SPACER}{POS}(?:{SEP}{POS})*{SPACER})"
LINE = rf"(?P<Line>[Ll]{SPACER}{POS}(?:{SEP}{POS})*{SPACER})"
HORIZONTAL_LINE = rf"(?P<HorizontalLine>[Hh]{SPACER}{FLOAT}(?:{SEP}{FLOAT})*{SPACER})"
VERTICAL_LINE = rf"(?P<VerticalLine>[Vv]{SPACER}{FLOAT}(?:{SEP}{FLOAT})*{SPACER})"
QUADRATIC_BEZIER = rf"(?P<QuadraticBezier>[Qq]{SPACER}{POS}{SEP}{POS}(?:{SEP}{POS}{SEP}{POS})*{SPACER})"
SMOOTH_QUADRATIC_BEZIER = rf"(?P<SmoothQuadraticBezier>[Tt]{SPACER}{POS}(?:{SEP}{POS})*{SPACER})"
CUBIC_BEZIER = rf"(?P<CubicBezier>[Cc]{SPACER}{POS}{SEP}{POS}{SEP}{POS}(?:{SEP}{POS}{SEP}{POS}{SEP}{POS})*{SPACER})"
SMOOTH_CUBIC_BEZIER = rf"(?P<SmoothCubicBezier>[Ss]{SPACER}{POS}{SEP}{POS}(?:{SEP}{POS}{SEP}{POS})*{SPACER})"
ARC = rf"(?P<Arc>[Aa]{SPACER}{_ARC_TUPLE}(?:{SEP}{_ARC_TUPLE})*{SPACER})"
CLOSE_PATH = rf"(?P<ClosePath>[Zz]{SPACER})"

PATH_FIGURE_BODY = (
    f"{MOVE_TO}"
    f"(?:{LINE}"                      # L x,y
    f"|{HORIZONTAL_LINE}"             # H x
    f"|{VERTICAL_LINE}"               # V y
    f"|{QUADRATIC_BEZIER}"            # Q x1,y1 x,y
    f"|{SMOOTH_QUADRATIC_BEZIER}"     # T x,y
    f"|{CUBIC_BEZIER}"                # C x1,y1 x2,y2 x,y
    f"|{SMOOTH_CUBIC_BEZIER}"         # S x2,y2 x,y
    f"|{ARC}"                         # A rx ry angle large-arc sweep x,y
    f")*"
    f"{CLOSE_PATH}?"
)

# --- Figure locators --------------------------------------------------------

FILL_RULE = rf"{SPACER}(?P<FillRule>[Ff]{SPACER}[01])"
PATH_FIGURE = rf"{SPACER}(?P<PathFigure>{PATH_FIGURE_BODY})"
ELLIPSE_FIGURE = rf"{SPACER}(?P<EllipseFigure>[Oo]{SPACER}{_ELLIPSE_TUPLE}(?:{SEP}{_ELLIPSE_TUPLE})*)"
POLYGON_FIGURE = rf"{SPACER}(?P<PolygonFigure>[Pp]{SPACER}{_POLYGON_TUPLE}(?:{SEP}{_POLYGON_TUPLE})*)"
RECTANGLE_FIGURE = rf"{SPACER}(?P<RectangleFigure>[Rr]{SPACER}{_RECTANGLE_TUPLE}(?:{SEP}{_RECTANGLE_TUPLE})*)"
ROUNDED_RECTANGLE_FIGURE = (
    rf"{SPACER}(?P<RoundedRectangleFigure>[Uu]{SPACER}{_ROUNDED_RECTANGLE_TUPLE}"
    rf"(?:{SEP}{_ROUNDED_RECTANGLE_TUPLE})*)"
)

GEOMETRY = (
    f"{FILL_RULE}?"                   # F0 or F1
    f"(?:{PATH_FIGURE}"               # M ... Z
    f"|{ELLIPSE_FIGURE}"              # O rx ry x,y
    f"|{POLYGON_FIGURE}"              # P sides radius x,y
    f"|{RECTANGLE_FIGURE}"            # R x,y width height
    f"|{ROUNDED_RECTANGLE_FIGURE}"    # U x,y width height rx ry
    f")+"
)

# --- Attribute extraction ---------------------------------------------------

MOVE_TO_ATTRIBUTES = rf"(?P<X>{FLOAT}){SEP}(?P<Y>{FLOAT})"
LINE_ATTRIBUTES = rf"(?P<X>{FLOAT}){SEP}(?P<Y>{FLOAT})"
HORIZONTAL_LINE_ATTRIBUTES = rf"(?P<X>{FLOAT})"
VERTICAL_LINE_ATTRIBUTES = rf"(?P<Y>{FLOAT})"
QUADRATIC_BEZIER_ATTRIBUTES = rf"(?P<X1>{FLOAT}){SEP}(?P<Y1>{FLOAT}){SEP}(?P<X>{FLOAT}){SEP}(?P<Y>{FLOAT})"
SMOOTH_QUADRATIC_BEZIER_ATTRIBUTES = rf"(?P<X>{FLOAT}){SEP}(?P<Y>{FLOAT})"
CUBIC_BEZIER_ATTRIBUTES = (
    rf"(?P<X1>{FLOAT}){SEP}(?P<Y1>{FLOAT}){SEP}(?P<X2>{FLOAT}){SEP}(?P<Y2>{FLOAT}){SEP}"
    rf"(?P<X>{FLOAT}){SEP}(?P<Y>{FLOAT})"
)
SMOOTH_CUBIC_BEZIER_ATTRIBUTES = rf"(?P<X2>{FLOAT}){SEP}(?P<Y2>{FLOAT}){SEP}(?P<X>{FLOAT}){SEP}(?P<Y>{FLOAT})"
ARC_ATTRIBUTES = (
    rf"(?P<RadiusX>{POSITIVE_FLOAT}){SEP}(?P<RadiusY>{POSITIVE_FLOAT}){SEP}(?P<Angle>{FLOAT}){SOC}"
    rf"(?P<IsLargeArc>[01]){SOC}(?P<SweepDirection>[01]){SEP}(?P<X>{FLOAT}){SEP}(?P<Y>{FLOAT})"
)
ELLIPSE_FIGURE_ATTRIBUTES = (
    rf"(?P<RadiusX>{POSITIVE_FLOAT}){SEP}(?P<RadiusY>{POSITIVE_FLOAT}){SEP}(?P<X>{FLOAT}){SEP}(?P<Y>{FLOAT})"
)
POLYGON_FIGURE_ATTRIBUTES = (
    rf"(?P<Sides>{POSITIVE_INTEGER}){SEP}(?P<Radius>{POSITIVE_FLOAT}){SEP}(?P<X>{FLOAT}){SEP}(?P<Y>{FLOAT})"
)
RECTANGLE_FIGURE_ATTRIBUTES = (
    rf"(?P<X>{FLOAT}){SEP}(?P<Y>{FLOAT}){SEP}(?P<Width>{POSITIVE_FLOAT}){SEP}(?P<Height>{POSITIVE_FLOAT})"
)
ROUNDED_RECTANGLE_FIGURE_ATTRIBUTES = (
    rf"{RECTANGLE_FIGURE_ATTRIBUTES}{SEP}(?P<RadiusX>{POSITIVE_FLOAT}){SEP}(?P<RadiusY>{POSITIVE_FLOAT})"
)


def _command(letters: str, attributes: str, additional: str) -> str:
    return (
        rf"{SPACER}(?P<Main>(?P<Command>[{letters}]){SPACER}{attributes})"
        rf"(?P<Additional>{SEP}{additional})*"
    )


_ELEMENT_PATTERNS: dict[ElementKind, str] = {
    ElementKind.MOVE_TO: _command("Mm", MOVE_TO_ATTRIBUTES, POS),
    ElementKind.LINE: _command("Ll", LINE_ATTRIBUTES, POS),
    ElementKind.HORIZONTAL_LINE: _command("Hh", HORIZONTAL_LINE_ATTRIBUTES, FLOAT),
    ElementKind.VERTICAL_LINE: _command("Vv", VERTICAL_LINE_ATTRIBUTES, FLOAT),
    ElementKind.QUADRATIC_BEZIER: _command("Qq", QUADRATIC_BEZIER_ATTRIBUTES, f"{POS}{SEP}{POS}"),
    ElementKind.SMOOTH_QUADRATIC_BEZIER: _command("Tt", SMOOTH_QUADRATIC_BEZIER_ATTRIBUTES, POS),
    ElementKind.CUBIC_BEZIER: _command("Cc", CUBIC_BEZIER_ATTRIBUTES, f"{POS}{SEP}{POS}{SEP}{POS}"),
    ElementKind.SMOOTH_CUBIC_BEZIER: _command("Ss", SMOOTH_CUBIC_BEZIER_ATTRIBUTES, f"{POS}{SEP}{POS}"),
    ElementKind.ARC: _command("Aa", ARC_ATTRIBUTES, _ARC_TUPLE),
    ElementKind.CLOSE_PATH: rf"{SPACER}(?P<Main>(?P<Command>[Zz])){SPACER}",
}

_FIGURE_PATTERNS: dict[FigureKind, str] = {
    FigureKind.FILL_RULE: rf"{SPACER}(?P<Main>(?P<Command>[Ff]){SPACER}(?P<FillValue>[01]))",
    FigureKind.PATH_FIGURE: rf"{SPACER}(?P<Main>{PATH_FIGURE_BODY})",
    FigureKind.ELLIPSE_FIGURE: _command("Oo", ELLIPSE_FIGURE_ATTRIBUTES, _ELLIPSE_TUPLE),
    FigureKind.POLYGON_FIGURE: _command("Pp", POLYGON_FIGURE_ATTRIBUTES, _POLYGON_TUPLE),
    FigureKind.RECTANGLE_FIGURE: _command("Rr", RECTANGLE_FIGURE_ATTRIBUTES, _RECTANGLE_TUPLE),
    FigureKind.ROUNDED_RECTANGLE_FIGURE: _command(
        "Uu", ROUNDED_RECTANGLE_FIGURE_ATTRIBUTES, _ROUNDED_RECTANGLE_TUPLE
    ),
}

_ATTRIBUTE_PATTERNS: dict[FigureKind | ElementKind, str] = {
    ElementKind.MOVE_TO: MOVE_TO_ATTRIBUTES,
    ElementKind.LINE: LINE_ATTRIBUTES,
    ElementKind.HORIZONTAL_LINE: HORIZONTAL_LINE_ATTRIBUTES,
    ElementKind.VERTICAL_LINE: VERTICAL_LINE_ATTRIBUTES,
    ElementKind.QUADRATIC_BEZIER: QUADRATIC_BEZIER_ATTRIBUTES,
    ElementKind.SMOOTH_QUADRATIC_BEZIER: SMOOTH_QUADRATIC_BEZIER_ATTRIBUTES,
    ElementKind.CUBIC_BEZIER: CUBIC_BEZIER_ATTRIBUTES,
    ElementKind.SMOOTH_CUBIC_BEZIER: SMOOTH_CUBIC_BEZIER_ATTRIBUTES,
    ElementKind.ARC: ARC_ATTRIBUTES,
    FigureKind.ELLIPSE_FIGURE: ELLIPSE_FIGURE_ATTRIBUTES,
    FigureKind.POLYGON_FIGURE: POLYGON_FIGURE_ATTRIBUTES,
    FigureKind.RECTANGLE_FIGURE: RECTANGLE_FIGURE_ATTRIBUTES,
    FigureKind.ROUNDED_RECTANGLE_FIGURE: ROUNDED_RECTANGLE_FIGURE_ATTRIBUTES,
}

# Compiled once at import; read-only afterwards
GEOMETRY_REGEX = regex.compile(GEOMETRY)
WHITESPACE_REGEX = regex.compile(r"\s+")
_FIGURE_REGEXES = {kind: regex.compile(p) for kind, p in _FIGURE_PATTERNS.items()}
_ELEMENT_REGEXES = {kind: regex.compile(p) for kind, p in _ELEMENT_PATTERNS.items()}
_ATTRIBUTE_REGEXES = {kind: regex.compile(f"{SEP}{p}") for kind, p in _ATTRIBUTE_PATTERNS.items()}


def figure_regex(kind: FigureKind) -> regex.Pattern:
    return _FIGURE_REGEXES[kind]


def element_regex(kind: ElementKind) -> regex.Pattern:
    return _ELEMENT_REGEXES[kind]


def attributes_regex(kind: FigureKind | ElementKind) -> regex.Pattern | None:
    """Pattern for one additional tuple, or None if the kind takes none."""
    return _ATTRIBUTE_REGEXES.get(kind)


def captures_with_offsets(match: regex.Match, group: str) -> list[tuple[str, int]]:
    """Every capture of a (possibly repeated) group, paired with its start offset.

    A group the pattern does not define yields no captures.
    """
    if group not in match.re.groupindex:
        return []
    return list(zip(match.captures(group), match.starts(group)))


def significant_length(text: str) -> int:
    """Number of non-whitespace characters in ``text``."""
    return len(WHITESPACE_REGEX.sub("", text))
