"""Parse failures raised by the engine."""

from __future__ import annotations

import enum


class ParseErrorKind(enum.Enum):
    # Outer grammar matched zero times or split the text into several matches
    GRAMMAR_MISMATCH = "grammar_mismatch"
    # Summed validation counts differ from the whitespace-stripped source length
    VALIDATION_MISMATCH = "validation_mismatch"
    # A figure began while the previous one was still open
    STRUCTURAL_SEQUENCE = "structural_sequence"
    # A numeric literal did not resolve to a finite float (strict mode only)
    NUMERIC = "numeric"


class PathParseError(ValueError):
    """Path data could not be turned into a document.

    Carries the failure category, the offending source text and, when known,
    the character offset the failure was detected at.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        source: str = "",
        offset: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.source = source
        self.offset = offset

    def __repr__(self) -> str:
        return f"PathParseError({self.kind.value}, offset={self.offset}, {self.message.splitlines()[0]!r})"
