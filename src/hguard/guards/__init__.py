"""Include guard checking for C/C++ headers.

This package holds the finding types shared by the stripper, the symbol
deriver and the guard checker.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol

WRONG_SYMBOL = "wrong-symbol"
MISSING_GUARD = "missing-guard"
MISSING_TERMINATOR = "missing-terminator"
OPEN_ERROR = "open-error"


class Finding(NamedTuple):
    """A single problem found in a header file."""

    kind: str
    line_no: int
    expected: str = ""
    actual: str = ""
    detail: str = ""

    @property
    def message(self) -> str:
        """Human readable description of the finding."""
        if self.kind == WRONG_SYMBOL:
            return f"guard symbol {self.actual} does not match expected {self.expected}"
        if self.kind == MISSING_GUARD:
            return f"missing include guard, expected #ifndef {self.expected}"
        if self.kind == MISSING_TERMINATOR:
            return "missing #endif at end of file"
        if self.kind == OPEN_ERROR:
            return f"cannot open file: {self.detail}"
        return self.detail


class StructuralWarning(NamedTuple):
    """A recoverable problem met while stripping comments and literals."""

    line_no: int
    message: str


class WarningSink(Protocol):
    """Callable receiving structural warnings."""

    def __call__(self, warning: StructuralWarning) -> None: ...


__all__ = [
    "MISSING_GUARD",
    "MISSING_TERMINATOR",
    "OPEN_ERROR",
    "WRONG_SYMBOL",
    "Finding",
    "StructuralWarning",
    "WarningSink",
]
