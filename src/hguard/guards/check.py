"""Structural include guard check on stripped source text."""

from __future__ import annotations

import re

from hguard.guards import MISSING_GUARD, MISSING_TERMINATOR, WRONG_SYMBOL, Finding

_IFNDEF = re.compile(r"\A\s*#[ \t]*ifndef[ \t]+(\w+)[ \t]*\n", re.ASCII)
_ENDIF = re.compile(r"\n\s*#[ \t]*endif\s*\n\s*\Z", re.ASCII)


def check_guard(
    clean: str,
    expected: str,
    first_code_line: int,
    total_lines: int,
) -> list[Finding]:
    """Check that ``clean`` opens with ``#ifndef expected`` and ends with ``#endif``.

    Args:
        clean: Source text with comments and literals stripped.
        expected: Guard symbol derived from the file path.
        first_code_line: Line reported for a missing or wrong ``#ifndef``.
        total_lines: Line reported for a missing ``#endif``.

    Returns:
        Findings for the file, empty when the guard is well formed.
    """
    findings: list[Finding] = []

    match = _IFNDEF.match(clean)
    if match is None:
        findings.append(Finding(kind=MISSING_GUARD, line_no=first_code_line, expected=expected))
    else:
        actual = match.group(1)
        if actual != expected:
            findings.append(
                Finding(
                    kind=WRONG_SYMBOL,
                    line_no=first_code_line,
                    expected=expected,
                    actual=actual,
                )
            )

    if _ENDIF.search(clean) is None:
        findings.append(Finding(kind=MISSING_TERMINATOR, line_no=total_lines))

    return findings


__all__ = ["check_guard"]
