"""Tests for hguard.guards.check."""

from __future__ import annotations

from hguard.guards import MISSING_GUARD, MISSING_TERMINATOR, WRONG_SYMBOL, Finding
from hguard.guards.check import check_guard


def test_well_formed_guard() -> None:
    """A matching guard yields no findings."""
    clean = "#ifndef FOO_H\n#define FOO_H\n#endif\n"
    assert check_guard(clean, "FOO_H", 1, 3) == []


def test_wrong_symbol() -> None:
    """A different symbol is reported with both names."""
    clean = "#ifndef FOO_OLD_H\n#define FOO_OLD_H\n#endif\n"
    findings = check_guard(clean, "FOO_H", 1, 3)
    assert findings == [
        Finding(kind=WRONG_SYMBOL, line_no=1, expected="FOO_H", actual="FOO_OLD_H")
    ]
    assert findings[0].message == "guard symbol FOO_OLD_H does not match expected FOO_H"


def test_missing_guard() -> None:
    """A file without #ifndef at the top reports the expected symbol."""
    clean = "#define FOO_H\n#endif\n"
    assert check_guard(clean, "FOO_H", 1, 2) == [
        Finding(kind=MISSING_GUARD, line_no=1, expected="FOO_H")
    ]


def test_ifndef_not_first_is_missing() -> None:
    """Code before the #ifndef means the guard is missing."""
    clean = "#include <a.h>\n#ifndef FOO_H\n#define FOO_H\n#endif\n"
    findings = check_guard(clean, "FOO_H", 1, 4)
    assert [f.kind for f in findings] == [MISSING_GUARD]


def test_leading_blank_lines_and_spacing() -> None:
    """Blank lines from stripped comments and spaces around # are accepted."""
    clean = " \n\n  #  ifndef\tFOO_H  \n# define FOO_H\n  #  endif  \n\n"
    assert check_guard(clean, "FOO_H", 3, 6) == []


def test_ifndef_symbol_on_next_line_is_missing() -> None:
    """The symbol must be on the #ifndef line."""
    clean = "#ifndef\nFOO_H\n#endif\n"
    findings = check_guard(clean, "FOO_H", 1, 3)
    assert [f.kind for f in findings] == [MISSING_GUARD]


def test_missing_terminator() -> None:
    """Code after the last #endif is reported at the last line."""
    clean = "#ifndef FOO_H\n#define FOO_H\n#endif\nint x;\n"
    assert check_guard(clean, "FOO_H", 1, 4) == [Finding(kind=MISSING_TERMINATOR, line_no=4)]


def test_endif_with_stripped_comment() -> None:
    """An #endif followed by a stripped comment still terminates the guard."""
    clean = "#ifndef FOO_H\n#define FOO_H\n#endif  \n"
    assert check_guard(clean, "FOO_H", 1, 3) == []


def test_both_findings() -> None:
    """Missing guard and missing terminator are independent."""
    clean = "int x;\n"
    findings = check_guard(clean, "X_H", 2, 1)
    assert [f.kind for f in findings] == [MISSING_GUARD, MISSING_TERMINATOR]
    assert [f.line_no for f in findings] == [2, 1]


def test_empty_text() -> None:
    """An empty file lacks both the guard and the terminator."""
    findings = check_guard("", "E_H", 1, 0)
    assert [f.kind for f in findings] == [MISSING_GUARD, MISSING_TERMINATOR]
