"""Comment and literal stripping for C/C++ sources.

Block comments, line comments and the bodies of character and string
literals are replaced by placeholders so that the guard checker can scan
the text for preprocessor lines without being fooled by a ``/*`` inside a
string or a quote inside a comment.

Replacements:
- ``/* ... */`` -> a single space
- ``// ...``    -> the newline ending the comment
- ``'...'``     -> ``'.'``
- ``"..."``     -> ``"..."``

Newlines swallowed by a replacement are re-emitted after it, so the output
always has as many lines as the input.
"""

from __future__ import annotations

import re

from hguard.guards import StructuralWarning, WarningSink

CHAR_PLACEHOLDER = "'.'"
STRING_PLACEHOLDER = '"..."'

_MARKER = re.compile(r"/\*|//|'|\"")


def _line_of(text: str, pos: int) -> int:
    """Return the 1-based line number of offset ``pos``."""
    return text.count("\n", 0, pos) + 1


def _newlines(text: str, start: int, end: int) -> str:
    """Return the newlines found in ``text[start:end]``."""
    return "\n" * text.count("\n", start, end)


def _find_closing_quote(text: str, start: int, quote: str) -> int:
    """Find the quote closing a literal whose body starts at ``start``.

    A backslash escapes the character after it. An unescaped newline ends
    the search. Returns -1 when the literal is unbalanced.
    """
    total = len(text)
    i = start
    while i < total:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i
        if ch == "\n":
            return -1
        i += 1
    return -1


def strip_source(text: str, on_warning: WarningSink | None = None) -> str:
    """Replace comments and literal bodies in ``text`` by placeholders.

    Args:
        text: Raw source text.
        on_warning: Optional callable receiving a StructuralWarning for every
            unbalanced comment or literal. Stripping continues after a warning.

    Returns:
        The clean text, with the same number of newlines as ``text``.
    """

    def warn(pos: int, message: str) -> None:
        if on_warning is not None:
            on_warning(StructuralWarning(line_no=_line_of(text, pos), message=message))

    out: list[str] = []
    total = len(text)
    pos = 0
    while pos < total:
        match = _MARKER.search(text, pos)
        if match is None:
            out.append(text[pos:])
            break
        start = match.start()
        marker = match.group(0)
        out.append(text[pos:start])

        if marker == "/*":
            end = text.find("*/", start + 2)
            if end == -1:
                warn(start, "unbalanced block comment")
                out.append(" ")
                out.append(_newlines(text, start, total))
                break
            out.append(" ")
            out.append(_newlines(text, start, end))
            pos = end + 2
        elif marker == "//":
            end = text.find("\n", start + 2)
            if end == -1:
                warn(start, "unterminated line comment")
                break
            out.append("\n")
            pos = end + 1
        else:
            end = _find_closing_quote(text, start + 1, marker)
            if end == -1:
                kind = "char" if marker == "'" else "double-quote"
                warn(start, f"unbalanced {kind} literal")
                out.append(marker)
                pos = start + 1
                continue
            out.append(CHAR_PLACEHOLDER if marker == "'" else STRING_PLACEHOLDER)
            out.append(_newlines(text, start, end))
            pos = end + 1

    return "".join(out)


__all__ = ["CHAR_PLACEHOLDER", "STRING_PLACEHOLDER", "strip_source"]
