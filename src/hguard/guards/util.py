"""Utility functions for reading header sources."""

from __future__ import annotations

import re
from pathlib import Path

_LINE_END = re.compile(r"\r\n|\r|\n")


class FileOpenError(Exception):
    """A source file could not be opened or read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


def read_lines(path: str | Path) -> list[str]:
    """Read file contents as a list of lines.

    Uses utf-8-sig to handle optional BOM. Bytes that are not UTF-8 are
    kept as surrogate escapes. Only CR, LF and CRLF end a line; form feeds
    and other separators stay inside the line.
    """
    try:
        text = Path(path).read_text(encoding="utf-8-sig", errors="surrogateescape")
    except OSError as exc:
        reason = exc.strerror if exc.strerror else str(exc)
        raise FileOpenError(str(path), reason) from exc
    lines = _LINE_END.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: list[str]) -> str:
    """Rebuild text from lines, every line newline terminated."""
    return "".join(f"{line}\n" for line in lines)


def first_code_line(lines: list[str]) -> int:
    """Return the 1-based index of the first line starting with ``#``.

    Leading whitespace is ignored. Returns ``len(lines) + 1`` when no such
    line exists.
    """
    for idx, line in enumerate(lines):
        if line.lstrip().startswith("#"):
            return idx + 1
    return len(lines) + 1


__all__ = ["FileOpenError", "first_code_line", "join_lines", "read_lines"]
