"""Expected guard symbol derivation.

e.g. ``/usr/include/sys/time.h`` -> ``SYS_TIME_H`` with the default style.
"""

from __future__ import annotations

import re
from pathlib import Path

from hguard.config import ConfigurationError, GuardConfig, GuardStyle

INCLUDE_DIR = "include/"

_NON_WORD = re.compile(r"[^A-Za-z0-9_]+")
_REGEX_SYNTAX = re.compile(r"[\\^$*+?{}\[\]|()]")


def normalize_symbol(text: str) -> str:
    """Collapse every run of non-word characters to ``_`` and upper-case."""
    return _NON_WORD.sub("_", text).upper()


def absolute_path(path: str) -> str:
    """Resolve ``path`` against the current directory, dropping leading ``./``."""
    if path.startswith("/"):
        return path
    while path.startswith("./"):
        path = path[2:]
    cwd = Path.cwd().as_posix().rstrip("/")
    return f"{cwd}/{path}"


def _after_include(path: str) -> str | None:
    """Return the part of ``path`` after the last ``include/``, if any."""
    idx = path.rfind(INCLUDE_DIR)
    if idx == -1:
        return None
    return path[idx + len(INCLUDE_DIR) :]


def _basename(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def _path_stem(path: str, base: str | None) -> str:
    full = absolute_path(path)
    if base is not None:
        return full[len(base) :] if full.startswith(base) else full
    tail = _after_include(full)
    return tail if tail is not None else full


def _matches_prefix(symbol: str, prefix: str) -> bool:
    """Check whether ``symbol`` already starts with ``prefix``.

    The prefix is compared literally first. It is only used as an anchored
    regular expression when it contains regex syntax other than ``.``, and
    when it compiles.
    """
    if symbol.startswith(prefix):
        return True
    if _REGEX_SYNTAX.search(prefix) is None:
        return False
    try:
        pattern = re.compile(prefix)
    except re.error:
        return False
    return pattern.match(symbol) is not None


def derive_expected(path: str, config: GuardConfig) -> str:
    """Compute the guard symbol a header at ``path`` is expected to use.

    Args:
        path: Header path as given on the command line.
        config: Run configuration selecting the style, base and prefix.

    Returns:
        The expected guard symbol.

    Raises:
        ConfigurationError: If ``config.style`` is not a known style.
    """
    style = config.style
    if style == GuardStyle.PATH:
        stem = _path_stem(path, config.base)
    elif style == GuardStyle.BASENAME:
        stem = _basename(path)
    elif style == GuardStyle.INCLUDE:
        tail = _after_include(path)
        stem = tail if tail is not None else _basename(path)
    else:
        msg = f"unknown guard style {style!r}"
        raise ConfigurationError(msg)

    symbol = normalize_symbol(stem)
    if config.prefix and not _matches_prefix(symbol, config.prefix):
        symbol = config.prefix + symbol
    return symbol


__all__ = ["absolute_path", "derive_expected", "normalize_symbol"]
