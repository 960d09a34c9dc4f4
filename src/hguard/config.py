"""Run configuration built once from the command line."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, TypedDict


class UsageError(Exception):
    """Invalid command-line usage; aborts the whole run."""


class ConfigurationError(UsageError):
    """A configuration value the checker cannot work with."""


class GuardStyle(IntEnum):
    """Convention used to derive a guard symbol from a header path."""

    PATH = 0
    BASENAME = 1
    INCLUDE = 2


class GuardConfig(NamedTuple):
    """Immutable settings shared by every file check."""

    style: GuardStyle = GuardStyle.PATH
    base: str | None = None
    prefix: str | None = None
    debug: bool = False


class ParsedArgs(TypedDict):
    """Parsed command-line options."""

    files: list[str]
    style: int
    base: str | None
    prefix: str | None
    debug: bool


def parse_style(value: int) -> GuardStyle:
    """Convert an integer option value to a GuardStyle.

    Raises:
        ConfigurationError: If ``value`` names no known style.
    """
    try:
        return GuardStyle(value)
    except ValueError as exc:
        choices = ", ".join(str(int(s)) for s in GuardStyle)
        msg = f"unknown guard style {value} (choose from {choices})"
        raise ConfigurationError(msg) from exc


def normalize_base(base: str) -> str:
    """Return ``base`` with a trailing path separator."""
    return base if base.endswith("/") else f"{base}/"


def build_config(args: ParsedArgs) -> GuardConfig:
    """Build the run configuration from parsed arguments."""
    base = args["base"]
    prefix = args["prefix"]
    return GuardConfig(
        style=parse_style(args["style"]),
        base=normalize_base(base) if base else None,
        prefix=prefix if prefix else None,
        debug=args["debug"],
    )


__all__ = [
    "ConfigurationError",
    "GuardConfig",
    "GuardStyle",
    "ParsedArgs",
    "UsageError",
    "build_config",
    "normalize_base",
    "parse_style",
]
