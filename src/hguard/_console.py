"""Rich console wrapper for diagnostic output.

This module provides typed console functions for checker output.
All print statements in the codebase should use these functions instead.
Everything is written to stderr; stdout stays empty.
"""

from __future__ import annotations

from typing import Protocol

from hguard.guards import Finding, StructuralWarning


class _RichConsole(Protocol):
    """Protocol for rich.console.Console interface."""

    def print(
        self,
        *objects: str,
        style: str | None = None,
        highlight: bool | None = None,
    ) -> None:
        """Print styled output to console."""
        ...


def _get_console() -> _RichConsole:
    """Get rich stderr Console instance with strict typing."""
    rich_console_mod = __import__("rich.console", fromlist=["Console"])
    console_cls = rich_console_mod.Console
    console: _RichConsole = console_cls(
        stderr=True,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
    )
    return console


# Module-level console instance
_console: _RichConsole = _get_console()


# =============================================================================
# Style Constants
# =============================================================================

STYLE_FINDING = "bold red"
STYLE_WARNING = "yellow"
STYLE_ERROR = "bold red"
STYLE_DEBUG = "dim white"
STYLE_SUCCESS = "bold green"


# =============================================================================
# Output Functions
# =============================================================================


def log_finding(path: str, finding: Finding) -> None:
    """Print a guard finding as ``file:line: message``."""
    _console.print(f"{path}:{finding.line_no}: {finding.message}", style=STYLE_FINDING)


def log_warning(path: str, warning: StructuralWarning) -> None:
    """Print a structural warning raised while stripping a file."""
    _console.print(f"{path}:{warning.line_no}: warning: {warning.message}", style=STYLE_WARNING)


def log_error(text: str) -> None:
    """Print a fatal error message."""
    _console.print(f"error: {text}", style=STYLE_ERROR)


def log_debug(text: str) -> None:
    """Print a debug trace line."""
    _console.print(f"debug: {text}", style=STYLE_DEBUG)


def log_summary(checked: int, failed: int) -> None:
    """Print the number of files checked and failed."""
    style = STYLE_ERROR if failed else STYLE_SUCCESS
    _console.print(f"debug: {checked} file(s) checked, {failed} failed", style=style)


__all__ = [
    "log_debug",
    "log_error",
    "log_finding",
    "log_summary",
    "log_warning",
]
