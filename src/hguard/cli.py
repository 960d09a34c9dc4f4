"""Command-line driver: check include guards of the given header files.

Usage: hguard [--style=N] [--base=PATH] [--prefix=PREFIX] [--debug] file...

Each file is read, stripped of comments and literals, and checked for a
leading ``#ifndef SYMBOL`` and a trailing ``#endif``, where ``SYMBOL`` is
derived from the file path. Findings are printed to stderr as
``file:line: message``. Exit status is 0 when every file passes and 1
otherwise, including usage errors.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from hguard import __version__
from hguard._console import log_debug, log_error, log_finding, log_summary, log_warning
from hguard.config import GuardConfig, ParsedArgs, UsageError, build_config
from hguard.guards import OPEN_ERROR, Finding, StructuralWarning
from hguard.guards.check import check_guard
from hguard.guards.derive import derive_expected
from hguard.guards.strip import strip_source
from hguard.guards.util import FileOpenError, first_code_line, join_lines, read_lines


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser raising UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = _ArgumentParser(
        prog="hguard",
        description="Check that C/C++ headers carry an include guard named after their path",
    )
    parser.add_argument(
        "-s",
        "--style",
        type=int,
        default=0,
        help="Guard naming style: 0 path, 1 basename, 2 path after include/ (default: 0)",
    )
    parser.add_argument(
        "--base",
        type=str,
        default=None,
        help="Path prefix stripped from absolute paths in style 0",
    )
    parser.add_argument(
        "--prefix",
        type=str,
        default=None,
        help="Prefix required on every guard symbol (regex or literal)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Trace derived symbols to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("files", nargs="+", metavar="file", help="Header files to check")
    return parser


def _extract_args(args: argparse.Namespace) -> ParsedArgs:
    """Extract and validate arguments from Namespace.

    Raises:
        TypeError: If argument types are incorrect.
    """
    files = args.files
    if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
        msg = f"Expected list of str for files, got {type(files).__name__}"
        raise TypeError(msg)

    style = args.style
    if not isinstance(style, int):
        msg = f"Expected int for style, got {type(style).__name__}"
        raise TypeError(msg)

    base = args.base
    if base is not None and not isinstance(base, str):
        msg = f"Expected str or None for base, got {type(base).__name__}"
        raise TypeError(msg)

    prefix = args.prefix
    if prefix is not None and not isinstance(prefix, str):
        msg = f"Expected str or None for prefix, got {type(prefix).__name__}"
        raise TypeError(msg)

    debug = args.debug
    if not isinstance(debug, bool):
        msg = f"Expected bool for debug, got {type(debug).__name__}"
        raise TypeError(msg)

    return {
        "files": files,
        "style": style,
        "base": base,
        "prefix": prefix,
        "debug": debug,
    }


def check_file(path: str, config: GuardConfig) -> list[Finding]:
    """Run every check on one header and return its findings.

    A file that cannot be read yields a single open-error finding.
    """
    try:
        lines = read_lines(path)
    except FileOpenError as exc:
        return [Finding(kind=OPEN_ERROR, line_no=0, detail=exc.reason)]

    def on_warning(warning: StructuralWarning) -> None:
        log_warning(path, warning)

    first_line = first_code_line(lines)
    clean = strip_source(join_lines(lines), on_warning)
    expected = derive_expected(path, config)
    if config.debug:
        log_debug(f"{path}: expected {expected}, first code line {first_line}, {len(lines)} lines")

    return check_guard(clean, expected, first_line, len(lines))


def run(paths: list[str], config: GuardConfig) -> int:
    """Check every path in order and return the exit code."""
    failed = 0
    for path in paths:
        findings = check_file(path, config)
        for finding in findings:
            log_finding(path, finding)
        if findings:
            failed += 1

    if config.debug:
        log_summary(len(paths), failed)
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the hguard command."""
    parser = build_parser()
    try:
        args = _extract_args(parser.parse_args(argv))
        config = build_config(args)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        log_error(str(exc))
        return 1

    return run(args["files"], config)


if __name__ == "__main__":
    raise SystemExit(main())
