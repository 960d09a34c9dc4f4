"""Pytest fixtures for hguard tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_header(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing header files under tmp_path."""

    def _write(relpath: str, text: str) -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def include_dir(tmp_path: Path) -> Path:
    """Create an include directory below tmp_path."""
    inc = tmp_path / "usr" / "include"
    inc.mkdir(parents=True)
    return inc
