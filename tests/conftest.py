"""Pytest configuration and shared fixtures for repository test runs."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixture_paths import REPORT_LINES, write_lines


@pytest.fixture
def report_path(tmp_path: Path) -> Path:
    """Small export with a two-line preamble before the ``Name,Zip`` header."""
    return write_lines(tmp_path / "report.csv", REPORT_LINES)
