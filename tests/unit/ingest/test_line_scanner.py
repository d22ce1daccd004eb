"""Unit tests for the forward-only line scanner."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import HeaderSeekIOError
from ingest.line_scanner import LineScanner
from tests.fixture_paths import write_lines


def test_next_line_strips_line_breaks_and_counts_lines(tmp_path: Path) -> None:
    """Scanner should return bare line text and track a 1-based counter."""
    source = write_lines(tmp_path / "a.csv", ["first", "second"], line_break="\r\n")

    with LineScanner(source) as scanner:
        lines = [scanner.next_line(), scanner.next_line(), scanner.next_line()]
        line_number = scanner.line_number

    assert lines == ["first", "second", None] and line_number == 2


def test_read_remainder_keeps_original_line_endings(tmp_path: Path) -> None:
    """Remainder should be returned untouched after the consumed lines."""
    source = write_lines(tmp_path / "a.csv", ["skip", "h1,h2", "1,2"], line_break="\r\n")

    with LineScanner(source) as scanner:
        scanner.next_line()
        remainder = scanner.read_remainder()

    assert remainder == "h1,h2\r\n1,2\r\n"


def test_skip_lines_reports_lines_actually_discarded(tmp_path: Path) -> None:
    """Skipping past the end should stop at end of source."""
    source = write_lines(tmp_path / "a.csv", ["one", "two"])

    with LineScanner(source) as scanner:
        skipped = scanner.skip_lines(5)
        remainder = scanner.read_remainder()

    assert skipped == 2 and remainder == ""


def test_skip_lines_zero_leaves_cursor_at_start(tmp_path: Path) -> None:
    """Skipping zero lines should not consume anything."""
    source = write_lines(tmp_path / "a.csv", ["h", "v"])

    with LineScanner(source) as scanner:
        skipped = scanner.skip_lines(0)
        remainder = scanner.read_remainder()

    assert skipped == 0 and remainder == "h\nv\n"


def test_scanner_drops_utf8_bom(tmp_path: Path) -> None:
    """Default encoding should hide a leading byte order mark."""
    source = tmp_path / "bom.csv"
    source.write_bytes("\ufeffName,Zip\n".encode("utf-8"))

    with LineScanner(source) as scanner:
        first_line = scanner.next_line()

    assert first_line == "Name,Zip"


def test_scanner_raises_io_error_for_missing_file(tmp_path: Path) -> None:
    """Opening a missing file should raise the I/O error kind."""
    missing_path = tmp_path / "missing.csv"

    with pytest.raises(HeaderSeekIOError) as error_info:
        LineScanner(missing_path)

    assert error_info.value.source_path == str(missing_path)


def test_scanner_raises_io_error_for_directory(tmp_path: Path) -> None:
    """A directory is not a readable source."""
    with pytest.raises(HeaderSeekIOError):
        LineScanner(tmp_path)

    assert tmp_path.is_dir()


def test_scanner_raises_io_error_for_undecodable_bytes(tmp_path: Path) -> None:
    """Decode failures mid-read should surface as I/O errors."""
    source = tmp_path / "latin.csv"
    source.write_bytes(b"Title\nCaf\xe9,1\n")

    with LineScanner(source, encoding="utf-8") as scanner:
        with pytest.raises(HeaderSeekIOError):
            scanner.read_remainder()

    assert source.exists()


def test_close_is_idempotent(tmp_path: Path) -> None:
    """Closing twice should not fail."""
    source = write_lines(tmp_path / "a.csv", ["x"])
    scanner = LineScanner(source)

    scanner.close()
    scanner.close()

    assert scanner.source_path == source
