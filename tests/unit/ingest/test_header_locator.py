"""Unit tests for marker-based header discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import HeaderNotFoundError
from core.types import ExplicitSkip, FindMarker, HeaderFound, HeaderMissing
from ingest.header_locator import locate_header, resolve_skip_count
from ingest.line_scanner import LineScanner
from tests.fixture_paths import write_lines


def _file_with_marker_at(tmp_path: Path, marker_line: int) -> Path:
    lines = [f"preamble {index}" for index in range(1, marker_line)]
    lines.extend(["Name,Zip", "Alice,10001"])
    return write_lines(tmp_path / "marker.csv", lines)


def test_locate_header_returns_index_of_matching_line(report_path: Path) -> None:
    """Found index should equal the number of lines before the header."""
    with LineScanner(report_path) as scanner:
        outcome = locate_header(scanner, "Zip", max_search_lines=10)

    assert outcome == HeaderFound(line_index=2)


def test_locate_header_matches_case_insensitively(tmp_path: Path) -> None:
    """Lowercase marker should match an uppercase header."""
    source = write_lines(tmp_path / "a.csv", ["Title", "Customer,ZIP Code", "Acme,10001"])

    with LineScanner(source) as scanner:
        outcome = locate_header(scanner, "zip", max_search_lines=5)

    assert outcome == HeaderFound(line_index=1)


def test_locate_header_treats_pattern_characters_literally(tmp_path: Path) -> None:
    """Regex metacharacters in the marker should not act as patterns."""
    source = write_lines(tmp_path / "a.csv", ["Total (USD)x", "Amount (USD),Qty", "1,2"])

    with LineScanner(source) as scanner:
        outcome = locate_header(scanner, "amount (usd)", max_search_lines=5)

    assert outcome == HeaderFound(line_index=1)


def test_locate_header_matches_first_line(report_path: Path) -> None:
    """A marker on the first line yields a zero skip count."""
    with LineScanner(report_path) as scanner:
        outcome = locate_header(scanner, "report", max_search_lines=0)

    assert outcome == HeaderFound(line_index=0)


def test_locate_header_succeeds_at_bound_plus_one(tmp_path: Path) -> None:
    """Marker at line max_search_lines + 1 should still be found."""
    source = _file_with_marker_at(tmp_path, marker_line=6)

    with LineScanner(source) as scanner:
        outcome = locate_header(scanner, "zip", max_search_lines=5)

    assert outcome == HeaderFound(line_index=5)


def test_locate_header_fails_at_bound_plus_two(tmp_path: Path) -> None:
    """Marker at line max_search_lines + 2 should not be found."""
    source = _file_with_marker_at(tmp_path, marker_line=7)

    with LineScanner(source) as scanner:
        outcome = locate_header(scanner, "zip", max_search_lines=5)

    assert outcome == HeaderMissing(lines_examined=6, search_bound=5)


def test_locate_header_stops_reading_at_bound(tmp_path: Path) -> None:
    """Search should not consume lines beyond max_search_lines + 1."""
    source = _file_with_marker_at(tmp_path, marker_line=20)

    with LineScanner(source) as scanner:
        locate_header(scanner, "zip", max_search_lines=3)
        line_number = scanner.line_number

    assert line_number == 4


def test_locate_header_reports_end_of_source(report_path: Path) -> None:
    """Short files should report the lines actually read."""
    with LineScanner(report_path) as scanner:
        outcome = locate_header(scanner, "Country", max_search_lines=10)

    assert outcome == HeaderMissing(lines_examined=5, search_bound=10)


def test_resolve_skip_count_explicit_mode_skips_file_access(tmp_path: Path) -> None:
    """Explicit counts should resolve without opening the source."""
    missing_path = tmp_path / "never-created.csv"

    skip_count = resolve_skip_count(missing_path, ExplicitSkip(count=3))

    assert skip_count == 3 and missing_path.exists() is False


def test_resolve_skip_count_raises_not_found_with_counts(report_path: Path) -> None:
    """Exhausted searches should raise with lines examined and bound."""
    with pytest.raises(HeaderNotFoundError) as error_info:
        resolve_skip_count(report_path, FindMarker(word="Country", max_search_lines=3))

    error = error_info.value
    assert (error.lines_examined, error.search_bound, error.marker) == (4, 3, "Country")


def test_resolve_skip_count_for_marker(report_path: Path) -> None:
    """Marker mode should resolve to the header index."""
    skip_count = resolve_skip_count(report_path, FindMarker(word="zip", max_search_lines=10))

    assert skip_count == 2
