"""Header line discovery for files with a variable-length preamble.

This module turns a skip mode into a concrete number of leading lines to
discard. Explicit counts pass straight through; marker searches scan the
file with a bound on how many non-matching lines may be examined.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import DEFAULT_ENCODING
from core.errors import HeaderNotFoundError
from core.logging_config import get_logger
from core.types import ExplicitSkip, HeaderFound, HeaderMissing, SearchOutcome, SkipMode
from ingest.line_scanner import LineScanner

_LOGGER = get_logger(__name__)


def locate_header(scanner: LineScanner, marker: str, max_search_lines: int) -> SearchOutcome:
    """Find the first line containing ``marker``, ignoring case.

    The marker is matched as a plain substring. Up to ``max_search_lines``
    lines may fail to match; the line after them is the last one examined.

    Args:
        scanner: Scanner positioned at the start of the source.
        marker: Marker word to look for.
        max_search_lines: Number of non-matching lines allowed.

    Returns:
        ``HeaderFound`` with the zero-based header index, or
        ``HeaderMissing`` with the number of lines examined.
    """
    folded_marker = marker.casefold()
    lines_examined = 0
    while lines_examined <= max_search_lines:
        line = scanner.next_line()
        if line is None:
            return HeaderMissing(lines_examined=lines_examined, search_bound=max_search_lines)
        if folded_marker in line.casefold():
            return HeaderFound(line_index=lines_examined)
        lines_examined += 1
    return HeaderMissing(lines_examined=lines_examined, search_bound=max_search_lines)


def resolve_skip_count(
    source_path: Path | str,
    mode: SkipMode,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """Resolve how many leading lines precede the header.

    Args:
        source_path: Delimited text file.
        mode: Explicit count or marker search.
        encoding: Text encoding of the file.

    Returns:
        Number of lines to discard.

    Raises:
        HeaderNotFoundError: If a marker search fails.
        HeaderSeekIOError: If the file cannot be read.
    """
    if isinstance(mode, ExplicitSkip):
        return mode.count
    _LOGGER.info(
        "header_search_started",
        source_path=str(source_path),
        marker=mode.word,
        max_search_lines=mode.max_search_lines,
    )
    with LineScanner(source_path, encoding) as scanner:
        outcome = locate_header(scanner, mode.word, mode.max_search_lines)
    if isinstance(outcome, HeaderMissing):
        _LOGGER.warning(
            "header_not_found",
            source_path=str(source_path),
            marker=mode.word,
            lines_examined=outcome.lines_examined,
            search_bound=outcome.search_bound,
        )
        raise HeaderNotFoundError(
            source_path=str(source_path),
            marker=mode.word,
            lines_examined=outcome.lines_examined,
            search_bound=outcome.search_bound,
        )
    _LOGGER.info(
        "header_found",
        source_path=str(source_path),
        marker=mode.word,
        header_line=outcome.line_index + 1,
    )
    return outcome.line_index
