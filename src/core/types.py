"""Shared typed models.

This module defines the immutable skip modes, search outcomes, and record
aliases used by the scanner, locator, loader, and CLI layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from core.constants import DEFAULT_MAX_SEARCH_LINES
from core.errors import HeaderSeekConfigError

Record = dict[str, str]
RecordSet = list[Record]


@dataclass(frozen=True)
class ExplicitSkip:
    """Discard a fixed number of leading lines before the header.

    Attributes:
        count: Number of lines to discard. Must be at least one.
    """

    count: int

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise HeaderSeekConfigError(
                f"Invalid skip count {self.count!r}: expected an integer greater than zero."
            )
        if self.count <= 0:
            raise HeaderSeekConfigError(
                f"Invalid skip count {self.count}: at least one line must be skipped. "
                "Use a marker search or a count greater than zero."
            )


@dataclass(frozen=True)
class FindMarker:
    """Search for the first line containing a marker word.

    Attributes:
        word: Case-insensitive substring identifying the header line.
        max_search_lines: Number of non-matching lines allowed before
            the search fails.
    """

    word: str
    max_search_lines: int = DEFAULT_MAX_SEARCH_LINES

    def __post_init__(self) -> None:
        if not isinstance(self.word, str) or not self.word:
            raise HeaderSeekConfigError(
                "Invalid marker word: expected a non-empty string. "
                "Pass a word that appears in the header line."
            )
        if isinstance(self.max_search_lines, bool) or not isinstance(self.max_search_lines, int):
            raise HeaderSeekConfigError(
                f"Invalid max_search_lines {self.max_search_lines!r}: expected an integer."
            )
        if self.max_search_lines < 0:
            raise HeaderSeekConfigError(
                f"Invalid max_search_lines {self.max_search_lines}: expected >= 0."
            )


SkipMode = Union[ExplicitSkip, FindMarker]


@dataclass(frozen=True)
class HeaderFound:
    """Successful marker search.

    Attributes:
        line_index: Zero-based index of the header line, which equals the
            number of lines to skip.
    """

    line_index: int


@dataclass(frozen=True)
class HeaderMissing:
    """Marker search that ended without a match."""

    lines_examined: int
    search_bound: int


SearchOutcome = Union[HeaderFound, HeaderMissing]
