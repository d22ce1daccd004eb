"""Headerseek exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure kind raises a specific error type so callers can tell a
missing header apart from an unreadable file.
"""

from __future__ import annotations


class HeaderSeekError(Exception):
    """Base exception for all headerseek failures."""


class HeaderSeekConfigError(HeaderSeekError):
    """Raised for invalid skip modes, delimiters, or runtime configuration."""


class HeaderSeekIOError(HeaderSeekError):
    """Raised when a source cannot be opened, read, or written."""

    def __init__(self, message: str, source_path: str) -> None:
        super().__init__(message)
        self.source_path = source_path


class HeaderNotFoundError(HeaderSeekError):
    """Raised when a marker search ends without finding the header line.

    Attributes:
        source_path: File that was searched.
        marker: Marker word used for the search.
        lines_examined: Number of lines read before the search gave up.
        search_bound: Configured maximum of non-matching lines.
    """

    def __init__(
        self,
        source_path: str,
        marker: str,
        lines_examined: int,
        search_bound: int,
    ) -> None:
        super().__init__(
            f"Header marker '{marker}' not found in {source_path}: "
            f"examined {lines_examined} line(s) with search bound {search_bound}. "
            "Check the marker word or raise max_search_lines and retry."
        )
        self.source_path = source_path
        self.marker = marker
        self.lines_examined = lines_examined
        self.search_bound = search_bound


class HeaderSeekRunSpecError(HeaderSeekError):
    """Raised for invalid or unsupported run-spec configuration."""
