"""Skip-mode selection from optional caller inputs.

CLI flags, run-spec fields, and SDK keyword arguments all arrive as a pair
of optional values. This module turns that pair into exactly one mode.
"""

from __future__ import annotations

from core.constants import DEFAULT_MAX_SEARCH_LINES
from core.errors import HeaderSeekConfigError
from core.types import ExplicitSkip, FindMarker, SkipMode


def build_skip_mode(
    skip_lines: int | None,
    search_word: str | None,
    max_search_lines: int | None = None,
    default_max_search_lines: int = DEFAULT_MAX_SEARCH_LINES,
) -> SkipMode:
    """Build a skip mode from mutually exclusive inputs.

    Args:
        skip_lines: Explicit number of lines to discard, if given.
        search_word: Marker word to search for, if given.
        max_search_lines: Optional search bound for marker mode.
        default_max_search_lines: Bound used when marker mode has none.

    Returns:
        ``ExplicitSkip`` or ``FindMarker``.

    Raises:
        HeaderSeekConfigError: If both or neither input is supplied, or if a
            search bound is passed together with an explicit count.
    """
    if skip_lines is not None and search_word is not None:
        raise HeaderSeekConfigError(
            "Both a skip count and a search word were supplied. "
            "Pass exactly one of them."
        )
    if skip_lines is None and search_word is None:
        raise HeaderSeekConfigError(
            "Neither a skip count nor a search word was supplied. "
            "Pass exactly one of them."
        )
    if skip_lines is not None:
        if max_search_lines is not None:
            raise HeaderSeekConfigError(
                "max_search_lines only applies to marker searches. "
                "Drop it or search for a marker word instead."
            )
        return ExplicitSkip(count=skip_lines)
    bound = default_max_search_lines if max_search_lines is None else max_search_lines
    return FindMarker(word=str(search_word), max_search_lines=bound)


def describe_skip_mode(mode: SkipMode) -> str:
    """Render a skip mode for log events and CLI output."""
    if isinstance(mode, ExplicitSkip):
        return f"skip={mode.count}"
    return f"find={mode.word!r} max_search_lines={mode.max_search_lines}"
