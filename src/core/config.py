"""Runtime configuration model for headerseek.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_MAX_SEARCH_LINES,
    DELIMITER_ENV_VAR,
    ENCODING_ENV_VAR,
    MAX_SEARCH_LINES_ENV_VAR,
)
from core.errors import HeaderSeekConfigError


@dataclass(frozen=True)
class HeaderSeekConfig:
    """Validated runtime configuration.

    Attributes:
        encoding: Text encoding used to open source files.
        default_delimiter: Field delimiter used when a call does not pass one.
        default_max_search_lines: Search bound used when a marker search
            does not pass one.
    """

    encoding: str = DEFAULT_ENCODING
    default_delimiter: str = DEFAULT_DELIMITER
    default_max_search_lines: int = DEFAULT_MAX_SEARCH_LINES

    @classmethod
    def from_env(cls) -> "HeaderSeekConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            HeaderSeekConfigError: If environment values are invalid.
        """
        encoding = validate_encoding(os.getenv(ENCODING_ENV_VAR, DEFAULT_ENCODING))
        delimiter = validate_delimiter(
            os.getenv(DELIMITER_ENV_VAR, DEFAULT_DELIMITER), DELIMITER_ENV_VAR
        )
        max_search_lines = _parse_max_search_lines(
            os.getenv(MAX_SEARCH_LINES_ENV_VAR, str(DEFAULT_MAX_SEARCH_LINES))
        )
        return cls(
            encoding=encoding,
            default_delimiter=delimiter,
            default_max_search_lines=max_search_lines,
        )


def validate_delimiter(delimiter: str, context: str = "delimiter") -> str:
    """Check that a delimiter is usable by the CSV parser.

    Args:
        delimiter: Candidate delimiter.
        context: Name shown in the error message.

    Returns:
        The unchanged delimiter.

    Raises:
        HeaderSeekConfigError: If delimiter is not exactly one character.
    """
    if len(delimiter) != 1 or delimiter in ("\r", "\n"):
        raise HeaderSeekConfigError(
            f"Invalid {context} value {delimiter!r}: expected a single non-newline "
            "character. Pass one character such as ',', ';' or a tab."
        )
    return delimiter


def validate_encoding(encoding: str) -> str:
    """Check that an encoding name is known to the codec registry.

    Raises:
        HeaderSeekConfigError: If the codec cannot be found.
    """
    try:
        codecs.lookup(encoding)
    except LookupError as error:
        raise HeaderSeekConfigError(
            f"Invalid encoding '{encoding}': unknown codec. "
            "Use a Python codec name such as 'utf-8-sig' or 'cp1252'."
        ) from error
    return encoding


def _parse_max_search_lines(raw_value: str) -> int:
    """Parse the default search bound environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed non-negative integer.

    Raises:
        HeaderSeekConfigError: If value is not a non-negative integer.
    """
    try:
        value = int(raw_value)
    except ValueError as error:
        raise HeaderSeekConfigError(
            f"Invalid {MAX_SEARCH_LINES_ENV_VAR} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {MAX_SEARCH_LINES_ENV_VAR} to a numeric value."
        ) from error
    if value < 0:
        raise HeaderSeekConfigError(
            f"Invalid {MAX_SEARCH_LINES_ENV_VAR} value: expected >= 0, got {value}."
        )
    return value
