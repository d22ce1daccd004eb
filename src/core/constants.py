"""Core constants used across headerseek modules.

This module centralizes defaults and environment variable names.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_ENCODING = "utf-8-sig"
DEFAULT_DELIMITER = ","
DEFAULT_MAX_SEARCH_LINES = 100
ENCODING_ENV_VAR = "HEADERSEEK_ENCODING"
DELIMITER_ENV_VAR = "HEADERSEEK_DELIMITER"
MAX_SEARCH_LINES_ENV_VAR = "HEADERSEEK_MAX_SEARCH_LINES"
RUN_SPEC_VERSION = 1
RECORD_EXPORT_SUFFIX = ".jsonl"
EXIT_CODE_OK = 0
EXIT_CODE_HEADER_NOT_FOUND = 1
EXIT_CODE_CONFIG_ERROR = 2
EXIT_CODE_IO_ERROR = 3
EXIT_CODE_PARSE_ERROR = 4
