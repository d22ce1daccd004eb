"""Public SDK surface for headerseek.

This module provides a stable import path for library users.
It re-exports the loader, the typed skip modes, and the error types.
"""

from __future__ import annotations

from core.config import HeaderSeekConfig
from core.errors import (
    HeaderNotFoundError,
    HeaderSeekConfigError,
    HeaderSeekError,
    HeaderSeekIOError,
    HeaderSeekRunSpecError,
)
from core.skip_mode import build_skip_mode
from core.types import (
    ExplicitSkip,
    FindMarker,
    HeaderFound,
    HeaderMissing,
    Record,
    RecordSet,
    SearchOutcome,
    SkipMode,
)
from ingest.header_locator import locate_header, resolve_skip_count
from ingest.line_scanner import LineScanner
from ingest.tabular_loader import TabularLoader, load_records

__all__ = [
    "ExplicitSkip",
    "FindMarker",
    "HeaderFound",
    "HeaderMissing",
    "HeaderNotFoundError",
    "HeaderSeekConfig",
    "HeaderSeekConfigError",
    "HeaderSeekError",
    "HeaderSeekIOError",
    "HeaderSeekRunSpecError",
    "LineScanner",
    "Record",
    "RecordSet",
    "SearchOutcome",
    "SkipMode",
    "TabularLoader",
    "build_skip_mode",
    "load_records",
    "locate_header",
    "resolve_skip_count",
]
