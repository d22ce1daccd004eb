"""Structured logging configuration.

This module initializes structlog with a stable structured format.
Events go to stderr so command output on stdout stays machine-readable.
"""

from __future__ import annotations

import sys
from typing import Any

import structlog


class _StderrProxy:
    """File-like object that writes to the current ``sys.stderr``.

    Cached loggers keep this proxy, so swapping ``sys.stderr`` later (test
    capture, CLI redirection) still reaches the new stream.
    """

    def write(self, text: str) -> int:
        return sys.stderr.write(text)

    def flush(self) -> None:
        sys.stderr.flush()


def configure_logging() -> None:
    """Configure structlog once per process.

    Leaves an existing configuration untouched, so applications embedding
    headerseek keep their own processors.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(file=_StderrProxy()),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with JSON output.
    """
    configure_logging()
    return structlog.get_logger(name)
