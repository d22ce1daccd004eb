"""Forward-only line reader over a delimited text file.

This module wraps one open file handle with a 1-based line counter.
Callers either inspect lines one at a time, discard a number of them,
or take everything that is left as a single text block.
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import Callable, TextIO

from core.constants import DEFAULT_ENCODING
from core.errors import HeaderSeekIOError


class LineScanner:
    """Sequential reader that cannot rewind.

    The file is opened without newline translation so the remainder block
    keeps its original line endings for the CSV parser.
    """

    def __init__(self, source_path: Path | str, encoding: str = DEFAULT_ENCODING) -> None:
        self._source_path = Path(source_path)
        self._handle = _open_source(self._source_path, encoding)
        self._line_number = 0

    @property
    def line_number(self) -> int:
        """One-based number of the last line returned, zero before any read."""
        return self._line_number

    @property
    def source_path(self) -> Path:
        return self._source_path

    def next_line(self) -> str | None:
        """Read the next line without its line break.

        Returns:
            Line text, or ``None`` at end of source.

        Raises:
            HeaderSeekIOError: If the read fails.
        """
        raw_line = self._read(lambda handle: handle.readline())
        if raw_line == "":
            return None
        self._line_number += 1
        return raw_line.rstrip("\r\n")

    def skip_lines(self, count: int) -> int:
        """Discard up to ``count`` lines.

        Returns:
            Number of lines actually discarded, lower than ``count`` when
            the source ends first.
        """
        skipped = 0
        while skipped < count:
            if self.next_line() is None:
                break
            skipped += 1
        return skipped

    def read_remainder(self) -> str:
        """Consume and return everything left in the source."""
        return self._read(lambda handle: handle.read())

    def close(self) -> None:
        """Release the file handle. Safe to call more than once."""
        if not self._handle.closed:
            self._handle.close()

    def __enter__(self) -> "LineScanner":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _read(self, reader: Callable[[TextIO], str]) -> str:
        try:
            return reader(self._handle)
        except (OSError, UnicodeDecodeError) as error:
            raise HeaderSeekIOError(
                f"Failed to read {self._source_path} after line {self._line_number}: "
                f"{error}. Check the file encoding and permissions and retry.",
                source_path=str(self._source_path),
            ) from error


def _open_source(source_path: Path, encoding: str) -> TextIO:
    """Open a source file for text reading.

    Raises:
        HeaderSeekIOError: If the file is missing or unreadable.
    """
    if source_path.is_dir():
        raise HeaderSeekIOError(
            f"Failed to open {source_path}: path is a directory. Provide a file path.",
            source_path=str(source_path),
        )
    try:
        return source_path.open("r", encoding=encoding, newline="")
    except OSError as error:
        raise HeaderSeekIOError(
            f"Failed to open {source_path}: {error.strerror or error}. "
            "Provide an existing, readable file.",
            source_path=str(source_path),
        ) from error
