"""Two-pass loading of delimited files with a preamble.

The first pass (marker searches only) resolves how many lines precede the
header. The second pass opens the file again, discards those lines, and
hands the rest to the CSV parser as one block.
"""

from __future__ import annotations

from pathlib import Path

from core.config import HeaderSeekConfig, validate_delimiter
from core.logging_config import get_logger
from core.skip_mode import describe_skip_mode
from core.types import RecordSet, SkipMode
from ingest.header_locator import resolve_skip_count
from ingest.line_scanner import LineScanner
from ingest.record_parser import parse_block_with_field_names

_LOGGER = get_logger(__name__)


class TabularLoader:
    """Loader for delimited files whose header is not on the first line.

    Each call opens and closes its own file handles, so one instance can
    serve any number of sequential loads.
    """

    def __init__(self, config: HeaderSeekConfig | None = None) -> None:
        self._config = config or HeaderSeekConfig()

    @property
    def config(self) -> HeaderSeekConfig:
        return self._config

    def locate(self, source_path: Path | str, mode: SkipMode) -> int:
        """Return the number of lines before the header without parsing.

        Raises:
            HeaderNotFoundError: If a marker search fails.
            HeaderSeekIOError: If the file cannot be read.
        """
        return resolve_skip_count(source_path, mode, self._config.encoding)

    def load(
        self,
        source_path: Path | str,
        mode: SkipMode,
        delimiter: str | None = None,
    ) -> RecordSet:
        """Parse a delimited file starting at its header line.

        Args:
            source_path: Delimited text file.
            mode: Explicit skip count or marker search.
            delimiter: Field separator; config default when omitted.

        Returns:
            Parsed records.

        Raises:
            HeaderSeekConfigError: If the delimiter is invalid.
            HeaderNotFoundError: If a marker search fails.
            HeaderSeekIOError: If either pass cannot read the file.
        """
        active_delimiter = validate_delimiter(
            self._config.default_delimiter if delimiter is None else delimiter
        )
        skip_count = self.locate(source_path, mode)
        block = self._read_after_skip(source_path, skip_count)
        field_names, records = parse_block_with_field_names(block, active_delimiter)
        _LOGGER.info(
            "records_loaded",
            source_path=str(source_path),
            mode=describe_skip_mode(mode),
            skip_count=skip_count,
            field_count=len(field_names),
            record_count=len(records),
        )
        return records

    def _read_after_skip(self, source_path: Path | str, skip_count: int) -> str:
        with LineScanner(source_path, self._config.encoding) as scanner:
            skipped = scanner.skip_lines(skip_count)
            block = scanner.read_remainder()
        if skipped < skip_count:
            _LOGGER.warning(
                "skip_exceeds_source",
                source_path=str(source_path),
                skip_count=skip_count,
                lines_available=skipped,
            )
        else:
            _LOGGER.debug("lines_skipped", source_path=str(source_path), skip_count=skip_count)
        return block


def load_records(
    source_path: Path | str,
    mode: SkipMode,
    delimiter: str | None = None,
    config: HeaderSeekConfig | None = None,
) -> RecordSet:
    """Load records with a one-off loader.

    Args:
        source_path: Delimited text file.
        mode: Explicit skip count or marker search.
        delimiter: Field separator; the config default (",") when omitted.
        config: Optional runtime config; defaults apply when omitted.

    Returns:
        Parsed records.
    """
    return TabularLoader(config).load(source_path, mode, delimiter)
