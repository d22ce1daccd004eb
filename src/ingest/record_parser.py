"""Delimited text block parsing.

The first line of the block is the field-name row. Ragged rows and quoting
errors follow ``csv.DictReader`` semantics and are not reinterpreted here.
"""

from __future__ import annotations

import csv
import io

from core.types import RecordSet


def parse_delimited_block(block: str, delimiter: str) -> RecordSet:
    """Parse a header-plus-data text block into records.

    Args:
        block: Text whose first line holds the field names.
        delimiter: Single-character field separator.

    Returns:
        Records in file order, keys in header order.

    Raises:
        csv.Error: If the parser rejects the block.
    """
    _, records = parse_block_with_field_names(block, delimiter)
    return records


def parse_block_with_field_names(block: str, delimiter: str) -> tuple[list[str], RecordSet]:
    """Parse a block and also return its header row.

    The header comes from the same reader pass as the records, so the block
    is only scanned once. An empty block has no field names.

    Raises:
        csv.Error: If the parser rejects the block.
    """
    reader = csv.DictReader(io.StringIO(block, newline=""), delimiter=delimiter)
    records = [dict(row) for row in reader]
    field_names = list(reader.fieldnames or [])
    return field_names, records
