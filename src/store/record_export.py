"""JSONL export for loaded record sets."""

from __future__ import annotations

import json
from pathlib import Path

from core.errors import HeaderSeekIOError
from core.types import Record, RecordSet


def write_records_jsonl(records: RecordSet, output_path: Path | str) -> Path:
    """Write records to a JSONL file, one object per line.

    Args:
        records: Records to write.
        output_path: Destination file path.

    Returns:
        Resolved path of the written file.

    Raises:
        HeaderSeekIOError: If the file cannot be written.
    """
    target_path = Path(output_path).expanduser().resolve()
    body = "".join(serialize_record(record) + "\n" for record in records)
    try:
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_text(body, encoding="utf-8")
    except OSError as error:
        raise HeaderSeekIOError(
            f"Failed to write records to {target_path}: {error}. "
            "Check the output directory permissions and retry.",
            source_path=str(target_path),
        ) from error
    return target_path


def serialize_record(record: Record) -> str:
    """Serialize one record, keeping header field order."""
    return json.dumps(record, ensure_ascii=False)
