"""Type-safe field parsing helpers for run-spec execution.

This module centralizes primitive parsing so run-spec executors can stay
concise and produce consistent validation errors across CLI and SDK flows.
"""

from __future__ import annotations

from typing import AbstractSet, Mapping

from core.errors import HeaderSeekRunSpecError


def required_string(args: Mapping[str, object], field_name: str) -> str:
    """Read a required string field from a run-spec step."""
    value = optional_string(args, field_name)
    if value is None:
        raise HeaderSeekRunSpecError(f"Run-spec step is missing required field '{field_name}'.")
    return value


def optional_string(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field from a run-spec step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    raise HeaderSeekRunSpecError(f"Run-spec field '{field_name}' must be a string when provided.")


def optional_raw_string(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field without stripping whitespace."""
    value = args.get(field_name)
    if value is None or isinstance(value, str):
        return value
    raise HeaderSeekRunSpecError(f"Run-spec field '{field_name}' must be a string when provided.")


def optional_int(args: Mapping[str, object], field_name: str) -> int | None:
    """Read an optional integer field from a run-spec step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, bool):
        raise HeaderSeekRunSpecError(f"Run-spec field '{field_name}' must be an integer.")
    if isinstance(value, int):
        return value
    raise HeaderSeekRunSpecError(f"Run-spec field '{field_name}' must be an integer.")


def reject_unknown_fields(
    args: Mapping[str, object],
    allowed_fields: AbstractSet[str],
    context: str,
) -> None:
    """Fail when a step carries fields its command does not understand."""
    unknown_fields = sorted(set(args) - allowed_fields)
    if unknown_fields:
        raise HeaderSeekRunSpecError(
            f"Run-spec {context} step contains unknown fields: {', '.join(unknown_fields)}."
        )
