"""Shared run-spec execution engine for CLI and SDK workflows.

This module maps validated run-spec steps to loader operations so different
entry points can execute one declarative batch without drift. Relative
``source`` and ``output`` paths resolve against the spec file's directory.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Protocol

from core.config import HeaderSeekConfig, validate_encoding
from core.errors import HeaderSeekRunSpecError
from core.logging_config import get_logger
from core.run_spec import RunSpec, RunSpecStep, load_run_spec
from core.run_spec_fields import (
    optional_int,
    optional_raw_string,
    optional_string,
    reject_unknown_fields,
    required_string,
)
from core.skip_mode import build_skip_mode
from core.types import RecordSet, SkipMode
from store.record_export import write_records_jsonl

_LOGGER = get_logger(__name__)
_LOCATE_FIELDS = frozenset({"source", "skip", "find", "max_search_lines"})
_LOAD_FIELDS = _LOCATE_FIELDS | {"delimiter", "output"}


class RunSpecLoader(Protocol):
    """Loader API contract required by run-spec execution."""

    def locate(self, source_path: Path | str, mode: SkipMode) -> int: ...

    def load(
        self,
        source_path: Path | str,
        mode: SkipMode,
        delimiter: str | None = None,
    ) -> RecordSet: ...


class RunSpecLoaderFactory(Protocol):
    def __call__(self, config: HeaderSeekConfig) -> RunSpecLoader: ...


@dataclass(frozen=True)
class RunSpecExecutionContext:
    """In-memory context used to execute run-spec steps."""

    loader: RunSpecLoader
    base_dir: Path
    default_delimiter: str | None
    default_max_search_lines: int


def execute_run_spec_file(
    loader_factory: RunSpecLoaderFactory,
    config: HeaderSeekConfig,
    spec_file: str,
) -> tuple[str, ...]:
    """Load and execute a run-spec file, returning printable output lines."""
    spec = load_run_spec(spec_file)
    base_dir = Path(spec_file).expanduser().resolve().parent
    return execute_run_spec(loader_factory, config, spec, base_dir)


def execute_run_spec(
    loader_factory: RunSpecLoaderFactory,
    config: HeaderSeekConfig,
    spec: RunSpec,
    base_dir: Path,
) -> tuple[str, ...]:
    """Execute a parsed run-spec object and return output lines."""
    execution_config = _apply_defaults(config, spec)
    context = RunSpecExecutionContext(
        loader=loader_factory(execution_config),
        base_dir=base_dir,
        default_delimiter=spec.defaults.delimiter,
        default_max_search_lines=(
            spec.defaults.max_search_lines
            if spec.defaults.max_search_lines is not None
            else execution_config.default_max_search_lines
        ),
    )
    output_lines: list[str] = []
    for index, step in enumerate(spec.steps):
        output_lines.extend(_execute_step(context, step))
        _LOGGER.info("run_spec_step_completed", step=index + 1, command=step.command)
    return tuple(output_lines)


def _apply_defaults(config: HeaderSeekConfig, spec: RunSpec) -> HeaderSeekConfig:
    if spec.defaults.encoding is None:
        return config
    return replace(config, encoding=validate_encoding(spec.defaults.encoding))


def _execute_step(context: RunSpecExecutionContext, step: RunSpecStep) -> tuple[str, ...]:
    if step.command == "locate":
        return _execute_locate_step(context, step)
    if step.command == "load":
        return _execute_load_step(context, step)
    raise HeaderSeekRunSpecError(f"Unsupported run-spec command '{step.command}'.")


def _execute_locate_step(
    context: RunSpecExecutionContext,
    step: RunSpecStep,
) -> tuple[str, ...]:
    reject_unknown_fields(step.args, _LOCATE_FIELDS, "locate")
    skip_count = context.loader.locate(
        _resolve_path(context, required_string(step.args, "source")),
        _build_step_mode(context, step),
    )
    return (f"skip_count={skip_count}",)


def _execute_load_step(context: RunSpecExecutionContext, step: RunSpecStep) -> tuple[str, ...]:
    reject_unknown_fields(step.args, _LOAD_FIELDS, "load")
    delimiter = optional_raw_string(step.args, "delimiter")
    if delimiter is None:
        delimiter = context.default_delimiter
    records = context.loader.load(
        _resolve_path(context, required_string(step.args, "source")),
        _build_step_mode(context, step),
        delimiter,
    )
    output_lines = [f"records={len(records)}"]
    output_value = optional_string(step.args, "output")
    if output_value is not None:
        output_path = write_records_jsonl(records, _resolve_path(context, output_value))
        output_lines.append(f"output_path={output_path}")
    return tuple(output_lines)


def _build_step_mode(context: RunSpecExecutionContext, step: RunSpecStep) -> SkipMode:
    return build_skip_mode(
        skip_lines=optional_int(step.args, "skip"),
        search_word=optional_string(step.args, "find"),
        max_search_lines=optional_int(step.args, "max_search_lines"),
        default_max_search_lines=context.default_max_search_lines,
    )


def _resolve_path(context: RunSpecExecutionContext, raw_path: str) -> Path:
    path = Path(raw_path).expanduser()
    return path if path.is_absolute() else context.base_dir / path
