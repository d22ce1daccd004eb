"""Headerseek CLI entry points.
This module exposes commands for locating header rows and loading records.
It maps argparse commands onto loader calls and errors onto exit codes.
"""

from __future__ import annotations

import argparse
import csv
from dataclasses import replace
import sys
from typing import Any, Sequence

from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from core.config import HeaderSeekConfig, validate_encoding
from core.constants import (
    EXIT_CODE_CONFIG_ERROR,
    EXIT_CODE_HEADER_NOT_FOUND,
    EXIT_CODE_IO_ERROR,
    EXIT_CODE_OK,
    EXIT_CODE_PARSE_ERROR,
)
from core.errors import (
    HeaderNotFoundError,
    HeaderSeekConfigError,
    HeaderSeekIOError,
    HeaderSeekRunSpecError,
)
from core.skip_mode import build_skip_mode
from core.types import SkipMode
from ingest.tabular_loader import TabularLoader
from store.record_export import serialize_record, write_records_jsonl


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="headerseek",
        description="Load delimited files that start with a report preamble",
    )
    parser.add_argument("--encoding", help="Override HEADERSEEK_ENCODING for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_load_command(subparsers)
    _add_locate_command(subparsers)
    add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the headerseek CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return _dispatch(parser, args)
    except HeaderNotFoundError as error:
        print(f"header_not_found={error}", file=sys.stderr)
        return EXIT_CODE_HEADER_NOT_FOUND
    except (HeaderSeekConfigError, HeaderSeekRunSpecError) as error:
        print(f"config_error={error}", file=sys.stderr)
        return EXIT_CODE_CONFIG_ERROR
    except HeaderSeekIOError as error:
        print(f"io_error={error}", file=sys.stderr)
        return EXIT_CODE_IO_ERROR
    except csv.Error as error:
        print(f"parse_error={error}", file=sys.stderr)
        return EXIT_CODE_PARSE_ERROR


def _dispatch(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    config = _build_config(args.encoding)
    if args.command == "load":
        return _run_load_command(TabularLoader(config), args)
    if args.command == "locate":
        return _run_locate_command(TabularLoader(config), args)
    if args.command == "run-spec":
        return run_run_spec_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return EXIT_CODE_CONFIG_ERROR


def _build_config(encoding: str | None) -> HeaderSeekConfig:
    """Build runtime config with optional encoding override.

    Args:
        encoding: Optional override codec name.

    Returns:
        Validated config.
    """
    config = HeaderSeekConfig.from_env()
    if encoding:
        config = replace(config, encoding=validate_encoding(encoding))
    return config


def _run_load_command(loader: TabularLoader, args: argparse.Namespace) -> int:
    """Handle load command.

    Args:
        loader: Configured loader.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    records = loader.load(args.source, _build_mode(loader, args), args.delimiter)
    if args.output:
        print(f"output_path={write_records_jsonl(records, args.output)}")
        return EXIT_CODE_OK
    for record in records:
        print(serialize_record(record))
    return EXIT_CODE_OK


def _run_locate_command(loader: TabularLoader, args: argparse.Namespace) -> int:
    """Handle locate command.

    Args:
        loader: Configured loader.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    skip_count = loader.locate(args.source, _build_mode(loader, args))
    print(f"skip_count={skip_count}")
    return EXIT_CODE_OK


def _build_mode(loader: TabularLoader, args: argparse.Namespace) -> SkipMode:
    return build_skip_mode(
        skip_lines=args.skip,
        search_word=args.find,
        max_search_lines=args.max_search_lines,
        default_max_search_lines=loader.config.default_max_search_lines,
    )


def _add_skip_mode_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the mutually exclusive header location flags."""
    mode_group = parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument("--skip", type=int, help="Number of lines before the header")
    mode_group.add_argument("--find", help="Case-insensitive word that appears in the header")
    parser.add_argument(
        "--max-search-lines",
        type=int,
        help="Non-matching lines allowed before --find gives up",
    )


def _add_load_command(subparsers: Any) -> None:
    """Register load subcommand."""
    parser = subparsers.add_parser("load", help="Parse records starting at the header line")
    parser.add_argument("source", help="Delimited text file")
    _add_skip_mode_arguments(parser)
    parser.add_argument("--delimiter", help="Single-character field separator")
    parser.add_argument("--output", help="Write records to this JSONL file instead of stdout")


def _add_locate_command(subparsers: Any) -> None:
    """Register locate subcommand."""
    parser = subparsers.add_parser("locate", help="Print how many lines precede the header")
    parser.add_argument("source", help="Delimited text file")
    _add_skip_mode_arguments(parser)
