"""Unit tests for run-spec CLI execution."""

from __future__ import annotations

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path


def test_cli_run_spec_executes_batch(capsys: pytest.CaptureFixture[str]) -> None:
    """Run-spec command should print one line per step result."""
    exit_code = main(["run-spec", str(fixture_path("run_spec/valid_batch.yaml"))])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output == ["skip_count=2", "records=2", "records=2"]


def test_cli_run_spec_invalid_command_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    """Schema errors should exit with the configuration code."""
    exit_code = main(["run-spec", str(fixture_path("run_spec/invalid_command.yaml"))])

    assert exit_code == 2 and "Unsupported command 'scan'" in capsys.readouterr().err


def test_cli_run_spec_missing_marker_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    """Header search failures inside a batch should exit 1."""
    exit_code = main(["run-spec", str(fixture_path("run_spec/missing_marker.yaml"))])

    assert exit_code == 1 and "header_not_found=" in capsys.readouterr().err
