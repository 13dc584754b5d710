# topmark:header:start
#
#   project      : Folio
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: failure classes map to distinct exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_COMPILATION_ERROR,
    assert_CONFIG_ERROR,
    assert_IO_ERROR,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli, write

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_type_error_exits_with_compilation_error(project: Path) -> None:
    write(project / "src" / "app.ts", "const n: number = 'TYPE_ERROR';\n")

    result: Result = run_cli_in(project, [])

    assert_COMPILATION_ERROR(result)
    assert "error TS2322" in result.output
    assert "[script]" in result.output
    assert not (project / "dist" / "assets" / "images").exists()
    assert not (project / "dist" / "data" / "profile.json").exists()


@mark_cli
def test_stylesheet_error_exits_with_compilation_error(project: Path) -> None:
    write(project / "src" / "styles" / "main.scss", "@error 'boom';\n")

    result: Result = run_cli_in(project, [])

    assert_COMPILATION_ERROR(result)
    assert "main.scss" in result.output


@mark_cli
def test_unpreparable_output_exits_with_io_error(project: Path) -> None:
    write(project / "dist", "not a directory")

    assert_IO_ERROR(run_cli_in(project, []))


@mark_cli
def test_invalid_project_config_exits_with_config_error(project: Path) -> None:
    write(project / "folio.toml", "[paths\n")

    result: Result = run_cli_in(project, [])

    assert_CONFIG_ERROR(result)
    assert "Invalid TOML" in result.output


@mark_cli
def test_missing_config_file_exits_with_config_error(project: Path) -> None:
    result: Result = run_cli_in(project, ["--config", "absent.toml"])

    assert_CONFIG_ERROR(result)
    assert "absent.toml" in result.output


@mark_cli
def test_overlapping_output_exits_with_config_error(project: Path) -> None:
    assert_CONFIG_ERROR(run_cli_in(project, ["--output", "src"]))


@mark_cli
def test_verbose_and_quiet_together_is_a_usage_error() -> None:
    result: Result = run_cli(["-v", "-q"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output
