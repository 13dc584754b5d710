# topmark:header:start
#
#   project      : Folio
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Folio in a controlled working directory.

`run_cli_in()` changes the process working directory to the given project
directory before invoking the Click CLI, so that default roots (``src``,
``data``, ``assets``, ``dist``) and project config files resolve against it,
as they do when a user runs ``folio`` from a project root.

Every invocation injects a fake toolchain through Click's context object, so
no external compiler is ever launched.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from folio.cli.main import cli
from folio.core.exit_codes import ExitCode
from tests.fakes import make_fake_toolchain

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    cwd_path: Path,
    argv: str | Sequence[str] | None,
    **obj_overrides: Any,
) -> Result:
    """Invoke the CLI with ``cwd_path`` as the working directory.

    Args:
        cwd_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--dev"]``.
        **obj_overrides (Any): Extra entries for Click's context object, e.g. an
            ``event_source`` for ``--dev`` runs.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(project, ["--output", "public"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(cwd_path)
        return runner.invoke(
            cli,
            argv,
            obj={"toolchain": make_fake_toolchain(), **obj_overrides},
        )
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper for invocations that never reach the build (``--help``,
    ``--version``, usage errors).
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, obj={"toolchain": make_fake_toolchain()})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_COMPILATION_ERROR(result: Result) -> None:
    """Assert that the command exited with COMPILATION_ERROR (code 65)."""
    assert result.exit_code == ExitCode.COMPILATION_ERROR, result.output


def assert_IO_ERROR(result: Result) -> None:
    """Assert that the command exited with IO_ERROR (code 74)."""
    assert result.exit_code == ExitCode.IO_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
