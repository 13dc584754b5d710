# topmark:header:start
#
#   project      : Folio
#   file         : test_build.py
#   file_relpath : tests/cli/test_build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: one-shot production builds and development builds with watching."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import pytest

from folio.watcher import WatchEvent
from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, parametrize, write
from tests.fakes import FakeEventSource

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def _files(root: Path) -> list[str]:
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


@mark_cli
def test_production_build(project: Path) -> None:
    result: Result = run_cli_in(project, [])

    assert_SUCCESS(result)
    assert "Building (production)" in result.output
    assert "Build finished" in result.output
    assert _files(project / "dist") == [
        "app.js",
        "assets/images/logo.png",
        "data/profile.json",
        "index.html",
        "main.css",
    ]


@mark_cli
def test_output_override_is_relative_to_cwd(project: Path) -> None:
    result: Result = run_cli_in(project, ["--output", "public"])

    assert_SUCCESS(result)
    assert (project / "public" / "index.html").is_file()
    assert not (project / "dist").exists()


@mark_cli
def test_project_config_file_is_honored(project: Path) -> None:
    write(project / "folio.toml", '[paths]\noutput = "site"\n')

    assert_SUCCESS(run_cli_in(project, []))

    assert (project / "site" / "main.css").is_file()


@mark_cli
def test_no_config_ignores_project_config(project: Path) -> None:
    write(project / "folio.toml", '[paths]\noutput = "site"\n')

    assert_SUCCESS(run_cli_in(project, ["--no-config"]))

    assert (project / "dist" / "main.css").is_file()
    assert not (project / "site").exists()


@mark_cli
def test_dev_builds_then_watches(project: Path) -> None:
    index: Path = project / "src" / "index.html"
    source = FakeEventSource(
        events=[WatchEvent(index)],
        before_each=lambda e: write(e.path, "<p>edited</p>\n"),
    )

    result: Result = run_cli_in(project, ["--dev"], event_source=source)

    assert_SUCCESS(result)
    assert "Building (development)" in result.output
    assert "Watching for changes" in result.output
    assert "markup rebuilt" in result.output
    assert (project / "dist" / "main.css.map").is_file()
    assert (project / "dist" / "index.html").read_text(encoding="utf-8") == "<p>edited</p>\n"
    assert source.started and source.stopped


@mark_cli
def test_dev_interrupt_stops_cleanly(project: Path) -> None:
    def interrupt(_event: WatchEvent) -> None:
        raise KeyboardInterrupt

    source = FakeEventSource(
        events=[WatchEvent(project / "src" / "index.html")], before_each=interrupt
    )

    result: Result = run_cli_in(project, ["-d"], event_source=source)

    assert_SUCCESS(result)
    assert "Stopped watching." in result.output
    assert source.stopped


@mark_cli
@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
@parametrize(
    ("argv", "expected_mode"),
    [
        (["--write-strategy", "inplace"], 0o600),
        (["--write-strategy", "INPLACE"], 0o600),
        (["--write-strategy", "atomic"], 0o644),
        ([], 0o644),
    ],
)
def test_write_strategy_option(project: Path, argv: list[str], expected_mode: int) -> None:
    stale: Path = write(project / "dist" / "index.html", "stale\n")
    stale.chmod(0o600)
    previous: int = os.umask(0o022)
    try:
        result: Result = run_cli_in(project, argv)
    finally:
        os.umask(previous)

    assert_SUCCESS(result)
    assert stale.read_text(encoding="utf-8") != "stale\n"
    # an in-place write reuses the existing file, an atomic one replaces it
    assert stale.stat().st_mode & 0o777 == expected_mode


@mark_cli
def test_unknown_write_strategy_is_rejected(project: Path) -> None:
    result: Result = run_cli_in(project, ["--write-strategy", "rename"])

    assert result.exit_code == 2, result.output
    assert "--write-strategy" in result.output
    assert not (project / "dist").exists()
