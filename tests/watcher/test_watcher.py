# topmark:header:start
#
#   project      : Folio
#   file         : test_watcher.py
#   file_relpath : tests/watcher/test_watcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Watcher dispatch: single-task rebuilds, failure isolation, ignore and debounce."""

from __future__ import annotations

from typing import TYPE_CHECKING

from folio.filetypes import TaskKind
from folio.pipeline.engine import run_build
from folio.watcher import ChangeKind, WatchEvent, Watcher
from tests.conftest import make_config, mark_integration, write
from tests.fakes import FakeEventSource, RecordingConsole

if TYPE_CHECKING:
    from pathlib import Path

    from folio.config import BuildConfig
    from folio.pipeline.compilers import Toolchain


def _snapshot(root: Path) -> dict[str, tuple[int, int]]:
    return {
        p.relative_to(root).as_posix(): (p.stat().st_ino, p.stat().st_mtime_ns)
        for p in root.rglob("*")
        if p.is_file()
    }


@mark_integration
def test_markup_change_rebuilds_only_markup(
    project: Path, dev_config: BuildConfig, toolchain: Toolchain
) -> None:
    run_build(dev_config, toolchain)
    before: dict[str, tuple[int, int]] = _snapshot(dev_config.output_root)
    index: Path = project / "src" / "index.html"
    source = FakeEventSource(
        events=[WatchEvent(index)],
        before_each=lambda e: write(e.path, "<p>edited</p>\n"),
    )

    watcher = Watcher(dev_config, toolchain, source)
    watcher.run()

    assert source.started and source.stopped
    assert [r.task for r in watcher.results] == [TaskKind.MARKUP]
    assert (dev_config.output_root / "index.html").read_text(encoding="utf-8") == "<p>edited</p>\n"
    after: dict[str, tuple[int, int]] = _snapshot(dev_config.output_root)
    assert after.keys() == before.keys()
    for rel in before.keys() - {"index.html"}:
        assert after[rel] == before[rel], rel


@mark_integration
def test_failed_rebuild_does_not_stop_the_loop(
    project: Path, dev_config: BuildConfig, toolchain: Toolchain
) -> None:
    run_build(dev_config, toolchain)
    app: Path = project / "src" / "app.ts"
    index: Path = project / "src" / "index.html"

    def edit(event: WatchEvent) -> None:
        if event.path == app:
            write(app, "const n: number = 'TYPE_ERROR';\n")

    console = RecordingConsole()
    source = FakeEventSource(events=[WatchEvent(app), WatchEvent(index)], before_each=edit)

    watcher = Watcher(dev_config, toolchain, source, console=console)
    watcher.run()

    assert watcher.failures == 1
    assert [r.task for r in watcher.results] == [TaskKind.MARKUP]
    assert any("error TS2322" in line for line in console.err)


def test_ignored_and_unrouted_paths_are_dropped(
    project: Path, dev_config: BuildConfig, toolchain: Toolchain
) -> None:
    watcher = Watcher(dev_config, toolchain, FakeEventSource())

    assert watcher.dispatch(WatchEvent(project / "src" / "node_modules" / "x.html")) is None
    assert watcher.dispatch(WatchEvent(project / "src" / "notes.txt")) is None
    assert watcher.results == []


def test_custom_ignore_patterns(project: Path, toolchain: Toolchain) -> None:
    config: BuildConfig = make_config(
        project, dev=True, watch_debounce_ms=0, watch_ignore=["*.tmp.html", "drafts/"]
    )
    watcher = Watcher(config, toolchain, FakeEventSource())

    assert watcher.is_ignored(project / "src" / "page.tmp.html")
    assert watcher.is_ignored(project / "src" / "drafts" / "post.html")
    assert not watcher.is_ignored(project / "src" / "index.html")


@mark_integration
def test_burst_of_changes_is_coalesced(project: Path, toolchain: Toolchain) -> None:
    config: BuildConfig = make_config(project, dev=True, watch_debounce_ms=200)
    run_build(config, toolchain)
    index: Path = project / "src" / "index.html"
    events: list[WatchEvent] = [
        WatchEvent(index, ChangeKind.MODIFIED),
        WatchEvent(index, ChangeKind.MODIFIED),
        WatchEvent(index, ChangeKind.CREATED),
    ]

    watcher = Watcher(config, toolchain, FakeEventSource(events=events))
    watcher.run()

    assert [r.task for r in watcher.results] == [TaskKind.MARKUP]


@mark_integration
def test_different_kinds_rebuild_independently(project: Path, toolchain: Toolchain) -> None:
    config: BuildConfig = make_config(project, dev=True, watch_debounce_ms=200)
    run_build(config, toolchain)
    events: list[WatchEvent] = [
        WatchEvent(project / "src" / "index.html"),
        WatchEvent(project / "data" / "profile.json"),
    ]

    watcher = Watcher(config, toolchain, FakeEventSource(events=events))
    watcher.run()

    assert sorted(r.task.value for r in watcher.results) == ["data", "markup"]


def test_ready_message_and_progress_lines(
    project: Path, dev_config: BuildConfig, toolchain: Toolchain
) -> None:
    run_build(dev_config, toolchain)
    console = RecordingConsole()
    source = FakeEventSource(events=[WatchEvent(project / "data" / "profile.json")])

    Watcher(dev_config, toolchain, source, console=console).run()

    assert console.out[0] == "👀 Watching for changes…"
    assert "profile.json modified; rebuilding data" in console.out[1]
    assert console.out[2].startswith("✅ data rebuilt")
