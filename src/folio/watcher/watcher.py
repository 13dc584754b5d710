# topmark:header:start
#
#   project      : Folio
#   file         : watcher.py
#   file_relpath : src/folio/watcher/watcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dispatch change events to single-task rebuilds.

One dispatch loop consumes events from an `EventSource`. Each event is
filtered through the ignore patterns, routed to a `TaskKind`, and scheduled:

- With a positive debounce window, a `threading.Timer` per kind is (re)armed,
  so a burst of changes of one kind triggers a single rebuild.
- With a zero window the task runs inline.

A per-kind lock guarantees that two rebuilds of the same kind never write
concurrently. Task failures are logged with the changed path and the error
message; the loop keeps running.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from folio.config.logging import get_logger
from folio.filetypes import TaskKind
from folio.pipeline.context import BuildContext
from folio.pipeline.engine import run_task
from folio.watcher.routing import route
from folio.watcher.source import WatchdogEventSource

if TYPE_CHECKING:
    from pathlib import Path

    from folio.cli_shared.console_api import ConsoleLike
    from folio.config import BuildConfig
    from folio.config.logging import FolioLogger
    from folio.pipeline.compilers import Toolchain
    from folio.pipeline.outcomes import TaskResult
    from folio.watcher.events import WatchEvent
    from folio.watcher.source import EventSource

logger: FolioLogger = get_logger(__name__)


def _rel_for_match(path: Path, roots: tuple[Path, ...]) -> str:
    """Return ``path`` relative to the first root containing it (POSIX style)."""
    for root in roots:
        if path.is_relative_to(root):
            return path.relative_to(root).as_posix()
    return path.as_posix()


class Watcher:
    """Resident change watcher for development mode.

    Args:
        config (BuildConfig): Immutable configuration snapshot.
        toolchain (Toolchain): Compilers handed to every rebuild.
        source (EventSource | None): Event source; a `WatchdogEventSource` over
            ``config.watch_roots`` when None.
        console (ConsoleLike | None): Optional program-output console for the ready
            message and per-event progress lines.

    Attributes:
        results (list[TaskResult]): Successful rebuilds, in completion order.
        failures (int): Number of rebuilds that raised.
    """

    def __init__(
        self,
        config: BuildConfig,
        toolchain: Toolchain,
        source: EventSource | None = None,
        *,
        console: ConsoleLike | None = None,
    ) -> None:
        self.config = config
        self.toolchain = toolchain
        self.source: EventSource = source or WatchdogEventSource(config.watch_roots)
        self.console = console
        self.results: list[TaskResult] = []
        self.failures: int = 0

        self._ignore: PathSpec = PathSpec.from_lines(GitWildMatchPattern, config.watch_ignore)
        self._delay: float = config.watch_debounce_ms / 1000.0
        self._locks: dict[TaskKind, threading.Lock] = {
            kind: threading.Lock() for kind in TaskKind
        }
        self._timers: dict[TaskKind, threading.Timer] = {}
        self._timers_lock = threading.Lock()
        self._results_lock = threading.Lock()

    # ------------------------------ Lifecycle ------------------------------
    def run(self) -> None:
        """Start the event source and dispatch events until it ends or is interrupted.

        Pending debounced rebuilds are completed before returning.
        """
        self.source.start()
        logger.info("Watcher ready")
        if self.console is not None:
            self.console.print(self.console.styled("👀 Watching for changes…", fg="cyan"))
        try:
            for event in self.source:
                self.dispatch(event)
        finally:
            self.flush()
            self.source.stop()

    def flush(self) -> None:
        """Wait for all armed debounce timers to fire and their rebuilds to finish."""
        with self._timers_lock:
            pending: list[threading.Timer] = list(self._timers.values())
            self._timers.clear()
        for timer in pending:
            timer.join()

    # ------------------------------ Dispatch -------------------------------
    def is_ignored(self, path: Path) -> bool:
        """Whether ``path`` matches one of the configured ignore patterns."""
        return self._ignore.match_file(_rel_for_match(path, self.config.watch_roots))

    def dispatch(self, event: WatchEvent) -> TaskKind | None:
        """Route ``event`` and schedule the owning task.

        Returns:
            TaskKind | None: The scheduled task kind, or None when the event is ignored.
        """
        if self.is_ignored(event.path):
            logger.trace("Ignoring %s (matches watch ignore patterns)", event.path)
            return None
        kind: TaskKind | None = route(event.path, self.config)
        if kind is None:
            logger.debug("No task handles %s; ignoring", event.path)
            return None

        logger.info("%s %s → %s", event.change.value.capitalize(), event.path, kind.value)
        if self.console is not None:
            self.console.print(
                f"🔄 {event.path.name} {event.change.value}; rebuilding {kind.value}"
            )

        if self._delay <= 0:
            self._rebuild(kind, event.path)
        else:
            self._arm(kind, event.path)
        return kind

    def _arm(self, kind: TaskKind, path: Path) -> None:
        with self._timers_lock:
            previous: threading.Timer | None = self._timers.get(kind)
            if previous is not None:
                previous.cancel()
                logger.trace("Coalescing %s rebuild", kind.value)
            timer = threading.Timer(self._delay, self._fire, args=(kind, path))
            timer.daemon = True
            self._timers[kind] = timer
            timer.start()

    def _fire(self, kind: TaskKind, path: Path) -> None:
        self._rebuild(kind, path)
        with self._timers_lock:
            if self._timers.get(kind) is threading.current_thread():
                del self._timers[kind]

    def _rebuild(self, kind: TaskKind, path: Path) -> TaskResult | None:
        """Run the task owning ``kind``; log failures instead of raising."""
        with self._locks[kind]:
            ctx: BuildContext = BuildContext.bootstrap(self.config, self.toolchain)
            try:
                result: TaskResult = run_task(kind, ctx)
            except Exception as e:
                with self._results_lock:
                    self.failures += 1
                logger.error("Rebuild of %s after change to %s failed: %s", kind.value, path, e)
                if self.console is not None:
                    self.console.error(f"❌ {kind.value}: {e}")
                return None
        with self._results_lock:
            self.results.append(result)
        if self.console is not None:
            self.console.print(
                self.console.styled(
                    f"✅ {kind.value} rebuilt ({len(result.written)} file(s))", fg="green"
                )
            )
        return result
