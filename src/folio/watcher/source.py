# topmark:header:start
#
#   project      : Folio
#   file         : source.py
#   file_relpath : src/folio/watcher/source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Event sources for the watcher.

An `EventSource` is started, iterated for `WatchEvent`s and stopped. The
production implementation wraps a watchdog `Observer`: its handler runs on the
observer thread and pushes events into a queue, which the watcher's dispatch
loop drains one event at a time. Tests inject a finite fake source.
"""

from __future__ import annotations

import os
import queue
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from folio.config.logging import get_logger
from folio.watcher.events import ChangeKind, WatchEvent

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from watchdog.events import FileSystemEvent

    from folio.config.logging import FolioLogger

logger: FolioLogger = get_logger(__name__)


class EventSource(Protocol):
    """Capability the watcher consumes change events from."""

    def start(self) -> None:
        """Begin observing; called once before iteration."""
        ...

    def stop(self) -> None:
        """Stop observing and end any running iteration."""
        ...

    def __iter__(self) -> Iterator[WatchEvent]:
        """Yield events as they arrive."""
        ...


class _QueueingHandler(FileSystemEventHandler):
    """Forward file (not directory) modifications and creations into a queue."""

    def __init__(self, events: queue.Queue[WatchEvent | None]) -> None:
        super().__init__()
        self._events = events

    def _put(self, event: FileSystemEvent, change: ChangeKind) -> None:
        if event.is_directory:
            return
        path = Path(os.fsdecode(event.src_path))
        logger.trace("watchdog: %s %s", change.value, path)
        self._events.put(WatchEvent(path=path, change=change))

    def on_modified(self, event: FileSystemEvent) -> None:
        self._put(event, ChangeKind.MODIFIED)

    def on_created(self, event: FileSystemEvent) -> None:
        self._put(event, ChangeKind.CREATED)


class WatchdogEventSource:
    """Recursive watchdog observer over a set of roots.

    Roots that do not exist when `start` is called are skipped.

    Attributes:
        roots (tuple[Path, ...]): Directories to observe.
        watched (list[Path]): Roots actually subscribed after `start`.
    """

    def __init__(self, roots: Sequence[Path]) -> None:
        self.roots: tuple[Path, ...] = tuple(roots)
        self.watched: list[Path] = []
        self._events: queue.Queue[WatchEvent | None] = queue.Queue()
        self._observer = Observer()

    def start(self) -> None:
        """Subscribe to every existing root and start the observer thread."""
        handler = _QueueingHandler(self._events)
        for root in self.roots:
            if not root.is_dir():
                logger.debug("Not watching %s: directory does not exist", root)
                continue
            self._observer.schedule(handler, str(root), recursive=True)
            self.watched.append(root)
            logger.info("Watching %s", root)
        self._observer.start()

    def stop(self) -> None:
        """Stop the observer and release the iterator."""
        self._events.put(None)
        if self._observer.is_alive():
            self._observer.stop()
            self._observer.join()

    def __iter__(self) -> Iterator[WatchEvent]:
        while True:
            event: WatchEvent | None = self._events.get()
            if event is None:
                return
            yield event
