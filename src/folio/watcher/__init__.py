# topmark:header:start
#
#   project      : Folio
#   file         : __init__.py
#   file_relpath : src/folio/watcher/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Development-mode change watcher.

The watcher subscribes to the source, data and assets roots, routes every
change event to the single task that owns it, and re-runs that task. A failing
task is logged and the watcher keeps going.
"""

from __future__ import annotations

from folio.watcher.events import ChangeKind, WatchEvent
from folio.watcher.routing import route
from folio.watcher.source import EventSource, WatchdogEventSource
from folio.watcher.watcher import Watcher

__all__ = [
    "ChangeKind",
    "EventSource",
    "WatchEvent",
    "WatchdogEventSource",
    "Watcher",
    "route",
]
