# topmark:header:start
#
#   project      : Folio
#   file         : events.py
#   file_relpath : src/folio/watcher/events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-system change events consumed by the watcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ChangeKind(str, Enum):
    """Kinds of change the watcher reacts to. Deletions are not tracked."""

    MODIFIED = "modified"
    CREATED = "created"


@dataclass(frozen=True)
class WatchEvent:
    """A single change notification.

    Attributes:
        path (Path): Absolute path of the changed file.
        change (ChangeKind): What happened to it.
    """

    path: Path
    change: ChangeKind = ChangeKind.MODIFIED
