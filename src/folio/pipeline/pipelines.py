# topmark:header:start
#
#   project      : Folio
#   file         : pipelines.py
#   file_relpath : src/folio/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The build pipeline as an immutable, typed task sequence.

``BUILD_PIPELINE``: markup → stylesheet → script → asset → data

Notes:
* The pipeline is immutable (``Final[tuple[BaseTask, ...]]``) and tasks are
  instantiated objects (not functions).
* The watcher looks tasks up by kind with `task_for` and runs them one at a time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from .tasks import AssetTask, DataTask, MarkupTask, ScriptTask, StylesheetTask

if TYPE_CHECKING:
    from folio.filetypes import TaskKind

    from .tasks import BaseTask

BUILD_PIPELINE: Final[tuple[BaseTask, ...]] = (
    MarkupTask(),  # Flatten markup into the output root
    StylesheetTask(),  # Compile .scss, copy .css
    ScriptTask(),  # Compile .ts, copy .js
    AssetTask(),  # Mirror assets/ (synthesized if missing)
    DataTask(),  # Mirror data/ (skipped if missing)
)

_TASKS_BY_KIND: Final[dict[TaskKind, BaseTask]] = {task.kind: task for task in BUILD_PIPELINE}


def task_for(kind: TaskKind) -> BaseTask:
    """Return the pipeline task that handles ``kind``."""
    return _TASKS_BY_KIND[kind]
