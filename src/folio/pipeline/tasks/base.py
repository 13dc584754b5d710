# topmark:header:start
#
#   project      : Folio
#   file         : base.py
#   file_relpath : src/folio/pipeline/tasks/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based build tasks.

The engine and the watcher invoke tasks as *callables*:

    result = task(ctx)  # internally: run() timed and error-tagged

`BaseTask` implements the shared lifecycle:

- times the task with ``time.perf_counter()``;
- tags any `FolioBuildError` raised by ``run()`` with the task name;
- converts filesystem and decoding errors into `OutputError`.

Tasks read sources and write through ``ctx.output``. The one exception is
compiled scripts, which the script compiler emits into the output root itself.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from folio.config.logging import get_logger
from folio.core.errors import FolioBuildError, OutputError
from folio.pipeline.outcomes import TaskResult

if TYPE_CHECKING:
    from folio.config.logging import FolioLogger
    from folio.filetypes import TaskKind
    from folio.pipeline.context import BuildContext

logger: FolioLogger = get_logger(__name__)


@dataclass
class BaseTask:
    """Reusable foundation for the per-kind build tasks.

    Subclass this and override ``run()``. Do not override ``__call__``.

    Attributes:
        kind (TaskKind): The task kind, used for routing and reporting.
    """

    kind: TaskKind

    @property
    def name(self) -> str:
        """Stable task name for logs and errors."""
        return self.kind.value

    def __call__(self, ctx: BuildContext) -> TaskResult:
        """Run the task and return what it produced.

        Args:
            ctx (BuildContext): Shared build dependencies.

        Returns:
            TaskResult: Files written by this invocation.

        Raises:
            FolioBuildError: Any task failure, tagged with the task name.
        """
        result = TaskResult(task=self.kind)
        start: float = time.perf_counter()
        logger.info("Task %s: running", self.name)
        try:
            self.run(ctx, result)
        except FolioBuildError as e:
            if e.task is None:
                e.task = self.name
            raise
        except UnicodeDecodeError as e:
            raise OutputError(f"Source is not valid UTF-8: {e.reason}", task=self.name) from e
        except OSError as e:
            path: Path | None = Path(e.filename) if e.filename else None
            raise OutputError(e.strerror or str(e), path=path, task=self.name) from e
        finally:
            result.elapsed = time.perf_counter() - start
        logger.info(
            "Task %s: done in %.3fs (%d file(s) written)",
            self.name,
            result.elapsed,
            len(result.written),
        )
        return result

    def run(self, ctx: BuildContext, result: TaskResult) -> None:
        """Perform the task's work, appending written paths to ``result.written``.

        Args:
            ctx (BuildContext): Shared build dependencies.
            result (TaskResult): Result record to fill in.
        """
        raise NotImplementedError
