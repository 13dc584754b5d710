# topmark:header:start
#
#   project      : Folio
#   file         : data.py
#   file_relpath : src/folio/pipeline/tasks/data.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data task: mirror the data root into ``<output>/data``, unmodified."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from folio.config.logging import get_logger
from folio.filetypes import TaskKind
from folio.pipeline.tasks.base import BaseTask

if TYPE_CHECKING:
    from folio.config.logging import FolioLogger
    from folio.pipeline.context import BuildContext
    from folio.pipeline.outcomes import TaskResult

logger: FolioLogger = get_logger(__name__)


@dataclass
class DataTask(BaseTask):
    """Mirror structured data files for the renderer."""

    kind: TaskKind = TaskKind.DATA

    def run(self, ctx: BuildContext, result: TaskResult) -> None:
        """Mirror the data root, or skip when it does not exist."""
        if not ctx.config.data_root.is_dir():
            logger.info("Data directory %s not found; skipping", ctx.config.data_root)
            result.skipped = True
            return
        result.written.extend(ctx.output.mirror(ctx.config.data_root, ctx.output.data_dir))
