# topmark:header:start
#
#   project      : Folio
#   file         : markup.py
#   file_relpath : src/folio/pipeline/tasks/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup task: copy ``.html`` files flat into the output root.

Nested source directories are flattened, so ``src/pages/about.html`` and
``src/about.html`` both land on ``<output>/about.html``. The later file wins
and a warning names both sources.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from folio.config.logging import get_logger
from folio.file_resolver import list_files
from folio.filetypes import AssetFile, AssetKind, TaskKind
from folio.filetypes.base import MARKUP_EXT
from folio.pipeline.output import read_source_text
from folio.pipeline.processors import MINIFIERS
from folio.pipeline.tasks.base import BaseTask

if TYPE_CHECKING:
    from pathlib import Path

    from folio.config.logging import FolioLogger
    from folio.pipeline.context import BuildContext
    from folio.pipeline.outcomes import TaskResult

logger: FolioLogger = get_logger(__name__)


@dataclass
class MarkupTask(BaseTask):
    """Process every markup file under the source root."""

    kind: TaskKind = TaskKind.MARKUP

    def run(self, ctx: BuildContext, result: TaskResult) -> None:
        """Copy markup files, minified in production builds."""
        claimed: dict[Path, Path] = {}
        for path in list_files(ctx.config.source_root, MARKUP_EXT):
            asset = AssetFile(path=path, kind=AssetKind.MARKUP)
            target: Path = ctx.output.flat_target(asset.path)
            previous: Path | None = claimed.get(target)
            if previous is not None:
                logger.warning(
                    "Markup files %s and %s both flatten to %s; the latter wins",
                    previous,
                    asset.path,
                    target.name,
                )
            claimed[target] = asset.path

            if ctx.config.dev:
                result.written.append(ctx.output.copy_file(asset.path, target))
            else:
                text: str = read_source_text(asset.path)
                result.written.append(ctx.output.write_text(target, MINIFIERS[asset.kind](text)))
            logger.debug("Markup: %s → %s", asset.path, target)
