# topmark:header:start
#
#   project      : Folio
#   file         : stylesheet.py
#   file_relpath : src/folio/pipeline/tasks/stylesheet.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stylesheet task: compile ``.scss`` and copy ``.css`` flat into the output root.

- ``.scss`` goes through the toolchain's stylesheet compiler. Production output
  is compressed; development output is expanded and accompanied by a
  ``<stem>.css.map`` source map.
- ``.css`` is copied unchanged in development and minified in production.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from folio.config.logging import get_logger
from folio.constants import SOURCE_MAP_SUFFIX
from folio.file_resolver import list_files
from folio.filetypes import AssetFile, AssetKind, TaskKind
from folio.filetypes.base import STYLESHEET_EXT, STYLESHEET_SOURCE_EXT
from folio.pipeline.compilers import StylesheetOptions
from folio.pipeline.output import read_source_text
from folio.pipeline.processors import MINIFIERS
from folio.pipeline.tasks.base import BaseTask

if TYPE_CHECKING:
    from pathlib import Path

    from folio.config.logging import FolioLogger
    from folio.pipeline.compilers import StylesheetOutput
    from folio.pipeline.context import BuildContext
    from folio.pipeline.outcomes import TaskResult

logger: FolioLogger = get_logger(__name__)


@dataclass
class StylesheetTask(BaseTask):
    """Process every stylesheet (source and plain) under the source root."""

    kind: TaskKind = TaskKind.STYLESHEET

    def run(self, ctx: BuildContext, result: TaskResult) -> None:
        """Compile preprocessed stylesheets first, then copy plain ones."""
        for path in list_files(ctx.config.source_root, STYLESHEET_SOURCE_EXT):
            self._compile(ctx, AssetFile(path=path, kind=AssetKind.STYLESHEET_SOURCE), result)

        for path in list_files(ctx.config.source_root, STYLESHEET_EXT):
            asset = AssetFile(path=path, kind=AssetKind.STYLESHEET)
            target: Path = ctx.output.flat_target(asset.path)
            if ctx.config.dev:
                result.written.append(ctx.output.copy_file(asset.path, target))
            else:
                text: str = read_source_text(asset.path)
                result.written.append(ctx.output.write_text(target, MINIFIERS[asset.kind](text)))

    def _compile(self, ctx: BuildContext, asset: AssetFile, result: TaskResult) -> None:
        target: Path = ctx.output.flat_target(asset.path, suffix=STYLESHEET_EXT)
        map_target: Path | None = None
        if ctx.config.dev:
            map_target = target.with_name(target.name + SOURCE_MAP_SUFFIX)

        compiled: StylesheetOutput = ctx.toolchain.stylesheets.compile(
            asset.path,
            StylesheetOptions(dev=ctx.config.dev, output_path=target, source_map_path=map_target),
        )
        result.written.append(ctx.output.write_text(target, compiled.css))
        if map_target is not None and compiled.source_map is not None:
            result.written.append(ctx.output.write_text(map_target, compiled.source_map))
        logger.debug("Stylesheet: compiled %s → %s", asset.path, target)
