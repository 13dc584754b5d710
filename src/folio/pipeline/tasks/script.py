# topmark:header:start
#
#   project      : Folio
#   file         : script.py
#   file_relpath : src/folio/pipeline/tasks/script.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Script task: compile ``.ts`` and copy ``.js`` flat into the output root.

Typed scripts are compiled one file per compiler invocation with fixed
options (see `CompileOptions`). A non-zero compiler exit stops the task with
a `CompilationError` carrying the compiler's diagnostic verbatim. Plain
scripts are copied unchanged in development and minified in production.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from folio.config.logging import get_logger
from folio.core.errors import CompilationError
from folio.file_resolver import list_files
from folio.filetypes import AssetFile, AssetKind, TaskKind
from folio.filetypes.base import SCRIPT_EXT, SCRIPT_SOURCE_EXT
from folio.pipeline.compilers import CompileOptions
from folio.pipeline.output import ensure_dir, read_source_text
from folio.pipeline.processors import MINIFIERS
from folio.pipeline.tasks.base import BaseTask

if TYPE_CHECKING:
    from pathlib import Path

    from folio.config.logging import FolioLogger
    from folio.pipeline.compilers import CompileResult
    from folio.pipeline.context import BuildContext
    from folio.pipeline.outcomes import TaskResult

logger: FolioLogger = get_logger(__name__)


@dataclass
class ScriptTask(BaseTask):
    """Process every script (typed and plain) under the source root."""

    kind: TaskKind = TaskKind.SCRIPT

    def run(self, ctx: BuildContext, result: TaskResult) -> None:
        """Compile typed scripts first, then copy plain ones."""
        options = CompileOptions(out_dir=ensure_dir(ctx.config.output_root))
        for path in list_files(ctx.config.source_root, SCRIPT_SOURCE_EXT):
            asset = AssetFile(path=path, kind=AssetKind.SCRIPT_SOURCE)
            outcome: CompileResult = ctx.toolchain.scripts.compile(asset.path, options)
            if not outcome.ok:
                logger.error(
                    "Script compiler failed for %s (exit %d)", asset.path, outcome.returncode
                )
                raise CompilationError(
                    outcome.diagnostic or f"compiler exited with status {outcome.returncode}",
                    path=asset.path,
                    task=self.name,
                )
            if outcome.output_path is not None:
                result.written.append(outcome.output_path)
            logger.info("Compiled typed script %s", asset.path.name)

        for path in list_files(ctx.config.source_root, SCRIPT_EXT):
            asset = AssetFile(path=path, kind=AssetKind.SCRIPT)
            target: Path = ctx.output.flat_target(asset.path)
            if ctx.config.dev:
                result.written.append(ctx.output.copy_file(asset.path, target))
            else:
                text: str = read_source_text(asset.path)
                result.written.append(ctx.output.write_text(target, MINIFIERS[asset.kind](text)))
