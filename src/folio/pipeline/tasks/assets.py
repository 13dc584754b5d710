# topmark:header:start
#
#   project      : Folio
#   file         : assets.py
#   file_relpath : src/folio/pipeline/tasks/assets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Asset task: mirror the assets root into ``<output>/assets``.

A fresh checkout without an assets directory gets one, holding a single
placeholder profile picture, so that pages referencing it render.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from folio.config.logging import get_logger
from folio.constants import PLACEHOLDER_IMAGE_RELPATH, PLACEHOLDER_IMAGE_SVG
from folio.filetypes import TaskKind
from folio.pipeline.output import ensure_dir
from folio.pipeline.tasks.base import BaseTask

if TYPE_CHECKING:
    from pathlib import Path

    from folio.config.logging import FolioLogger
    from folio.pipeline.context import BuildContext
    from folio.pipeline.outcomes import TaskResult

logger: FolioLogger = get_logger(__name__)


def synthesize_placeholder_assets(assets_root: Path) -> Path:
    """Create ``assets_root`` with the placeholder image and return the image path."""
    placeholder: Path = assets_root / PLACEHOLDER_IMAGE_RELPATH
    ensure_dir(placeholder.parent)
    placeholder.write_text(PLACEHOLDER_IMAGE_SVG, encoding="utf-8")
    return placeholder


@dataclass
class AssetTask(BaseTask):
    """Mirror binary assets byte-for-byte."""

    kind: TaskKind = TaskKind.ASSET

    def run(self, ctx: BuildContext, result: TaskResult) -> None:
        """Synthesize the assets root if needed, then mirror it."""
        assets_root: Path = ctx.config.assets_root
        if not assets_root.exists():
            placeholder: Path = synthesize_placeholder_assets(assets_root)
            logger.info("No assets directory found; created %s with a placeholder", placeholder)
        result.written.extend(ctx.output.mirror(assets_root, ctx.output.assets_dir))
