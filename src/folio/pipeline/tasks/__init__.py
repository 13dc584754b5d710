# topmark:header:start
#
#   project      : Folio
#   file         : __init__.py
#   file_relpath : src/folio/pipeline/tasks/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The five per-kind build tasks."""

from __future__ import annotations

from folio.pipeline.tasks.assets import AssetTask
from folio.pipeline.tasks.base import BaseTask
from folio.pipeline.tasks.data import DataTask
from folio.pipeline.tasks.markup import MarkupTask
from folio.pipeline.tasks.script import ScriptTask
from folio.pipeline.tasks.stylesheet import StylesheetTask

__all__ = [
    "AssetTask",
    "BaseTask",
    "DataTask",
    "MarkupTask",
    "ScriptTask",
    "StylesheetTask",
]
