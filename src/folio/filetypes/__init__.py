# topmark:header:start
#
#   project      : Folio
#   file         : __init__.py
#   file_relpath : src/folio/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Asset kinds, file extensions and classification helpers."""

from __future__ import annotations

from folio.filetypes.base import AssetFile, AssetKind, TaskKind, classify

__all__ = [
    "AssetFile",
    "AssetKind",
    "TaskKind",
    "classify",
]
