# topmark:header:start
#
#   project      : Folio
#   file         : base.py
#   file_relpath : src/folio/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Asset kinds and their classification.

A discovered file belongs to exactly one `AssetKind`. Source-tree files are
classified by extension; anything else is classified by the root it lives
under. Each kind is owned by exactly one build task (`TaskKind`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from pathlib import Path

    from folio.config import BuildConfig


class TaskKind(str, Enum):
    """The five build tasks, in canonical build order."""

    MARKUP = "markup"
    STYLESHEET = "stylesheet"
    SCRIPT = "script"
    ASSET = "assets"
    DATA = "data"


class AssetKind(str, Enum):
    """Classification of a single file."""

    MARKUP = "markup"
    STYLESHEET_SOURCE = "stylesheet source"
    STYLESHEET = "stylesheet"
    SCRIPT_SOURCE = "script source"
    SCRIPT = "script"
    ASSET = "asset"
    DATA = "data"

    @property
    def task(self) -> TaskKind:
        """The task that owns files of this kind."""
        return _TASK_BY_KIND[self]


MARKUP_EXT: Final[str] = ".html"
STYLESHEET_SOURCE_EXT: Final[str] = ".scss"
STYLESHEET_EXT: Final[str] = ".css"
SCRIPT_SOURCE_EXT: Final[str] = ".ts"
SCRIPT_EXT: Final[str] = ".js"

# Extension → kind for files in the source tree
KIND_BY_EXTENSION: Final[dict[str, AssetKind]] = {
    MARKUP_EXT: AssetKind.MARKUP,
    STYLESHEET_SOURCE_EXT: AssetKind.STYLESHEET_SOURCE,
    STYLESHEET_EXT: AssetKind.STYLESHEET,
    SCRIPT_SOURCE_EXT: AssetKind.SCRIPT_SOURCE,
    SCRIPT_EXT: AssetKind.SCRIPT,
}

_TASK_BY_KIND: Final[dict[AssetKind, TaskKind]] = {
    AssetKind.MARKUP: TaskKind.MARKUP,
    AssetKind.STYLESHEET_SOURCE: TaskKind.STYLESHEET,
    AssetKind.STYLESHEET: TaskKind.STYLESHEET,
    AssetKind.SCRIPT_SOURCE: TaskKind.SCRIPT,
    AssetKind.SCRIPT: TaskKind.SCRIPT,
    AssetKind.ASSET: TaskKind.ASSET,
    AssetKind.DATA: TaskKind.DATA,
}


def classify(path: Path, config: BuildConfig) -> AssetKind | None:
    """Return the kind of ``path``, or None when no task owns it.

    Files under the assets or data root belong to those roots regardless of
    extension; everything else is classified by extension.
    """
    if path.is_relative_to(config.assets_root):
        return AssetKind.ASSET
    if path.is_relative_to(config.data_root):
        return AssetKind.DATA
    for ext, kind in KIND_BY_EXTENSION.items():
        if path.name.endswith(ext):
            return kind
    return None


@dataclass(frozen=True)
class AssetFile:
    """A discovered file and its kind.

    Attributes:
        path (Path): Absolute path of the file.
        kind (AssetKind): Its classification.
    """

    path: Path
    kind: AssetKind

    @property
    def task(self) -> TaskKind:
        """The task that owns this file."""
        return self.kind.task
