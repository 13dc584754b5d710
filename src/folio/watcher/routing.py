# topmark:header:start
#
#   project      : Folio
#   file         : routing.py
#   file_relpath : src/folio/watcher/routing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Route a changed path to the task that rebuilds it.

Rules, first match wins:
    1. ``.html`` → markup
    2. ``.scss`` / ``.css`` → stylesheet
    3. ``.ts`` / ``.js`` → script
    4. under the assets root, or the directory path contains ``assets`` → asset
    5. under the data root, or the directory path contains ``data`` → data
    6. anything else is ignored

Extensions are checked before location, so ``assets/app.js`` rebuilds scripts.
The directory match is a plain substring test: ``static-assets/`` and
``metadata/`` count as well.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from folio.constants import OUTPUT_ASSETS_DIR, OUTPUT_DATA_DIR
from folio.filetypes import TaskKind
from folio.filetypes.base import (
    MARKUP_EXT,
    SCRIPT_EXT,
    SCRIPT_SOURCE_EXT,
    STYLESHEET_EXT,
    STYLESHEET_SOURCE_EXT,
)

if TYPE_CHECKING:
    from pathlib import Path

    from folio.config import BuildConfig

_EXTENSION_ROUTES: Final[tuple[tuple[tuple[str, ...], TaskKind], ...]] = (
    ((MARKUP_EXT,), TaskKind.MARKUP),
    ((STYLESHEET_SOURCE_EXT, STYLESHEET_EXT), TaskKind.STYLESHEET),
    ((SCRIPT_SOURCE_EXT, SCRIPT_EXT), TaskKind.SCRIPT),
)


def _inside(path: Path, root: Path | None, dir_name: str) -> bool:
    if root is not None and path.is_relative_to(root):
        return True
    return dir_name in path.parent.as_posix()


def route(path: Path, config: BuildConfig | None = None) -> TaskKind | None:
    """Return the task kind that handles a change to ``path``.

    Args:
        path (Path): The changed file.
        config (BuildConfig | None): When given, its assets and data roots are
            matched in addition to the conventional directory names.

    Returns:
        TaskKind | None: The owning task, or None when the change is ignored.
    """
    for extensions, kind in _EXTENSION_ROUTES:
        if path.name.endswith(extensions):
            return kind
    if _inside(path, config.assets_root if config else None, OUTPUT_ASSETS_DIR):
        return TaskKind.ASSET
    if _inside(path, config.data_root if config else None, OUTPUT_DATA_DIR):
        return TaskKind.DATA
    return None
