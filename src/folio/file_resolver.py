# topmark:header:start
#
#   project      : Folio
#   file         : file_resolver.py
#   file_relpath : src/folio/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumerate source files for the build tasks.

Every task starts by asking this module for the files it owns. Matching is a
plain, case-sensitive suffix comparison on the file name; a missing root is a
normal state on a fresh checkout and yields no files.

The result follows filesystem enumeration order. Callers must not depend on
ordering across directories.
"""

from __future__ import annotations

import os
from pathlib import Path

from folio.config.logging import FolioLogger, get_logger

logger: FolioLogger = get_logger(__name__)


def list_files(root: Path, extension: str) -> list[Path]:
    """Return all files below ``root`` whose name ends with ``extension``.

    Args:
        root (Path): Directory to scan recursively.
        extension (str): Suffix to match exactly, including the dot (e.g. ``".scss"``).

    Returns:
        list[Path]: Absolute paths of matching files; empty if ``root`` does not exist.
    """
    if not root.is_dir():
        logger.debug("list_files(): root %s does not exist, nothing to scan", root)
        return []

    result: list[Path] = []
    with os.scandir(root) as entries:
        for entry in entries:
            path = Path(entry.path)
            if entry.is_dir():
                result.extend(list_files(path, extension))
            elif entry.name.endswith(extension):
                result.append(path.absolute())

    logger.trace("list_files(%s, %r): %d match(es)", root, extension, len(result))
    return result
