# topmark:header:start
#
#   project      : Folio
#   file         : output.py
#   file_relpath : src/folio/pipeline/output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output tree manager.

`OutputTree` is the only place where the pipeline writes to disk. It creates
destination directories on demand, mirrors directory trees, and commits file
contents with the configured `FileWriteStrategy`:

- ``ATOMIC``: write a temporary sibling in the destination directory, then
  ``os.replace`` it over the target. Readers (the HTTP server) never observe
  a half-written file.
- ``INPLACE``: truncate and write the destination directly.

New files get the usual permissions (``0o666`` minus the process umask) under
both strategies; copies keep the permission bits of their source.

Every write is recorded so a task can report what it produced.
"""

from __future__ import annotations

import os
import shutil
import stat
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from folio.config.logging import get_logger
from folio.config.types import FileWriteStrategy
from folio.constants import OUTPUT_ASSETS_DIR, OUTPUT_DATA_DIR
from folio.core.errors import OutputError

if TYPE_CHECKING:
    from folio.config.logging import FolioLogger

logger: FolioLogger = get_logger(__name__)


def ensure_dir(path: Path) -> Path:
    """Create ``path`` (and parents) if needed and return it."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_source_text(path: Path) -> str:
    """Read a UTF-8 source file.

    Raises:
        OutputError: If the file is not valid UTF-8.
    """
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise OutputError(f"Source is not valid UTF-8: {e.reason}", path=path) from e


def _atomic_write_bytes(target: Path, data: bytes, mode: int | None = None) -> None:
    tmp: Path = target.with_name(f".{target.name}.{uuid.uuid4().hex}.tmp")
    # 0o666 lets the umask decide the final permissions, like a plain open()
    fd: int = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        if mode is not None:
            os.chmod(tmp, mode)
        os.replace(tmp, target)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


@dataclass
class OutputTree:
    """Destination tree of a build.

    Attributes:
        root (Path): Output root.
        strategy (FileWriteStrategy): How file contents are committed.
        written (list[Path]): Files written through this instance, in write order.
    """

    root: Path
    strategy: FileWriteStrategy = FileWriteStrategy.ATOMIC
    written: list[Path] = field(default_factory=lambda: [])

    @property
    def assets_dir(self) -> Path:
        """Destination of the mirrored assets tree."""
        return self.root / OUTPUT_ASSETS_DIR

    @property
    def data_dir(self) -> Path:
        """Destination of the mirrored data tree."""
        return self.root / OUTPUT_DATA_DIR

    def prepare(self) -> None:
        """Create the output root and its fixed ``assets/`` and ``data/`` subdirectories."""
        for d in (self.root, self.data_dir, self.assets_dir):
            ensure_dir(d)
        logger.debug("Output tree prepared at %s", self.root)

    def write_bytes(self, target: Path, data: bytes, *, mode: int | None = None) -> Path:
        """Write ``data`` to ``target`` (inside the tree) with the configured strategy.

        Args:
            target (Path): Destination file.
            data (bytes): File contents.
            mode (int | None): Permission bits for the file; umask-derived when None.

        Returns:
            Path: ``target``, for chaining.
        """
        ensure_dir(target.parent)
        if self.strategy is FileWriteStrategy.ATOMIC:
            _atomic_write_bytes(target, data, mode)
        else:
            target.write_bytes(data)
            if mode is not None:
                os.chmod(target, mode)
        self.written.append(target)
        logger.debug("OutputTree: wrote %d bytes to %s", len(data), target)
        return target

    def write_text(self, target: Path, text: str) -> Path:
        """Write ``text`` encoded as UTF-8 to ``target``."""
        return self.write_bytes(target, text.encode("utf-8"))

    def copy_file(self, source: Path, target: Path) -> Path:
        """Copy ``source`` byte-for-byte to ``target``, keeping its permission bits."""
        if self.strategy is FileWriteStrategy.ATOMIC:
            mode: int = stat.S_IMODE(source.stat().st_mode)
            return self.write_bytes(target, source.read_bytes(), mode=mode)
        ensure_dir(target.parent)
        shutil.copy(source, target)
        self.written.append(target)
        logger.debug("OutputTree: copied %s to %s", source, target)
        return target

    def mirror(self, source_dir: Path, target_dir: Path) -> list[Path]:
        """Recursively copy ``source_dir`` into ``target_dir``, preserving structure.

        Existing files in ``target_dir`` that have no counterpart in the source are
        left in place.

        Returns:
            list[Path]: The files written.
        """
        copied: list[Path] = []
        ensure_dir(target_dir)
        with os.scandir(source_dir) as entries:
            for entry in entries:
                src = Path(entry.path)
                dest: Path = target_dir / entry.name
                if entry.is_dir():
                    copied.extend(self.mirror(src, dest))
                else:
                    copied.append(self.copy_file(src, dest))
        return copied

    def flat_target(self, source: Path, *, suffix: str | None = None) -> Path:
        """Return the flattened destination of ``source`` at the output root.

        Args:
            source (Path): Source file.
            suffix (str | None): Replacement suffix (e.g. ``".css"`` for ``.scss``);
                keeps the source suffix when None.
        """
        name: str = source.name if suffix is None else f"{source.stem}{suffix}"
        return self.root / name
