# topmark:header:start
#
#   project      : Folio
#   file         : test_output_tree.py
#   file_relpath : tests/pipeline/test_output_tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output tree manager: preparation, write strategies and mirroring."""

from __future__ import annotations

import os
import stat
import sys
from typing import TYPE_CHECKING

import pytest

from folio.config import FileWriteStrategy
from folio.pipeline.engine import run_build
from folio.pipeline.output import OutputTree
from tests.conftest import make_config, parametrize, write

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from folio.config import BuildConfig
    from folio.pipeline.compilers import Toolchain

skip_on_windows = pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")


def test_prepare_creates_fixed_subdirectories(tmp_path: Path) -> None:
    tree = OutputTree(root=tmp_path / "dist")

    tree.prepare()

    assert (tmp_path / "dist").is_dir()
    assert (tmp_path / "dist" / "assets").is_dir()
    assert (tmp_path / "dist" / "data").is_dir()


def test_prepare_is_repeatable(tmp_path: Path) -> None:
    tree = OutputTree(root=tmp_path / "dist")
    tree.prepare()
    write(tmp_path / "dist" / "keep.txt", "x")

    tree.prepare()

    assert (tmp_path / "dist" / "keep.txt").read_text(encoding="utf-8") == "x"


@parametrize("strategy", list(FileWriteStrategy))
def test_write_text_replaces_content(tmp_path: Path, strategy: FileWriteStrategy) -> None:
    tree = OutputTree(root=tmp_path / "dist", strategy=strategy)
    target: Path = tmp_path / "dist" / "index.html"

    tree.write_text(target, "first")
    tree.write_text(target, "second")

    assert target.read_text(encoding="utf-8") == "second"
    assert tree.written == [target, target]


def test_atomic_write_leaves_no_temporary_files(tmp_path: Path) -> None:
    tree = OutputTree(root=tmp_path / "dist", strategy=FileWriteStrategy.ATOMIC)

    tree.write_bytes(tmp_path / "dist" / "a.bin", b"\x00\x01")

    assert sorted(p.name for p in (tmp_path / "dist").iterdir()) == ["a.bin"]


@parametrize("strategy", list(FileWriteStrategy))
def test_mirror_copies_nested_tree_byte_for_byte(
    tmp_path: Path, strategy: FileWriteStrategy
) -> None:
    src: Path = tmp_path / "assets"
    (src / "img" / "icons").mkdir(parents=True)
    payload: bytes = bytes(range(256))
    (src / "img" / "icons" / "star.bin").write_bytes(payload)
    write(src / "fonts" / "readme.txt", "fonts\r\n")
    tree = OutputTree(root=tmp_path / "dist", strategy=strategy)

    copied: list[Path] = tree.mirror(src, tree.assets_dir)

    assert (tree.assets_dir / "img" / "icons" / "star.bin").read_bytes() == payload
    assert (tree.assets_dir / "fonts" / "readme.txt").read_bytes() == b"fonts\r\n"
    assert len(copied) == 2


def test_flat_target_drops_directories_and_swaps_suffix(tmp_path: Path) -> None:
    tree = OutputTree(root=tmp_path / "dist")

    assert tree.flat_target(tmp_path / "src" / "a" / "b.html") == tmp_path / "dist" / "b.html"
    assert (
        tree.flat_target(tmp_path / "src" / "s" / "main.scss", suffix=".css")
        == tmp_path / "dist" / "main.css"
    )


# ------------------------------ Permissions ------------------------------


@pytest.fixture
def umask_022() -> Iterator[None]:
    """Run the test with the common ``022`` umask."""
    previous: int = os.umask(0o022)
    try:
        yield
    finally:
        os.umask(previous)


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


@skip_on_windows
@parametrize("strategy", list(FileWriteStrategy))
def test_written_files_are_world_readable(
    umask_022: None, tmp_path: Path, strategy: FileWriteStrategy
) -> None:
    tree = OutputTree(root=tmp_path / "dist", strategy=strategy)

    target: Path = tree.write_text(tmp_path / "dist" / "index.html", "<p>hi</p>")

    assert _mode(target) == 0o644


@skip_on_windows
@parametrize("strategy", list(FileWriteStrategy))
def test_copies_keep_source_permissions(
    umask_022: None, tmp_path: Path, strategy: FileWriteStrategy
) -> None:
    src: Path = write(tmp_path / "assets" / "run.sh", "#!/bin/sh\n")
    src.chmod(0o750)
    tree = OutputTree(root=tmp_path / "dist", strategy=strategy)

    target: Path = tree.copy_file(src, tmp_path / "dist" / "run.sh")

    assert _mode(target) == 0o750


@skip_on_windows
def test_build_outputs_are_world_readable(
    umask_022: None, project: Path, toolchain: Toolchain
) -> None:
    (project / "assets" / "images" / "logo.png").chmod(0o644)
    (project / "data" / "profile.json").chmod(0o644)
    config: BuildConfig = make_config(project)

    run_build(config, toolchain)

    modes: dict[str, int] = {
        p.relative_to(config.output_root).as_posix(): _mode(p)
        for p in config.output_root.rglob("*")
        if p.is_file()
    }
    assert modes == {
        "app.js": 0o644,
        "index.html": 0o644,
        "main.css": 0o644,
        "assets/images/logo.png": 0o644,
        "data/profile.json": 0o644,
    }
