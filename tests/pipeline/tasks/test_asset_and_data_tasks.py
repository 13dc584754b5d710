# topmark:header:start
#
#   project      : Folio
#   file         : test_asset_and_data_tasks.py
#   file_relpath : tests/pipeline/tasks/test_asset_and_data_tasks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Asset and data tasks: byte-for-byte mirroring, placeholder and skip paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

from folio.constants import PLACEHOLDER_IMAGE_RELPATH, PLACEHOLDER_IMAGE_SVG
from folio.pipeline.tasks import AssetTask, DataTask
from folio.pipeline.tasks.assets import synthesize_placeholder_assets
from tests.conftest import make_config, mark_pipeline, prepared_context

if TYPE_CHECKING:
    from pathlib import Path

    from folio.config import BuildConfig
    from folio.pipeline.compilers import Toolchain


@mark_pipeline
def test_assets_mirrored_byte_for_byte(
    project: Path, prod_config: BuildConfig, toolchain: Toolchain
) -> None:
    result = AssetTask()(prepared_context(prod_config, toolchain))

    out: Path = prod_config.output_root / "assets" / "images" / "logo.png"
    assert result.written == [out]
    assert out.read_bytes() == (project / "assets" / "images" / "logo.png").read_bytes()


@mark_pipeline
def test_missing_assets_root_gets_placeholder(tmp_path: Path, toolchain: Toolchain) -> None:
    config: BuildConfig = make_config(tmp_path)

    AssetTask()(prepared_context(config, toolchain))

    assert (tmp_path / "assets" / PLACEHOLDER_IMAGE_RELPATH).is_file()
    out: Path = config.output_root / "assets" / PLACEHOLDER_IMAGE_RELPATH
    assert out.read_text(encoding="utf-8") == PLACEHOLDER_IMAGE_SVG


def test_synthesize_placeholder_returns_image_path(tmp_path: Path) -> None:
    placeholder: Path = synthesize_placeholder_assets(tmp_path / "assets")

    assert placeholder == tmp_path / "assets" / "images" / "profile.jpg"
    assert placeholder.read_text(encoding="utf-8").startswith("<?xml")


@mark_pipeline
def test_data_mirrored_unmodified(
    project: Path, prod_config: BuildConfig, toolchain: Toolchain
) -> None:
    result = DataTask()(prepared_context(prod_config, toolchain))

    out: Path = prod_config.output_root / "data" / "profile.json"
    assert result.written == [out]
    assert not result.skipped
    assert out.read_bytes() == (project / "data" / "profile.json").read_bytes()


@mark_pipeline
def test_missing_data_root_is_skipped(tmp_path: Path, toolchain: Toolchain) -> None:
    config: BuildConfig = make_config(tmp_path)

    result = DataTask()(prepared_context(config, toolchain))

    assert result.skipped
    assert result.written == []
    assert not (tmp_path / "data").exists()
