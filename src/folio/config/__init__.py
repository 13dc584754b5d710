# topmark:header:start
#
#   project      : Folio
#   file         : __init__.py
#   file_relpath : src/folio/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for Folio builds.

Public surface:
    - `BuildConfig`: immutable runtime snapshot passed to every component.
    - `MutableBuildConfig`: builder used to merge defaults, TOML files and CLI overrides.
    - `FileWriteStrategy`: how the output tree commits files.
"""

from __future__ import annotations

from folio.config.model import BuildConfig, MutableBuildConfig
from folio.config.types import ArgsLike, FileWriteStrategy

__all__ = [
    "ArgsLike",
    "BuildConfig",
    "FileWriteStrategy",
    "MutableBuildConfig",
]
