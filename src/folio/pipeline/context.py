# topmark:header:start
#
#   project      : Folio
#   file         : context.py
#   file_relpath : src/folio/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Context shared by all tasks of one build or one watch session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from folio.pipeline.output import OutputTree

if TYPE_CHECKING:
    from folio.config import BuildConfig
    from folio.pipeline.compilers import Toolchain


@dataclass
class BuildContext:
    """Explicit dependencies handed to every task.

    Attributes:
        config (BuildConfig): Immutable configuration snapshot.
        toolchain (Toolchain): Stylesheet and script compilers.
        output (OutputTree): Destination tree writer.
    """

    config: BuildConfig
    toolchain: Toolchain
    output: OutputTree

    @classmethod
    def bootstrap(cls, config: BuildConfig, toolchain: Toolchain) -> BuildContext:
        """Create a context whose output tree follows ``config``."""
        return cls(
            config=config,
            toolchain=toolchain,
            output=OutputTree(root=config.output_root, strategy=config.write_strategy),
        )
