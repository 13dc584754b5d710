# topmark:header:start
#
#   project      : Folio
#   file         : keys.py
#   file_relpath : src/folio/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Folio configuration.

These constants are the external configuration API as it appears in
``folio.toml`` and in ``[tool.folio]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Folio configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_FOLIO: Final[str] = "folio"

    # [paths]
    SECTION_PATHS: Final[str] = "paths"

    KEY_SOURCE: Final[str] = "source"
    KEY_DATA: Final[str] = "data"
    KEY_ASSETS: Final[str] = "assets"
    KEY_OUTPUT: Final[str] = "output"

    # [writer]
    SECTION_WRITER: Final[str] = "writer"

    KEY_STRATEGY: Final[str] = "strategy"

    # [scripts]
    SECTION_SCRIPTS: Final[str] = "scripts"

    KEY_COMPILER: Final[str] = "compiler"

    # [watch]
    SECTION_WATCH: Final[str] = "watch"

    KEY_IGNORE: Final[str] = "ignore"
    KEY_DEBOUNCE_MS: Final[str] = "debounce_ms"
