# topmark:header:start
#
#   project      : Folio
#   file         : types.py
#   file_relpath : src/folio/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API argument dicts.
    - `FileWriteStrategy`: how the output tree manager commits file contents.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# Generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class FileWriteStrategy(str, Enum):
    """Strategies for writing files into the output tree."""

    ATOMIC = "Write to a temporary sibling, then rename (default)"
    INPLACE = "Truncate and write the destination directly"

    @classmethod
    def from_name(cls, key_name: str | None) -> FileWriteStrategy | None:
        """Return the member matching ``key_name`` (case-insensitive), or None.

        Args:
            key_name (str | None): Member name such as ``"atomic"`` or ``"INPLACE"``.
                Dashes and underscores are ignored (``"in-place"`` matches ``INPLACE``).

        Returns:
            FileWriteStrategy | None: The matching member, or None when unknown or unset.
        """
        if not key_name:
            return None
        normalized: str = key_name.upper().replace("-", "").replace("_", "")
        return cls.__members__.get(normalized)
