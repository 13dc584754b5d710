# topmark:header:start
#
#   project      : Folio
#   file         : io.py
#   file_relpath : src/folio/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value getters for Folio configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Getters never raise: a missing key yields the default, and a value of the
wrong shape is logged as a warning and replaced by the default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from folio.config.keys import Toml
from folio.config.logging import get_logger
from folio.constants import (
    DEFAULT_ASSETS_DIR,
    DEFAULT_DATA_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SCRIPT_COMPILER,
    DEFAULT_SOURCE_DIR,
    DEFAULT_WATCH_DEBOUNCE_MS,
    DEFAULT_WATCH_IGNORE,
)
from folio.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from folio.config.logging import FolioLogger

TomlTable = dict[str, Any]

logger: FolioLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Folio's runtime defaults as a TOML-shaped dict.

    The returned value is a new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_PATHS: {
            Toml.KEY_SOURCE: DEFAULT_SOURCE_DIR,
            Toml.KEY_DATA: DEFAULT_DATA_DIR,
            Toml.KEY_ASSETS: DEFAULT_ASSETS_DIR,
            Toml.KEY_OUTPUT: DEFAULT_OUTPUT_DIR,
        },
        Toml.SECTION_WRITER: {
            Toml.KEY_STRATEGY: "atomic",
        },
        Toml.SECTION_SCRIPTS: {
            Toml.KEY_COMPILER: list(DEFAULT_SCRIPT_COMPILER),
        },
        Toml.SECTION_WATCH: {
            Toml.KEY_IGNORE: list(DEFAULT_WATCH_IGNORE),
            Toml.KEY_DEBOUNCE_MS: DEFAULT_WATCH_DEBOUNCE_MS,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``folio.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", path=path) from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", path=path) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table stored under ``key``, or an empty dict."""
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.warning("Expected a table for [%s], got %r; ignoring", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or None when absent or not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for '%s', got %r; ignoring", key, value)
    return None


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Returns:
        list[str] | None: The list, or None when absent or not a list of strings.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[Any]", value)):
        return list(cast("list[str]", value))
    logger.warning("Expected a list of strings for '%s', got %r; ignoring", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional non-negative integer from a TOML table.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Returns:
        int | None: The integer, or None when absent or invalid.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    logger.warning("Expected a non-negative integer for '%s', got %r; ignoring", key, value)
    return None
