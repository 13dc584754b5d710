# topmark:header:start
#
#   project      : Folio
#   file         : constants.py
#   file_relpath : src/folio/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Folio Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    FOLIO_VERSION: str = get_version("folio")
except PackageNotFoundError:  # running from a source checkout
    FOLIO_VERSION = "0.0.0"

# Project-local configuration file names
FOLIO_TOML_NAME: Final[str] = "folio.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Environment variable overriding the log level (e.g. "DEBUG", "TRACE", "10")
LOG_LEVEL_ENV_VAR: Final[str] = "FOLIO_LOG_LEVEL"

# Default source layout, relative to the working directory
DEFAULT_SOURCE_DIR: Final[str] = "src"
DEFAULT_DATA_DIR: Final[str] = "data"
DEFAULT_ASSETS_DIR: Final[str] = "assets"
DEFAULT_OUTPUT_DIR: Final[str] = "dist"

# Subdirectories of the output root consumed by the HTTP server and renderer
OUTPUT_ASSETS_DIR: Final[str] = "assets"
OUTPUT_DATA_DIR: Final[str] = "data"

# Pinned TypeScript compiler, resolved through npx
TYPESCRIPT_VERSION: Final[str] = "5.4.5"
DEFAULT_SCRIPT_COMPILER: Final[tuple[str, ...]] = (
    "npx",
    "--yes",
    "-p",
    f"typescript@{TYPESCRIPT_VERSION}",
    "tsc",
)

DEFAULT_WATCH_IGNORE: Final[tuple[str, ...]] = ("node_modules/", ".git/")
DEFAULT_WATCH_DEBOUNCE_MS: Final[int] = 100

# Suffix appended to a compiled stylesheet name for its development source map
SOURCE_MAP_SUFFIX: Final[str] = ".map"

# Placeholder written when a fresh checkout has no assets directory yet.
PLACEHOLDER_IMAGE_RELPATH: Final[str] = "images/profile.jpg"
PLACEHOLDER_IMAGE_SVG: Final[str] = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg width="300" height="300" viewBox="0 0 300 300" xmlns="http://www.w3.org/2000/svg">
    <rect width="300" height="300" fill="#e5e7eb"/>
    <circle cx="150" cy="120" r="40" fill="#9ca3af"/>
    <path d="M150 180 C120 180 90 200 90 220 L90 250 L210 250 L210 220 \
C210 200 180 180 150 180 Z" fill="#9ca3af"/>
    <text x="150" y="280" text-anchor="middle" fill="#6b7280" font-size="14" \
font-family="Arial">Profile Photo</text>
</svg>
"""
