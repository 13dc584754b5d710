# topmark:header:start
#
#   project      : Folio
#   file         : __init__.py
#   file_relpath : src/folio/pipeline/processors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Production-only text minifiers, one per copy-through asset kind.

All minifiers are pure ``str -> str`` functions and idempotent:
``minify(minify(x)) == minify(x)``.
"""

from __future__ import annotations

from typing import Callable, Final

from folio.filetypes import AssetKind
from folio.pipeline.processors.markup import minify_markup
from folio.pipeline.processors.script import minify_script
from folio.pipeline.processors.stylesheet import minify_stylesheet

Minifier = Callable[[str], str]

MINIFIERS: Final[dict[AssetKind, Minifier]] = {
    AssetKind.MARKUP: minify_markup,
    AssetKind.STYLESHEET: minify_stylesheet,
    AssetKind.SCRIPT: minify_script,
}

__all__ = [
    "MINIFIERS",
    "Minifier",
    "minify_markup",
    "minify_script",
    "minify_stylesheet",
]
