# topmark:header:start
#
#   project      : Folio
#   file         : stylesheet.py
#   file_relpath : src/folio/pipeline/processors/stylesheet.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Production minifier for plain stylesheets (``.css``).

This is a best-effort textual transform, not a CSS parser. It never validates
its input, and malformed stylesheets pass through with only whitespace and
comments removed.

Rules, in order:
    1. strip ``/* ... */`` comments (repeated until none are left, since removing
       one comment can splice a new ``/*`` together);
    2. collapse whitespace runs to a single space;
    3. remove whitespace on both sides of ``;``, ``{`` and ``,``;
    4. remove whitespace after ``:`` (whitespace *before* a colon is kept so that
       ``div :hover`` keeps its descendant meaning);
    5. drop semicolons directly before ``}``;
    6. trim.
"""

from __future__ import annotations

import re
from typing import Final

_BLOCK_COMMENT_RE: Final[re.Pattern[str]] = re.compile(r"/\*.*?\*/", re.DOTALL)
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")
_AROUND_PUNCT_RE: Final[re.Pattern[str]] = re.compile(r"\s*([;{,])\s*")
_AFTER_COLON_RE: Final[re.Pattern[str]] = re.compile(r":\s+")
_TRAILING_SEMICOLONS_RE: Final[re.Pattern[str]] = re.compile(r";+\}")


def strip_block_comments(text: str) -> str:
    """Remove ``/* ... */`` comments until none remain."""
    while True:
        stripped: str = _BLOCK_COMMENT_RE.sub("", text)
        if stripped == text:
            return stripped
        text = stripped


def minify_stylesheet(text: str) -> str:
    """Return a minified copy of a plain stylesheet.

    Args:
        text (str): Stylesheet source.

    Returns:
        str: Minified stylesheet; idempotent.
    """
    out: str = strip_block_comments(text)
    out = _WHITESPACE_RE.sub(" ", out)
    out = _AROUND_PUNCT_RE.sub(r"\1", out)
    out = _AFTER_COLON_RE.sub(":", out)
    out = _TRAILING_SEMICOLONS_RE.sub("}", out)
    return out.strip()
