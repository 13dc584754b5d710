# topmark:header:start
#
#   project      : Folio
#   file         : markup.py
#   file_relpath : src/folio/pipeline/processors/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Production minifier for markup (``.html``).

Whitespace-only transform: runs of whitespace collapse to one space, then
whitespace between tags and just inside tag brackets is removed. Content of
``<pre>``/``<textarea>`` is not special-cased.
"""

from __future__ import annotations

import re
from typing import Final

_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")
_BETWEEN_TAGS_RE: Final[re.Pattern[str]] = re.compile(r">\s+<")
_BEFORE_CLOSE_RE: Final[re.Pattern[str]] = re.compile(r"\s+>")
_AFTER_OPEN_RE: Final[re.Pattern[str]] = re.compile(r"<\s+")


def minify_markup(text: str) -> str:
    """Return ``text`` with removable whitespace stripped.

    Args:
        text (str): Markup source.

    Returns:
        str: Minified markup. Applying the function again returns the same string.
    """
    out: str = _WHITESPACE_RE.sub(" ", text)
    out = _BETWEEN_TAGS_RE.sub("><", out)
    out = _BEFORE_CLOSE_RE.sub(">", out)
    out = _AFTER_OPEN_RE.sub("<", out)
    return out.strip()
