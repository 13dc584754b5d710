# topmark:header:start
#
#   project      : Folio
#   file         : script.py
#   file_relpath : src/folio/pipeline/processors/script.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Production minifier for plain scripts (``.js``).

Like the stylesheet minifier this is textual and tolerant: it does not
tokenize JavaScript, so a ``//`` inside a string literal (e.g. a URL) is
treated as a line comment. Sources that depend on such literals should be
written as typed scripts and go through the compiler instead.
"""

from __future__ import annotations

import re
from typing import Final

from folio.pipeline.processors.stylesheet import strip_block_comments

_LINE_COMMENT_RE: Final[re.Pattern[str]] = re.compile(r"//.*$", re.MULTILINE)
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")
_AROUND_PUNCT_RE: Final[re.Pattern[str]] = re.compile(r"\s*([{}();,:])\s*")


def minify_script(text: str) -> str:
    """Return a minified copy of a plain script.

    Block comments go first, then ``//`` line comments, then whitespace is
    collapsed and tightened around ``{ } ( ) ; , :``.

    Args:
        text (str): Script source.

    Returns:
        str: Minified script; idempotent.
    """
    out: str = strip_block_comments(text)
    out = _LINE_COMMENT_RE.sub("", out)
    out = _WHITESPACE_RE.sub(" ", out)
    out = _AROUND_PUNCT_RE.sub(r"\1", out)
    return out.strip()
