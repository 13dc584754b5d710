# topmark:header:start
#
#   project      : Folio
#   file         : __main__.py
#   file_relpath : src/folio/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Folio via ``python -m folio``.

Delegates to [`folio.cli.main.cli`][folio.cli.main.cli] so the console script
and the module invocation share a single entry point.

Examples:
    Build once for production::

        python -m folio

    Build and keep watching the source tree::

        python -m folio --dev
"""

from __future__ import annotations

from folio.cli.main import cli

if __name__ == "__main__":
    cli()
