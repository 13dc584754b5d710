# topmark:header:start
#
#   project      : Folio
#   file         : __init__.py
#   file_relpath : src/folio/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Folio command-line interface (Click)."""
