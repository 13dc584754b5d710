# topmark:header:start
#
#   project      : Folio
#   file         : __init__.py
#   file_relpath : src/folio/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, dependency-free building blocks shared by the pipeline and the CLI."""
