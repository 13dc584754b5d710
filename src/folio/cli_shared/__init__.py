# topmark:header:start
#
#   project      : Folio
#   file         : __init__.py
#   file_relpath : src/folio/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic helpers shared by the CLI and the watcher."""
