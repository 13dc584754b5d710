# topmark:header:start
#
#   project      : Folio
#   file         : __init__.py
#   file_relpath : src/folio/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Folio build pipeline: per-kind tasks, the output tree and the build engine.

Entry points:
    - `folio.pipeline.engine.run_build`: run every task once, in order.
    - `folio.pipeline.engine.run_task`: run the task owning one kind (watch mode).
"""
