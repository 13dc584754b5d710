# topmark:header:start
#
#   project      : Folio
#   file         : __init__.py
#   file_relpath : src/folio/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Folio package.

Folio is a small build pipeline for static sites. It transforms a tree of
source assets (markup, stylesheets, scripts, data and binary assets) into a
deployable output tree, either as a one-shot production build or as a
watch-driven development loop.
"""

from __future__ import annotations
