# topmark:header:start
#
#   project      : Mimic
#   file         : __init__.py
#   file_relpath : src/mimic/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command line interface for Mimic."""

from __future__ import annotations
