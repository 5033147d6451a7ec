# topmark:header:start
#
#   project      : Mimic
#   file         : __init__.py
#   file_relpath : src/mimic/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by the Mimic pipeline, codec and CLI."""

from __future__ import annotations
