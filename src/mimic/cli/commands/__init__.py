# topmark:header:start
#
#   project      : Mimic
#   file         : __init__.py
#   file_relpath : src/mimic/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mimic CLI subcommands."""

from __future__ import annotations
