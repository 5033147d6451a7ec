# topmark:header:start
#
#   project      : Mimic
#   file         : __init__.py
#   file_relpath : src/mimic/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for Mimic.

Re-exports the runtime [`Config`][mimic.config.model.Config] snapshot, its
[`MutableConfig`][mimic.config.model.MutableConfig] builder, and
[`resolve_config`][mimic.config.model.resolve_config].
"""

from __future__ import annotations

from mimic.config.model import Config, MutableConfig, resolve_config

__all__: list[str] = [
    "Config",
    "MutableConfig",
    "resolve_config",
]
