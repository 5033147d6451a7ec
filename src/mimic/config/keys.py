# topmark:header:start
#
#   project      : Mimic
#   file         : keys.py
#   file_relpath : src/mimic/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Mimic configuration.

These constants are the external configuration API as it appears in
``mimic.toml`` and in ``[tool.mimic]`` inside ``pyproject.toml``. Renaming or
removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Mimic configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_MIMIC: Final[str] = "mimic"

    # [definition]
    SECTION_DEFINITION: Final[str] = "definition"

    KEY_COMMENT_MARKER: Final[str] = "comment_marker"
    KEY_BODY_MARKER: Final[str] = "body_marker"
    KEY_BODY_SETTING: Final[str] = "body_setting"
    KEY_ENCODING: Final[str] = "encoding"

    # [headers]
    SECTION_HEADERS: Final[str] = "headers"

    KEY_INDENT: Final[str] = "indent"
