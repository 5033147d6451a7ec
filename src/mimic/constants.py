# topmark:header:start
#
#   project      : Mimic
#   file         : constants.py
#   file_relpath : src/mimic/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mimic Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    MIMIC_VERSION: str = get_version("mimic")
except PackageNotFoundError:  # running from a source checkout
    MIMIC_VERSION = "0.0.0"

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "MIMIC_LOG_LEVEL"

# Definition grammar defaults:
COMMENT_MARKER: str = "#"
BODY_MARKER: str = "# Body"
BODY_SETTING: str = "Body"
SETTING_SEPARATOR: str = ":"

DEFAULT_ENCODING: str = "utf-8"

# Configuration file discovery:
MIMIC_TOML_NAME: str = "mimic.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
