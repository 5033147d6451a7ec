# topmark:header:start
#
#   project      : Mimic
#   file         : io.py
#   file_relpath : src/mimic/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module reads Mimic configuration from on-disk TOML files (``mimic.toml``
or the ``[tool.mimic]`` table of ``pyproject.toml``). Parsing is done with
`tomlkit` and returned as plain `dict` structures; typed getters validate the
values before the config layer consumes them.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from mimic.config.keys import Toml
from mimic.config.logging import get_logger
from mimic.constants import MIMIC_TOML_NAME, PYPROJECT_TOML_NAME
from mimic.core.errors import ConfigError

if TYPE_CHECKING:
    from mimic.config.logging import MimicLogger

TomlTable = dict[str, Any]

logger: MimicLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Read a TOML file and return its content as a plain dict.

    Args:
        path (Path): Path to the TOML file.

    Returns:
        TomlTable: The parsed document, unwrapped to built-in Python types.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    logger.debug("Loaded TOML config from %s", path)
    return cast("TomlTable", doc.unwrap())


def extract_mimic_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Mimic configuration table from a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.mimic]``; any other file is taken
    to be a dedicated Mimic config file.

    Args:
        path (Path): The file the document was read from.
        data (TomlTable): The parsed document.

    Returns:
        TomlTable | None: The Mimic table, or None when a pyproject has no ``[tool.mimic]``.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, dict):
        return None
    table = cast("dict[str, Any]", tool).get(Toml.SECTION_MIMIC)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def find_config_file(start: Path | None = None) -> Path | None:
    """Discover the nearest Mimic config file, walking up from ``start``.

    In each directory ``mimic.toml`` wins over a ``pyproject.toml`` that has a
    ``[tool.mimic]`` table.

    Args:
        start (Path | None): Directory to start from (defaults to the working directory).

    Returns:
        Path | None: The config file path, or None if none was found.
    """
    current: Path = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate: Path = directory / MIMIC_TOML_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            try:
                if extract_mimic_table(pyproject, load_toml_dict(pyproject)) is not None:
                    return pyproject
            except ConfigError as exc:
                # An unrelated, broken pyproject must not block discovery
                logger.warning("Skipping %s during config discovery: %s", pyproject, exc)
    return None


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table`` (empty when absent).

    Raises:
        ConfigError: If the value exists but is not a table.
    """
    value = table.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}")
    return cast("TomlTable", value)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return the string value of ``key`` or None when absent.

    Raises:
        ConfigError: If the value exists but is not a non-empty string.
    """
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' must be a non-empty string, got {value!r}")
    return value


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Return the non-negative integer value of ``key`` or None when absent.

    Raises:
        ConfigError: If the value exists but is not a non-negative integer.
    """
    value = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"'{key}' must be a non-negative integer, got {value!r}")
    return value
