# topmark:header:start
#
#   project      : Mimic
#   file         : model.py
#   file_relpath : src/mimic/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for Mimic.

The runtime snapshot is the frozen [`Config`][mimic.config.model.Config]. It is
produced by [`MutableConfig.freeze`][mimic.config.model.MutableConfig.freeze]
after layering defaults, a config file, and explicit overrides. Use
``Config.thaw()`` to edit a snapshot, then ``freeze()`` again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from mimic.config.io import (
    extract_mimic_table,
    find_config_file,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from mimic.config.keys import Toml
from mimic.config.logging import get_logger
from mimic.constants import BODY_MARKER, BODY_SETTING, COMMENT_MARKER, DEFAULT_ENCODING
from mimic.core.errors import ConfigError

if TYPE_CHECKING:
    from mimic.config.io import TomlTable
    from mimic.config.logging import MimicLogger

logger: MimicLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Mimic.

    Attributes:
        comment_marker (str): Prefix that turns a definition line into a comment.
        body_marker (str): Exact line after which the rest of the stream is the body.
        body_setting (str): Setting name that receives the body text.
        encoding (str): Text encoding used when Mimic opens definition files itself.
        header_indent (int | None): Indentation for encoded header JSON (None = compact).
        config_files (tuple[Path, ...]): Config files merged into this snapshot.
    """

    comment_marker: str = COMMENT_MARKER
    body_marker: str = BODY_MARKER
    body_setting: str = BODY_SETTING
    encoding: str = DEFAULT_ENCODING
    header_indent: int | None = None
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            comment_marker=self.comment_marker,
            body_marker=self.body_marker,
            body_setting=self.body_setting,
            encoding=self.encoding,
            header_indent=self.header_indent,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while layering config sources.

    ``None`` means "not set by this layer" so that `merge_with` can tell an
    explicit value apart from an inherited one.
    """

    comment_marker: str | None = None
    body_marker: str | None = None
    body_setting: str | None = None
    encoding: str | None = None
    header_indent: int | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable Config, filling unset values with defaults.

        Raises:
            ConfigError: If the body marker does not start with the comment marker.
        """
        defaults = Config()
        config = Config(
            comment_marker=self.comment_marker or defaults.comment_marker,
            body_marker=self.body_marker or defaults.body_marker,
            body_setting=self.body_setting or defaults.body_setting,
            encoding=self.encoding or defaults.encoding,
            header_indent=self.header_indent,
            config_files=tuple(self.config_files),
        )
        # The skip stage exempts only marker lines that would otherwise read as comments
        if not config.body_marker.startswith(config.comment_marker):
            raise ConfigError(
                f"Body marker {config.body_marker!r} must start with "
                f"the comment marker {config.comment_marker!r}"
            )
        return config

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: The merged builder.
        """
        return MutableConfig(
            comment_marker=other.comment_marker or self.comment_marker,
            body_marker=other.body_marker or self.body_marker,
            body_setting=other.body_setting or self.body_setting,
            encoding=other.encoding or self.encoding,
            header_indent=(
                other.header_indent if other.header_indent is not None else self.header_indent
            ),
            config_files=[*self.config_files, *other.config_files],
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with Mimic's built-in defaults."""
        return Config().thaw()

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a config layer from a Mimic TOML table.

        Args:
            data (TomlTable): The Mimic table (``mimic.toml`` root or ``[tool.mimic]``).
            config_file (Path | None): The file the table was read from, if any.

        Returns:
            MutableConfig: The layer; keys absent from ``data`` stay unset.
        """
        definition: TomlTable = get_table_value(data, Toml.SECTION_DEFINITION)
        headers: TomlTable = get_table_value(data, Toml.SECTION_HEADERS)

        return cls(
            comment_marker=get_string_value_or_none(definition, Toml.KEY_COMMENT_MARKER),
            body_marker=get_string_value_or_none(definition, Toml.KEY_BODY_MARKER),
            body_setting=get_string_value_or_none(definition, Toml.KEY_BODY_SETTING),
            encoding=get_string_value_or_none(definition, Toml.KEY_ENCODING),
            header_indent=get_int_value_or_none(headers, Toml.KEY_INDENT),
            config_files=[config_file] if config_file is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a config layer from ``mimic.toml`` or ``pyproject.toml``.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The layer, or None if a pyproject has no ``[tool.mimic]``.
        """
        table: TomlTable | None = extract_mimic_table(path, load_toml_dict(path))
        if table is None:
            logger.debug("No [tool.mimic] table in %s", path)
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def load_merged(cls, path: Path | None = None) -> MutableConfig:
        """Layer the defaults with an explicit or discovered config file.

        Args:
            path (Path | None): Explicit config file; when None the nearest one is discovered.

        Returns:
            MutableConfig: Defaults overridden by the config file, if any.
        """
        merged: MutableConfig = cls.from_defaults()
        config_path: Path | None = path or find_config_file()
        if config_path is not None:
            layer: MutableConfig | None = cls.from_toml_file(config_path)
            if layer is not None:
                merged = merged.merge_with(layer)
        return merged


def resolve_config(path: Path | None = None) -> Config:
    """Return the effective runtime config (defaults + config file)."""
    return MutableConfig.load_merged(path).freeze()
