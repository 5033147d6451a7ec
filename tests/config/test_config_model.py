# topmark:header:start
#
#   project      : Mimic
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the layered Mimic configuration model."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import pytest

from mimic.config.model import Config, MutableConfig, resolve_config
from mimic.constants import BODY_MARKER, BODY_SETTING, COMMENT_MARKER, DEFAULT_ENCODING
from mimic.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    """The built-in defaults describe the standard definition format."""
    config = Config()

    assert config.comment_marker == COMMENT_MARKER == "#"
    assert config.body_marker == BODY_MARKER == "# Body"
    assert config.body_setting == BODY_SETTING == "Body"
    assert config.encoding == DEFAULT_ENCODING
    assert config.header_indent is None
    assert config.config_files == ()


def test_config_is_frozen() -> None:
    """Config snapshots are immutable."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        Config().comment_marker = "//"  # type: ignore[misc]


def test_thaw_freeze_round_trip() -> None:
    """thaw() then freeze() reproduces the snapshot."""
    config: Config = MutableConfig(header_indent=4, encoding="latin-1").freeze()

    assert config.thaw().freeze() == config


def test_freeze_rejects_marker_mismatch() -> None:
    """The body marker must start with the comment marker."""
    with pytest.raises(ConfigError, match="must start with"):
        MutableConfig(comment_marker="//").freeze()


def test_merge_with_prefers_other_layer() -> None:
    """Values set in the higher layer win; unset ones are inherited."""
    base = MutableConfig.from_defaults()
    layer = MutableConfig(body_marker="# Payload", header_indent=0)

    merged: Config = base.merge_with(layer).freeze()

    assert merged.body_marker == "# Payload"
    assert merged.comment_marker == "#"
    assert merged.header_indent == 0


def test_from_toml_dict() -> None:
    """Known keys are read from their sections; absent ones stay unset."""
    layer = MutableConfig.from_toml_dict(
        {"definition": {"body_setting": "Payload"}, "headers": {"indent": 2}}
    )

    assert layer.body_setting == "Payload"
    assert layer.comment_marker is None
    assert layer.header_indent == 2


def test_from_toml_dict_rejects_bad_types() -> None:
    """Wrongly typed values are configuration errors."""
    with pytest.raises(ConfigError):
        MutableConfig.from_toml_dict({"definition": {"comment_marker": 3}})
    with pytest.raises(ConfigError):
        MutableConfig.from_toml_dict({"headers": "indent"})


def test_from_toml_file_pyproject(tmp_path: Path) -> None:
    """pyproject.toml is read from its [tool.mimic] table."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "svc"\n\n[tool.mimic.definition]\nbody_marker = "#--"\n',
        encoding="utf-8",
    )

    layer: MutableConfig | None = MutableConfig.from_toml_file(path)

    assert layer is not None
    assert layer.body_marker == "#--"
    assert layer.config_files == [path]


def test_from_toml_file_pyproject_without_table(tmp_path: Path) -> None:
    """A pyproject.toml without [tool.mimic] yields no layer."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "svc"\n', encoding="utf-8")

    assert MutableConfig.from_toml_file(path) is None


def test_resolve_config_explicit_file(tmp_path: Path) -> None:
    """An explicit config file overrides the defaults."""
    path: Path = tmp_path / "custom.toml"
    path.write_text(
        '[definition]\ncomment_marker = ";"\nbody_marker = ";; Body"\n', encoding="utf-8"
    )

    config: Config = resolve_config(path)

    assert config.comment_marker == ";"
    assert config.body_marker == ";; Body"
    assert config.config_files == (path,)


def test_resolve_config_discovers_file(isolation: Path) -> None:
    """Without an explicit path, the nearest mimic.toml is used."""
    (isolation / "mimic.toml").write_text("[headers]\nindent = 2\n", encoding="utf-8")

    config: Config = resolve_config()

    assert config.header_indent == 2
    assert config.config_files == (isolation.resolve() / "mimic.toml",)


def test_resolve_config_without_file(isolation: Path) -> None:
    """Without any config file the defaults apply."""
    assert resolve_config() == Config()
