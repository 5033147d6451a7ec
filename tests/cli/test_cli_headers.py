# topmark:header:start
#
#   project      : Mimic
#   file         : test_cli_headers.py
#   file_relpath : tests/cli/test_cli_headers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `mimic headers encode|decode`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click
import pytest

from mimic.cli.commands.headers import collect_header_options
from mimic.headers.model import HeaderCollection
from tests.cli.conftest import assert_DATA_ERROR, assert_SUCCESS, run_cli
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_collect_header_options_groups_by_first_occurrence() -> None:
    """Values of a repeated name are gathered under its first occurrence."""
    headers: HeaderCollection = collect_header_options(
        ("A: ABC", "B: 123", "A: DEF", "X-Empty:", "B:456")
    )

    assert headers == HeaderCollection(
        [("A", ["ABC", "DEF"]), ("B", ["123", "456"]), ("X-Empty", [])]
    )


@parametrize("option", ["no separator", ": value"])
def test_collect_header_options_rejects_malformed(option: str) -> None:
    """Options must be 'Name: value'."""
    with pytest.raises(click.BadParameter):
        collect_header_options((option,))


def test_encode(isolation: Path) -> None:
    """encode prints compact header JSON."""
    result = run_cli(
        ["headers", "encode", "-H", "A: ABC", "-H", "B: 123", "-H", "A: DEF", "-H", "B: 456"]
    )

    assert_SUCCESS(result)
    assert result.output == '[{"A": ["ABC", "DEF"]}, {"B": ["123", "456"]}]\n'


def test_encode_without_headers(isolation: Path) -> None:
    """No headers encode as an empty array."""
    result = run_cli(["headers", "encode"])

    assert_SUCCESS(result)
    assert result.output == "[]\n"


def test_encode_indent_from_config(isolation: Path) -> None:
    """The [headers] indent setting pretty-prints the JSON."""
    (isolation / "mimic.toml").write_text("[headers]\nindent = 2\n", encoding="utf-8")

    result = run_cli(["headers", "encode", "-H", "A: 1"])

    assert_SUCCESS(result)
    assert result.output.startswith("[\n  {")
    assert json.loads(result.output) == [{"A": ["1"]}]


def test_encode_rejects_malformed_option(isolation: Path) -> None:
    """A malformed -H option is a usage error."""
    result = run_cli(["headers", "encode", "-H", "nocolon"])

    assert result.exit_code == 2
    assert "Name: value" in result.output


def test_decode_from_stdin(isolation: Path) -> None:
    """decode prints one line per value, in order."""
    result = run_cli(
        ["headers", "decode"],
        input_text='[{"A": ["ABC", "DEF"]}, {"B": ["123"]}, {"C": []}]',
    )

    assert_SUCCESS(result)
    assert result.output == "A: ABC\nA: DEF\nB: 123\nC:\n"


def test_decode_from_file(isolation: Path) -> None:
    """decode reads a file argument."""
    path: Path = isolation / "headers.json"
    path.write_text('[{"Accept": ["*/*"]}]', encoding="utf-8")

    result = run_cli(["headers", "decode", str(path)])

    assert_SUCCESS(result)
    assert result.output == "Accept: */*\n"


@parametrize("text", ['{"A": ["1"]}', "[1]", '[{"A": ["1"]}] trailing', ""])
def test_decode_rejects_invalid_json(isolation: Path, text: str) -> None:
    """Documents of the wrong shape exit with 65."""
    result = run_cli(["headers", "decode"], input_text=text)

    assert_DATA_ERROR(result)


def test_decode_oversized_integer_is_data_error(isolation: Path) -> None:
    """Oversized numbers exit with 65 like any other malformed document."""
    result = run_cli(["headers", "decode", "-"], input_text="[" + "1" * 5000 + "]")

    assert_DATA_ERROR(result)
    assert "Invalid JSON number" in result.output
