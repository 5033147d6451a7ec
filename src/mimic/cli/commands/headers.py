# topmark:header:start
#
#   project      : Mimic
#   file         : headers.py
#   file_relpath : src/mimic/cli/commands/headers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mimic `headers` command group.

- ``mimic headers encode -H "Name: value" ...`` prints header JSON.
- ``mimic headers decode [PATH]`` validates header JSON and prints one
  ``Name: value`` line per value (``Name:`` for entries without values).
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from mimic.cli.errors import MimicDataError
from mimic.constants import SETTING_SEPARATOR
from mimic.core.errors import HeaderFormatError
from mimic.headers.codec import decode_headers, encode_headers
from mimic.headers.model import HeaderCollection

if TYPE_CHECKING:
    from mimic.cli.console import ClickConsole
    from mimic.config.model import Config


def collect_header_options(options: tuple[str, ...]) -> HeaderCollection:
    """Group ``Name: value`` options into a header collection.

    Values for the same name are gathered under that name's first occurrence;
    ``Name:`` with nothing after the colon declares an entry without values.

    Args:
        options (tuple[str, ...]): Raw ``-H`` option values, in command-line order.

    Returns:
        HeaderCollection: The collected headers.

    Raises:
        click.BadParameter: If an option has no colon or an empty name.
    """
    grouped: dict[str, list[str]] = {}
    for option in options:
        name, sep, value = option.partition(SETTING_SEPARATOR)
        name = name.strip()
        if not sep or not name:
            raise click.BadParameter(
                f"expected 'Name: value', got {option!r}", param_hint="'-H' / '--header'"
            )
        values: list[str] = grouped.setdefault(name, [])
        if value.strip():
            values.append(value.strip())
    return HeaderCollection(grouped.items())


@click.group(name="headers", help="Encode and decode header JSON.")
def headers_command() -> None:
    """Group for the header JSON subcommands."""


@headers_command.command(name="encode", help="Encode -H 'Name: value' options as header JSON.")
@click.option(
    "-H",
    "--header",
    "header_options",
    multiple=True,
    help="Header as 'Name: value' (repeatable).",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Pretty-print with this indentation (default: from config, else compact).",
)
def encode_command(*, header_options: tuple[str, ...], indent: int | None) -> None:
    """Print header JSON for the given headers.

    Args:
        header_options (tuple[str, ...]): ``Name: value`` strings.
        indent (int | None): Indentation override.
    """
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    config: Config = ctx.obj["config"]

    headers: HeaderCollection = collect_header_options(header_options)
    effective_indent: int | None = indent if indent is not None else config.header_indent
    console.print(encode_headers(headers, indent=effective_indent))


@headers_command.command(name="decode", help="Decode header JSON from PATH (default: STDIN).")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def decode_command(*, source: IO[str]) -> None:
    """Print the headers found in header JSON.

    Args:
        source (IO[str]): Open header JSON stream (managed by Click).

    Raises:
        MimicDataError: If the JSON does not have the header wire shape.
    """
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]

    try:
        headers: HeaderCollection = decode_headers(source.read())
    except HeaderFormatError as exc:
        raise MimicDataError(f"{source.name}: {exc}") from exc

    for entry in headers:
        if not entry.values:
            console.print(f"{entry.name}:")
        for value in entry.values:
            console.print(f"{entry.name}: {value}")
