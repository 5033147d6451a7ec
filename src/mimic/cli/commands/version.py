# topmark:header:start
#
#   project      : Mimic
#   file         : version.py
#   file_relpath : src/mimic/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mimic `version` command.

Prints the current Mimic version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from mimic.constants import MIMIC_VERSION

if TYPE_CHECKING:
    from mimic.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Mimic.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of Mimic.

    Args:
        output_format (str): ``text`` (default) or ``json``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if output_format == "json":
        console.print(json.dumps({"version": MIMIC_VERSION}))
    else:
        console.print(console.styled(MIMIC_VERSION, bold=True))
