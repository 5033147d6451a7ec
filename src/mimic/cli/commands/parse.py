# topmark:header:start
#
#   project      : Mimic
#   file         : parse.py
#   file_relpath : src/mimic/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mimic `parse` command.

Parses a service definition file (or STDIN with ``-``) into a
[`ServiceDefinition`][mimic.settings.model.ServiceDefinition] and prints the
resulting settings as text or JSON. Any malformed line, unknown setting or
invalid ``Headers`` value aborts with exit code 65.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from mimic.cli.errors import MimicDataError, MimicFileNotFoundError, MimicIOError
from mimic.config.logging import get_logger
from mimic.core.errors import DefinitionError, HeaderFormatError
from mimic.headers.codec import encode_headers
from mimic.pipeline.runner import parse_file, parse_stream
from mimic.settings.model import ServiceDefinition

if TYPE_CHECKING:
    from mimic.cli.console import ClickConsole
    from mimic.config.logging import MimicLogger
    from mimic.config.model import Config
    from mimic.headers.model import HeaderCollection

logger: MimicLogger = get_logger(__name__)

STDIN_PATH: str = "-"


def _load_definition(path: Path, config: Config) -> ServiceDefinition:
    """Parse ``path`` (or STDIN) and translate library errors into CLI errors.

    Raises:
        MimicFileNotFoundError: If ``path`` does not exist.
        MimicDataError: If the definition is malformed.
        MimicIOError: If the file cannot be read.
    """
    definition = ServiceDefinition()
    try:
        if str(path) == STDIN_PATH:
            parse_stream(click.get_text_stream("stdin"), definition, config=config)
        else:
            parse_file(path, definition, config=config)
        # Validate the typed views up front so errors surface here
        definition.http_status()
        definition.header_collection()
    except FileNotFoundError as exc:
        raise MimicFileNotFoundError(f"No such file: {path}") from exc
    except (DefinitionError, HeaderFormatError) as exc:
        raise MimicDataError(f"{path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise MimicDataError(f"{path}: not valid {config.encoding} text ({exc.reason})") from exc
    except OSError as exc:
        raise MimicIOError(f"{path}: {exc}") from exc
    return definition


def _render_text(console: ClickConsole, definition: ServiceDefinition) -> None:
    headers: HeaderCollection = definition.header_collection()
    for name, value in definition.to_dict().items():
        if name in ("Headers", "Body") or value is None:
            continue
        console.print(f"{console.styled(name, bold=True)}: {value}")
    if headers:
        console.print(console.styled("Headers", bold=True) + ":")
        for entry in headers:
            console.print(f"  {entry.name}: {', '.join(entry.values)}")
    if definition.body is not None:
        console.print(console.styled("Body", bold=True) + ":")
        console.print(definition.body, nl=not definition.body.endswith("\n"))


@click.command(
    name="parse",
    help="Parse a service definition file (use '-' for STDIN) and print its settings.",
)
@click.argument("path", type=click.Path(dir_okay=False, allow_dash=True, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
def parse_command(*, path: Path, output_format: str = "text") -> None:
    """Parse a service definition and print its settings.

    Args:
        path (Path): Definition file, or ``-`` for STDIN.
        output_format (str): ``text`` (default) or ``json``.
    """
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    config: Config = ctx.obj["config"]

    definition: ServiceDefinition = _load_definition(path, config)
    logger.info("Parsed %s %s from %s", definition.method, definition.path, path)

    if output_format == "json":
        data: dict[str, Any] = dict(definition.to_dict())
        data["Headers"] = json.loads(encode_headers(definition.header_collection()))
        console.print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        _render_text(console, definition)
