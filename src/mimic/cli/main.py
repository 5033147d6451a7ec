# topmark:header:start
#
#   project      : Mimic
#   file         : main.py
#   file_relpath : src/mimic/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Mimic CLI.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``console``: the [`ClickConsole`][mimic.cli.console.ClickConsole] for program output,
- ``config``: the effective [`Config`][mimic.config.model.Config],
- ``log_level``: the internal log level (from ``--log-level`` or ``MIMIC_LOG_LEVEL``).
"""

from __future__ import annotations

from pathlib import Path

import click

from mimic.cli.commands.headers import headers_command
from mimic.cli.commands.parse import parse_command
from mimic.cli.commands.version import version_command
from mimic.cli.console import ClickConsole
from mimic.cli.errors import MimicConfigError
from mimic.config.logging import get_logger, parse_log_level, resolve_env_log_level, setup_logging
from mimic.config.model import resolve_config
from mimic.core.errors import ConfigError

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    config_path: Path | None,
    log_level: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging, console, config) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        config_path (Path | None): Explicit config file, or None to discover one.
        log_level (str | None): Explicit log level name, or None to use the environment.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Raises:
        MimicConfigError: If the configuration cannot be loaded.
    """
    ctx.obj = ctx.obj or {}

    level: int | None = parse_log_level(log_level) if log_level else resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    if no_color:
        ctx.color = False
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)

    try:
        ctx.obj["config"] = resolve_config(config_path)
    except ConfigError as exc:
        raise MimicConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", ctx.obj["config"])


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Mimic CLI: parse virtual service definitions and header JSON.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help=(
        "Config file (mimic.toml or pyproject.toml). "
        "Default: discovered from the working directory."
    ),
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        case_sensitive=False,
    ),
    default=None,
    help="Internal log level (overrides MIMIC_LOG_LEVEL).",
)
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    no_color: bool,
) -> None:
    """Entry point for the Mimic CLI."""
    init_common_state(ctx, config_path=config_path, log_level=log_level, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'mimic parse PATH' to parse a service definition.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(parse_command)

cli.add_command(headers_command)
