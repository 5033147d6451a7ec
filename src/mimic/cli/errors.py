# topmark:header:start
#
#   project      : Mimic
#   file         : errors.py
#   file_relpath : src/mimic/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Mimic CLI.

Commands translate library errors into these Click exceptions so each failure
kind leaves with its own exit code and a plain message on stderr.
"""

from __future__ import annotations

import click

from mimic.cli.exit_codes import ExitCode


class MimicCliError(click.ClickException):
    """Base class for all Mimic CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class MimicDataError(MimicCliError):
    """Error for malformed definitions or header JSON."""

    exit_code = ExitCode.DATA_ERROR


class MimicConfigError(MimicCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class MimicFileNotFoundError(MimicCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MimicIOError(MimicCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR
