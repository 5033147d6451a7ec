# topmark:header:start
#
#   project      : Mimic
#   file         : console.py
#   file_relpath : src/mimic/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Messages intended for end users go through `ClickConsole`; ``logging`` is
reserved for diagnostics.
"""

from __future__ import annotations

from typing import Any

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
    """

    def __init__(self, *, enable_color: bool = True) -> None:
        self.enable_color = enable_color

    @property
    def _color(self) -> bool | None:
        # None lets Click strip ANSI codes when the stream is not a terminal
        return None if self.enable_color else False

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, color=self._color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with click.style (plain when color is disabled).

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments supported by click.style.

        Returns:
            str: The styled text.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
