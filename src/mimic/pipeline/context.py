# topmark:header:start
#
#   project      : Mimic
#   file         : context.py
#   file_relpath : src/mimic/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse context model for the Mimic definition pipeline.

A [`ParseContext`][mimic.pipeline.context.ParseContext] carries everything one
parse of a definition stream needs: the read cursor, the current line, the
destination object and the binder that writes onto it. Steps mutate the
context in place; the context itself never closes the cursor.

[`FlowControl`][mimic.pipeline.context.FlowControl] lets a step tell the driver
to stop reading lines (end of stream, or the body consumed the rest).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from mimic.config.logging import get_logger
from mimic.config.model import Config
from mimic.core.errors import MissingArgumentError, require
from mimic.settings.binder import binder_for

if TYPE_CHECKING:
    from mimic.config.logging import MimicLogger
    from mimic.pipeline.status import HaltReason
    from mimic.settings.binder import FieldBinder

logger: MimicLogger = get_logger(__name__)

__all__: list[str] = [
    "FlowControl",
    "ParseContext",
    "TextCursor",
]


class TextCursor(Protocol):
    """Forward-only text reader (satisfied by any text file object)."""

    def readline(self) -> str: ...

    def read(self) -> str: ...


@dataclass
class FlowControl:
    """Execution flow control for the whole parse."""

    halt: bool = False
    reason: HaltReason | None = None
    at_step: str = ""  # step name that requested the halt


@dataclass(eq=False)
class ParseContext:
    """Mutable state of one parse pass over a definition stream.

    Attributes:
        cursor (TextCursor): Reader positioned at the next unread character. Owned by the caller.
        state (object): Destination object receiving the settings. Owned by the caller.
        binder (FieldBinder | None): Binder writing settings onto ``state``; resolved with
            [`binder_for`][mimic.settings.binder.binder_for] when not given.
        config (Config): Effective configuration (markers, body setting name).
        input (str): The current line, stripped of surrounding whitespace.
        line_number (int): 1-based number of the line in ``input`` (0 before the first read).
        flow (FlowControl): Set when the driver must stop reading lines.
        steps (list[str]): Names of the steps run in the current pass.

    Raises:
        MissingArgumentError: If ``cursor`` or ``state`` is None.
    """

    cursor: TextCursor
    state: object
    binder: FieldBinder | None = None
    config: Config = field(default_factory=Config)
    input: str = ""
    line_number: int = 0
    flow: FlowControl = field(default_factory=FlowControl)
    steps: list[str] = field(default_factory=lambda: [])

    def __post_init__(self) -> None:
        require(self.cursor, "cursor")
        require(self.state, "state")
        if self.binder is None:
            self.binder = binder_for(self.state)
        logger.trace("ParseContext created for %s with %r", type(self.state).__name__, self.binder)

    @property
    def is_halted(self) -> bool:
        """Return True once a step has asked the driver to stop reading lines."""
        return self.flow.halt

    @property
    def field_binder(self) -> FieldBinder:
        """Return the binder resolved at construction.

        Raises:
            MissingArgumentError: If ``binder`` was reset to None after construction.
        """
        if self.binder is None:
            raise MissingArgumentError("binder")
        return self.binder

    def request_halt(self, *, reason: HaltReason, at_step: str) -> None:
        """Ask the driver to stop after the current pass.

        Args:
            reason (HaltReason): Why reading stops.
            at_step (str): Name of the requesting step.
        """
        self.flow.halt = True
        self.flow.reason = reason
        self.flow.at_step = at_step
        logger.debug("Parse halted by %s at line %d: %s", at_step, self.line_number, reason.value)
