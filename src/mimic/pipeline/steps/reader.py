# topmark:header:start
#
#   project      : Mimic
#   file         : reader.py
#   file_relpath : src/mimic/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line reader step: the head of every pass.

Reads the next line from the cursor, strips it and stores it as ``ctx.input``.
A blank line reads as ``"\\n"`` and an exhausted cursor as ``""``, so end of
stream is detected here: the step asks the driver to halt instead of passing
an empty line on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mimic.config.logging import get_logger
from mimic.pipeline.status import HaltReason, StepSignal
from mimic.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from mimic.config.logging import MimicLogger
    from mimic.pipeline.context import ParseContext

logger: MimicLogger = get_logger(__name__)


class ReadLineStep(BaseStep):
    """Read and strip the next line into ``ctx.input``; always proceeds unless at end of stream."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: ParseContext) -> StepSignal:
        raw: str = ctx.cursor.readline()
        if raw == "":
            ctx.input = ""
            ctx.request_halt(reason=HaltReason.END_OF_STREAM, at_step=self.name)
            return StepSignal.STOP

        ctx.line_number += 1
        ctx.input = raw.strip()
        logger.trace("Line %d: %r", ctx.line_number, ctx.input)
        return StepSignal.PROCEED
