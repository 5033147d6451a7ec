# topmark:header:start
#
#   project      : Mimic
#   file         : comments.py
#   file_relpath : src/mimic/pipeline/steps/comments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment and blank line filter step.

Ends the pass for blank lines and for lines starting with the comment marker
(``#``), e.g. ``# Comments begin with a hash mark``. The body marker also
starts with ``#``; the exact marker line is let through for the body step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mimic.pipeline.status import StepSignal
from mimic.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from mimic.pipeline.context import ParseContext


class SkipCommentsStep(BaseStep):
    """Stop the pass on blank lines and comments; proceed otherwise."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: ParseContext) -> StepSignal:
        line: str = ctx.input
        if not line or line.isspace():
            return StepSignal.STOP
        if line.startswith(ctx.config.comment_marker) and line != ctx.config.body_marker:
            return StepSignal.STOP
        return StepSignal.PROCEED
