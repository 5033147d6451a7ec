# topmark:header:start
#
#   project      : Mimic
#   file         : body.py
#   file_relpath : src/mimic/pipeline/steps/body.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Body marker step.

When the current line is exactly the body marker (``# Body``), everything left
in the cursor becomes the value of the ``Body`` setting, verbatim. The match is
exact: ``Body: value`` is an ordinary setting line, and ``# body`` is a comment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mimic.config.logging import get_logger
from mimic.core.errors import UnknownSettingError
from mimic.pipeline.status import HaltReason, StepSignal
from mimic.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from mimic.config.logging import MimicLogger
    from mimic.pipeline.context import ParseContext

logger: MimicLogger = get_logger(__name__)


class BodyMarkerStep(BaseStep):
    """Read the rest of the stream into the body setting when the marker line is seen."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: ParseContext) -> StepSignal:
        if ctx.input != ctx.config.body_marker:
            return StepSignal.PROCEED

        setting: str = ctx.config.body_setting
        if not ctx.field_binder.has_setting(ctx.state, setting):
            raise UnknownSettingError(setting, line_number=ctx.line_number)

        body: str = ctx.cursor.read()
        logger.debug("Body marker at line %d: read %d characters", ctx.line_number, len(body))
        ctx.field_binder.bind(ctx.state, setting, body)

        # The cursor is exhausted; no further line can follow.
        ctx.request_halt(reason=HaltReason.BODY, at_step=self.name)
        return StepSignal.STOP
