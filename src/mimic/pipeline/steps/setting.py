# topmark:header:start
#
#   project      : Mimic
#   file         : setting.py
#   file_relpath : src/mimic/pipeline/steps/setting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Setting line step: the last step of every pass.

Parses ``name: value`` from ``ctx.input`` and binds it onto the destination.
Only the first colon separates name and value, so values may contain colons
(``Path: http://localhost:8080/x`` binds ``http://localhost:8080/x``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from mimic.config.logging import get_logger
from mimic.constants import SETTING_SEPARATOR
from mimic.core.errors import SettingFormatError, UnknownSettingError
from mimic.pipeline.status import StepSignal
from mimic.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from mimic.config.logging import MimicLogger
    from mimic.pipeline.context import ParseContext

logger: MimicLogger = get_logger(__name__)

SETTING_NAME: Final[int] = 0
SETTING_VALUE: Final[int] = 1
# Split on the first separator only
MAX_PARTS: Final[int] = 2

FORMAT_HINT: Final[str] = (
    "Settings must have a name and a value. For example: MyFavoriteColor: Red"
)


class SettingStep(BaseStep):
    """Bind a ``name: value`` line onto the destination. Terminal: always stops."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: ParseContext) -> StepSignal:
        parts: list[str] = [p.strip() for p in ctx.input.split(SETTING_SEPARATOR, MAX_PARTS - 1)]
        if len(parts) != MAX_PARTS:
            raise SettingFormatError(FORMAT_HINT, line_number=ctx.line_number)

        name: str = parts[SETTING_NAME]
        value: str = parts[SETTING_VALUE]
        if not name:
            raise SettingFormatError(
                f"Setting name must not be empty. {FORMAT_HINT}", line_number=ctx.line_number
            )
        if not value:
            raise SettingFormatError(
                f"Setting value of '{name}' must not be empty. {FORMAT_HINT}",
                line_number=ctx.line_number,
            )

        if not ctx.field_binder.has_setting(ctx.state, name):
            raise UnknownSettingError(name, line_number=ctx.line_number)
        ctx.field_binder.bind(ctx.state, name, value)
        logger.debug("Line %d: %s = %r", ctx.line_number, name, value)

        return StepSignal.STOP
