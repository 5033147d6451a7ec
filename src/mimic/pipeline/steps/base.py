# topmark:header:start
#
#   project      : Mimic
#   file         : base.py
#   file_relpath : src/mimic/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    signal = step(ctx)  # internally: validate ctx → bookkeeping → run

Subclasses only implement ``run()`` and return a
[`StepSignal`][mimic.pipeline.status.StepSignal]: ``PROCEED`` hands the line to
the next step, ``STOP`` ends the pass for this line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mimic.config.logging import get_logger
from mimic.core.errors import require
from mimic.pipeline.status import StepSignal

if TYPE_CHECKING:
    from mimic.config.logging import MimicLogger
    from mimic.pipeline.context import ParseContext

logger: MimicLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Attributes:
        name (str): Stable step identifier for logs and tracing.
    """

    name: str

    def __call__(self, ctx: ParseContext) -> StepSignal:
        """Invoke the step lifecycle: validate → bookkeeping → run.

        Args:
            ctx (ParseContext): The mutable parse context for the current line.

        Returns:
            StepSignal: The signal returned by ``run()``.

        Raises:
            MissingArgumentError: If ``ctx`` is None.
        """
        require(ctx, "ctx")
        ctx.steps.append(self.name)

        signal: StepSignal = self.run(ctx)
        logger.trace("Step %s on line %d: %s", self.name, ctx.line_number, signal.value)
        return signal

    def run(self, ctx: ParseContext) -> StepSignal:
        """Perform the step's work, mutating ``ctx`` in place.

        Args:
            ctx (ParseContext): The mutable parse context.

        Returns:
            StepSignal: ``PROCEED`` (default) to hand the line to the next step.
        """
        return StepSignal.PROCEED
