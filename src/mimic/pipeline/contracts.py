# topmark:header:start
#
#   project      : Mimic
#   file         : contracts.py
#   file_relpath : src/mimic/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for pipeline steps (runner-facing).

Steps are instantiated objects that are *callable*; the runner invokes them as
``signal = step(ctx)`` where ``ctx`` is a `ParseContext` and ``signal`` tells
it whether the rest of the pass runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .context import ParseContext
    from .status import StepSignal


class Step(Protocol):
    """Protocol for a single pipeline step.

    Implementations typically subclass
    [`mimic.pipeline.steps.base.BaseStep`][mimic.pipeline.steps.base.BaseStep].
    """

    name: str

    def run(self, ctx: ParseContext) -> StepSignal:
        """Execute the step, mutating the context in place.

        Args:
            ctx (ParseContext): The mutable parse context.

        Returns:
            StepSignal: ``PROCEED`` to continue the pass, ``STOP`` to end it.
        """
        ...

    def __call__(self, ctx: ParseContext) -> StepSignal:
        """Validate the context and run the step.

        Args:
            ctx (ParseContext): The mutable parse context.

        Returns:
            StepSignal: The signal returned by ``run()``.
        """
        ...
