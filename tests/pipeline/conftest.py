# topmark:header:start
#
#   project      : Mimic
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared test utilities for the definition pipeline.

Key utilities:
  * Destination: a plain dataclass destination with ``Method``/``Path``/``Body`` settings.
  * make_pipeline_context(text, state): a context over an in-memory stream.
  * run_reader(ctx) / run_step(step, ctx): drive individual steps.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mimic.pipeline.context import ParseContext
from mimic.pipeline.steps import ReadLineStep

if TYPE_CHECKING:
    from mimic.config.model import Config
    from mimic.pipeline.contracts import Step
    from mimic.pipeline.status import StepSignal
    from mimic.settings.binder import FieldBinder


@dataclass
class Destination:
    """Destination whose field names are the accepted setting names."""

    Method: str | None = None
    Path: str | None = None
    Body: str | None = None


def make_pipeline_context(
    text: str,
    state: object | None = None,
    *,
    binder: FieldBinder | None = None,
    config: Config | None = None,
) -> ParseContext:
    """Return a context reading ``text`` into ``state`` (a fresh `Destination` by default)."""
    if config is None:
        return ParseContext(io.StringIO(text), state or Destination(), binder=binder)
    return ParseContext(io.StringIO(text), state or Destination(), binder=binder, config=config)


def run_reader(ctx: ParseContext) -> StepSignal:
    """Read the next line into ``ctx.input``."""
    return ReadLineStep()(ctx)


def run_step(step: Step, ctx: ParseContext) -> StepSignal:
    """Read the next line, then run ``step`` on it."""
    run_reader(ctx)
    return step(ctx)
