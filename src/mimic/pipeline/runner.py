# topmark:header:start
#
#   project      : Mimic
#   file         : runner.py
#   file_relpath : src/mimic/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the definition pipeline over a text stream.

[`run_pass`][mimic.pipeline.runner.run_pass] processes one line: it runs the
steps in order and ends the pass on the first ``STOP``.
[`run`][mimic.pipeline.runner.run] is the driver, repeating passes until a step
halts the parse (end of stream, or the body consumed the rest of it).

The ``parse_*`` helpers build the context for common inputs and return the
populated destination. Streams passed in stay open; only `parse_file` opens
(and closes) a file itself.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from mimic.config.logging import get_logger
from mimic.config.model import Config
from mimic.core.errors import require
from mimic.pipeline.context import ParseContext
from mimic.pipeline.pipelines import DEFINITION_PIPELINE
from mimic.pipeline.status import StepSignal

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mimic.config.logging import MimicLogger
    from mimic.pipeline.context import TextCursor
    from mimic.pipeline.contracts import Step
    from mimic.settings.binder import FieldBinder

logger: MimicLogger = get_logger(__name__)

StateT = TypeVar("StateT")


def run_pass(ctx: ParseContext, steps: Sequence[Step]) -> StepSignal:
    """Run one pass (one input line) through ``steps``.

    Args:
        ctx (ParseContext): Mutable parse context.
        steps (Sequence[Step]): Ordered pipeline steps.

    Returns:
        StepSignal: ``STOP`` if a step ended the pass, ``PROCEED`` if every step proceeded.

    Raises:
        MissingArgumentError: If ``ctx`` or ``steps`` is None.
    """
    require(ctx, "ctx")
    require(steps, "steps")

    ctx.steps.clear()
    for step in steps:
        if step(ctx) is StepSignal.STOP:
            return StepSignal.STOP
    return StepSignal.PROCEED


def run(ctx: ParseContext, steps: Sequence[Step] | None = None) -> ParseContext:
    """Drive passes until a step halts the parse.

    Args:
        ctx (ParseContext): Mutable parse context.
        steps (Sequence[Step] | None): Ordered pipeline steps (default: the definition pipeline).

    Returns:
        ParseContext: The same context, after the last pass.
    """
    require(ctx, "ctx")
    pipeline: Sequence[Step] = DEFINITION_PIPELINE if steps is None else steps

    logger.debug("Parsing into %s", type(ctx.state).__name__)
    while not ctx.is_halted:
        run_pass(ctx, pipeline)
    logger.debug(
        "Parsed %d line(s) into %s (%s)",
        ctx.line_number,
        type(ctx.state).__name__,
        ctx.flow.reason.value if ctx.flow.reason else "",
    )
    return ctx


def parse_stream(
    cursor: TextCursor,
    state: StateT,
    *,
    binder: FieldBinder | None = None,
    config: Config | None = None,
) -> StateT:
    """Parse a definition from an open text stream into ``state``.

    Args:
        cursor (TextCursor): Text stream positioned at the start of the definition.
            It is read to the end but not closed.
        state (StateT): Destination object.
        binder (FieldBinder | None): Binder to use (default: resolved from ``state``).
        config (Config | None): Effective configuration (default: built-in defaults).

    Returns:
        StateT: ``state``, populated.
    """
    ctx = ParseContext(cursor=cursor, state=state, binder=binder, config=config or Config())
    run(ctx)
    return state


def parse_text(
    text: str,
    state: StateT,
    *,
    binder: FieldBinder | None = None,
    config: Config | None = None,
) -> StateT:
    """Parse a definition held in a string into ``state``."""
    require(text, "text")
    with io.StringIO(text) as cursor:
        return parse_stream(cursor, state, binder=binder, config=config)


def parse_file(
    path: Path | str,
    state: StateT,
    *,
    binder: FieldBinder | None = None,
    config: Config | None = None,
) -> StateT:
    """Parse a definition file into ``state``.

    The file is opened with ``config.encoding`` and closed when done.

    Args:
        path (Path | str): Definition file path.
        state (StateT): Destination object.
        binder (FieldBinder | None): Binder to use (default: resolved from ``state``).
        config (Config | None): Effective configuration (default: built-in defaults).

    Returns:
        StateT: ``state``, populated.
    """
    require(path, "path")
    cfg: Config = config or Config()
    # newline="" keeps the body's line endings exactly as written
    with Path(path).open("r", encoding=cfg.encoding, newline="") as cursor:
        return parse_stream(cursor, state, binder=binder, config=cfg)
