# topmark:header:start
#
#   project      : Mimic
#   file         : pipelines.py
#   file_relpath : src/mimic/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline definitions.

A pipeline is an ordered tuple of steps run once per input line. The order is
fixed: read the line, drop comments and blank lines, switch to body mode on the
body marker, otherwise parse a ``name: value`` setting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from mimic.pipeline.steps import BodyMarkerStep, ReadLineStep, SettingStep, SkipCommentsStep

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mimic.pipeline.contracts import Step


def build_definition_pipeline() -> tuple[Step, ...]:
    """Return a fresh instance of the definition pipeline."""
    return (
        ReadLineStep(),
        SkipCommentsStep(),
        BodyMarkerStep(),
        SettingStep(),
    )


DEFINITION_PIPELINE: Final[Sequence[Step]] = build_definition_pipeline()
