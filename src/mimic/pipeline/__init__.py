# topmark:header:start
#
#   project      : Mimic
#   file         : __init__.py
#   file_relpath : src/mimic/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-oriented pipeline that parses service definitions onto settings objects."""

from __future__ import annotations

from mimic.pipeline.context import FlowControl, ParseContext
from mimic.pipeline.pipelines import DEFINITION_PIPELINE, build_definition_pipeline
from mimic.pipeline.runner import parse_file, parse_stream, parse_text, run, run_pass
from mimic.pipeline.status import HaltReason, StepSignal

__all__: list[str] = [
    "DEFINITION_PIPELINE",
    "FlowControl",
    "HaltReason",
    "ParseContext",
    "StepSignal",
    "build_definition_pipeline",
    "parse_file",
    "parse_stream",
    "parse_text",
    "run",
    "run_pass",
]
