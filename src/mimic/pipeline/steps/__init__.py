# topmark:header:start
#
#   project      : Mimic
#   file         : __init__.py
#   file_relpath : src/mimic/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline steps for parsing service definitions."""

from __future__ import annotations

from mimic.pipeline.steps.base import BaseStep
from mimic.pipeline.steps.body import BodyMarkerStep
from mimic.pipeline.steps.comments import SkipCommentsStep
from mimic.pipeline.steps.reader import ReadLineStep
from mimic.pipeline.steps.setting import SettingStep

__all__: list[str] = [
    "BaseStep",
    "BodyMarkerStep",
    "ReadLineStep",
    "SettingStep",
    "SkipCommentsStep",
]
