# topmark:header:start
#
#   project      : Mimic
#   file         : status.py
#   file_relpath : src/mimic/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Control signals returned by pipeline steps."""

from __future__ import annotations

from enum import Enum


class StepSignal(Enum):
    """What the runner does after a step returns.

    Attributes:
        PROCEED: Run the next step of the current pass.
        STOP: End the current pass; no further step runs for this line.
    """

    PROCEED = "proceed"
    STOP = "stop"


class HaltReason(str, Enum):
    """Why a step asked the driver to stop reading lines altogether."""

    END_OF_STREAM = "eof"
    BODY = "body"
