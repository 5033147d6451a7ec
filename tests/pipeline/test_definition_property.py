# topmark:header:start
#
#   project      : Mimic
#   file         : test_definition_property.py
#   file_relpath : tests/pipeline/test_definition_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for definition parsing.

Generated ``name: value`` lines (with arbitrary padding) must bind exactly the
stripped name and value, and any text after the body marker must come back
unchanged as the body.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from mimic.pipeline.runner import parse_text
from mimic.settings.binder import SchemaBinder
from tests.strategies_mimic import s_setting_name, s_setting_value

if TYPE_CHECKING:
    from mimic.settings.binder import Setter

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

s_padding: st.SearchStrategy[str] = st.sampled_from(["", " ", "  ", "\t"])


class Recorder:
    """Destination that records every bound setting, in order."""

    def __init__(self) -> None:
        self.bound: list[tuple[str, str]] = []


def _recording_binder(names: list[str]) -> SchemaBinder:
    def setter_for(name: str) -> Setter:
        def _record(state: Any, value: str) -> None:
            state.bound.append((name, value))

        return _record

    return SchemaBinder({name: setter_for(name) for name in names})


@settings(deadline=None, max_examples=100)
@given(
    pairs=st.lists(st.tuples(s_setting_name, s_setting_value), min_size=1, max_size=5),
    pad=s_padding,
)
def test_setting_lines_bind_stripped_name_and_value(
    pairs: list[tuple[str, str]],
    pad: str,
) -> None:
    """Each line binds its stripped name and its value split at the first colon."""
    text: str = "".join(f"{pad}{name}{pad}:{pad}{value}{pad}\n" for name, value in pairs)
    recorder = Recorder()

    parse_text(text, recorder, binder=_recording_binder([name for name, _ in pairs]))

    assert recorder.bound == [(name, value.strip()) for name, value in pairs]


@settings(deadline=None, max_examples=100)
@given(body=st.text(alphabet=st.characters(blacklist_categories=("Cs",))))
def test_body_is_taken_verbatim(body: str) -> None:
    """Everything after the body marker line is the body."""
    recorder = Recorder()

    parse_text("# Body\n" + body, recorder, binder=_recording_binder(["Body"]))

    assert recorder.bound == [("Body", body)]
