# topmark:header:start
#
#   project      : Mimic
#   file         : test_header_codec_property.py
#   file_relpath : tests/headers/test_header_codec_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the header codec.

For any ordered collection (repeated names, empty value lists, arbitrary
Unicode), decoding the encoded text yields an equal collection, and the encoded
text is plain JSON of the documented shape.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from mimic.headers.codec import decode_headers, encode_headers
from tests.strategies_mimic import s_header_collection

if TYPE_CHECKING:
    from mimic.headers.model import HeaderCollection

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(headers=s_header_collection(), indent=st.one_of(st.none(), st.integers(0, 4)))
def test_decode_inverts_encode(headers: HeaderCollection, indent: int | None) -> None:
    """decode(encode(h)) == h, entry order and value order included."""
    assert decode_headers(encode_headers(headers, indent=indent)) == headers


@settings(deadline=None, max_examples=100)
@given(headers=s_header_collection())
def test_encoded_text_matches_wire_shape(headers: HeaderCollection) -> None:
    """The encoded text is a list of single-key objects mapping to string lists."""
    document: list[dict[str, Any]] = json.loads(encode_headers(headers))

    assert all(len(entry) == 1 for entry in document)
    assert [next(iter(entry)) for entry in document] == headers.names()
    assert [list(next(iter(entry.values()))) for entry in document] == [
        list(entry.values) for entry in headers
    ]
