# topmark:header:start
#
#   project      : Mimic
#   file         : __init__.py
#   file_relpath : src/mimic/headers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered multi-valued header collections and their JSON codec."""

from __future__ import annotations

from mimic.headers.codec import decode_headers, encode_headers
from mimic.headers.model import HeaderCollection, HeaderEntry

__all__: list[str] = [
    "HeaderCollection",
    "HeaderEntry",
    "decode_headers",
    "encode_headers",
]
