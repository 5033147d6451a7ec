# topmark:header:start
#
#   project      : Mimic
#   file         : codec.py
#   file_relpath : src/mimic/headers/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header collection <-> JSON codec.

Wire shape::

    [ {"<name1>": ["<v1>", "<v2>", ...]},
      {"<name2>": ["<v1>", ...]},
      ... ]

Each header entry becomes a single-key object inside a top-level array. A
plain JSON object keyed by header name cannot represent a collection in which
two entries share a name, so entries are never merged or dropped here. Entry
order and value order round-trip exactly; an empty collection encodes as
``[]``.

Decoding walks the token stream (see [`mimic.headers.tokens`][mimic.headers.tokens])
and fails on the first token that deviates from the shape above.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from mimic.config.logging import get_logger
from mimic.core.errors import HeaderFormatError, require
from mimic.headers.model import HeaderCollection
from mimic.headers.tokens import JsonTokenKind, JsonTokenReader, unexpected_token

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mimic.config.logging import MimicLogger
    from mimic.headers.tokens import JsonToken

logger: MimicLogger = get_logger(__name__)


def encode_headers(
    headers: Iterable[tuple[str, Iterable[str]]],
    *,
    indent: int | None = None,
) -> str:
    """Encode an ordered header collection as header JSON.

    Args:
        headers (Iterable[tuple[str, Iterable[str]]]): A
            [`HeaderCollection`][mimic.headers.model.HeaderCollection] or any iterable of
            ``(name, values)`` pairs.
        indent (int | None): Pretty-print indentation; None for compact output.

    Returns:
        str: The JSON text.

    Raises:
        MissingArgumentError: If ``headers`` is None.
    """
    require(headers, "headers")
    # Single-key objects: one dict per entry, so repeated names cannot collide.
    document: list[dict[str, list[str]]] = [
        {name: list(values)} for name, values in HeaderCollection(headers)
    ]
    return json.dumps(document, indent=indent, ensure_ascii=False)


def decode_headers(text: str | bytes) -> HeaderCollection:
    """Decode header JSON into an ordered header collection.

    Args:
        text (str | bytes): The JSON text (bytes are decoded as UTF-8).

    Returns:
        HeaderCollection: The decoded collection (empty for ``[]``).

    Raises:
        MissingArgumentError: If ``text`` is None.
        HeaderFormatError: If the text is not valid JSON of the expected shape.
    """
    require(text, "text")
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HeaderFormatError(f"Header JSON is not valid UTF-8: {exc}") from exc

    reader = JsonTokenReader(text)
    headers = HeaderCollection()

    reader.expect(JsonTokenKind.START_ARRAY)
    while True:
        token: JsonToken = reader.next()
        if token.kind is JsonTokenKind.END_ARRAY:
            break
        if token.kind is not JsonTokenKind.START_OBJECT:
            raise unexpected_token(token, JsonTokenKind.START_OBJECT.value)
        name, values = _read_entry(reader)
        headers.add(name, values)
    reader.expect_end()

    logger.trace("Decoded %d header entries", len(headers))
    return headers


def _read_entry(reader: JsonTokenReader) -> tuple[str, list[str]]:
    # The opening '{' has been consumed; read `"name": [values...] }`
    name_token: JsonToken = reader.expect(JsonTokenKind.PROPERTY_NAME)
    reader.expect(JsonTokenKind.START_ARRAY)

    values: list[str] = []
    while True:
        token: JsonToken = reader.next()
        if token.kind is JsonTokenKind.END_ARRAY:
            break
        if token.kind is not JsonTokenKind.STRING:
            raise unexpected_token(token, JsonTokenKind.STRING.value)
        values.append(str(token.value))

    reader.expect(JsonTokenKind.END_OBJECT)
    return str(name_token.value), values
