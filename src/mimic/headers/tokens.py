# topmark:header:start
#
#   project      : Mimic
#   file         : tokens.py
#   file_relpath : src/mimic/headers/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token-level JSON reader.

The header codec validates its input token by token instead of loading it into
Python objects: a JSON object cannot hold repeated keys once deserialized, and
the expected document shape must be checked element by element.

`iter_json_tokens` lexes the text with a single compiled regex and runs a small
syntax state machine over the lexemes, yielding structural tokens
(``START_ARRAY``, ``PROPERTY_NAME``, ``STRING`` ...) with their character
offsets. Syntax errors (bad characters, missing separators, unterminated or
trailing content) raise [`HeaderFormatError`][mimic.core.errors.HeaderFormatError]
as soon as the offending lexeme is reached.
"""

from __future__ import annotations

import json
import re
from enum import Enum
from typing import TYPE_CHECKING, Final, NamedTuple

from mimic.core.errors import HeaderFormatError

if TYPE_CHECKING:
    from collections.abc import Iterator


class JsonTokenKind(Enum):
    """Kinds of structural JSON tokens."""

    START_ARRAY = "start of array"
    END_ARRAY = "end of array"
    START_OBJECT = "start of object"
    END_OBJECT = "end of object"
    PROPERTY_NAME = "property name"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class JsonToken(NamedTuple):
    """A structural JSON token: kind, decoded value (for scalars/names) and offset."""

    kind: JsonTokenKind
    value: str | int | float | bool | None
    offset: int


_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    r'(?P<STRING>"(?:[^"\\\x00-\x1f]|\\.)*")'
    r"|(?P<NUMBER>-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?)"
    r"|(?P<LITERAL>true|false|null)"
    r"|(?P<PUNCT>[\[\]{},:])"
    r"|(?P<WS>[ \t\r\n]+)"
)

_LITERALS: Final[dict[str, tuple[JsonTokenKind, bool | None]]] = {
    "true": (JsonTokenKind.BOOLEAN, True),
    "false": (JsonTokenKind.BOOLEAN, False),
    "null": (JsonTokenKind.NULL, None),
}


class _Expect(Enum):
    # What the syntax state machine accepts next
    VALUE = "a value"
    VALUE_OR_END = "a value or ']'"
    KEY_OR_END = "a property name or '}'"
    KEY = "a property name"
    COLON = "':'"
    COMMA_OR_END = "',' or a closing bracket"
    DONE = "end of input"


_VALUE_STATES: Final[frozenset[_Expect]] = frozenset({_Expect.VALUE, _Expect.VALUE_OR_END})
_KEY_STATES: Final[frozenset[_Expect]] = frozenset({_Expect.KEY, _Expect.KEY_OR_END})


def _syntax_error(found: str, expect: _Expect, offset: int) -> HeaderFormatError:
    return HeaderFormatError(
        f"Invalid JSON: found {found} at offset {offset}, expected {expect.value}",
        offset=offset,
    )


def _decode_string(raw: str, offset: int) -> str:
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise HeaderFormatError(
            f"Invalid JSON string at offset {offset}: {exc.msg}", offset=offset
        ) from exc
    return value


def _decode_number(raw: str, offset: int) -> int | float:
    if any(c in raw for c in ".eE"):
        return float(raw)
    try:
        return int(raw)
    except ValueError as exc:
        # int() refuses strings longer than sys.get_int_max_str_digits()
        raise HeaderFormatError(
            f"Invalid JSON number at offset {offset}: {exc}",
            offset=offset,
            token_kind=JsonTokenKind.NUMBER.name,
        ) from exc


def iter_json_tokens(text: str) -> Iterator[JsonToken]:
    """Yield the structural tokens of a JSON document.

    Args:
        text (str): The JSON document.

    Yields:
        JsonToken: Tokens in document order.

    Raises:
        HeaderFormatError: If ``text`` is not a single, well-formed JSON value.
    """
    stack: list[JsonTokenKind] = []  # open containers: START_ARRAY / START_OBJECT
    expect: _Expect = _Expect.VALUE
    pos: int = 0
    end: int = len(text)

    def after_value() -> _Expect:
        return _Expect.COMMA_OR_END if stack else _Expect.DONE

    while pos < end:
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise _syntax_error(f"invalid character {text[pos]!r}", expect, pos)
        kind: str | None = m.lastgroup
        lexeme: str = m.group()
        offset: int = pos
        pos = m.end()

        if kind == "WS":
            continue

        if expect is _Expect.DONE:
            raise _syntax_error(f"trailing content {lexeme!r}", expect, offset)

        if kind == "STRING":
            value: str = _decode_string(lexeme, offset)
            if expect in _KEY_STATES:
                yield JsonToken(JsonTokenKind.PROPERTY_NAME, value, offset)
                expect = _Expect.COLON
            elif expect in _VALUE_STATES:
                yield JsonToken(JsonTokenKind.STRING, value, offset)
                expect = after_value()
            else:
                raise _syntax_error("a string", expect, offset)

        elif kind in ("NUMBER", "LITERAL"):
            if expect not in _VALUE_STATES:
                raise _syntax_error(repr(lexeme), expect, offset)
            if kind == "NUMBER":
                yield JsonToken(JsonTokenKind.NUMBER, _decode_number(lexeme, offset), offset)
            else:
                literal_kind, literal_value = _LITERALS[lexeme]
                yield JsonToken(literal_kind, literal_value, offset)
            expect = after_value()

        elif lexeme in "[{":
            if expect not in _VALUE_STATES:
                raise _syntax_error(repr(lexeme), expect, offset)
            if lexeme == "[":
                stack.append(JsonTokenKind.START_ARRAY)
                yield JsonToken(JsonTokenKind.START_ARRAY, None, offset)
                expect = _Expect.VALUE_OR_END
            else:
                stack.append(JsonTokenKind.START_OBJECT)
                yield JsonToken(JsonTokenKind.START_OBJECT, None, offset)
                expect = _Expect.KEY_OR_END

        elif lexeme == "]":
            if (
                not stack
                or stack[-1] is not JsonTokenKind.START_ARRAY
                or expect not in (_Expect.VALUE_OR_END, _Expect.COMMA_OR_END)
            ):
                raise _syntax_error("']'", expect, offset)
            stack.pop()
            yield JsonToken(JsonTokenKind.END_ARRAY, None, offset)
            expect = after_value()

        elif lexeme == "}":
            if (
                not stack
                or stack[-1] is not JsonTokenKind.START_OBJECT
                or expect not in (_Expect.KEY_OR_END, _Expect.COMMA_OR_END)
            ):
                raise _syntax_error("'}'", expect, offset)
            stack.pop()
            yield JsonToken(JsonTokenKind.END_OBJECT, None, offset)
            expect = after_value()

        elif lexeme == ",":
            if expect is not _Expect.COMMA_OR_END:
                raise _syntax_error("','", expect, offset)
            expect = _Expect.KEY if stack[-1] is JsonTokenKind.START_OBJECT else _Expect.VALUE

        else:  # ":"
            if expect is not _Expect.COLON:
                raise _syntax_error("':'", expect, offset)
            expect = _Expect.VALUE

    if expect is not _Expect.DONE:
        raise _syntax_error("end of input", expect, end)


class JsonTokenReader:
    """Pull-style reader over [`iter_json_tokens`][mimic.headers.tokens.iter_json_tokens].

    Args:
        text (str): The JSON document.
    """

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[JsonToken] = iter_json_tokens(text)
        self._end: int = len(text)

    def next(self) -> JsonToken:
        """Return the next token.

        Raises:
            HeaderFormatError: If the document is malformed or has no more tokens.
        """
        token: JsonToken | None = next(self._tokens, None)
        if token is None:
            raise HeaderFormatError(
                f"Unexpected end of JSON input at offset {self._end}", offset=self._end
            )
        return token

    def expect(self, kind: JsonTokenKind) -> JsonToken:
        """Return the next token, which must be of ``kind``.

        Raises:
            HeaderFormatError: If the next token is of another kind.
        """
        token: JsonToken = self.next()
        if token.kind is not kind:
            raise unexpected_token(token, kind.value)
        return token

    def expect_end(self) -> None:
        """Check that the document has no further tokens.

        Raises:
            HeaderFormatError: If a token follows, or the document is malformed.
        """
        token: JsonToken | None = next(self._tokens, None)
        if token is not None:
            raise unexpected_token(token, "end of input")


def unexpected_token(token: JsonToken, expected: str) -> HeaderFormatError:
    """Build the error for a token that does not fit the expected shape.

    Args:
        token (JsonToken): The offending token.
        expected (str): Description of what was expected instead.

    Returns:
        HeaderFormatError: The error, carrying the token kind and offset.
    """
    return HeaderFormatError(
        f"Unexpected token: {token.kind.value} at offset {token.offset}, expected {expected}",
        offset=token.offset,
        token_kind=token.kind.name,
    )
