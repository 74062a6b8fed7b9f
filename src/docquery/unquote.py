"""Backslash escape decoding for stored JSON string text.

Recognised escapes: ``\\"``, ``\\b``, ``\\f``, ``\\n``, ``\\r``, ``\\t``,
``\\\\`` and ``\\uXXXX``. Any other escaped character is kept with its
backslash dropped.
"""

from __future__ import annotations

import string

from .errors import InvalidUnicodeEscapeError, MalformedEscapeError

ESCAPED_UNICODE_LENGTH = 4

# \t decodes to vertical tab (0x0B), matching the stored-text dialect.
_SIMPLE_ESCAPES = {
    '"': '"',
    "b": "\x08",
    "f": "\x0c",
    "n": "\x0a",
    "r": "\x0d",
    "t": "\x0b",
    "\\": "\\",
}

_HEX_DIGITS = frozenset(string.hexdigits)


def decode_escaped_unicode(digits: str) -> str:
    """Decode the 4 hex digits of a ``\\u`` escape into one character."""

    if len(digits) != ESCAPED_UNICODE_LENGTH or not _HEX_DIGITS.issuperset(digits):
        raise InvalidUnicodeEscapeError(
            f"invalid unicode escape digits {digits!r}", text=digits
        )
    code_point = int(digits, 16)
    if 0xD800 <= code_point <= 0xDFFF:
        raise InvalidUnicodeEscapeError(
            f"unicode escape {digits!r} is a surrogate, not a character", text=digits
        )
    return chr(code_point)


def unquote_string(text: str) -> str:
    """Decode every escape sequence in ``text``.

    Raises ``MalformedEscapeError`` for a trailing backslash or a truncated
    ``\\u`` escape and ``InvalidUnicodeEscapeError`` for bad ``\\u`` digits.
    """

    decoded: list[str] = []
    position = 0
    length = len(text)
    while position < length:
        char = text[position]
        if char != "\\":
            decoded.append(char)
            position += 1
            continue

        if position + 1 >= length:
            raise MalformedEscapeError(
                "missing a closing quotation mark in string",
                text=text,
                position=position,
            )

        escape = text[position + 1]
        if escape != "u":
            decoded.append(_SIMPLE_ESCAPES.get(escape, escape))
            position += 2
            continue

        start = position + 2
        digits = text[start : start + ESCAPED_UNICODE_LENGTH]
        if len(digits) < ESCAPED_UNICODE_LENGTH:
            raise MalformedEscapeError(
                f"invalid unicode: {digits!r}", text=text, position=position
            )
        try:
            decoded.append(decode_escaped_unicode(digits))
        except InvalidUnicodeEscapeError as exc:
            raise InvalidUnicodeEscapeError(
                str(exc), text=text, position=position
            ) from exc
        position = start + ESCAPED_UNICODE_LENGTH

    return "".join(decoded)


__all__ = ["ESCAPED_UNICODE_LENGTH", "decode_escaped_unicode", "unquote_string"]
