from __future__ import annotations


class DocQueryError(Exception):
    """Base class for all docquery errors."""


class UnquoteError(DocQueryError, ValueError):
    """Raised when escaped text cannot be decoded.

    ``text`` is the input being decoded and ``position`` the offset of the
    backslash that started the failing escape, when known.
    """

    def __init__(self, message: str, *, text: str, position: int | None = None):
        super().__init__(message)
        self.text = text
        self.position = position


class MalformedEscapeError(UnquoteError):
    """A trailing backslash, or a ``\\u`` escape with fewer than 4 characters."""


class InvalidUnicodeEscapeError(UnquoteError):
    """A ``\\u`` escape whose digits are not hex or do not name a scalar character."""


__all__ = [
    "DocQueryError",
    "InvalidUnicodeEscapeError",
    "MalformedEscapeError",
    "UnquoteError",
]
