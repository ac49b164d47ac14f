"""ASCII character classification, case mapping and plain output helpers.

The classification and case functions take a character code (an ``int``) or
a one-character string. They answer for plain ASCII only, whatever the
locale. ``toupper`` and ``tolower`` return the same kind of value they were
given.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

CharCode = Union[int, str]


def _code(value: CharCode) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return value


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def isalpha(code: CharCode) -> bool:
    """Return True for the ASCII letters A-Z and a-z."""
    value = _code(code)
    return 65 <= value <= 90 or 97 <= value <= 122


def isdigit(code: CharCode) -> bool:
    """Return True for the ASCII digits 0-9."""
    return 48 <= _code(code) <= 57


def isalnum(code: CharCode) -> bool:
    """Return True for ASCII letters and digits."""
    return isdigit(code) or isalpha(code)


def isascii(code: CharCode) -> bool:
    """Return True for codes 0 to 127."""
    return 0 <= _code(code) <= 127


def isprint(code: CharCode) -> bool:
    """Return True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(code) <= 126


def toupper(code: CharCode) -> CharCode:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    value = _code(code)
    if ord("a") <= value <= ord("z"):
        value -= 32
    return chr(value) if isinstance(code, str) else value


def tolower(code: CharCode) -> CharCode:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    value = _code(code)
    if ord("A") <= value <= ord("Z"):
        value += 32
    return chr(value) if isinstance(code, str) else value


def putchar(char: str, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _out(stream).write(char)


def putstr(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream``; a missing text writes nothing."""
    if text is None:
        return
    _out(stream).write(text)


def putendl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; a missing text writes nothing."""
    if text is None:
        return
    _out(stream).write(text + "\n")


def putnbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write ``number`` in decimal."""
    _out(stream).write(f"{number:d}")