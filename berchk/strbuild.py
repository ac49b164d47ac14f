"""String building helpers: number conversion, splitting, trimming and copying.

Inputs are treated as NUL-terminated, so anything after the first ``"\\0"``
is ignored. Every function returns a new string (or list of strings).
"""

from __future__ import annotations

from collections.abc import Callable

from berchk.strutil import strlen

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _terminated(text: str) -> str:
    return text[: strlen(text)]


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping like C ``int`` arithmetic."""
    span = 1 << _INT_BITS
    value %= span
    return value - span if value >= span >> 1 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted; parsing
    stops at the first non-digit. Text without digits gives 0. Results wrap
    to the signed 32-bit range.
    """
    text = _terminated(text).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = []
    for char in text:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(sign * value)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return f"{number:d}"


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    text = _terminated(text)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    text = _terminated(text)
    chars = _terminated(chars)
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _terminated(text)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return _terminated(first) + _terminated(second)


def strdup(text: str) -> str:
    """Return a copy of ``text`` up to its first NUL."""
    return _terminated(text)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Apply ``func(index, char)`` to each character and join the results.

    ``func`` must return a single character; a NUL result ends the string.
    """
    mapped = []
    for index, char in enumerate(_terminated(text)):
        result = func(index, char)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping must return a single character, got {result!r}")
        mapped.append(result)
    return _terminated("".join(mapped))