"""C-style string searching, comparison and bounded copying on Python strings.

Strings are treated as NUL-terminated: anything after the first ``"\\0"`` is
ignored, just as a C routine would stop there. Searches return indices
(or ``None``) rather than pointers, and the bounded copy routines return
the resulting string together with the length they report.
"""

from __future__ import annotations

from typing import Optional

NUL = "\0"


def _terminated(text: str) -> str:
    end = text.find(NUL)
    return text if end < 0 else text[:end]


def _check_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(text))


def strchr(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    if _check_char(char) == NUL:
        return strlen(text)
    index = _terminated(text).find(char)
    return index if index >= 0 else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    if _check_char(char) == NUL:
        return strlen(text)
    index = _terminated(text).rfind(char)
    return index if index >= 0 else None


def strcmp(first: str, second: str) -> int:
    """Compare two strings; return the code difference at the first mismatch, else 0."""
    return strncmp(first, second, max(strlen(first), strlen(second)) + 1)


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; return the code difference or 0."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if count == 0:
        return 0
    first = _terminated(first)
    second = _terminated(second)
    for index in range(count):
        left = _code_at(first, index)
        right = _code_at(second, index)
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index where ``needle`` first occurs wholly within ``haystack[:length]``.

    An empty needle matches at index 0; otherwise None means no match.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = _terminated(needle)
    if not needle:
        return 0
    if length == 0:
        return None
    index = _terminated(haystack)[:length].find(needle)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the copied text and ``strlen(src)``, the length that was wanted;
    a result shorter than that means the copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    src = _terminated(src)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters, NUL included.

    Returns the new buffer text and the length that was wanted. When ``size``
    leaves no room past ``dst`` the buffer is unchanged and the reported
    length is ``strlen(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    src = _terminated(src)
    if size == 0:
        return dst, len(src)
    dst = _terminated(dst)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)