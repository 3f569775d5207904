"""String helpers with C library semantics, on Python strings.

Functions that report a position return an index into the string, or
``None`` when nothing is found.
"""

from __future__ import annotations

import re
from collections.abc import Callable, MutableSequence
from typing import Optional, TypeVar

T = TypeVar("T")

_NUL = "\0"
_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?)(\d*)")


def _as_char(c: int | str) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(text: str) -> int:
    """Length of ``text`` up to its first NUL character, if it has one."""
    end = text.find(_NUL)
    return len(text) if end == -1 else end


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Anything that does not start like a number gives 0.
    """
    match = _ATOI.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    return str(n)


def split(text: str, sep: int | str) -> list[str]:
    """The non-empty pieces of ``text`` between occurrences of ``sep``."""
    return [word for word in text.split(_as_char(sep)) if word]


def strchr(text: str, c: int | str) -> Optional[int]:
    """Index of the first ``c`` in ``text``.

    Searching for NUL finds the end of the string.
    """
    ch = _as_char(c)
    text = text[: strlen(text)]
    if ch == _NUL:
        return len(text)
    pos = text.find(ch)
    return None if pos == -1 else pos


def strrchr(text: str, c: int | str) -> Optional[int]:
    """Index of the last ``c`` in ``text``.

    Searching for NUL finds the end of the string.
    """
    ch = _as_char(c)
    text = text[: strlen(text)]
    if ch == _NUL:
        return len(text)
    pos = text.rfind(ch)
    return None if pos == -1 else pos


def strdup(text: str) -> str:
    """A copy of ``text`` up to its first NUL."""
    return text[: strlen(text)]


def striteri(text: MutableSequence[T], func: Callable[[int, MutableSequence[T]], None]) -> None:
    """Call ``func(index, text)`` for each position, letting it change ``text`` in place."""
    for index in range(len(text)):
        func(index, text)


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return strdup(first) + strdup(second)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``; with a size
    of 0 nothing is copied.
    """
    src = strdup(src)
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters including NUL.

    Returns the resulting text and the length the full result would have had.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst = strdup(dst)
    src = strdup(src)
    if size == 0:
        return dst, len(src)
    dlen = min(len(dst), size)
    if size <= dlen:
        return dst, size + len(src)
    room = size - 1 - dlen
    return dst + src[:room], dlen + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character of ``text``."""
    return "".join(func(index, ch) for index, ch in enumerate(strdup(text)))


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) & 0xFF if index < len(text) else 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells which string sorts first."""
    if n <= 0:
        return 0
    first = strdup(first)
    second = strdup(second)
    index = 0
    while (
        index < len(first)
        and _code_at(first, index) == _code_at(second, index)
        and index < n - 1
    ):
        index += 1
    return _code_at(first, index) - _code_at(second, index)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` in the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    haystack = strdup(haystack)
    needle = strdup(needle)
    if not needle:
        return 0
    if length <= 0:
        return None
    pos = haystack[:length].find(needle)
    return None if pos == -1 else pos


def strtrim(text: str, charset: str) -> str:
    """``text`` without the characters of ``charset`` at either end."""
    return strdup(text).strip(strdup(charset))


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from index ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(text)
    if start > len(text):
        return ""
    return text[start : start + length]