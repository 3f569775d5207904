"""Loading XPM images into 32-bit pixel buffers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Iterator

from .colors import lookup_color

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_SPACE = " \t\n\v\f\r"
_INT = re.compile(rf"[{_SPACE}]*([+-]?\d+)")
_HEX = re.compile(rf"[{_SPACE}]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_WORD_GAP = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """The XPM data could not be read or is malformed."""


@dataclass
class XpmImage:
    """A decoded image: ``pixels`` holds ``width * height`` values, row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)


def str_str(text: str, find: str, length: int) -> int:
    """Position of ``find`` in ``text``; -1 if absent or longer than ``length``."""
    if len(find) > length:
        return -1
    return text.find(find)


def str_str_quoted(text: str, find: str, length: int) -> int:
    """Like :func:`str_str`, but ignores matches inside double quotes."""
    if len(find) > length:
        return -1
    quoted = False
    last_start = len(text) - len(find)
    for pos, ch in enumerate(text):
        if pos > last_start:
            break
        if ch == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs."""
    return [word for word in _WORD_GAP.split(text) if word]


def _blank(text: str, start: int, width: int) -> str:
    stop = min(len(text), start + width)
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces, keeping the length."""
    while (begin := str_str_quoted(text, "/*", len(text))) != -1:
        rest = text[begin + 2 :]
        end = str_str(rest, "*/", len(rest))
        text = _blank(text, begin, end + 4)
    while (begin := str_str_quoted(text, "//", len(text))) != -1:
        rest = text[begin + 2 :]
        end = str_str(rest, "\n", len(rest))
        text = _blank(text, begin, end + 3)
    return text


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, end: str | None) -> int:
    """Colour value of an XPM colour spec: ``#RRGGBB`` or a (two-word) name."""
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        sign, digits = match.group(1), match.group(2)
        if not digits:
            return 0
        value = int(digits, 16)
        return -value if sign == "-" else value
    if end:
        name = f"{name} {end}"[:_NAME_LIMIT]
    return lookup_color(name)


def _next_line(source: Iterator[str]) -> str:
    line = next(source, None)
    if line is None:
        raise XpmError("XPM data ends early")
    return line


def _color_definition(words: list[str]) -> int:
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError("colour line has no 'c' key") from None
    if index + 1 >= len(words):
        raise XpmError("colour line has no colour after 'c'")
    end = words[index + 2] if index + 2 < len(words) else None
    return text_to_rgb(words[index + 1], end)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode the strings of an XPM image: header, colours, then pixel rows."""
    source = iter(lines)
    words = split_words(_next_line(source))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("XPM header values must be positive")

    # Short codes overwrite earlier definitions; longer ones keep the first.
    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source)
        rgb = _color_definition(split_words(line[cpp:]))
        if direct:
            palette[line[:cpp]] = rgb
        else:
            palette.setdefault(line[:cpp], rgb)

    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(source)
        for start in range(0, width * cpp, cpp):
            color = palette.get(line[start : start + cpp], 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & 0xFFFFFFFF)
    return XpmImage(width=width, height=height, pixels=pixels)


def xpm_data_to_image(xpm_data: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its list of strings."""
    return parse_xpm(xpm_data)


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def xpm_file_to_image(path: str | PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, "rb") as stream:
            text = stream.read().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(_quoted_strings(strip_comments(text)))