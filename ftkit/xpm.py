"""Reading XPM pixmaps into 32-bit pixel images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from ftkit.colors import lookup_color
from ftkit.wordtab import find, find_outside_quotes, split_words

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 64

_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_STRTOL_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class Image:
    """A width x height image of 0xAARRGGBB pixels stored row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column *x*, row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def parse_color_spec(name: str, end: str | None) -> int:
    """Return the colour value for an XPM colour spec.

    "#RRGGBB" is read as hexadecimal; otherwise *name* (joined with *end*
    when given) is looked up in the colour table. "None" gives -1.
    """
    if name.startswith("#"):
        sign, digits = _STRTOL_HEX.match(name, 1).groups()
        value = int(digits, 16) if digits else 0
        return -value if sign == "-" else value
    if end is not None:
        name = f"{name} {end}"[: _NAME_BUFFER - 1]
    return lookup_color(name)


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside string literals, keeping the length."""
    size = len(text)

    def blank(source: str, begin: int, span: int) -> str:
        span = min(span, size - begin)
        return source[:begin] + " " * span + source[begin + span:]

    while (begin := find_outside_quotes(text, "/*", size)) != -1:
        end = find(text[begin + 2:], "*/", size - begin - 2)
        text = blank(text, begin, end + 4)
    while (begin := find_outside_quotes(text, "//", size)) != -1:
        end = find(text[begin + 2:], "\n", size - begin - 2)
        text = blank(text, begin, end + 3)
    return text


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1:stop]
        pos = stop + 1


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM pixmap, header first."""
    source = iter(lines)

    def next_line() -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError("XPM data ended early") from None

    header = split_words(next_line())
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError("XPM header values must be positive")

    # With one or two chars per pixel a later definition replaces an earlier
    # one; with more, the first definition of a key is kept.
    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        if len(line) < cpp:
            raise XpmError("colour line shorter than its key")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError("colour line has no 'c' entry") from None
        if index >= len(words):
            raise XpmError("colour line has no colour after 'c'")
        end = words[index + 1] if index + 1 < len(words) else None
        value = parse_color_spec(words[index], end)
        key = line[:cpp]
        if direct:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    pixels: list[int] = []
    for _ in range(height):
        line = next_line()
        if len(line) < width * cpp:
            raise XpmError("pixel row shorter than the image width")
        for x in range(width):
            value = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            if value == -1:
                value = TRANSPARENT
            pixels.append(value & 0xFFFFFFFF)
    return Image(width, height, tuple(pixels))


def xpm_to_image(data: Iterable[str]) -> Image:
    """Build an image from in-memory XPM strings."""
    return parse_xpm(data)


def load_xpm_file(path: str | PathLike[str]) -> Image:
    """Read an XPM file written as C source and build its image."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(_quoted_strings(strip_comments(text)))