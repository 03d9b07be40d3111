"""Reading XPM pixmaps into :class:`~raycast2d.image.Image` objects."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from raycast2d.colornames import find_color
from raycast2d.image import Image
from raycast2d.text import find, find_unquoted, split_words

_TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def parse_color(name: str, suffix: str | None) -> int:
    """Return the colour a ``c`` key names: ``#hex``, or a colour name.

    ``suffix`` is the word following the name; it is joined to it with a space
    before the name lookup. Unknown names give 0, ``none`` gives -1.
    """
    if name.startswith("#"):
        match = _LEADING_HEX.match(name[1:])
        sign, digits = match.group(1), match.group(2)
        value = int(digits, 16) if digits else 0
        return _to_int32(-value if sign == "-" else value)
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER]
    color = find_color(name)
    return 0 if color is None else color


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments outside quotes, keeping length."""
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        end = find(text[begin + 2 :], "*/", len(text) - begin - 2)
        stop = len(text) if end == -1 else begin + end + 4
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        end = find(text[begin + 2 :], "\n", len(text) - begin - 2)
        stop = len(text) if end == -1 else begin + end + 3
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def _parse(lines: Iterable[str], bits_per_pixel: int, byte_order: int) -> Image:
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values: {' '.join(header[:4])}")

    # One or two characters per pixel: later definitions win; otherwise the first one does.
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = split_words(line[cpp:])
        try:
            key_index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if key_index + 1 >= len(words):
            raise XpmError(f"no colour after key in {line!r}")
        suffix = words[key_index + 2] if key_index + 2 < len(words) else None
        color = parse_color(words[key_index + 1], suffix)
        if last_wins:
            palette[line[:cpp]] = color
        else:
            palette.setdefault(line[:cpp], color)

    image = Image(width, height, bits_per_pixel, byte_order)
    for y in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(line[x * cpp : (x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_from_data(lines: Iterable[str], bits_per_pixel: int = 32, byte_order: int = 0) -> Image:
    """Build an image from XPM strings given one per line."""
    return _parse(lines, bits_per_pixel, byte_order)


def xpm_from_file(
    path: str | PathLike[str], bits_per_pixel: int = 32, byte_order: int = 0
) -> Image:
    """Build an image from an XPM file."""
    text = Path(path).read_bytes().decode("latin-1")
    return _parse(_quoted_strings(strip_comments(text)), bits_per_pixel, byte_order)