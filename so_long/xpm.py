"""Reading XPM images into lists of 32-bit pixel values.

Only the quoted strings of an XPM file matter: a header with width, height,
colour count and characters per pixel, the colour definitions, then one
string per pixel row. Transparent pixels (colour ``None``) come out as
``0xFF000000``.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from so_long.chars import atoi
from so_long.colors import lookup_color

TRANSPARENT = 0xFF000000

_PIXEL_MASK = 0xFFFFFFFF
_NAME_LIMIT = 63
_WORD_SPLIT = re.compile(r"[ \t]+")
_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when an XPM image cannot be read or parsed."""


@dataclass
class XpmImage:
    """Decoded image; ``pixels`` holds ``width * height`` values, row by row."""

    width: int
    height: int
    pixels: list[int]


def split_words(text: str) -> list[str]:
    """Words of ``text`` separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def find_unquoted(text: str, needle: str) -> int | None:
    """Index of the first ``needle`` in ``text`` outside double quotes."""
    if not needle:
        return 0
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return None


def _blank(text: str, start: int, count: int) -> str:
    count = min(count, len(text) - start)
    return text[:start] + " " * count + text[start + count :]


def strip_comments(text: str) -> str:
    """Replace block and line comments outside strings with spaces.

    The length of the text is preserved. A line comment is blanked together
    with the newline that ends it.
    """
    while (begin := find_unquoted(text, "/*")) is not None:
        end = text.find("*/", begin + 2)
        span = end - begin + 2 if end >= 0 else 3
        text = _blank(text, begin, span)
    while (begin := find_unquoted(text, "//")) is not None:
        end = text.find("\n", begin + 2)
        span = end - begin + 1 if end >= 0 else 2
        text = _blank(text, begin, span)
    return text


def _to_int32(value: int) -> int:
    value = max(min(value, (1 << 63) - 1), -(1 << 63))
    value &= _PIXEL_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def parse_color(name: str, extra: str | None = None) -> int:
    """RGB value of an XPM colour specification.

    ``#rrggbb`` is read as hexadecimal. Otherwise ``name`` (joined with
    ``extra`` by a space, when given) is looked up in the colour table;
    unknown names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_NUMBER.match(name, 1)
        if not match:
            return 0
        value = int(match.group(2), 16)
        if match.group(1) == "-":
            value = -value
        return _to_int32(value)
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    value = lookup_color(name)
    return 0 if value is None else value


def good_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert ``0xRRGGBB`` to a pixel value for a display of ``depth`` bits.

    ``shifts`` holds, for red, green and blue in turn, the bit offset and the
    bit width of the channel. Depths of 24 and more use the colour unchanged.
    """
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (opening := text.find('"', pos)) >= 0:
        closing = text.find('"', opening + 1)
        if closing < 0:
            return
        yield text[opening + 1 : closing]
        pos = closing + 1


def _next_string(strings: Iterator[str], what: str) -> str:
    line = next(strings, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def _color_value(words: list[str]) -> int:
    try:
        key = words.index("c")
    except ValueError:
        raise XpmError("colour definition without a 'c' key") from None
    if key + 1 >= len(words):
        raise XpmError("colour definition without a colour")
    extra = words[key + 2] if key + 2 < len(words) else None
    return parse_color(words[key + 1], extra)


def parse_xpm(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    strings = _quoted_strings(strip_comments(text))
    words = split_words(_next_string(strings, "XPM header"))
    if len(words) < 4:
        raise XpmError("incomplete XPM header")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header")

    # Short keys let a later definition override an earlier one; longer keys
    # keep the first definition.
    later_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_string(strings, "colour definition")
        if len(line) < cpp:
            raise XpmError("colour definition shorter than its key")
        key = line[:cpp]
        value = _color_value(split_words(line[cpp:]))
        if later_wins:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    pixels: list[int] = []
    row_length = cpp * width
    for _ in range(height):
        line = _next_string(strings, "pixel row")
        if len(line) < row_length:
            raise XpmError("pixel row too short")
        for start in range(0, row_length, cpp):
            color = palette.get(line[start : start + cpp], 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & _PIXEL_MASK)
    return XpmImage(width=width, height=height, pixels=pixels)


def load_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"unable to read {os.fspath(path)}") from exc
    return parse_xpm(data.decode("latin-1"))