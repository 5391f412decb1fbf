"""Reading XPM pixmaps into plain pixel grids, and X visual colour packing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence

from .colors import lookup_color

#: Pixel value given to transparent ("None") colours.
TRANSPARENT = 0xFF000000

_MAX_COLOR_NAME = 63
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_QUOTED_RE = re.compile(r'"([^"]*)"')
_WORD_SPLIT_RE = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM picture: rows of 32-bit pixels, 0xRRGGBB or TRANSPARENT."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.rows[y][x]


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT_RE.split(text) if word]


def _blank_comments(chars: list[str], opener: str, closer: str) -> None:
    in_quote = False
    size = len(chars)
    i = 0
    while i <= size - len(opener):
        if chars[i] == '"':
            in_quote = not in_quote
        if not in_quote and "".join(chars[i:i + len(opener)]) == opener:
            tail = "".join(chars[i + len(opener):])
            end = tail.find(closer)
            if end == -1:
                stop = size
            else:
                stop = i + len(opener) + end + len(closer)
            chars[i:stop] = " " * (stop - i)
            i = stop
            continue
        i += 1


def strip_comments(text: str) -> str:
    """Replace /* */ and // comments outside quotes with spaces.

    The result has the same length as the input.
    """
    chars = list(text)
    _blank_comments(chars, "/*", "*/")
    _blank_comments(chars, "//", "\n")
    return "".join(chars)


def _atoi(word: str) -> int:
    match = _INT_RE.match(word)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, extra: Optional[str] = None) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    "#RRGGBB" is read as hexadecimal; otherwise the name (joined to the
    following word, if any) is looked up in the colour table. Unknown names
    give 0 and "None" gives -1.
    """
    if name.startswith("#"):
        match = _HEX_RE.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if extra is not None:
        name = f"{name} {extra}"[:_MAX_COLOR_NAME]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if not all(values):
        raise XpmError(f"bad XPM header: {line!r}")
    width, height, ncolors, cpp = values
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError(f"bad XPM header: {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without colour value: {line!r}")
    extra = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[index], extra)


def parse_xpm_lines(lines: Sequence[str]) -> XpmImage:
    """Decode XPM data given as its list of strings (header, colours, rows)."""
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "the header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _parse_color(_next_line(source, "the colour table ends"), cpp)
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    rows = []
    for _ in range(height):
        line = _next_line(source, "the last pixel row")
        row = []
        for x in range(width):
            color = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = TRANSPARENT
            row.append(color & 0xFFFFFFFF)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm_lines(_QUOTED_RE.findall(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(text)


def _shift_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def mask_shifts(red_mask: int, green_mask: int,
                blue_mask: int) -> tuple[int, int, int, int, int, int]:
    """Return (shift, width) of each of the red, green and blue masks, flattened."""
    red = _shift_and_width(red_mask)
    green = _shift_and_width(green_mask)
    blue = _shift_and_width(blue_mask)
    return (*red, *green, *blue)


def get_good_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Pack a 0xRRGGBB colour for a visual of the given depth.

    Depths of 24 and more take the colour as is; shallower visuals pack each
    component into the bits described by ``mask_shifts``.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (((red >> (16 - shifts[1])) << shifts[0])
            + ((green >> (16 - shifts[3])) << shifts[2])
            + ((blue >> (16 - shifts[5])) << shifts[4]))