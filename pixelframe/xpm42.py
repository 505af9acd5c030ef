"""Reading XPM42 images, a simplified XPM2-like text pixmap format.

A file starts with the line ``!XPM42``, followed by a header line holding
width, height, colour count, characters per pixel and the colour mode
(``c`` for RGBA colour, ``m`` for monochrome). Then come the colour entries,
one per line (``<key> #RRGGBBAA``), and finally one line per pixel row.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import BinaryIO

from pixelframe.colorutil import encode_pixel, fnv_hash, rgba_to_mono
from pixelframe.errors import ErrorCode, MlxError
from pixelframe.image import BPP, MAX_DIMENSION, Texture

EXTENSION = ".xpm42"
MAGIC = b"!XPM42\n"
MAX_CPP = 10

_HEADER_BUFFER = 64
_TABLE_SIZE = 65535
_MODES = (b"c", b"m")
_WHITESPACE = b" \t\n\r\f\v"
_INT_PATTERN = re.compile(rb"[ \t\n\r\f\v]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_HEX_PATTERN = re.compile(rb"([+-]?)([0-9a-fA-F]*)")


@dataclass
class Xpm:
    """A decoded XPM42 image and the header values it was read with."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str


def _invalid() -> MlxError:
    return MlxError(ErrorCode.INVXPM)


def _parse_c_int(sign: bytes, body: bytes) -> int:
    if body[:2] in (b"0x", b"0X"):
        value = int(body[2:], 16)
    elif len(body) > 1 and body.startswith(b"0"):
        value = int(body, 8)
    else:
        value = int(body)
    return -value if sign == b"-" else value


def _scan_header(line: bytes) -> tuple[list[int], bytes]:
    """Read up to four integers and a mode character the way ``%i`` and ``%c`` do."""
    values: list[int] = []
    pos = 0
    while len(values) < 4:
        match = _INT_PATTERN.match(line, pos)
        if match is None:
            return values, b""
        values.append(_parse_c_int(match.group(1), match.group(2)))
        pos = match.end()
    rest = line[pos:].lstrip(_WHITESPACE)
    return values, rest[:1]


def _read_header(stream: BinaryIO) -> tuple[int, int, int, int, str]:
    if stream.readline(_HEADER_BUFFER - 1) != MAGIC:
        raise _invalid()
    line = stream.readline(_HEADER_BUFFER - 1)
    if not line:
        raise _invalid()
    values, mode = _scan_header(line)
    if len(values) < 4 or mode not in _MODES:
        raise _invalid()
    width, height, color_count, cpp = values
    if not (0 <= width <= MAX_DIMENSION and 0 <= height <= MAX_DIMENSION):
        raise _invalid()
    if not 0 < cpp <= MAX_CPP:
        raise _invalid()
    return width, height, color_count, cpp, mode.decode("ascii")


def _hex_channel(raw: bytes) -> int:
    """Parse a two-character hex channel, stopping at the first non-hex character."""
    text = raw.split(b"\0", 1)[0].lstrip(_WHITESPACE)
    match = _HEX_PATTERN.match(text)
    digits = match.group(2) if match else b""
    value = int(digits, 16) if digits else 0
    if match and match.group(1) == b"-":
        value = -value
    return value & 0xFF


def _slot(key: bytes) -> int:
    return fnv_hash(key) % _TABLE_SIZE


def _insert_entry(line: bytes, cpp: int, mode: str, table: dict[int, int]) -> None:
    if line.rfind(b" ") != cpp:
        raise _invalid()
    if line[cpp + 1 : cpp + 2] != b"#" or not line[cpp + 2 : cpp + 3].isalnum():
        raise _invalid()
    digits = line[cpp + 2 : cpp + 10].ljust(8, b"\0")
    color = (
        _hex_channel(digits[0:2]) << 24
        | _hex_channel(digits[2:4]) << 16
        | _hex_channel(digits[4:6]) << 8
        | _hex_channel(digits[6:8])
    )
    table[_slot(line[:cpp])] = rgba_to_mono(color) if mode == "m" else color


def _read_rows(
    stream: BinaryIO, width: int, height: int, cpp: int, table: dict[int, int]
) -> bytearray:
    pixels = bytearray()
    for _ in range(height):
        line = stream.readline()
        if not line:
            raise _invalid()
        if line.endswith(b"\n"):
            line = line[:-1]
        if len(line) != width * cpp:
            raise _invalid()
        keys = (line[start : start + cpp] for start in range(0, len(line), cpp))
        for key in keys:
            pixels += encode_pixel(table.get(_slot(key), 0))
    return pixels


def parse_xpm42(stream: BinaryIO) -> Xpm:
    """Decode an XPM42 image from a binary stream.

    Raises MlxError with ErrorCode.INVXPM if the data is malformed.
    """
    width, height, color_count, cpp, mode = _read_header(stream)
    table: dict[int, int] = {}
    for _ in range(color_count):
        line = stream.readline()
        if not line:
            raise _invalid()
        _insert_entry(line, cpp, mode, table)
    pixels = _read_rows(stream, width, height, cpp, table)
    return Xpm(Texture(width, height, pixels, BPP), color_count, cpp, mode)


def load_xpm42(path: str | os.PathLike[str]) -> Xpm:
    """Load an XPM42 image from a file whose name contains ``.xpm42``.

    Raises MlxError with INVEXT for a wrong name, INVFILE if the file cannot be
    opened and INVXPM if its contents are malformed.
    """
    name = os.fspath(path)
    if EXTENSION not in name:
        raise MlxError(ErrorCode.INVEXT)
    try:
        handle = open(name, "rb")
    except OSError as exc:
        raise MlxError(ErrorCode.INVFILE) from exc
    with handle:
        return parse_xpm42(handle)