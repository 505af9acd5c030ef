"""Colour and hashing helpers shared by the image and texture code."""

from __future__ import annotations

import struct

_FNV_PRIME = 0x100000001B3
_FNV_OFFSET = 0xCBF29CE484222325
_MASK64 = (1 << 64) - 1
_MAX_COLOR = 0xFFFFFFFF


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


_R_WEIGHT = _f32(0.299)
_G_WEIGHT = _f32(0.587)
_B_WEIGHT = _f32(0.114)


def _check_color(color: int) -> int:
    if not 0 <= color <= _MAX_COLOR:
        raise ValueError(f"colour out of 32-bit range: {color!r}")
    return color


def fnv_hash(data: bytes | str) -> int:
    """Hash bytes (or UTF-8 text) with 64-bit FNV-1a.

    Bytes of 0x80 and above are mixed in as sign-extended signed chars.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    result = _FNV_OFFSET
    for byte in data:
        result ^= byte if byte < 0x80 else (byte - 0x100) & _MASK64
        result = (result * _FNV_PRIME) & _MASK64
    return result


def _weighted(weight: float, channel: int) -> int:
    return int(_f32(weight * channel)) & 0xFF


def rgba_to_mono(color: int) -> int:
    """Convert an RGBA colour to grey, keeping its alpha channel."""
    _check_color(color)
    red = _weighted(_R_WEIGHT, (color >> 24) & 0xFF)
    green = _weighted(_G_WEIGHT, (color >> 16) & 0xFF)
    blue = _weighted(_B_WEIGHT, (color >> 8) & 0xFF)
    grey = (red + green + blue) & 0xFF
    return (grey << 24 | grey << 16 | grey << 8 | (color & 0xFF)) & _MAX_COLOR


def encode_pixel(color: int) -> bytes:
    """Return the four R, G, B, A bytes of an RGBA colour."""
    return _check_color(color).to_bytes(4, "big")


def decode_pixel(data: bytes) -> int:
    """Build an RGBA colour from four R, G, B, A bytes."""
    if len(data) != 4:
        raise ValueError(f"a pixel is 4 bytes, got {len(data)}")
    return int.from_bytes(data, "big")