"""Images, textures, instances and the vertex batch they are drawn with."""

from __future__ import annotations

import itertools
import struct
from dataclasses import dataclass
from typing import NamedTuple

from pixelframe.colorutil import decode_pixel, encode_pixel
from pixelframe.errors import ErrorCode, MlxError

BPP = 4
MAX_DIMENSION = 32767
BATCH_SIZE = 12000
TEXTURE_SLOTS = 16

_texture_handles = itertools.count(1)


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _check_dimensions(width: int, height: int) -> None:
    if not (0 < width <= MAX_DIMENSION and 0 < height <= MAX_DIMENSION):
        raise MlxError(ErrorCode.INVDIM)


@dataclass
class Texture:
    """Pixel data loaded from disk, stored as rows of RGBA bytes."""

    width: int
    height: int
    pixels: bytearray
    bytes_per_pixel: int = BPP

    def __post_init__(self) -> None:
        self.pixels = bytearray(self.pixels)
        expected = self.width * self.height * self.bytes_per_pixel
        if len(self.pixels) != expected:
            raise ValueError(
                f"texture of {self.width}x{self.height} needs {expected} bytes, "
                f"got {len(self.pixels)}"
            )


@dataclass
class Instance:
    """One placement of an image on the screen."""

    x: int
    y: int
    z: int
    enabled: bool = True


class Image:
    """An RGBA pixel buffer that can be placed on the window many times."""

    def __init__(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self._width = width
        self._height = height
        self.pixels = bytearray(width * height * BPP)
        self.instances: list[Instance] = []
        self.enabled = True
        self.texture = next(_texture_handles)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) is out of bounds")
        return (y * self._width + x) * BPP

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y) to an RGBA colour."""
        start = self._offset(x, y)
        self.pixels[start : start + BPP] = encode_pixel(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the RGBA colour of the pixel at (x, y)."""
        start = self._offset(x, y)
        return decode_pixel(bytes(self.pixels[start : start + BPP]))

    def resize(self, width: int, height: int) -> None:
        """Scale the pixel data to a new size by nearest-neighbour sampling."""
        _check_dimensions(width, height)
        if width == self._width and height == self._height:
            return
        wstep = _f32(self._width / width)
        hstep = _f32(self._height / height)
        source = self.pixels
        columns = [int(_f32(i * wstep)) for i in range(width)]
        rows = []
        for j in range(height):
            row_start = int(_f32(j * hstep)) * self._width
            rows.extend(
                source[(row_start + sx) * BPP : (row_start + sx + 1) * BPP]
                for sx in columns
            )
        self.pixels = bytearray(b"".join(rows))
        self._width = width
        self._height = height

    def add_instance(self, x: int, y: int, z: int) -> int:
        """Append an enabled instance and return its index."""
        self.instances.append(Instance(x, y, z))
        return len(self.instances) - 1

    @classmethod
    def from_texture(cls, texture: Texture) -> Image:
        """Create an image holding a copy of a texture's pixels."""
        image = cls(texture.width, texture.height)
        row_bytes = texture.width * texture.bytes_per_pixel
        image_row = image.width * BPP
        for row in range(texture.height):
            src = row * row_bytes
            dst = row * image_row
            image.pixels[dst : dst + row_bytes] = texture.pixels[src : src + row_bytes]
        return image


class Vertex(NamedTuple):
    """A vertex as laid out for the shader: position, UV and texture slot."""

    x: float
    y: float
    z: float
    u: float
    v: float
    tex: int


class Batch:
    """Collects instance quads and the texture slots they use until flushed."""

    def __init__(self, capacity: int = BATCH_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("batch capacity must be positive")
        self.capacity = capacity
        self.vertices: list[Vertex] = []
        self.bound_textures = [0] * TEXTURE_SLOTS
        self.flush_count = 0
        self.last_flushed: list[Vertex] = []

    def __len__(self) -> int:
        return len(self.vertices)

    def bind_texture(self, handle: int) -> int:
        """Return the slot holding a texture, binding it to a free slot if needed."""
        for slot, bound in enumerate(self.bound_textures):
            if bound == handle:
                return slot
            if bound == 0:
                self.bound_textures[slot] = handle
                return slot
        self.flush()
        self.bound_textures[0] = handle
        return 0

    def draw_instance(self, image: Image, instance: Instance) -> None:
        """Queue the two triangles that draw one instance of an image."""
        w = float(image.width)
        h = float(image.height)
        x, y, z = float(instance.x), float(instance.y), float(instance.z)
        tex = self.bind_texture(image.texture)
        self.vertices.extend(
            (
                Vertex(x, y, z, 0.0, 0.0, tex),
                Vertex(x + w, y + h, z, 1.0, 1.0, tex),
                Vertex(x + w, y, z, 1.0, 0.0, tex),
                Vertex(x, y, z, 0.0, 0.0, tex),
                Vertex(x, y + h, z, 0.0, 1.0, tex),
                Vertex(x + w, y + h, z, 1.0, 1.0, tex),
            )
        )
        if len(self.vertices) >= self.capacity:
            self.flush()

    def flush(self) -> list[Vertex]:
        """Hand over the queued vertices, free all texture slots and return them."""
        if not self.vertices:
            return []
        flushed = self.vertices
        self.vertices = []
        self.bound_textures = [0] * TEXTURE_SLOTS
        self.flush_count += 1
        self.last_flushed = flushed
        return flushed