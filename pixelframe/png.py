"""Loading PNG files into textures."""

from __future__ import annotations

import os

from PIL import Image as PilImage

from pixelframe.errors import ErrorCode, MlxError
from pixelframe.image import BPP, Texture


def load_png(path: str | os.PathLike[str]) -> Texture:
    """Decode a PNG file into an RGBA texture.

    Raises MlxError with ErrorCode.INVPNG if the file is missing or not a valid PNG.
    """
    try:
        with PilImage.open(path) as picture:
            if picture.format != "PNG":
                raise MlxError(ErrorCode.INVPNG)
            rgba = picture.convert("RGBA")
            width, height = rgba.size
            data = rgba.tobytes()
    except MlxError:
        raise
    except (OSError, ValueError, SyntaxError) as exc:
        raise MlxError(ErrorCode.INVPNG) from exc
    return Texture(width, height, bytearray(data), BPP)