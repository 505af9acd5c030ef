# pixelframe

pixelframe models the pieces of a simple 2D frame as plain Python objects:
RGBA images, the places those images are drawn, the depth ordering of those
draws, the vertex batch they turn into, and a window's size, position, title
and hooks. It also reads XPM42 and PNG files into textures. No GPU and no
display are needed.

## Installation

```
pip install pixelframe
```

Pillow is the only dependency. It decodes PNG files.

## Quick start

```python
from pixelframe.image import Batch, Image
from pixelframe.renderqueue import DrawCall, RenderQueue

img = Image(32, 32)
img.put_pixel(0, 0, 0xFF0000FF)          # RGBA: opaque red
assert img.get_pixel(0, 0) == 0xFF0000FF

queue = RenderQueue()
back = img.add_instance(10, 20, 0)       # returns the instance index
front = img.add_instance(50, 20, 1)
queue.add_front(DrawCall(img, front))
queue.add_front(DrawCall(img, back))
queue.sort()                             # ascending depth

batch = Batch()
for call in queue:
    instance = img.instances[call.instance_id]
    if img.enabled and instance.enabled:
        batch.draw_instance(img, instance)
vertices = batch.flush()                 # six vertices per instance
```

## Modules

- `pixelframe.image`
  - `Image(width, height)` is an RGBA pixel buffer of 4 bytes per pixel. Both sides must be 1 to 32767.
    - `put_pixel` and `get_pixel` raise `IndexError` outside the image.
    - `resize` scales by nearest-neighbour sampling.
    - `add_instance(x, y, z)` appends an `Instance` and returns its index.
    - `Image.from_texture(texture)` copies a texture's pixels into a new image.
  - `Texture` holds pixel data read from a file (width, height, pixels, bytes per pixel).
  - `Instance` is one placement of an image: `x`, `y`, `z` and `enabled`.
  - `Batch(capacity)` collects the two triangles per instance and up to 16 bound texture slots.
    - `bind_texture` returns a texture's slot. When all 16 slots are taken, it flushes the batch first.
    - `draw_instance` flushes on its own once the capacity is reached.
    - `flush` returns the queued vertices and frees all slots.
- `pixelframe.renderqueue`
  - `DrawCall(image, instance_id)` names one instance to draw. `z()` gives its depth.
  - `RenderQueue` keeps the calls. New calls go to the front.
    - `remove_image` drops and returns every call for an image.
    - `sort` orders the calls by ascending depth. Among equal depths, the later call in the queue comes first.
- `pixelframe.window`
  - `Window(width, height, title, resizable)` holds the window state.
    - `set_size` and `notify_resize` change the size within the limits set by `set_limit`, where `DONT_CARE` (-1) leaves a bound open. A real change calls the resize hook.
    - `set_pos` and `get_pos` set and return the position.
    - `set_title` and `set_icon` set the title and icon.
    - `close_hook` and `resize_hook` register callbacks.
    - `request_close` sets `should_close` and runs the close hook. The hook may cancel the request by setting `should_close` back to False.
  - `projection_matrix(width, height, depth)` returns the 16 single-precision values of the column-major orthographic matrix.
- `pixelframe.png`
  - `load_png(path)` returns an RGBA `Texture`.
- `pixelframe.xpm42`
  - `load_xpm42(path)` and `parse_xpm42(stream)` return an `Xpm` with `texture`, `color_count`, `cpp` and `mode`.
- `pixelframe.font`
  - `texture_offset(char)` gives the X offset of a glyph in a font atlas of 10×20 glyphs with 2-pixel separators, starting at the space character. It returns -1 for non-printable characters.
  - The constants are `FONT_WIDTH`, `FONT_HEIGHT` and `MAX_STRING`.
- `pixelframe.colorutil`
  - `encode_pixel` and `decode_pixel` convert between a colour and its R, G, B, A bytes.
  - `rgba_to_mono` converts a colour to greyscale and keeps its alpha.
  - `fnv_hash` is 64-bit FNV-1a.
- `pixelframe.errors`
  - `ErrorCode` lists the error codes.
  - `MlxError(code)` is the exception raised on failure. Its `code` attribute holds the `ErrorCode`.
  - `strerror(code)` returns the English description of a code.
- `pixelframe.numbers` has C-style integer helpers:
  - `atoi`, `atol` and `atoll` wrap to 32 or 64 bits.
  - `fits_int`, `fits_long` and `long_long_overflows` check for overflow.
  - `int_abs` and `itoa` work on 32-bit ints.
- `pixelframe.chars` has ASCII classification in the C locale: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_blank`, `is_print`, `is_punct` and `is_space`. Each takes a code or a one-character string.

## XPM42 format

```
!XPM42
<width> <height> <colors> <chars-per-pixel> <c|m>
<chars> #RRGGBBAA
...
<pixel rows>
```

Mode `c` keeps the colours as written. Mode `m` converts each colour to greyscale.
Characters per pixel can be 1 to 10.

```python
import io
from pixelframe.image import Image
from pixelframe.xpm42 import parse_xpm42

data = b"!XPM42\n2 1 2 1 c\n. #FF0000FF\n# #00FF00FF\n.#\n"
xpm = parse_xpm42(io.BytesIO(data))
img = Image.from_texture(xpm.texture)
assert img.get_pixel(1, 0) == 0x00FF00FF
```

## Errors

Failures raise `MlxError`:

- `ErrorCode.INVDIM` for bad image dimensions.
- `ErrorCode.INVPNG` for a missing or invalid PNG.
- `ErrorCode.INVEXT`, `ErrorCode.INVFILE` or `ErrorCode.INVXPM` from `load_xpm42`: a name without `.xpm42`, a file that cannot be opened, or malformed contents.

## What it does not do

- pixelframe opens no window and shows nothing on screen.
- It has no frame loop that runs hooks each frame.
- It has no keyboard or mouse input handling.
- It does not ship the pixels of a font atlas, so it cannot draw text into images. `texture_offset` only gives glyph positions.
- The vertices returned by `Batch.flush` are for your own display code to draw.

## Running the tests

```
pip install "pixelframe[test]"
pytest
```