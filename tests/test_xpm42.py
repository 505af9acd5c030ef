import io

import pytest

from pixelframe.colorutil import encode_pixel, rgba_to_mono
from pixelframe.errors import ErrorCode, MlxError
from pixelframe.xpm42 import Xpm, load_xpm42, parse_xpm42

SAMPLE = b"!XPM42\n2 2 2 1 c\na #FF0000FF\nb #00FF00FF\nab\nba\n"


def parse(data: bytes) -> Xpm:
    return parse_xpm42(io.BytesIO(data))


def expect_invalid(data: bytes) -> None:
    with pytest.raises(MlxError) as info:
        parse(data)
    assert info.value.code is ErrorCode.INVXPM


def test_parse_colour_image():
    xpm = parse(SAMPLE)
    assert xpm.texture.width == 2
    assert xpm.texture.height == 2
    assert xpm.color_count == 2
    assert xpm.cpp == 1
    assert xpm.mode == "c"
    red = encode_pixel(0xFF0000FF)
    green = encode_pixel(0x00FF00FF)
    assert bytes(xpm.texture.pixels) == red + green + green + red


def test_texture_has_four_bytes_per_pixel():
    xpm = parse(SAMPLE)
    assert xpm.texture.bytes_per_pixel == 4
    assert len(xpm.texture.pixels) == 2 * 2 * 4


def test_monochrome_mode_converts_colours():
    data = b"!XPM42\n1 1 1 1 m\nx #40A0C0FF\nx\n"
    xpm = parse(data)
    assert xpm.mode == "m"
    assert bytes(xpm.texture.pixels) == encode_pixel(rgba_to_mono(0x40A0C0FF))


def test_multi_character_keys():
    data = b"!XPM42\n2 1 2 2 c\n.. #11223344\n#x #AABBCCDD\n#x..\n"
    xpm = parse(data)
    assert bytes(xpm.texture.pixels) == encode_pixel(0xAABBCCDD) + encode_pixel(0x11223344)


def test_unknown_key_yields_transparent_black():
    data = b"!XPM42\n1 1 1 1 c\na #FFFFFFFF\nz\n"
    xpm = parse(data)
    assert bytes(xpm.texture.pixels) == bytes(4)


def test_later_entry_for_same_key_wins():
    data = b"!XPM42\n1 1 2 1 c\na #FFFFFFFF\na #01020304\na\n"
    xpm = parse(data)
    assert bytes(xpm.texture.pixels) == encode_pixel(0x01020304)


def test_last_row_without_newline():
    data = SAMPLE.rstrip(b"\n")
    xpm = parse(data)
    assert bytes(xpm.texture.pixels) == bytes(parse(SAMPLE).texture.pixels)


def test_hexadecimal_header_values():
    data = b"!XPM42\n0x2 0x1 1 1 c\na #FFFFFFFF\naa\n"
    xpm = parse(data)
    assert (xpm.texture.width, xpm.texture.height) == (2, 1)


def test_octal_header_values():
    data = b"!XPM42\n010 1 1 1 c\na #FFFFFFFF\naaaaaaaa\n"
    xpm = parse(data)
    assert xpm.texture.width == 8


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"XPM42\n1 1 1 1 c\na #FFFFFFFF\na\n",
        b"!XPM42 \n1 1 1 1 c\na #FFFFFFFF\na\n",
        b"!XPM42\n",
        b"!XPM42\n1 1 1 1 x\na #FFFFFFFF\na\n",
        b"!XPM42\n1 1 1 1\na #FFFFFFFF\na\n",
        b"!XPM42\n1 1 1\n",
        b"!XPM42\n1 1 1 11 c\n",
        b"!XPM42\n32768 1 0 1 c\n",
        b"!XPM42\n1 32768 0 1 c\n",
        b"!XPM42\n-1 1 0 1 c\n",
    ],
)
def test_invalid_headers(data):
    expect_invalid(data)


@pytest.mark.parametrize(
    "entry",
    [
        b"a  #FFFFFFFF\n",
        b"a#FFFFFFFF\n",
        b"a FFFFFFFF\n",
        b"a #FFFFFFFF \n",
        b"a #-FFFFFFF\n",
        b"ab #FFFFFFFF\n",
    ],
)
def test_invalid_colour_entries(entry):
    expect_invalid(b"!XPM42\n1 1 1 1 c\n" + entry + b"a\n")


def test_missing_colour_entry():
    expect_invalid(b"!XPM42\n1 1 2 1 c\na #FFFFFFFF\n")


def test_row_of_wrong_length():
    expect_invalid(b"!XPM42\n2 1 1 1 c\na #FFFFFFFF\na\n")


def test_missing_rows():
    expect_invalid(b"!XPM42\n1 2 1 1 c\na #FFFFFFFF\na\n")


def test_carriage_return_breaks_row_length():
    expect_invalid(b"!XPM42\n1 1 1 1 c\na #FFFFFFFF\na\r\n")


def test_load_from_file(tmp_path):
    path = tmp_path / "sprite.xpm42"
    path.write_bytes(SAMPLE)
    xpm = load_xpm42(path)
    assert bytes(xpm.texture.pixels) == bytes(parse(SAMPLE).texture.pixels)


def test_load_rejects_wrong_extension(tmp_path):
    path = tmp_path / "sprite.xpm"
    path.write_bytes(SAMPLE)
    with pytest.raises(MlxError) as info:
        load_xpm42(path)
    assert info.value.code is ErrorCode.INVEXT


def test_load_missing_file(tmp_path):
    with pytest.raises(MlxError) as info:
        load_xpm42(tmp_path / "missing.xpm42")
    assert info.value.code is ErrorCode.INVFILE


def test_load_malformed_file(tmp_path):
    path = tmp_path / "broken.xpm42"
    path.write_bytes(b"!XPM42\nnot a header\n")
    with pytest.raises(MlxError) as info:
        load_xpm42(path)
    assert info.value.code is ErrorCode.INVXPM