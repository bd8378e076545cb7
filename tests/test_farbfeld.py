import io
import struct

import pytest

from stkit.farbfeld import (
    FarbfeldError,
    FarbfeldImage,
    convert_pixel,
    load_farbfeld,
    read_farbfeld,
)


def _image_bytes(width, height, pixels):
    body = b"".join(struct.pack(">HHHH", *p) for p in pixels)
    return b"farbfeld" + struct.pack(">II", width, height) + body


def _raw(rgba):
    return int.from_bytes(struct.pack(">HHHH", *rgba), "little")


def test_convert_pixel_example():
    assert convert_pixel(_raw((0x1234, 0x5678, 0x9ABC, 0xDEF0))) == 0xDE12569A


def test_convert_pixel_ignores_low_bytes():
    a = convert_pixel(_raw((0x1200, 0x3400, 0x5600, 0x7800)))
    b = convert_pixel(_raw((0x12FF, 0x34FF, 0x56FF, 0x78FF)))
    assert a == b


def test_convert_opaque_white():
    assert convert_pixel(_raw((0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF))) == 0xFFFFFFFF


def test_read_dimensions_and_pixels():
    pixels = [(0xFFFF, 0, 0, 0xFFFF), (0, 0xFFFF, 0, 0xFFFF), (0, 0, 0xFFFF, 0)]
    img = read_farbfeld(io.BytesIO(_image_bytes(3, 1, pixels)))
    assert img.width == 3
    assert img.height == 1
    assert img.pixels == tuple(convert_pixel(_raw(p)) for p in pixels)


def test_read_empty_image():
    img = read_farbfeld(io.BytesIO(_image_bytes(0, 0, [])))
    assert img == FarbfeldImage(0, 0, ())


def test_short_header():
    with pytest.raises(FarbfeldError, match="header"):
        read_farbfeld(io.BytesIO(b"farbfeld\x00\x00"))


def test_bad_magic():
    data = _image_bytes(1, 1, [(0, 0, 0, 0)]).replace(b"farbfeld", b"notfarbf")
    with pytest.raises(FarbfeldError, match="magic"):
        read_farbfeld(io.BytesIO(data))


def test_short_data():
    data = _image_bytes(2, 2, [(0, 0, 0, 0)] * 3)
    with pytest.raises(FarbfeldError, match="data"):
        read_farbfeld(io.BytesIO(data))


def test_load_from_file(tmp_path):
    path = tmp_path / "bg.ff"
    path.write_bytes(_image_bytes(1, 2, [(0xFFFF,) * 4, (0, 0, 0, 0xFFFF)]))
    img = load_farbfeld(path)
    assert (img.width, img.height) == (1, 2)
    assert img.pixels[0] == 0xFFFFFFFF


def test_load_missing_file(tmp_path):
    with pytest.raises(FarbfeldError):
        load_farbfeld(tmp_path / "missing.ff")