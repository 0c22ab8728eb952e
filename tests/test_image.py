import pytest

from deeplib.image import ColorSpace, Image, channels_for


def _rgb(width, height):
    data = bytes(range(width * height * 3))
    return Image(width, height, 8, ColorSpace.RGB, data), data


@pytest.mark.parametrize(
    "space, expected",
    [
        (ColorSpace.NONE, 0),
        (ColorSpace.GRAY, 1),
        (ColorSpace.PALETTE, 1),
        (ColorSpace.RGB, 3),
        (ColorSpace.BGR, 3),
        (ColorSpace.RGBA, 4),
        (ColorSpace.GA, 2),
        (ColorSpace.BGRA, 4),
    ],
)
def test_channels_for(space, expected):
    assert channels_for(space) == expected


def test_default_channels_follow_color_space():
    img = Image(1, 1, 8, ColorSpace.BGRA, bytes(4))
    assert img.channels == channels_for(ColorSpace.BGRA)


def test_default_row_bytes():
    img, _ = _rgb(3, 2)
    assert img.row_bytes == 9


def test_pixel_size_sixteen_bit():
    img = Image(1, 1, 16, ColorSpace.RGBA, bytes(8))
    assert img.pixel_size() == 8


def test_too_little_data_raises():
    with pytest.raises(ValueError):
        Image(4, 4, 8, ColorSpace.RGB, bytes(10))


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Image(-1, 1, 8, ColorSpace.RGB, b"")


def test_mirror_horizontal_reverses_pixels():
    img, original = _rgb(3, 2)
    img.mirror_horizontal()
    row0 = original[6:9] + original[3:6] + original[0:3]
    row1 = original[15:18] + original[12:15] + original[9:12]
    assert bytes(img.data) == row0 + row1


def test_mirror_horizontal_twice_is_identity():
    img, original = _rgb(4, 3)
    img.mirror_horizontal()
    assert bytes(img.data) != original
    img.mirror_horizontal()
    assert bytes(img.data) == original


def test_mirror_vertical_reverses_rows():
    img, original = _rgb(2, 3)
    img.mirror_vertical()
    assert bytes(img.data) == original[12:18] + original[6:12] + original[0:6]


def test_mirror_vertical_twice_is_identity():
    img, original = _rgb(3, 4)
    img.mirror_vertical()
    img.mirror_vertical()
    assert bytes(img.data) == original


def test_resize_larger_keeps_rows_and_pads_with_zero():
    img, original = _rgb(2, 2)
    img.resize(3, 3)
    assert (img.width, img.height) == (3, 3)
    assert img.row_bytes == 3 * img.pixel_size()
    assert len(img.data) == img.row_bytes * img.height
    assert bytes(img.data[0:6]) == original[0:6]
    assert bytes(img.data[img.row_bytes : img.row_bytes + 6]) == original[6:12]
    assert not any(img.data[6 : img.row_bytes])
    assert not any(img.data[2 * img.row_bytes :])


def test_resize_smaller_crops():
    img, original = _rgb(3, 3)
    img.resize(2, 1)
    assert bytes(img.data) == original[0:6]


def test_copy_is_independent():
    img, original = _rgb(2, 2)
    duplicate = img.copy()
    assert duplicate == img
    duplicate.data[0] = 255
    assert bytes(img.data) == original
    assert duplicate != img