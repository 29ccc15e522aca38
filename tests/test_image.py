import pytest

from doxabin.image import BLACK, WHITE, Image, TupleType


@pytest.fixture
def image():
    return Image(3, 2, bytearray([0xF0, 0xF1, 0xF2, 0xF3, 0xF4, 0xF5]))


def test_pixel_reads_row_major(image):
    assert image.pixel(0, 0) == image.data[0]
    assert image.pixel(1, 0) == image.data[1]
    assert image.pixel(2, 0) == image.data[2]
    assert image.pixel(0, 1) == image.data[3]
    assert image.pixel(1, 1) == image.data[4]
    assert image.pixel(2, 1) == image.data[5]


def test_pixel_out_of_bounds_default(image):
    assert image.pixel(0, 3, 0xF6) == 0xF6


def test_pixel_out_of_bounds_without_default_raises(image):
    with pytest.raises(IndexError):
        image.pixel(3, 0)


def test_copy_is_independent(image):
    copy = image.copy()
    assert copy == image
    assert copy.data is not image.data
    image[1, 1] = 0xFA
    assert image.pixel(1, 1) == 0xFA
    assert copy.pixel(1, 1) == 0xF4


def test_getitem_setitem_by_index_and_coordinate(image):
    image[4] = 0x10
    assert image[1, 1] == 0x10
    image[2, 0] = 0x20
    assert image[2] == 0x20


def test_setitem_out_of_range_raises(image):
    with pytest.raises(IndexError):
        image[6] = 1
    with pytest.raises(IndexError):
        image[0, 2] = 1
    assert list(image.data) == [0xF0, 0xF1, 0xF2, 0xF3, 0xF4, 0xF5]
    assert image.pixel(0, 1) == 0xF3


def test_blank_and_size():
    blank = Image.blank(4, 3)
    assert blank.size == 12
    assert list(blank.data) == [0] * 12


def test_fill():
    img = Image.blank(2, 2)
    img.fill(WHITE)
    assert list(img.data) == [WHITE] * 4
    img.fill(BLACK)
    assert list(img.data) == [BLACK] * 4


def test_wrong_data_length_raises():
    with pytest.raises(ValueError):
        Image(3, 3, bytearray(4))


def test_tuple_type_strings():
    assert TupleType.BLACK_WHITE.value == "BLACKANDWHITE"
    assert TupleType.RGBA.value == "RGB_ALPHA"
    assert Image.blank(1, 1).tuple_type == "GRAYSCALE"