import random

import pytest

from doxabin.image import Image
from doxabin.morphology import (
    close_image,
    dilate,
    erode,
    iteratively_dilate,
    iteratively_erode,
    morph,
    open_image,
)


def _grid(text):
    return [int(token) for token in text.split()]


def _sample_data():
    values = list(range(1, 37))
    values[16] = 50
    values[20] = 3
    return values


DATA = _sample_data()

ERODED_3 = _grid(
    """
    1 1 2 3 4 5
    1 1 2 3 4 5
    7 3 3 3 10 11
    13 3 3 3 16 18
    19 3 3 3 22 23
    25 25 26 27 28 29
    """
)

DILATED_3 = _grid(
    """
    8 9 10 11 12 12
    14 15 16 50 50 50
    20 20 22 50 50 50
    26 27 28 50 50 50
    32 33 34 35 36 36
    32 33 34 35 36 36
    """
)


@pytest.fixture
def small():
    return Image(6, 6, bytearray(DATA))


@pytest.fixture
def noisy():
    rng = random.Random(1234)
    return Image(40, 33, bytearray(rng.randrange(256) for _ in range(40 * 33)))


def test_erode(small):
    assert list(erode(small, 3).data) == ERODED_3


def test_dilate(small):
    assert list(dilate(small, 3).data) == DILATED_3


def test_morph_matches_expected_for_small_window(small):
    assert list(morph(small, 3, lambda s: s[0]).data) == ERODED_3
    assert list(morph(small, 3, lambda s: s[-1]).data) == DILATED_3


def test_erode_comparison(noisy):
    assert iteratively_erode(noisy, 25) == morph(noisy, 25, lambda s: s[0])


def test_dilate_comparison(noisy):
    assert iteratively_dilate(noisy, 25) == morph(noisy, 25, lambda s: s[-1])


def test_large_window_uses_same_result(noisy):
    assert erode(noisy, 17) == iteratively_erode(noisy, 17)
    assert dilate(noisy, 19) == iteratively_dilate(noisy, 19)


def test_input_untouched(small):
    erode(small, 3)
    dilate(small, 21)
    assert list(small.data) == DATA


def test_erode_below_dilate_above(noisy):
    eroded = erode(noisy, 5)
    dilated = dilate(noisy, 5)
    assert all(e <= v <= d for e, v, d in zip(eroded.data, noisy.data, dilated.data))


def test_open_and_close_bounds(noisy):
    opened = open_image(noisy, 3)
    closed = close_image(noisy, 3)
    assert all(o <= v <= c for o, v, c in zip(opened.data, noisy.data, closed.data))


def test_open_is_idempotent(noisy):
    once = open_image(noisy, 3)
    assert open_image(once, 3) == once