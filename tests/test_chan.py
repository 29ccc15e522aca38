import pytest

from doxabin.chan import (
    iterate_mean,
    iterate_mean_variance,
    process_mean,
    process_mean_variance,
)
from doxabin.image import BLACK, WHITE, Image
from doxabin.localwindow import iterate, window_positions

PIXELS = [
    12, 200, 34, 90, 7,
    45, 66, 180, 3, 250,
    99, 1, 128, 77, 64,
    31, 240, 15, 160, 88,
]


@pytest.fixture
def image():
    return Image.from_pixels(5, 4, PIXELS)


def _window_values(image, window_size):
    for window, position in iterate(image.width, image.height, window_size):
        yield [image.data[p] for p in window_positions(image.width, window)], position


def test_positions_cover_image_in_order(image):
    positions = [position for _, position in iterate_mean(image, 3)]
    assert positions == list(range(image.size))


def test_mean_matches_direct_window_scan(image):
    expected = list(_window_values(image, 3))
    for (mean, position), (values, exp_position) in zip(iterate_mean(image, 3), expected):
        assert position == exp_position
        assert mean == pytest.approx(sum(values) / len(values))


def test_variance_matches_direct_window_scan(image):
    expected = list(_window_values(image, 3))
    results = list(iterate_mean_variance(image, 3))
    assert len(results) == len(expected)
    for (mean, variance, position), (values, exp_position) in zip(results, expected):
        exp_mean = sum(values) / len(values)
        exp_variance = sum(v * v for v in values) / len(values) - exp_mean ** 2
        assert position == exp_position
        assert mean == pytest.approx(exp_mean)
        assert variance == pytest.approx(exp_variance, abs=1e-6)


def test_constant_image_has_zero_variance():
    image = Image.from_pixels(4, 3, [77] * 12)
    for mean, variance, _ in iterate_mean_variance(image, 5):
        assert mean == pytest.approx(77)
        assert variance == pytest.approx(0, abs=1e-9)


def test_window_larger_than_image_uses_whole_image(image):
    whole = sum(PIXELS) / len(PIXELS)
    means = [mean for mean, _ in iterate_mean(image, 51)]
    assert len(means) == image.size
    assert means == pytest.approx([whole] * image.size)


def test_process_mean_thresholds_at_callback_value(image):
    binary = process_mean(image, 3, lambda mean, position: 100)
    assert list(binary.data) == [BLACK if p <= 100 else WHITE for p in PIXELS]
    assert (binary.width, binary.height) == (image.width, image.height)


def test_process_mean_variance_passes_positions(image):
    seen = []

    def algorithm(mean, variance, position):
        seen.append(position)
        return 255

    binary = process_mean_variance(image, 3, algorithm)
    assert seen == list(range(image.size))
    assert set(binary.data) == {BLACK}


def test_invalid_window_size(image):
    with pytest.raises(ValueError):
        list(iterate_mean(image, 0))