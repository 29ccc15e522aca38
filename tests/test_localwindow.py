from doxabin.image import BLACK, WHITE, Image
from doxabin.localwindow import Window, iterate, process, window_positions

EXPECTED_SUMS = [
    18, 30, 36, 42, 48, 34,
    45, 72, 81, 90, 99, 69,
    81, 126, 135, 144, 153, 105,
    117, 180, 189, 198, 207, 141,
    153, 234, 243, 252, 255, 177,
    114, 174, 180, 186, 192, 130,
]


def test_iterate_window_sums():
    image = Image(6, 6, bytearray(range(1, 37)))
    windows = list(iterate(image.width, image.height, 3))

    assert [position for _, position in windows] == list(range(36))
    first = windows[0][0]
    assert (first.left, first.top, first.right, first.bottom) == (0, 0, 1, 1)
    last = windows[-1][0]
    assert (last.left, last.top, last.right, last.bottom) == (4, 4, 5, 5)

    sums = [
        min(sum(image.data[p] for p in window_positions(image.width, window)), 255)
        for window, _ in windows
    ]
    assert sums == EXPECTED_SUMS


def test_iterate_visits_every_position_in_order():
    positions = [p for _, p in iterate(4, 3, 5)]
    assert positions == list(range(12))


def test_windows_are_clipped_to_image():
    for window, position in iterate(5, 4, 7):
        assert window.left >= 0 and window.top >= 0
        assert window.right <= 4 and window.bottom <= 3
        x, y = position % 5, position // 5
        assert window.left <= x <= window.right
        assert window.top <= y <= window.bottom


def test_window_positions_match_area():
    window = Window(1, 2, 3, 4)
    positions = list(window_positions(10, window))
    assert len(positions) == window.area()
    assert positions[0] == 21
    assert positions[-1] == 43


def test_process_thresholds():
    image = Image(2, 2, bytearray([10, 100, 150, 200]))
    binary = process(image, 3, lambda window, position: 100)
    assert list(binary.data) == [BLACK, BLACK, WHITE, WHITE]
    assert list(image.data) == [10, 100, 150, 200]