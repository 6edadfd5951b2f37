import numpy as np
import pytest

from maze_walker.common.exceptions import GridIndexMissingError, MalformedInputError
from maze_walker.core.grid_model import Dimensions, Point
from maze_walker.core.pixel_classifier import classify_pixels


def test_coordinates_follow_buffer_offset():
    data = bytes(range(4 * 3 * 2))
    pixels = classify_pixels(data, Dimensions(3, 2))

    assert len(pixels) == 6
    assert [p.point for p in pixels] == [
        Point(0, 0), Point(1, 0), Point(2, 0),
        Point(0, 1), Point(1, 1), Point(2, 1),
    ]
    # 通道顺序 R, G, B, A
    fifth = pixels.pixels[4]
    assert (fifth.red, fifth.green, fifth.blue, fifth.alpha) == (16, 17, 18, 19)


def test_alpha_is_ignored_for_passability():
    data = bytes([
        0, 0, 0, 255,   # 黑色不透明 -> 障碍
        0, 0, 1, 0,     # 蓝色通道非零 -> 可通行
        1, 0, 0, 0,
        0, 0, 0, 0,
    ])
    pixels = classify_pixels(data, Dimensions(2, 2))

    assert [p.passable for p in pixels] == [False, True, True, False]
    assert pixels.is_passable(Point(1, 0))
    assert not pixels.is_passable(Point(1, 1))
    assert pixels.passable_mask.shape == (2, 2)


def test_accepts_numpy_array(maze_buffer):
    data, dims = maze_buffer(["*.", ".*"])
    array = np.frombuffer(data, dtype=np.uint8).reshape(2, 2, 4)

    pixels = classify_pixels(array, dims)

    assert [p.passable for p in pixels] == [False, True, True, False]


def test_length_not_multiple_of_four():
    with pytest.raises(MalformedInputError):
        classify_pixels(bytes(7), Dimensions(1, 2))


def test_length_does_not_match_dimensions():
    with pytest.raises(MalformedInputError):
        classify_pixels(bytes(4 * 5), Dimensions(2, 2))


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
def test_non_positive_dimensions(width, height):
    with pytest.raises(MalformedInputError):
        classify_pixels(b"", Dimensions(width, height))


def test_rejects_non_uint8_array():
    with pytest.raises(MalformedInputError):
        classify_pixels(np.zeros(16, dtype=np.int32), Dimensions(2, 2))


def test_out_of_range_lookup(maze_buffer):
    data, dims = maze_buffer(["..", ".."])
    pixels = classify_pixels(data, dims)

    with pytest.raises(GridIndexMissingError):
        pixels.is_passable(Point(2, 0))
    with pytest.raises(GridIndexMissingError):
        pixels.get_pixel(Point(0, 5))
