from typing import List, Tuple

import numpy as np
import pytest

from maze_walker.core.grid_builder import build_grid
from maze_walker.core.grid_model import Dimensions, MazeGrid
from maze_walker.core.image_loader import RasterImage
from maze_walker.core.pixel_classifier import classify_pixels

OPEN = (255, 255, 255, 255)
WALL = (0, 0, 0, 255)


def rows_to_rgba(rows: List[str]) -> np.ndarray:
    """'.' 可通行，'*' 障碍"""
    height, width = len(rows), len(rows[0])
    rgba = np.zeros((height, width, 4), dtype=np.uint8)
    for y, row in enumerate(rows):
        assert len(row) == width
        for x, glyph in enumerate(row):
            rgba[y, x] = OPEN if glyph == "." else WALL
    return rgba


@pytest.fixture
def maze_buffer():
    def _make(rows: List[str]) -> Tuple[bytes, Dimensions]:
        rgba = rows_to_rgba(rows)
        return rgba.tobytes(), Dimensions(rgba.shape[1], rgba.shape[0])
    return _make


@pytest.fixture
def maze_grid(maze_buffer):
    def _make(rows: List[str]) -> MazeGrid:
        data, dims = maze_buffer(rows)
        return build_grid(classify_pixels(data, dims))
    return _make


@pytest.fixture
def maze_raster():
    def _make(rows: List[str]) -> RasterImage:
        return RasterImage.from_array(rows_to_rgba(rows))
    return _make
