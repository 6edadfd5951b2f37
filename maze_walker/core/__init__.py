#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫核心模块

像素分类、栅格图构建、边界扫描。
"""

from .grid_model import Point, Dimensions, Connectors, MazeNode, MazeGrid
from .pixel_classifier import Pixel, PixelList, classify_pixels
from .grid_builder import build_grid
from .border_scanner import EntranceList, find_entrances
from .maze_renderer import render_grid, parse_rendering, passability_map
from .image_loader import RasterImage, load_raster

__all__ = [
    'Point',
    'Dimensions',
    'Connectors',
    'MazeNode',
    'MazeGrid',
    'Pixel',
    'PixelList',
    'classify_pixels',
    'build_grid',
    'EntranceList',
    'find_entrances',
    'render_grid',
    'parse_rendering',
    'passability_map',
    'RasterImage',
    'load_raster',
]
