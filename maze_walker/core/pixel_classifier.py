#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
像素分类模块

将交错存储的 RGBA 字节流拆分为带坐标的像素，并判定每个像素是否可通行。
"""

from dataclasses import dataclass
from typing import List, Union

import numpy as np
from loguru import logger

from maze_walker.common.constants import RGBA_CHANNELS
from maze_walker.common.exceptions import MalformedInputError
from maze_walker.core.grid_model import Dimensions, Point

BufferLike = Union[bytes, bytearray, memoryview, np.ndarray]


@dataclass(frozen=True)
class Pixel:
    """单个像素：四个通道值及其栅格坐标"""
    red: int
    green: int
    blue: int
    alpha: int
    point: Point

    @property
    def passable(self) -> bool:
        # alpha 不参与判定
        return self.red > 0 or self.green > 0 or self.blue > 0


class PixelList:
    """按行优先顺序排列的像素列表"""

    def __init__(self, pixels: List[Pixel], dimensions: Dimensions, passable_mask: np.ndarray):
        self.list_ = pixels
        self.dimensions_ = dimensions
        # (height, width) 布尔数组，True=可通行
        self.passable_mask_ = passable_mask

    @property
    def dimensions(self) -> Dimensions:
        return self.dimensions_

    @property
    def pixels(self) -> List[Pixel]:
        return self.list_

    @property
    def passable_mask(self) -> np.ndarray:
        return self.passable_mask_

    def __len__(self) -> int:
        return len(self.list_)

    def __iter__(self):
        return iter(self.list_)

    def get_pixel(self, point: Point) -> Pixel:
        return self.list_[self.dimensions_.to_index(point.x, point.y)]

    def is_passable(self, point: Point) -> bool:
        self.dimensions_.to_index(point.x, point.y)
        return bool(self.passable_mask_[point.y, point.x])


def _as_byte_array(buffer: BufferLike) -> np.ndarray:
    if isinstance(buffer, np.ndarray):
        if buffer.dtype != np.uint8:
            raise MalformedInputError(f"像素数组类型必须为 uint8: {buffer.dtype}")
        return buffer.reshape(-1)
    return np.frombuffer(bytes(buffer), dtype=np.uint8)


def classify_pixels(buffer: BufferLike, dimensions: Dimensions) -> PixelList:
    """
    将 RGBA 字节流分类为像素列表

    Args:
        buffer: 行优先的 RGBA 字节流，长度应为 4*width*height
        dimensions: 图像尺寸

    Returns:
        PixelList，包含 width*height 个像素

    Raises:
        MalformedInputError: 尺寸非法或字节流长度与尺寸不一致
    """
    width, height = dimensions.width, dimensions.height
    if width <= 0 or height <= 0:
        raise MalformedInputError(f"图像尺寸必须大于0: ({width}, {height})")

    data = _as_byte_array(buffer)
    if data.size % RGBA_CHANNELS != 0:
        raise MalformedInputError(f"字节流长度不是 {RGBA_CHANNELS} 的倍数: {data.size}")

    expected = RGBA_CHANNELS * width * height
    if data.size != expected:
        raise MalformedInputError(
            f"字节流长度与尺寸不一致: len={data.size}, expected={expected} ({width}x{height})"
        )

    channels = data.reshape(-1, RGBA_CHANNELS)
    passable_mask = channels[:, :3].any(axis=1).reshape(height, width)

    pixels: List[Pixel] = []
    for index, (red, green, blue, alpha) in enumerate(channels.tolist()):
        pixels.append(Pixel(
            red=red,
            green=green,
            blue=blue,
            alpha=alpha,
            point=Point(index % width, index // width),
        ))

    logger.debug(
        f"像素分类完成: size=({width}, {height}), "
        f"passable={int(passable_mask.sum())}/{len(pixels)}"
    )
    return PixelList(pixels, Dimensions(width, height), passable_mask)
