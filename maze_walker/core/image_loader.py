#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
图像加载模块

读取迷宫图片并转换为行优先的 RGBA 字节流。
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

import cv2
import numpy as np
from loguru import logger

from maze_walker.common.exceptions import ImageLoadError
from maze_walker.core.grid_model import Dimensions


@dataclass(frozen=True)
class RasterImage:
    """解码后的栅格图像"""
    width: int
    height: int
    data: bytes  # RGBA，长度 4*width*height

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.height)

    @classmethod
    def from_array(cls, rgba: np.ndarray) -> "RasterImage":
        """
        从 (H, W, 4) 的 uint8 数组构建

        Args:
            rgba: RGBA 图像数组

        Returns:
            RasterImage
        """
        if rgba.ndim != 3 or rgba.shape[2] != 4:
            raise ImageLoadError(f"RGBA 数组形状必须为 (H, W, 4): {rgba.shape}")
        height, width = rgba.shape[:2]
        data = np.ascontiguousarray(rgba, dtype=np.uint8).tobytes()
        return cls(width=width, height=height, data=data)


def _to_rgba(image: np.ndarray) -> np.ndarray:
    """将 OpenCV 读取的灰度/BGR/BGRA 图像转为 RGBA"""
    if image.dtype != np.uint8:
        # 16 位图像缩放到 8 位
        image = (image / 257).astype(np.uint8) if image.dtype == np.uint16 else image.astype(np.uint8)

    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
    channels = image.shape[2]
    if channels == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
    raise ImageLoadError(f"不支持的通道数: {channels}")


def load_raster(image_path: Union[str, Path]) -> RasterImage:
    """
    读取迷宫图片

    Args:
        image_path: 图片路径

    Returns:
        RasterImage

    Raises:
        ImageLoadError: 文件不存在或无法解码
    """
    image_path = Path(image_path)
    if not image_path.exists():
        error_msg = f"图片文件不存在: {image_path}"
        logger.error(error_msg)
        raise ImageLoadError(error_msg)

    image = cv2.imread(str(image_path), cv2.IMREAD_UNCHANGED)
    if image is None:
        error_msg = f"无法读取图片文件: {image_path}"
        logger.error(error_msg)
        raise ImageLoadError(error_msg)

    raster = RasterImage.from_array(_to_rgba(image))
    logger.info(f"加载图片: {image_path}, 尺寸: ({raster.width}, {raster.height})")
    return raster
