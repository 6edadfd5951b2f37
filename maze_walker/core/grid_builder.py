#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格图构建模块

根据像素分类结果构建四邻接栅格图。只有两端都可通行时才建立连接。
"""

from typing import List

from loguru import logger

from maze_walker.core.grid_model import Connectors, MazeGrid, MazeNode, Point
from maze_walker.core.pixel_classifier import PixelList


def get_passable_neighbours(pixel_list: PixelList, point: Point) -> Connectors:
    """
    计算某个坐标四个方向上的可通行相邻坐标

    Args:
        pixel_list: 像素列表
        point: 当前坐标

    Returns:
        Connectors，越界或不可通行的方向为 None
    """
    dims = pixel_list.dimensions
    x, y = point.x, point.y

    def passable_at(nx: int, ny: int):
        if not dims.contains(nx, ny):
            return None
        neighbour = Point(nx, ny)
        return neighbour if pixel_list.is_passable(neighbour) else None

    return Connectors(
        north=passable_at(x, y - 1),
        east=passable_at(x + 1, y),
        south=passable_at(x, y + 1),
        west=passable_at(x - 1, y),
    )


def build_grid(pixel_list: PixelList) -> MazeGrid:
    """
    构建迷宫栅格图

    Args:
        pixel_list: 像素分类结果

    Returns:
        MazeGrid，包含 width*height 个节点
    """
    nodes: List[MazeNode] = []
    edge_count = 0

    for pixel in pixel_list:
        if not pixel.passable:
            nodes.append(MazeNode(passable=False))
            continue

        connectors = get_passable_neighbours(pixel_list, pixel.point)
        edge_count += len(connectors.ordered())
        nodes.append(MazeNode(passable=True, connectors=connectors))

    grid = MazeGrid(pixel_list.dimensions, nodes)
    logger.debug(
        f"栅格图构建完成: size=({grid.width}, {grid.height}), "
        f"passable={grid.passable_count()}, edges={edge_count // 2}"
    )
    return grid
