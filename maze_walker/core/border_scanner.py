#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
边界扫描模块

沿栅格四周查找可通行格子，作为迷宫的入口和出口候选。
"""

from typing import Iterator, List, Tuple

from loguru import logger

from maze_walker.common.exceptions import GridIndexMissingError, InsufficientEntrancesError
from maze_walker.core.grid_model import MazeGrid, Point


class EntranceList:
    """边界可通行坐标列表，首个为起点，末个为终点"""

    def __init__(self, points: List[Point]):
        self.points_ = list(points)

    @property
    def points(self) -> List[Point]:
        return list(self.points_)

    def __len__(self) -> int:
        return len(self.points_)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points_)

    def _require_pair(self) -> None:
        if len(self.points_) < 2:
            raise InsufficientEntrancesError(
                f"边界可通行格子不足两个: found={len(self.points_)}"
            )

    @property
    def start(self) -> Point:
        self._require_pair()
        return self.points_[0]

    @property
    def end(self) -> Point:
        self._require_pair()
        return self.points_[-1]

    def endpoints(self) -> Tuple[Point, Point]:
        return self.start, self.end


def perimeter_points(width: int, height: int) -> Iterator[Point]:
    """
    按固定顺序遍历边界坐标

    顺序：上边（左到右）、下边（左到右）、左边（上到下）、右边（上到下）。
    四个角各出现两次。
    """
    # 上下两行
    for y in (0, height - 1):
        for x in range(width):
            yield Point(x, y)

    # 左右两列
    for x in (0, width - 1):
        for y in range(height):
            yield Point(x, y)


def find_entrances(grid: MazeGrid) -> EntranceList:
    """
    查找边界上的可通行格子

    Args:
        grid: 迷宫栅格图

    Returns:
        EntranceList，按扫描顺序排列

    Raises:
        GridIndexMissingError: 边界坐标不在栅格中（尺寸与栅格不一致）
    """
    entrances: List[Point] = []
    for point in perimeter_points(grid.width, grid.height):
        if point not in grid:
            raise GridIndexMissingError(point.x, point.y)
        if grid.is_passable(point):
            entrances.append(point)

    logger.info(f"边界扫描完成: 候选入口数={len(entrances)}")
    return EntranceList(entrances)
