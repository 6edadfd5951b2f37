#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义迷宫求解模块的专用异常
"""


class MazeWalkerError(Exception):
    """迷宫求解模块基础异常类"""
    pass


class MalformedInputError(MazeWalkerError):
    """输入数据与声明尺寸不一致"""
    pass


class GridIndexMissingError(MazeWalkerError):
    """查询的坐标不在栅格中"""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(f"invalid pixel index {x},{y}")


class InsufficientEntrancesError(MazeWalkerError):
    """边界可通行格子不足两个，无法确定起点和终点"""
    pass


class PathPlanningError(MazeWalkerError):
    """路径规划失败异常"""
    pass


class PathNotFoundError(PathPlanningError):
    """回溯至空路径仍未到达终点"""
    pass


class SearchBudgetExceededError(PathPlanningError):
    """搜索步数超过上限"""
    pass


class ConfigurationError(MazeWalkerError):
    """配置错误异常"""
    pass


class ImageLoadError(MazeWalkerError):
    """图像读取失败异常"""
    pass
