#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：实现带回溯的迭代式深度优先搜索
"""

# 标准库导入
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set

# 第三方库导入
from loguru import logger

from maze_walker.common.exceptions import PathNotFoundError, SearchBudgetExceededError
from maze_walker.core.grid_model import MazeGrid, Point


class SearchState(Enum):
    ADVANCING = "advancing"
    BACKTRACKING = "backtracking"
    FOUND = "found"


@dataclass(frozen=True)
class TraceStep:
    """单步搜索记录"""
    point: Point
    came_from: Optional[Point]
    action: SearchState

    def __str__(self) -> str:
        return f"point: {self.point}  from: {self.came_from}  [{self.action.value}]"


class DfsPlanner:
    """
    深度优先路径规划器

    只沿栅格图声明的连接移动，邻居优先级固定为 北、东、南、西。
    返回的是一条可行路径，不保证最短。

    示例:
        ```python
        planner = DfsPlanner(max_steps=100000)
        path = planner.Solve(grid, start=Point(0, 1), end=Point(2, 1))
        ```
    """

    def __init__(self, max_steps: Optional[int] = None, record_trace: bool = False):
        """
        初始化 DFS 规划器

        Args:
            max_steps: 最大搜索步数，None 表示不限制
            record_trace: 是否记录每一步

        Raises:
            ValueError: 输入参数无效
        """
        if max_steps is not None and (not isinstance(max_steps, int) or max_steps <= 0):
            raise ValueError("max_steps必须是正整数或None")

        self.max_steps_ = max_steps
        self.record_trace_ = record_trace
        self.trace_: List[TraceStep] = []
        self.steps_ = 0
        self.state_: Optional[SearchState] = None

    @property
    def trace(self) -> List[TraceStep]:
        return list(self.trace_)

    @property
    def steps(self) -> int:
        return self.steps_

    @property
    def state(self) -> Optional[SearchState]:
        return self.state_

    def _Record(self, point: Point, came_from: Optional[Point], action: SearchState) -> None:
        logger.debug(f"point: {point}  from: {came_from}")
        if self.record_trace_:
            self.trace_.append(TraceStep(point, came_from, action))

    def Solve(self, grid: MazeGrid, start: Point, end: Point) -> List[Point]:
        """
        搜索从起点到终点的路径

        Args:
            grid: 迷宫栅格图
            start: 起点
            end: 终点

        Returns:
            路径坐标列表，首个为起点，末个为终点

        Raises:
            GridIndexMissingError: 起点或终点不在栅格中
            PathNotFoundError: 起点和终点之间不连通
            SearchBudgetExceededError: 超过最大搜索步数
        """
        # 越界时 get_node 会抛出 GridIndexMissingError
        grid.get_node(start)
        grid.get_node(end)

        self.trace_ = []
        self.steps_ = 0

        path: List[Point] = [start]
        visited: Set[Point] = {start}
        current = start

        if start == end:
            self.state_ = SearchState.FOUND
            self._Record(start, None, SearchState.FOUND)
            logger.debug("[DFS] 起点和终点相同，返回单点路径")
            return path

        self._Record(start, None, SearchState.ADVANCING)
        logger.debug(f"[DFS] 开始搜索，起点: {start}, 终点: {end}")

        while True:
            self.steps_ += 1
            if self.max_steps_ is not None and self.steps_ > self.max_steps_:
                error_msg = f"超过最大搜索步数: max_steps={self.max_steps_}, start={start}, end={end}"
                logger.warning(error_msg)
                raise SearchBudgetExceededError(error_msg)

            node = grid.get_node(current)
            candidate = next((p for p in node.get_connections() if p not in visited), None)

            if candidate is not None:
                self.state_ = SearchState.ADVANCING
                path.append(candidate)
                visited.add(candidate)
                self._Record(candidate, current, SearchState.ADVANCING)
                current = candidate

                if current == end:
                    self.state_ = SearchState.FOUND
                    logger.info(f"[DFS] 找到出口: {end}, 路径长度={len(path)}, 步数={self.steps_}")
                    return path
                continue

            # 无可走邻居，回退
            self.state_ = SearchState.BACKTRACKING
            dead_end = path.pop()
            if not path:
                error_msg = f"无法找到从起点到终点的路径: start={start}, end={end}, 探索节点数={len(visited)}"
                logger.warning(error_msg)
                raise PathNotFoundError(error_msg)

            current = path[-1]
            self._Record(current, dead_end, SearchState.BACKTRACKING)
