#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫求解服务模块

封装求解的完整流程：像素分类、栅格图构建、边界扫描、DFS 搜索、渲染。
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from loguru import logger

from maze_walker.common.exceptions import PathPlanningError
from maze_walker.config.models import MazeConfig
from maze_walker.core.border_scanner import EntranceList, find_entrances
from maze_walker.core.grid_builder import build_grid
from maze_walker.core.grid_model import MazeGrid
from maze_walker.core.image_loader import RasterImage
from maze_walker.core.maze_renderer import render_grid
from maze_walker.core.pixel_classifier import classify_pixels
from maze_walker.path_planner.dfs_planner import DfsPlanner
from maze_walker.path_planner.map_model import PlanRequest, PlanResult


@dataclass
class MazeSolveSummary:
    """一次求解的汇总结果"""
    grid: MazeGrid
    entrances: EntranceList
    request: PlanRequest
    result: PlanResult
    rendering: str

    @property
    def ok(self) -> bool:
        return self.result.ok


class MazeSolvingService:
    """迷宫求解服务"""

    def __init__(self, config: Optional[MazeConfig] = None):
        """
        初始化迷宫求解服务

        Args:
            config: MazeConfig配置对象，None 时使用默认配置
        """
        self.config_ = config or MazeConfig()
        self.planner_ = DfsPlanner(
            max_steps=self.config_.solver.max_steps,
            record_trace=self.config_.solver.record_trace,
        )

    @property
    def planner(self) -> DfsPlanner:
        return self.planner_

    def build_grid(self, raster: RasterImage) -> MazeGrid:
        """
        从栅格图像构建迷宫栅格图

        Raises:
            MalformedInputError: 字节流与尺寸不一致
        """
        pixel_list = classify_pixels(raster.data, raster.dimensions)
        grid = build_grid(pixel_list)
        logger.info(f"栅格图构建完成: ({grid.width}, {grid.height}), 可通行格子={grid.passable_count()}")
        return grid

    def find_endpoints(self, grid: MazeGrid) -> Tuple[EntranceList, PlanRequest]:
        """
        在边界上确定起点和终点

        Returns:
            (边界候选入口列表, 起终点请求)

        Raises:
            InsufficientEntrancesError: 边界可通行格子不足两个
        """
        entrances = find_entrances(grid)
        start, end = entrances.endpoints()
        logger.info(f"Entrances {start} {end}")
        return entrances, PlanRequest(start=start, end=end)

    def plan(self, grid: MazeGrid, request: PlanRequest) -> PlanResult:
        """
        在给定栅格图上做一次路径规划

        搜索失败（不连通或超出步数）转换为 ok=False 的结果，不向上抛出。
        """
        try:
            path = self.planner_.Solve(grid, request.start, request.end)
        except PathPlanningError as e:
            logger.warning(f"路径规划失败: {e}")
            return PlanResult(ok=False, path=[], reason=str(e), steps=self.planner_.steps)

        return PlanResult(ok=True, path=path, reason="ok", steps=self.planner_.steps)

    def solve(self, raster: RasterImage) -> MazeSolveSummary:
        """
        求解迷宫

        Args:
            raster: 解码后的迷宫图像

        Returns:
            MazeSolveSummary

        Raises:
            MalformedInputError: 字节流与尺寸不一致
            InsufficientEntrancesError: 边界可通行格子不足两个
        """
        grid = self.build_grid(raster)
        entrances, request = self.find_endpoints(grid)
        result = self.plan(grid, request)

        rendering = render_grid(grid, path=result.path, config=self.config_.render)
        return MazeSolveSummary(
            grid=grid,
            entrances=entrances,
            request=request,
            result=result,
            rendering=rendering,
        )
