#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫文本渲染模块

将栅格图渲染为字符画（每行以换行结尾），并支持从字符画还原可通行性。
"""

from typing import Iterable, List, Optional

from maze_walker.common.exceptions import MalformedInputError
from maze_walker.config.models import RenderConfig
from maze_walker.core.grid_model import MazeGrid, Point


def render_grid(
    grid: MazeGrid,
    path: Optional[Iterable[Point]] = None,
    config: Optional[RenderConfig] = None,
) -> str:
    """
    渲染栅格图

    Args:
        grid: 迷宫栅格图
        path: 路径（仅在 config.show_path 为 True 时标出）
        config: 渲染配置，默认为空格/星号

    Returns:
        字符画文本
    """
    config = config or RenderConfig()
    on_path = set(path) if (path is not None and config.show_path) else set()

    lines: List[str] = []
    row: List[str] = []
    for point, node in grid.items():
        if point in on_path:
            row.append(config.path_glyph)
        elif node.passable:
            row.append(config.passable_glyph)
        else:
            row.append(config.blocked_glyph)

        if point.x == grid.width - 1:
            lines.append("".join(row) + "\n")
            row = []

    return "".join(lines)


def passability_map(grid: MazeGrid) -> List[List[bool]]:
    """按行返回栅格的可通行性"""
    rows: List[List[bool]] = [[] for _ in range(grid.height)]
    for point, node in grid.items():
        rows[point.y].append(node.passable)
    return rows


def parse_rendering(text: str, config: Optional[RenderConfig] = None) -> List[List[bool]]:
    """
    将字符画还原为可通行性矩阵

    Args:
        text: render_grid 输出的文本
        config: 渲染配置，需与渲染时一致

    Returns:
        按行排列的可通行性（路径字符视为可通行）

    Raises:
        MalformedInputError: 出现未知字符或行宽不一致
    """
    config = config or RenderConfig()
    passable_glyphs = {config.passable_glyph, config.path_glyph}

    lines = text.split("\n")
    if text.endswith("\n"):
        lines = lines[:-1]

    rows: List[List[bool]] = []
    for line_no, line in enumerate(lines):
        row: List[bool] = []
        for glyph in line:
            if glyph in passable_glyphs:
                row.append(True)
            elif glyph == config.blocked_glyph:
                row.append(False)
            else:
                raise MalformedInputError(f"第 {line_no} 行出现未知字符: {glyph!r}")
        if rows and len(row) != len(rows[0]):
            raise MalformedInputError(f"第 {line_no} 行宽度不一致: {len(row)} != {len(rows[0])}")
        rows.append(row)

    return rows
