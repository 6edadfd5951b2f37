#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫求解模块

将迷宫图片转换为四邻接栅格图，并在边界入口之间搜索路径。
"""

from .service.maze_service import MazeSolvingService, MazeSolveSummary

__version__ = "0.1.0"

__all__ = ['MazeSolvingService', 'MazeSolveSummary']
