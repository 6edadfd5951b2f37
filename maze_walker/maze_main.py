#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫求解主程序

读取迷宫图片，打印迷宫和入口，搜索并输出路径。
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from maze_walker.common.exceptions import MazeWalkerError
from maze_walker.config.loader import load_config
from maze_walker.config.models import MazeConfig
from maze_walker.core.image_loader import load_raster
from maze_walker.service.maze_service import MazeSolvingService
from maze_walker.utils.logger import SetupLogger

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_PATH = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze-walker",
        description="从迷宫图片的边界入口出发，搜索一条通往出口的路径",
    )
    parser.add_argument("image", type=Path, help="迷宫图片路径")
    parser.add_argument("--config", type=Path, default=None, help="YAML 配置文件路径")
    parser.add_argument("--max-steps", type=int, default=None, help="最大搜索步数")
    parser.add_argument("--show-path", action="store_true", help="在迷宫中标出路径")
    parser.add_argument("--trace", action="store_true", help="输出每一步搜索记录")
    parser.add_argument("--log-level", default=None, help="日志级别（覆盖配置文件）")
    return parser


def _merge_args(config: MazeConfig, args: argparse.Namespace) -> MazeConfig:
    """命令行参数覆盖配置文件"""
    updates = {}
    if args.max_steps is not None:
        updates["solver"] = config.solver.model_copy(update={"max_steps": args.max_steps})
    if args.trace:
        solver = updates.get("solver", config.solver)
        updates["solver"] = solver.model_copy(update={"record_trace": True})
    if args.show_path:
        updates["render"] = config.render.model_copy(update={"show_path": True})
    if args.log_level:
        updates["logging"] = config.logging.model_copy(update={"level": args.log_level.upper()})
    # model_copy 不会重新校验，这里重新构建一次
    return MazeConfig.model_validate(config.model_copy(update=updates).model_dump())


def main(argv: Optional[List[str]] = None) -> int:
    """
    命令行入口

    Returns:
        进程退出码：0=找到路径，1=错误，2=无路径
    """
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else MazeConfig()
        config = _merge_args(config, args)
    except (MazeWalkerError, ValueError) as e:
        logger.error(f"配置无效: {e}")
        return EXIT_ERROR

    SetupLogger(log_dir=config.logging.log_dir, level=config.logging.level)

    try:
        raster = load_raster(args.image)
        service = MazeSolvingService(config)
        summary = service.solve(raster)
    except MazeWalkerError as e:
        logger.error(f"求解失败: {e}")
        return EXIT_ERROR

    print(summary.rendering, end="")
    print(f"Entrances {summary.request.start} {summary.request.end}")

    if config.solver.record_trace:
        for step in service.planner.trace:
            print(step)

    if not summary.ok:
        print(f"No path: {summary.result.reason}")
        return EXIT_NO_PATH

    print(f"Found exit: {summary.request.end}")
    print(f"Path ({len(summary.result.path)} cells, {summary.result.steps} steps): "
          + " -> ".join(str(p) for p in summary.result.path))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
