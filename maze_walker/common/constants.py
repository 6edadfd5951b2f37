#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
常量定义：集中管理所有魔法数字和配置常量
"""

# =============================
# 像素相关常量
# =============================

# 每个像素的通道数（RGBA）
RGBA_CHANNELS: int = 4

# =============================
# 渲染相关常量
# =============================

PASSABLE_GLYPH: str = " "
BLOCKED_GLYPH: str = "*"
PATH_GLYPH: str = "o"

# =============================
# 日志相关常量
# =============================

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT_CONSOLE: str = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

LOG_FORMAT_FILE: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
