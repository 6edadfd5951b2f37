#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    MazeConfig,
    SolverConfig,
    RenderConfig,
    LoggingConfig,
)
from .loader import load_config

__all__ = [
    'MazeConfig',
    'SolverConfig',
    'RenderConfig',
    'LoggingConfig',
    'load_config'
]
