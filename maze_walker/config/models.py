#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫求解配置模型

使用Pydantic定义类型安全的配置模型，所有字段均有默认值。
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from maze_walker.common.constants import (
    BLOCKED_GLYPH,
    LOG_LEVELS,
    PASSABLE_GLYPH,
    PATH_GLYPH,
)


class SolverConfig(BaseModel):
    """DFS 求解配置"""
    max_steps: Optional[int] = Field(None, description="最大搜索步数，None 表示不限制")
    record_trace: bool = Field(False, description="是否记录每一步搜索")

    @field_validator('max_steps')
    @classmethod
    def validate_max_steps(cls, v: Optional[int]) -> Optional[int]:
        """验证最大步数"""
        if v is not None and v <= 0:
            raise ValueError(f"最大搜索步数必须大于0: {v}")
        return v


class RenderConfig(BaseModel):
    """控制台渲染配置"""
    passable_glyph: str = Field(PASSABLE_GLYPH, description="可通行格子字符")
    blocked_glyph: str = Field(BLOCKED_GLYPH, description="障碍格子字符")
    path_glyph: str = Field(PATH_GLYPH, description="路径格子字符")
    show_path: bool = Field(False, description="渲染时是否标出路径")

    @field_validator('passable_glyph', 'blocked_glyph', 'path_glyph')
    @classmethod
    def validate_glyph(cls, v: str) -> str:
        """验证字符长度"""
        if len(v) != 1 or v == "\n":
            raise ValueError(f"渲染字符必须是单个非换行字符: {v!r}")
        return v

    @model_validator(mode='after')
    def validate_distinct(self) -> "RenderConfig":
        """三个字符必须互不相同"""
        glyphs = {self.passable_glyph, self.blocked_glyph, self.path_glyph}
        if len(glyphs) != 3:
            raise ValueError("passable_glyph、blocked_glyph、path_glyph 不能重复")
        return self


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志文件目录，None 表示只输出到控制台")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """验证日志级别"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"未知日志级别: {v}")
        return level


class MazeConfig(BaseModel):
    """迷宫求解主配置"""
    solver: SolverConfig = Field(default_factory=SolverConfig, description="求解配置")
    render: RenderConfig = Field(default_factory=RenderConfig, description="渲染配置")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")
