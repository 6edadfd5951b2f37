#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫栅格模型

定义坐标、节点和栅格图的数据结构。栅格按行优先的扁平列表存储，
构建完成后只读。
"""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Iterator, List, Optional, Tuple

from maze_walker.common.exceptions import GridIndexMissingError


@total_ordering
@dataclass(frozen=True)
class Point:
    """栅格坐标 (x, y)，按行优先排序（y 优先，x 其次）"""
    x: int
    y: int

    def __lt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Dimensions:
    """栅格尺寸"""
    width: int
    height: int

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def to_index(self, x: int, y: int) -> int:
        """行优先索引；越界时抛出 GridIndexMissingError"""
        if not self.contains(x, y):
            raise GridIndexMissingError(x, y)
        return y * self.width + x

    def points(self) -> Iterator[Point]:
        """按行优先顺序遍历所有坐标"""
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)


@dataclass(frozen=True)
class Connectors:
    """四个方向上可通行的相邻坐标"""
    north: Optional[Point] = None
    east: Optional[Point] = None
    south: Optional[Point] = None
    west: Optional[Point] = None

    def ordered(self) -> List[Point]:
        # 北、东、南、西
        return [p for p in (self.north, self.east, self.south, self.west) if p is not None]


@dataclass(frozen=True)
class MazeNode:
    """栅格节点"""
    passable: bool
    connectors: Connectors = field(default_factory=Connectors)

    def get_connections(self) -> List[Point]:
        """按 北/东/南/西 顺序返回相邻可通行坐标"""
        return self.connectors.ordered()


class MazeGrid:
    """
    迷宫栅格图

    持有 width*height 个节点，每个坐标恰好一个。由 grid_builder 构建，之后只读。
    """

    def __init__(self, dimensions: Dimensions, nodes: List[MazeNode]):
        if len(nodes) != dimensions.cell_count:
            raise ValueError(
                f"节点数量与尺寸不一致: nodes={len(nodes)}, "
                f"expected={dimensions.cell_count}"
            )
        self.dimensions_ = dimensions
        self.nodes_ = tuple(nodes)

    @property
    def dimensions(self) -> Dimensions:
        return self.dimensions_

    @property
    def width(self) -> int:
        return self.dimensions_.width

    @property
    def height(self) -> int:
        return self.dimensions_.height

    def __len__(self) -> int:
        return len(self.nodes_)

    def __contains__(self, point: Point) -> bool:
        return self.dimensions_.contains(point.x, point.y)

    def get_node(self, point: Point) -> MazeNode:
        """获取节点；坐标不在栅格中时抛出 GridIndexMissingError"""
        return self.nodes_[self.dimensions_.to_index(point.x, point.y)]

    def is_passable(self, point: Point) -> bool:
        return self.get_node(point).passable

    def items(self) -> Iterator[Tuple[Point, MazeNode]]:
        """按行优先顺序遍历 (坐标, 节点)"""
        for point, node in zip(self.dimensions_.points(), self.nodes_):
            yield point, node

    def passable_count(self) -> int:
        return sum(1 for node in self.nodes_ if node.passable)
