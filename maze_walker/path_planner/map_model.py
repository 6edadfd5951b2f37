from dataclasses import dataclass, field
from typing import List

from maze_walker.core.grid_model import Point


@dataclass
class PlanRequest:
    start: Point
    end: Point


@dataclass
class PlanResult:
    ok: bool
    path: List[Point] = field(default_factory=list)
    reason: str = ""
    steps: int = 0
