import cv2
import numpy as np
import pytest

from conftest import rows_to_rgba
from maze_walker.common.exceptions import InsufficientEntrancesError, MalformedInputError
from maze_walker.config.models import MazeConfig, RenderConfig, SolverConfig
from maze_walker.core.grid_model import Point
from maze_walker.core.image_loader import RasterImage
from maze_walker.maze_main import EXIT_ERROR, EXIT_NO_PATH, EXIT_OK, main
from maze_walker.service.maze_service import MazeSolvingService


def test_solve_corridor(maze_raster):
    config = MazeConfig(render=RenderConfig(show_path=True))

    summary = MazeSolvingService(config).solve(maze_raster(["***", "...", "***"]))

    assert summary.ok
    assert summary.request.start == Point(0, 1)
    assert summary.request.end == Point(2, 1)
    assert summary.result.path == [Point(0, 1), Point(1, 1), Point(2, 1)]
    assert summary.rendering == "***\nooo\n***\n"


def test_no_path_is_reported_not_raised(maze_raster):
    summary = MazeSolvingService().solve(maze_raster(["*****", "..*..", "*****"]))

    assert not summary.ok
    assert summary.result.path == []
    assert "无法找到" in summary.result.reason


def test_budget_is_reported_not_raised(maze_raster):
    service = MazeSolvingService(MazeConfig(solver=SolverConfig(max_steps=1)))

    summary = service.solve(maze_raster(["*****", ".....", "*****"]))

    assert not summary.ok
    assert summary.result.steps == 2


def test_structural_errors_propagate(maze_raster):
    with pytest.raises(InsufficientEntrancesError):
        MazeSolvingService().solve(maze_raster(["***", "*.*", "***"]))

    with pytest.raises(MalformedInputError):
        MazeSolvingService().solve(RasterImage(width=2, height=2, data=bytes(12)))


def test_cli_prints_maze_and_path(tmp_path, capsys):
    bgr = cv2.cvtColor(rows_to_rgba(["*.*", "*.*", "*.*"]), cv2.COLOR_RGBA2BGR)
    image = tmp_path / "maze.png"
    assert cv2.imwrite(str(image), bgr)

    code = main([str(image), "--show-path", "--log-level", "warning"])

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert out.startswith("*o*\n*o*\n*o*\n")
    assert "Entrances (1, 0) (1, 2)" in out
    assert "Found exit: (1, 2)" in out


def test_cli_exit_codes(tmp_path):
    blocked = tmp_path / "blocked.png"
    assert cv2.imwrite(str(blocked), cv2.cvtColor(rows_to_rgba(["*.*", "***", "*.*"]), cv2.COLOR_RGBA2BGR))
    closed = tmp_path / "closed.png"
    assert cv2.imwrite(str(closed), np.zeros((3, 3, 3), dtype=np.uint8))

    assert main([str(blocked), "--log-level", "error"]) == EXIT_NO_PATH
    assert main([str(closed), "--log-level", "error"]) == EXIT_ERROR
    assert main([str(tmp_path / "missing.png")]) == EXIT_ERROR


def test_step_by_step_pipeline(maze_raster):
    service = MazeSolvingService(MazeConfig(solver=SolverConfig(record_trace=True)))

    grid = service.build_grid(maze_raster(["*.**", "*..*", "**.*"]))
    entrances, request = service.find_endpoints(grid)
    result = service.plan(grid, request)

    assert len(grid) == 12
    assert entrances.points == [Point(1, 0), Point(2, 2)]
    assert result.ok
    assert result.path == [Point(1, 0), Point(1, 1), Point(2, 1), Point(2, 2)]
    assert [step.point for step in service.planner.trace] == result.path
