import pytest

from maze_walker.common.exceptions import GridIndexMissingError, InsufficientEntrancesError
from maze_walker.core.border_scanner import find_entrances, perimeter_points
from maze_walker.core.grid_model import Point


def test_corridor_entrances(maze_grid):
    grid = maze_grid([
        "***",
        "...",
        "***",
    ])

    entrances = find_entrances(grid)

    assert entrances.points == [Point(0, 1), Point(2, 1)]
    assert entrances.start == Point(0, 1)
    assert entrances.end == Point(2, 1)


def test_scan_order_visits_corners_twice(maze_grid):
    grid = maze_grid([
        "...",
        "...",
        "...",
    ])

    entrances = find_entrances(grid).points

    assert entrances == [
        Point(0, 0), Point(1, 0), Point(2, 0),
        Point(0, 2), Point(1, 2), Point(2, 2),
        Point(0, 0), Point(0, 1), Point(0, 2),
        Point(2, 0), Point(2, 1), Point(2, 2),
    ]
    for corner in (Point(0, 0), Point(2, 0), Point(0, 2), Point(2, 2)):
        assert entrances.count(corner) == 2
    assert find_entrances(grid).points == entrances


def test_single_row_is_scanned_twice():
    assert list(perimeter_points(2, 1)) == [
        Point(0, 0), Point(1, 0),
        Point(0, 0), Point(1, 0),
        Point(0, 0),
        Point(1, 0),
    ]


def test_no_openings(maze_grid):
    entrances = find_entrances(maze_grid(["***", "*.*", "***"]))

    assert len(entrances) == 0
    with pytest.raises(InsufficientEntrancesError):
        entrances.start
    with pytest.raises(InsufficientEntrancesError):
        entrances.endpoints()


def test_single_opening_is_not_enough(maze_grid):
    entrances = find_entrances(maze_grid(["*.*", "*.*", "***"]))

    assert entrances.points == [Point(1, 0)]
    with pytest.raises(InsufficientEntrancesError):
        entrances.end


def test_dimension_mismatch_is_reported():
    class ShrunkGrid:
        width = 3
        height = 3

        def __contains__(self, point):
            return point.x < 2

        def is_passable(self, point):
            return True

    with pytest.raises(GridIndexMissingError) as excinfo:
        find_entrances(ShrunkGrid())
    assert (excinfo.value.x, excinfo.value.y) == (2, 0)
