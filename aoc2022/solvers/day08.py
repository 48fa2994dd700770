"""Day 8: Treetop Tree House."""

from __future__ import annotations

from math import prod

from aoc2022.grid import Coord, Grid

DAY = 8
TITLE = "Treetop Tree House"

_DIRECTIONS: tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _visible(grid: Grid, coord: Coord) -> bool:
    height = grid[coord]
    return any(
        all(grid[c] < height for c in grid.ray(coord, step))
        for step in _DIRECTIONS
    )


def _viewing_distance(grid: Grid, coord: Coord, step: Coord) -> int:
    height = grid[coord]
    distance = 0
    for c in grid.ray(coord, step):
        distance += 1
        if grid[c] >= height:
            break
    return distance


def scenic_score(grid: Grid, coord: Coord) -> int:
    return prod(_viewing_distance(grid, coord, step) for step in _DIRECTIONS)


def solve_a(text: str) -> int:
    grid = Grid.parse(text, int)
    return sum(1 for coord in grid.coords() if _visible(grid, coord))


def solve_b(text: str) -> int:
    grid = Grid.parse(text, int)
    return max(scenic_score(grid, coord) for coord in grid.coords())
