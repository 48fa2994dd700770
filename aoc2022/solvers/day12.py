"""Day 12: Hill Climbing Algorithm.

Breadth-first search over the height map. A step may climb at most one level
and descend any amount. Part B searches backwards from E to the nearest 'a'.
"""

from __future__ import annotations

from collections import deque
from typing import Callable

from aoc2022.grid import Coord, Grid
from aoc2022.models import InputFormatError

DAY = 12
TITLE = "Hill Climbing Algorithm"


def _elevation(c: str) -> int:
    return ord({"S": "a", "E": "z"}.get(c, c)) - ord("a")


def _bfs(grid: Grid, start: Coord, can_step: Callable[[int, int], bool], is_goal: Callable[[Coord], bool]) -> int:
    queue = deque([(start, 0)])
    seen = {start}
    while queue:
        coord, steps = queue.popleft()
        if is_goal(coord):
            return steps
        here = _elevation(grid[coord])
        for n in grid.neighbors(coord):
            if n not in seen and can_step(here, _elevation(grid[n])):
                seen.add(n)
                queue.append((n, steps + 1))
    raise InputFormatError("no route to the best signal location")


def solve_a(text: str) -> int:
    grid = Grid.parse(text)
    end = grid.find("E")
    return _bfs(grid, grid.find("S"), lambda here, there: there <= here + 1, lambda c: c == end)


def solve_b(text: str) -> int:
    grid = Grid.parse(text)
    return _bfs(
        grid,
        grid.find("E"),
        lambda here, there: here <= there + 1,
        lambda c: _elevation(grid[c]) == 0,
    )
