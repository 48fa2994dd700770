"""Small 2D grid helper shared by the grid-shaped puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from aoc2022.models import InputFormatError

Coord = tuple[int, int]

_STEPS: tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class Grid:
    """A fixed-size grid of cells addressed by (x, y), row-major."""

    width: int
    height: int
    cells: list

    @classmethod
    def parse(cls, text: str, convert: Callable[[str], object] = str) -> Grid:
        """Build a grid from lines of characters, converting each one.

        All non-empty lines must have the same length.
        """
        rows = [line.strip() for line in text.splitlines() if line.strip()]
        if not rows:
            raise InputFormatError("grid input is empty")
        width = len(rows[0])
        cells = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InputFormatError(f"grid row {y + 1} has length {len(row)}, expected {width}")
            cells.extend(convert(c) for c in row)
        return cls(width=width, height=len(rows), cells=cells)

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, coord: Coord):
        x, y = coord
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} is outside a {self.width}x{self.height} grid")
        return self.cells[y * self.width + x]

    def coords(self) -> Iterator[Coord]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def find(self, value) -> Coord:
        """Coordinate of the first cell equal to value."""
        for coord in self.coords():
            if self[coord] == value:
                return coord
        raise InputFormatError(f"no cell contains {value!r}")

    def neighbors(self, coord: Coord) -> Iterator[Coord]:
        """Orthogonal neighbors that lie inside the grid."""
        x, y = coord
        for dx, dy in _STEPS:
            n = (x + dx, y + dy)
            if self.in_bounds(n):
                yield n

    def ray(self, coord: Coord, step: Coord) -> Iterator[Coord]:
        """Coordinates walking from coord (exclusive) in one direction to the edge."""
        x, y = coord
        dx, dy = step
        x, y = x + dx, y + dy
        while self.in_bounds((x, y)):
            yield x, y
            x, y = x + dx, y + dy
