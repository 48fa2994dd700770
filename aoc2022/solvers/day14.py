"""Day 14: Regolith Reservoir.

Sand pours from (500, 0) and falls down, then down-left, then down-right.
The path of the previous grain is reused: the next grain follows it exactly
up to the point where that grain came to rest.
"""

from __future__ import annotations

from typing import Optional

from aoc2022.models import InputFormatError

DAY = 14
TITLE = "Regolith Reservoir"

SOURCE = (500, 0)

Point = tuple[int, int]


def parse_rocks(text: str) -> set[Point]:
    rocks: set[Point] = set()
    for n, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        try:
            points = [tuple(int(v) for v in p.split(",")) for p in line.split("->")]
        except ValueError as e:
            raise InputFormatError(f"line {n}: bad rock path {line!r}") from e
        if any(len(p) != 2 for p in points):
            raise InputFormatError(f"line {n}: bad rock path {line!r}")
        for (x1, y1), (x2, y2) in zip(points, points[1:]):
            if x1 != x2 and y1 != y2:
                raise InputFormatError(f"line {n}: diagonal rock segment {x1},{y1} -> {x2},{y2}")
            for x in range(min(x1, x2), max(x1, x2) + 1):
                for y in range(min(y1, y2), max(y1, y2) + 1):
                    rocks.add((x, y))
        if len(points) == 1:
            rocks.add(points[0])
    if not rocks:
        raise InputFormatError("no rock paths in input")
    return rocks


def pour(rocks: set[Point], floor: Optional[int] = None) -> int:
    """Units of sand at rest when pouring stops.

    Without a floor, pouring stops once a grain falls past the lowest rock.
    With one, it stops when the source itself is covered.
    """
    blocked = set(rocks)
    lowest = max(y for _, y in rocks)
    path = [SOURCE]
    rested = 0

    while path:
        x, y = path[-1]
        if floor is None and y > lowest:
            break
        for nx in (x, x - 1, x + 1):
            nxt = (nx, y + 1)
            if nxt not in blocked and (floor is None or y + 1 < floor):
                path.append(nxt)
                break
        else:
            blocked.add(path.pop())
            rested += 1
    return rested


def solve_a(text: str) -> int:
    return pour(parse_rocks(text))


def solve_b(text: str) -> int:
    rocks = parse_rocks(text)
    return pour(rocks, floor=max(y for _, y in rocks) + 2)
