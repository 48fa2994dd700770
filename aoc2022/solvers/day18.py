"""Day 18: Boiling Boulders."""

from __future__ import annotations

from collections import deque

from aoc2022.models import InputFormatError

DAY = 18
TITLE = "Boiling Boulders"

Cube = tuple[int, int, int]

_FACES: tuple[Cube, ...] = ((1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1))


def parse_cubes(text: str) -> set[Cube]:
    cubes = set()
    for n, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        try:
            x, y, z = (int(v) for v in line.split(","))
        except ValueError as e:
            raise InputFormatError(f"line {n}: expected 'x,y,z', found {line!r}") from e
        cubes.add((x, y, z))
    return cubes


def _adjacent(cube: Cube):
    x, y, z = cube
    for dx, dy, dz in _FACES:
        yield x + dx, y + dy, z + dz


def solve_a(text: str) -> int:
    cubes = parse_cubes(text)
    return sum(1 for cube in cubes for n in _adjacent(cube) if n not in cubes)


def solve_b(text: str) -> int:
    cubes = parse_cubes(text)
    if not cubes:
        return 0
    lo = [min(c[i] for c in cubes) - 1 for i in range(3)]
    hi = [max(c[i] for c in cubes) + 1 for i in range(3)]

    # Flood the air around the droplet from a corner of the padded bounding box
    start = (lo[0], lo[1], lo[2])
    outside = {start}
    queue = deque([start])
    faces = 0
    while queue:
        for n in _adjacent(queue.popleft()):
            if not all(lo[i] <= n[i] <= hi[i] for i in range(3)):
                continue
            if n in cubes:
                faces += 1
            elif n not in outside:
                outside.add(n)
                queue.append(n)
    return faces
