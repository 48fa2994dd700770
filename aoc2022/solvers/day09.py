"""Day 9: Rope Bridge.

The head moves one step at a time; each following knot catches up whenever
it is no longer touching (including diagonally) the knot ahead of it.
"""

from __future__ import annotations

from aoc2022.models import InputFormatError

DAY = 9
TITLE = "Rope Bridge"

_STEPS = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}


def _motions(text: str) -> list[tuple[tuple[int, int], int]]:
    motions = []
    for n, line in enumerate(text.splitlines(), 1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) != 2 or parts[0] not in _STEPS or not parts[1].isdigit():
            raise InputFormatError(f"line {n}: expected '<R|L|U|D> <count>', found {line!r}")
        motions.append((_STEPS[parts[0]], int(parts[1])))
    return motions


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def tail_positions(text: str, knots: int) -> int:
    """Number of distinct positions the last knot visits."""
    rope = [(0, 0)] * knots
    visited = {rope[-1]}
    for (dx, dy), count in _motions(text):
        for _ in range(count):
            hx, hy = rope[0]
            rope[0] = (hx + dx, hy + dy)
            for i in range(1, knots):
                (px, py), (kx, ky) = rope[i - 1], rope[i]
                if max(abs(px - kx), abs(py - ky)) <= 1:
                    break
                rope[i] = (kx + _sign(px - kx), ky + _sign(py - ky))
            visited.add(rope[-1])
    return len(visited)


def solve_a(text: str) -> int:
    return tail_positions(text, 2)


def solve_b(text: str) -> int:
    return tail_positions(text, 10)
