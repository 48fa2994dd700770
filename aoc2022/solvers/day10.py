"""Day 10: Cathode-Ray Tube.

``noop`` takes one cycle, ``addx V`` takes two and updates X after both.
Part B draws a 40-wide CRT: a pixel is lit when the 3-wide sprite centred on
X covers the column being drawn.
"""

from __future__ import annotations

from aoc2022.models import InputFormatError

DAY = 10
TITLE = "Cathode-Ray Tube"

INTERESTING_CYCLES = (20, 60, 100, 140, 180, 220)
CRT_WIDTH = 40
CRT_HEIGHT = 6
LIT = "#"
DARK = "."


def register_values(text: str) -> list[int]:
    """Value of X *during* each cycle; index 0 is cycle 1."""
    x = 1
    values = []
    for n, line in enumerate(text.splitlines(), 1):
        parts = line.split()
        if not parts:
            continue
        if parts == ["noop"]:
            values.append(x)
        elif parts[0] == "addx" and len(parts) == 2:
            try:
                v = int(parts[1])
            except ValueError as e:
                raise InputFormatError(f"line {n}: bad addx operand {parts[1]!r}") from e
            values.extend((x, x))
            x += v
        else:
            raise InputFormatError(f"line {n}: unknown instruction {line!r}")
    return values


def solve_a(text: str) -> int:
    values = register_values(text)
    return sum(cycle * values[cycle - 1] for cycle in INTERESTING_CYCLES if cycle <= len(values))


def solve_b(text: str) -> str:
    values = register_values(text)[:CRT_WIDTH * CRT_HEIGHT]
    pixels = [
        LIT if abs(i % CRT_WIDTH - x) <= 1 else DARK
        for i, x in enumerate(values)
    ]
    rows = ["".join(pixels[i:i + CRT_WIDTH]) for i in range(0, len(pixels), CRT_WIDTH)]
    return "\n".join(rows)
