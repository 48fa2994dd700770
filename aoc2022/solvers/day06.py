"""Day 6: Tuning Trouble."""

from __future__ import annotations

from aoc2022.models import InputFormatError

DAY = 6
TITLE = "Tuning Trouble"


def find_marker(stream: str, size: int) -> int:
    """Characters processed when the first window of `size` distinct characters ends."""
    for end in range(size, len(stream) + 1):
        if len(set(stream[end - size:end])) == size:
            return end
    raise InputFormatError(f"no run of {size} distinct characters in the datastream")


def solve_a(text: str) -> int:
    return find_marker(text.strip(), 4)


def solve_b(text: str) -> int:
    return find_marker(text.strip(), 14)
