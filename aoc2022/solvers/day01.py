"""Day 1: Calorie Counting.

Input is groups of integers separated by blank lines, one group per elf.
"""

from __future__ import annotations

from aoc2022.models import InputFormatError

DAY = 1
TITLE = "Calorie Counting"


def elf_totals(text: str) -> list[int]:
    """Calorie total for each elf, in input order."""
    totals = []
    for block in text.strip().split("\n\n"):
        try:
            totals.append(sum(int(line) for line in block.split()))
        except ValueError as e:
            raise InputFormatError(f"bad calorie count in group {len(totals) + 1}: {e}") from e
    return totals


def solve_a(text: str) -> int:
    return max(elf_totals(text))


def solve_b(text: str) -> int:
    return sum(sorted(elf_totals(text), reverse=True)[:3])
