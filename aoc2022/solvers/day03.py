"""Day 3: Rucksack Reorganization."""

from __future__ import annotations

import string

from aoc2022.models import InputFormatError

DAY = 3
TITLE = "Rucksack Reorganization"

_PRIORITY = {c: i for i, c in enumerate(string.ascii_lowercase + string.ascii_uppercase, 1)}


def _rucksacks(text: str) -> list[str]:
    sacks = [line.strip() for line in text.splitlines() if line.strip()]
    for sack in sacks:
        if any(c not in _PRIORITY for c in sack):
            raise InputFormatError(f"rucksack {sack!r} contains a non-letter item")
    return sacks


def _common(*groups: str) -> str:
    shared = set(groups[0]).intersection(*groups[1:])
    if len(shared) != 1:
        raise InputFormatError(f"expected exactly one shared item in {groups}, found {sorted(shared)}")
    return shared.pop()


def solve_a(text: str) -> int:
    total = 0
    for sack in _rucksacks(text):
        half = len(sack) // 2
        total += _PRIORITY[_common(sack[:half], sack[half:])]
    return total


def solve_b(text: str) -> int:
    sacks = _rucksacks(text)
    if len(sacks) % 3:
        raise InputFormatError(f"{len(sacks)} rucksacks cannot be split into groups of three")
    return sum(_PRIORITY[_common(*sacks[i:i + 3])] for i in range(0, len(sacks), 3))
