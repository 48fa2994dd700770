"""Day 4: Camp Cleanup.

Lines look like ``2-4,6-8``: two inclusive section ranges per pair of elves.
"""

from __future__ import annotations

import re

from aoc2022.models import InputFormatError

DAY = 4
TITLE = "Camp Cleanup"

_PAIR_RE = re.compile(r"^(\d+)-(\d+),(\d+)-(\d+)$")


def _pairs(text: str) -> list[tuple[int, int, int, int]]:
    pairs = []
    for n, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        m = _PAIR_RE.match(line)
        if not m:
            raise InputFormatError(f"line {n}: expected 'a-b,c-d', found {line!r}")
        pairs.append(tuple(int(g) for g in m.groups()))
    return pairs


def solve_a(text: str) -> int:
    return sum(
        1 for a, b, c, d in _pairs(text)
        if (a <= c and d <= b) or (c <= a and b <= d)
    )


def solve_b(text: str) -> int:
    return sum(1 for a, b, c, d in _pairs(text) if a <= d and c <= b)
