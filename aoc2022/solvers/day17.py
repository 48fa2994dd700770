"""Day 17: Pyroclastic Flow.

Rocks fall into a 7-wide chamber, pushed by a repeating jet pattern. For the
trillion-rock question the simulation watches for a repeated state (rock
shape, jet position, shape of the tower's top) and skips whole cycles.
"""

from __future__ import annotations

from aoc2022.models import InputFormatError

DAY = 17
TITLE = "Pyroclastic Flow"

CHAMBER_WIDTH = 7
SKYLINE_DEPTH = 64

# (dx, dy) offsets from the bottom-left corner, y grows upward
ROCKS: tuple[tuple[tuple[int, int], ...], ...] = (
    ((0, 0), (1, 0), (2, 0), (3, 0)),
    ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2)),
    ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)),
    ((0, 0), (0, 1), (0, 2), (0, 3)),
    ((0, 0), (1, 0), (0, 1), (1, 1)),
)


def _parse_jets(text: str) -> list[int]:
    jets = text.strip()
    if not jets or set(jets) - {"<", ">"}:
        raise InputFormatError("jet pattern must be a non-empty run of '<' and '>'")
    return [1 if c == ">" else -1 for c in jets]


def _fits(filled: set[tuple[int, int]], rock, x: int, y: int) -> bool:
    for dx, dy in rock:
        cx, cy = x + dx, y + dy
        if cx < 0 or cx >= CHAMBER_WIDTH or cy < 0 or (cx, cy) in filled:
            return False
    return True


def _skyline(filled: set[tuple[int, int]], height: int) -> tuple[int, ...]:
    # Depth below the top to the first rock per column, capped so empty columns still repeat
    limit = min(height, SKYLINE_DEPTH)
    depths = []
    for col in range(CHAMBER_WIDTH):
        depth = 0
        while depth < limit and (col, height - 1 - depth) not in filled:
            depth += 1
        depths.append(depth)
    return tuple(depths)


def tower_height(text: str, rock_count: int) -> int:
    jets = _parse_jets(text)
    filled: set[tuple[int, int]] = set()
    height = 0
    jet = 0
    seen: dict[tuple, tuple[int, int]] = {}
    skipped_height = 0
    cycle_found = False
    dropped = 0

    while dropped < rock_count:
        rock = ROCKS[dropped % len(ROCKS)]
        x, y = 2, height + 3
        while True:
            push = jets[jet]
            jet = (jet + 1) % len(jets)
            if _fits(filled, rock, x + push, y):
                x += push
            if not _fits(filled, rock, x, y - 1):
                break
            y -= 1

        for dx, dy in rock:
            filled.add((x + dx, y + dy))
            height = max(height, y + dy + 1)
        dropped += 1

        if cycle_found:
            continue
        state = (dropped % len(ROCKS), jet, _skyline(filled, height))
        if state in seen:
            prev_dropped, prev_height = seen[state]
            period = dropped - prev_dropped
            cycles = (rock_count - dropped) // period
            dropped += cycles * period
            skipped_height = cycles * (height - prev_height)
            cycle_found = True
        else:
            seen[state] = (dropped, height)

    return height + skipped_height


def solve_a(text: str) -> int:
    return tower_height(text, 2022)


def solve_b(text: str) -> int:
    return tower_height(text, 1_000_000_000_000)
