"""Day 15: Beacon Exclusion Zone.

Each sensor rules out a Manhattan diamond reaching its closest beacon.

Part A merges the diamonds' intersections with one row into intervals.
Part B relies on the single uncovered point sitting just outside several
diamonds: it must lie on a line one step beyond some sensor's edge, so the
candidates are the crossings of those lines. Rows are scanned as a fallback.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from aoc2022.models import InputFormatError

DAY = 15
TITLE = "Beacon Exclusion Zone"

ROW = 2_000_000
SEARCH_BOUND = 4_000_000
TUNING_MULTIPLIER = 4_000_000

_RECORD_RE = re.compile(
    r"Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)"
)


@dataclass(frozen=True)
class Sensor:
    x: int
    y: int
    beacon_x: int
    beacon_y: int

    @property
    def radius(self) -> int:
        return abs(self.x - self.beacon_x) + abs(self.y - self.beacon_y)

    def covers(self, x: int, y: int) -> bool:
        return abs(self.x - x) + abs(self.y - y) <= self.radius


def parse_sensors(text: str) -> list[Sensor]:
    sensors = []
    for n, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        m = _RECORD_RE.search(line)
        if not m:
            raise InputFormatError(f"line {n}: not a sensor report: {line!r}")
        sensors.append(Sensor(*(int(g) for g in m.groups())))
    return sensors


def row_intervals(sensors: list[Sensor], y: int) -> list[tuple[int, int]]:
    """Merged, sorted inclusive x-intervals covered on row y."""
    spans = []
    for s in sensors:
        reach = s.radius - abs(s.y - y)
        if reach >= 0:
            spans.append((s.x - reach, s.x + reach))
    spans.sort()

    merged: list[tuple[int, int]] = []
    for lo, hi in spans:
        if merged and lo <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], hi))
        else:
            merged.append((lo, hi))
    return merged


def _edge_crossings(sensors: list[Sensor]) -> Iterator[tuple[int, int]]:
    # Lines y = x + a and y = -x + b just outside each diamond
    rising = set()
    falling = set()
    for s in sensors:
        r = s.radius + 1
        rising.update((s.y - s.x - r, s.y - s.x + r))
        falling.update((s.y + s.x - r, s.y + s.x + r))
    for a in rising:
        for b in falling:
            if (b - a) % 2 == 0:
                yield (b - a) // 2, (a + b) // 2


def find_beacon(sensors: list[Sensor], bound: int) -> Optional[tuple[int, int]]:
    for x, y in _edge_crossings(sensors):
        if 0 <= x <= bound and 0 <= y <= bound and not any(s.covers(x, y) for s in sensors):
            return x, y

    for y in range(bound + 1):
        x = 0
        for lo, hi in row_intervals(sensors, y):
            if lo > x:
                break
            x = max(x, hi + 1)
        if x <= bound:
            return x, y
    return None


def solve_a(text: str, row: int = ROW) -> int:
    sensors = parse_sensors(text)
    covered = sum(hi - lo + 1 for lo, hi in row_intervals(sensors, row))
    beacons = {(s.beacon_x, s.beacon_y) for s in sensors if s.beacon_y == row}
    return covered - len(beacons)


def solve_b(text: str, bound: int = SEARCH_BOUND) -> int:
    position = find_beacon(parse_sensors(text), bound)
    if position is None:
        raise InputFormatError(f"every position in 0..{bound} is covered by a sensor")
    x, y = position
    return x * TUNING_MULTIPLIER + y
