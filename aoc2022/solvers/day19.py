"""Day 19: Not Enough Minerals.

Depth-first search over which robot to build next. Instead of stepping one
minute at a time, each branch jumps straight to the minute the chosen robot
can be afforded. Branches are cut when:
  - a robot type already produces as much per minute as any recipe can spend
  - an optimistic estimate cannot beat the best count found so far
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from math import prod
from typing import Optional

from aoc2022.models import InputFormatError

DAY = 19
TITLE = "Not Enough Minerals"

_BLUEPRINT_RE = re.compile(
    r"Blueprint (\d+):\s*"
    r"Each ore robot costs (\d+) ore\.\s*"
    r"Each clay robot costs (\d+) ore\.\s*"
    r"Each obsidian robot costs (\d+) ore and (\d+) clay\.\s*"
    r"Each geode robot costs (\d+) ore and (\d+) obsidian\."
)


@dataclass(frozen=True)
class Blueprint:
    number: int
    ore_robot_ore: int
    clay_robot_ore: int
    obsidian_robot_ore: int
    obsidian_robot_clay: int
    geode_robot_ore: int
    geode_robot_obsidian: int


def parse_blueprints(text: str) -> list[Blueprint]:
    blueprints = [Blueprint(*(int(g) for g in m.groups())) for m in _BLUEPRINT_RE.finditer(text)]
    if not blueprints:
        raise InputFormatError("no blueprints found")
    return blueprints


def _wait(cost: int, stock: int, robots: int) -> int:
    """Minutes until `stock` reaches `cost`, or -1 if it never will."""
    if stock >= cost:
        return 0
    if robots == 0:
        return -1
    return -(-(cost - stock) // robots)


def _build_time(*waits: int) -> Optional[int]:
    """Minutes until a robot is ready, counting the minute spent building it."""
    if min(waits) < 0:
        return None
    return max(waits) + 1


def _geode_bound(bp: Blueprint, time: int, obs_r: int, obs: int, geodes: int) -> int:
    # Ore and clay are free and a new obsidian robot appears every minute
    for remaining in range(time - 1, -1, -1):
        if obs >= bp.geode_robot_obsidian:
            obs -= bp.geode_robot_obsidian
            geodes += remaining
        obs += obs_r
        obs_r += 1
    return geodes


def max_geodes(bp: Blueprint, minutes: int) -> int:
    max_ore = max(bp.ore_robot_ore, bp.clay_robot_ore, bp.obsidian_robot_ore, bp.geode_robot_ore)
    best = 0

    def search(time: int, ore_r: int, clay_r: int, obs_r: int, ore: int, clay: int, obs: int, geodes: int) -> None:
        nonlocal best
        best = max(best, geodes)
        if _geode_bound(bp, time, obs_r, obs, geodes) <= best:
            return

        # A geode robot's whole future output is credited when it is built
        t = _build_time(_wait(bp.geode_robot_ore, ore, ore_r), _wait(bp.geode_robot_obsidian, obs, obs_r))
        if t is not None and t < time:
            search(
                time - t, ore_r, clay_r, obs_r,
                ore + ore_r * t - bp.geode_robot_ore, clay + clay_r * t, obs + obs_r * t - bp.geode_robot_obsidian,
                geodes + time - t,
            )

        if obs_r < bp.geode_robot_obsidian:
            t = _build_time(_wait(bp.obsidian_robot_ore, ore, ore_r), _wait(bp.obsidian_robot_clay, clay, clay_r))
            if t is not None and t < time:
                search(
                    time - t, ore_r, clay_r, obs_r + 1,
                    ore + ore_r * t - bp.obsidian_robot_ore, clay + clay_r * t - bp.obsidian_robot_clay, obs + obs_r * t,
                    geodes,
                )

        if clay_r < bp.obsidian_robot_clay:
            t = _build_time(_wait(bp.clay_robot_ore, ore, ore_r))
            if t is not None and t < time:
                search(
                    time - t, ore_r, clay_r + 1, obs_r,
                    ore + ore_r * t - bp.clay_robot_ore, clay + clay_r * t, obs + obs_r * t,
                    geodes,
                )

        if ore_r < max_ore:
            t = _build_time(_wait(bp.ore_robot_ore, ore, ore_r))
            if t is not None and t < time:
                search(
                    time - t, ore_r + 1, clay_r, obs_r,
                    ore + ore_r * t - bp.ore_robot_ore, clay + clay_r * t, obs + obs_r * t,
                    geodes,
                )

    search(minutes, 1, 0, 0, 0, 0, 0, 0)
    return best


def solve_a(text: str) -> int:
    return sum(bp.number * max_geodes(bp, 24) for bp in parse_blueprints(text))


def solve_b(text: str) -> int:
    return prod(max_geodes(bp, 32) for bp in parse_blueprints(text)[:3])
