"""Day 16: Proboscidea Volcanium.

Only valves with a positive flow rate are worth visiting, so the tunnel
network is collapsed into shortest-path distances between those valves and
the start.

Part A is a depth-first walk that drops any branch whose optimistic total
cannot beat the best found so far. Part B records, for every set of opened
valves, the best pressure released by opening exactly that set, then takes
the best sum over two disjoint sets: one for us, one for the elephant.
"""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass

from aoc2022.models import InputFormatError

DAY = 16
TITLE = "Proboscidea Volcanium"

START = "AA"

_VALVE_RE = re.compile(r"Valve (\w+) has flow rate=(\d+); tunnels? leads? to valves? ([\w, ]+)")


@dataclass
class Network:
    rates: dict[str, int]
    tunnels: dict[str, list[str]]

    def distances_from(self, origin: str) -> dict[str, int]:
        dist = {origin: 0}
        queue = deque([origin])
        while queue:
            valve = queue.popleft()
            for nxt in self.tunnels[valve]:
                if nxt not in dist:
                    dist[nxt] = dist[valve] + 1
                    queue.append(nxt)
        return dist


def parse_network(text: str) -> Network:
    rates: dict[str, int] = {}
    tunnels: dict[str, list[str]] = {}
    for n, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        m = _VALVE_RE.search(line)
        if not m:
            raise InputFormatError(f"line {n}: not a valve description: {line!r}")
        name, rate, targets = m.groups()
        rates[name] = int(rate)
        tunnels[name] = [t.strip() for t in targets.split(",")]
    if START not in rates:
        raise InputFormatError(f"no valve named {START}")
    for name, targets in tunnels.items():
        for t in targets:
            if t not in rates:
                raise InputFormatError(f"valve {name} leads to unknown valve {t}")
    return Network(rates=rates, tunnels=tunnels)


def _compress(network: Network) -> tuple[list[str], dict[str, dict[str, int]]]:
    """Valves with positive flow and shortest distances from them and the start."""
    useful = [v for v, rate in network.rates.items() if rate > 0]
    return useful, {v: network.distances_from(v) for v in [START, *useful]}


def _pressure_bound(rates_left: list[int], time_left: int, pressure: int) -> int:
    """Optimistic total if the closed valves, largest first, opened as early as possible."""
    # Every further valve costs at least a step and a minute to open
    bound = pressure
    for k, rate in enumerate(rates_left):
        remaining = time_left - 1 - 2 * k
        if remaining <= 0:
            break
        bound += rate * remaining
    return bound


def max_pressure(network: Network, minutes: int) -> int:
    """Most pressure one walker can release in `minutes`."""
    useful, dist = _compress(network)
    best = 0

    def visit(valve: str, time_left: int, closed: list[str], pressure: int) -> None:
        nonlocal best
        best = max(best, pressure)
        rates_left = sorted((network.rates[v] for v in closed), reverse=True)
        if _pressure_bound(rates_left, time_left, pressure) <= best:
            return
        for nxt in closed:
            if nxt not in dist[valve]:
                continue
            remaining = time_left - dist[valve][nxt] - 1
            if remaining <= 0:
                continue
            rest = [v for v in closed if v != nxt]
            visit(nxt, remaining, rest, pressure + remaining * network.rates[nxt])

    visit(START, minutes, useful, 0)
    return best


def best_by_valve_set(network: Network, minutes: int) -> dict[int, int]:
    """Best pressure for each bitmask of opened valves reachable in `minutes`."""
    useful, dist = _compress(network)
    bits = {v: 1 << i for i, v in enumerate(useful)}
    best: dict[int, int] = {}

    def visit(valve: str, time_left: int, opened: int, pressure: int) -> None:
        if pressure > best.get(opened, -1):
            best[opened] = pressure
        for nxt in useful:
            if opened & bits[nxt] or nxt not in dist[valve]:
                continue
            # Walk there, then one minute to open it
            remaining = time_left - dist[valve][nxt] - 1
            if remaining <= 0:
                continue
            visit(nxt, remaining, opened | bits[nxt], pressure + remaining * network.rates[nxt])

    visit(START, minutes, 0, 0)
    return best


def solve_a(text: str) -> int:
    return max_pressure(parse_network(text), 30)


def solve_b(text: str) -> int:
    ranked = sorted(best_by_valve_set(parse_network(text), 26).items(), key=lambda kv: kv[1], reverse=True)
    answer = 0
    for i, (mine, my_pressure) in enumerate(ranked):
        if my_pressure * 2 < answer:
            break
        for theirs, their_pressure in ranked[i:]:
            if my_pressure + their_pressure <= answer:
                break
            if not mine & theirs:
                answer = my_pressure + their_pressure
                break
    return answer
