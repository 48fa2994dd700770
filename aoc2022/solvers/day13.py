"""Day 13: Distress Signal.

Packets are nested lists of integers, which happen to be valid JSON.
"""

from __future__ import annotations

import json
from functools import cmp_to_key

from aoc2022.models import InputFormatError

DAY = 13
TITLE = "Distress Signal"

DIVIDERS = ([[2]], [[6]])

Packet = list


def compare(left, right) -> int:
    """Negative if left is in the right order before right, positive if not, 0 if tied."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for l, r in zip(left, right):
        result = compare(l, r)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


def parse_packets(text: str) -> list[Packet]:
    packets = []
    for n, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        try:
            packet = json.loads(line)
        except json.JSONDecodeError as e:
            raise InputFormatError(f"line {n}: not a packet: {line!r}") from e
        if not isinstance(packet, list):
            raise InputFormatError(f"line {n}: packet must be a list, found {line!r}")
        packets.append(packet)
    return packets


def solve_a(text: str) -> int:
    packets = parse_packets(text)
    if len(packets) % 2:
        raise InputFormatError("packets must come in pairs")
    pairs = zip(packets[::2], packets[1::2])
    return sum(i for i, (left, right) in enumerate(pairs, 1) if compare(left, right) < 0)


def solve_b(text: str) -> int:
    packets = parse_packets(text) + [*DIVIDERS]
    packets.sort(key=cmp_to_key(compare))
    key = 1
    for divider in DIVIDERS:
        key *= packets.index(divider) + 1
    return key
