"""Day 20: Grove Positioning System."""

from __future__ import annotations

from collections import deque

from aoc2022.models import InputFormatError

DAY = 20
TITLE = "Grove Positioning System"

DECRYPTION_KEY = 811_589_153
GROVE_OFFSETS = (1000, 2000, 3000)


def parse_numbers(text: str) -> list[int]:
    try:
        numbers = [int(line) for line in text.split()]
    except ValueError as e:
        raise InputFormatError(f"encrypted file must hold one integer per line: {e}") from e
    if numbers.count(0) != 1:
        raise InputFormatError("encrypted file must contain exactly one 0")
    return numbers


def mix(numbers: list[int], rounds: int = 1) -> list[int]:
    """Move each number forward or backward by its value, in original order."""
    # Tag each value with its original index so duplicates stay distinct
    order = list(enumerate(numbers))
    ring = deque(order)
    size = len(order) - 1
    for _ in range(rounds):
        for item in order:
            ring.rotate(-ring.index(item))
            ring.popleft()
            if size:
                ring.rotate(-(item[1] % size))
            ring.appendleft(item)
    return [value for _, value in ring]


def grove_sum(mixed: list[int]) -> int:
    zero = mixed.index(0)
    return sum(mixed[(zero + offset) % len(mixed)] for offset in GROVE_OFFSETS)


def solve_a(text: str) -> int:
    return grove_sum(mix(parse_numbers(text)))


def solve_b(text: str) -> int:
    numbers = [n * DECRYPTION_KEY for n in parse_numbers(text)]
    return grove_sum(mix(numbers, rounds=10))
