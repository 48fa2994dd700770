"""Day 5: Supply Stacks.

The input is a drawing of crate stacks, a blank line, then move commands:

        [D]
    [N] [C]
    [Z] [M] [P]
     1   2   3

    move 1 from 2 to 1

Crate letters sit at column 1 + 4*i for stack i. Part A moves crates one at a
time (reversing their order), part B moves each batch as a block.
"""

from __future__ import annotations

import re

from aoc2022.models import InputFormatError

DAY = 5
TITLE = "Supply Stacks"

_MOVE_RE = re.compile(r"^move (\d+) from (\d+) to (\d+)$")


def parse(text: str) -> tuple[list[list[str]], list[tuple[int, int, int]]]:
    """Split input into stacks (bottom first) and (count, src, dest) moves, 0-based."""
    drawing, sep, commands = text.partition("\n\n")
    if not sep:
        raise InputFormatError("missing blank line between crate drawing and moves")

    lines = [line for line in drawing.splitlines() if line.strip()]
    if not lines:
        raise InputFormatError("crate drawing is empty")
    labels = lines[-1].split()
    stacks: list[list[str]] = [[] for _ in labels]
    for line in reversed(lines[:-1]):
        for i in range(len(stacks)):
            col = 1 + 4 * i
            if col < len(line) and line[col] != " ":
                stacks[i].append(line[col])

    moves = []
    for line in commands.splitlines():
        line = line.strip()
        if not line:
            continue
        m = _MOVE_RE.match(line)
        if not m:
            raise InputFormatError(f"bad move command: {line!r}")
        count, src, dest = (int(g) for g in m.groups())
        if not (1 <= src <= len(stacks) and 1 <= dest <= len(stacks)):
            raise InputFormatError(f"move references a missing stack: {line!r}")
        moves.append((count, src - 1, dest - 1))
    return stacks, moves


def _rearrange(text: str, keep_order: bool) -> str:
    stacks, moves = parse(text)
    for count, src, dest in moves:
        if count > len(stacks[src]):
            raise InputFormatError(f"cannot move {count} crates from stack {src + 1} holding {len(stacks[src])}")
        split = len(stacks[src]) - count
        batch = stacks[src][split:]
        del stacks[src][split:]
        stacks[dest].extend(batch if keep_order else reversed(batch))
    return "".join(stack[-1] for stack in stacks if stack)


def solve_a(text: str) -> str:
    return _rearrange(text, keep_order=False)


def solve_b(text: str) -> str:
    return _rearrange(text, keep_order=True)
