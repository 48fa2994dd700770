"""Day 7: No Space Left On Device.

Replays a terminal session of ``cd``/``ls`` commands to recover directory
sizes. A directory's size includes everything beneath it.
"""

from __future__ import annotations

from aoc2022.models import InputFormatError

DAY = 7
TITLE = "No Space Left On Device"

TOTAL_SPACE = 70_000_000
NEEDED_FREE_SPACE = 30_000_000
SMALL_DIR_LIMIT = 100_000


def directory_sizes(text: str) -> dict[tuple[str, ...], int]:
    """Total size of every directory seen, keyed by path components from root."""
    cwd: list[str] = []
    sizes: dict[tuple[str, ...], int] = {(): 0}

    for n, line in enumerate(text.splitlines(), 1):
        parts = line.split()
        if not parts:
            continue
        if parts[0] == "$":
            if len(parts) == 3 and parts[1] == "cd":
                target = parts[2]
                if target == "/":
                    cwd = []
                elif target == "..":
                    if not cwd:
                        raise InputFormatError(f"line {n}: 'cd ..' above the root directory")
                    cwd.pop()
                else:
                    cwd.append(target)
                    sizes.setdefault(tuple(cwd), 0)
            elif parts[1:] != ["ls"]:
                raise InputFormatError(f"line {n}: unknown command {line!r}")
        elif parts[0] == "dir" and len(parts) == 2:
            sizes.setdefault((*cwd, parts[1]), 0)
        elif len(parts) == 2 and parts[0].isdigit():
            size = int(parts[0])
            # Every ancestor, root included, grows by the file size
            for depth in range(len(cwd) + 1):
                sizes[tuple(cwd[:depth])] += size
        else:
            raise InputFormatError(f"line {n}: unrecognised listing {line!r}")
    return sizes


def solve_a(text: str) -> int:
    return sum(size for size in directory_sizes(text).values() if size <= SMALL_DIR_LIMIT)


def solve_b(text: str) -> int:
    sizes = directory_sizes(text)
    free_space = TOTAL_SPACE - sizes[()]
    to_free = NEEDED_FREE_SPACE - free_space
    if to_free <= 0:
        return 0
    return min(size for size in sizes.values() if size >= to_free)
