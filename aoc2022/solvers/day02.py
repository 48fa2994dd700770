"""Day 2: Rock Paper Scissors.

Each line is an opponent shape (A/B/C) and a second column (X/Y/Z). Part A
reads the column as our shape, part B as the outcome we need. A round scores
the shape value (1-3) plus 0/3/6 for loss/draw/win.
"""

from __future__ import annotations

from aoc2022.models import InputFormatError

DAY = 2
TITLE = "Rock Paper Scissors"

_OPPONENT = {"A": 0, "B": 1, "C": 2}
_SECOND = {"X": 0, "Y": 1, "Z": 2}


def _rounds(text: str) -> list[tuple[int, int]]:
    rounds = []
    for n, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2 or parts[0] not in _OPPONENT or parts[1] not in _SECOND:
            raise InputFormatError(f"line {n}: expected '<A|B|C> <X|Y|Z>', found {line!r}")
        rounds.append((_OPPONENT[parts[0]], _SECOND[parts[1]]))
    return rounds


def _score(opponent: int, me: int) -> int:
    # (me - opponent) % 3: 0 draw, 1 win, 2 loss
    outcome = (me - opponent + 1) % 3
    return me + 1 + outcome * 3


def solve_a(text: str) -> int:
    return sum(_score(opp, me) for opp, me in _rounds(text))


def solve_b(text: str) -> int:
    # X lose, Y draw, Z win
    return sum(_score(opp, (opp + outcome - 1) % 3) for opp, outcome in _rounds(text))
