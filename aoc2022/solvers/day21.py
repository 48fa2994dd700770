"""Day 21: Monkey Math.

Every monkey either yells a number or combines two other monkeys' numbers.
For part B, ``root`` compares its operands and ``humn`` is us: the unknown is
found by walking from root down the branch that depends on humn, inverting
each operation along the way.
"""

from __future__ import annotations

import operator
import re
from fractions import Fraction
from typing import Union

from aoc2022.models import InputFormatError

DAY = 21
TITLE = "Monkey Math"

ROOT = "root"
HUMAN = "humn"

_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}
_JOB_RE = re.compile(r"^(\w+):\s*(?:(-?\d+)|(\w+)\s*([-+*/])\s*(\w+))$")

Job = Union[int, tuple[str, str, str]]


def parse_jobs(text: str) -> dict[str, Job]:
    jobs: dict[str, Job] = {}
    for n, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        m = _JOB_RE.match(line)
        if not m:
            raise InputFormatError(f"line {n}: not a monkey job: {line!r}")
        name, number, left, op, right = m.groups()
        jobs[name] = int(number) if number is not None else (left, op, right)
    for name, job in jobs.items():
        if isinstance(job, tuple):
            for dep in (job[0], job[2]):
                if dep not in jobs:
                    raise InputFormatError(f"monkey {name} waits on unknown monkey {dep}")
    if ROOT not in jobs:
        raise InputFormatError(f"no monkey named {ROOT}")
    return jobs


def evaluate(jobs: dict[str, Job], name: str) -> Fraction:
    job = jobs[name]
    if isinstance(job, int):
        return Fraction(job)
    left, op, right = job
    return _OPS[op](evaluate(jobs, left), evaluate(jobs, right))


def _depends_on_human(jobs: dict[str, Job], name: str) -> bool:
    if name == HUMAN:
        return True
    job = jobs[name]
    if isinstance(job, int):
        return False
    return _depends_on_human(jobs, job[0]) or _depends_on_human(jobs, job[2])


def _solve_for_human(jobs: dict[str, Job], name: str, target: Fraction) -> Fraction:
    """Value humn must yell so that monkey `name` yells `target`."""
    while name != HUMAN:
        left, op, right = jobs[name]
        if _depends_on_human(jobs, left):
            known = evaluate(jobs, right)
            if op == "+":
                target -= known
            elif op == "-":
                target += known
            elif op == "*":
                target /= known
            else:
                target *= known
            name = left
        else:
            known = evaluate(jobs, left)
            if op == "+":
                target -= known
            elif op == "-":
                target = known - target
            elif op == "*":
                target /= known
            else:
                target = known / target
            name = right
    return target


def _as_int(value: Fraction) -> int:
    if value.denominator != 1:
        raise InputFormatError(f"result {value} is not a whole number")
    return int(value)


def solve_a(text: str) -> int:
    return _as_int(evaluate(parse_jobs(text), ROOT))


def solve_b(text: str) -> int:
    jobs = parse_jobs(text)
    if HUMAN not in jobs or isinstance(jobs[ROOT], int):
        raise InputFormatError(f"need a {HUMAN} monkey and an operation at {ROOT}")
    left, _, right = jobs[ROOT]
    if _depends_on_human(jobs, left):
        return _as_int(_solve_for_human(jobs, left, evaluate(jobs, right)))
    return _as_int(_solve_for_human(jobs, right, evaluate(jobs, left)))
