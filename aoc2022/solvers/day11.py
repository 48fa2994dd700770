"""Day 11: Monkey in the Middle.

Part B drops the divide-by-three relief, so worry levels are kept modulo the
product of every monkey's test divisor. Divisibility checks are unchanged
by that reduction.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from math import prod

from aoc2022.models import InputFormatError

DAY = 11
TITLE = "Monkey in the Middle"

_MONKEY_RE = re.compile(
    r"Monkey (\d+):\s*"
    r"Starting items:([\d,\s]*?)\s*"
    r"Operation: new = old ([*+]) (old|\d+)\s*"
    r"Test: divisible by (\d+)\s*"
    r"If true: throw to monkey (\d+)\s*"
    r"If false: throw to monkey (\d+)"
)


@dataclass
class Monkey:
    items: list[int]
    operator: str
    operand: str
    divisor: int
    if_true: int
    if_false: int
    inspected: int = field(default=0)

    def inspect(self, worry: int) -> int:
        value = worry if self.operand == "old" else int(self.operand)
        return worry * value if self.operator == "*" else worry + value

    def target(self, worry: int) -> int:
        return self.if_true if worry % self.divisor == 0 else self.if_false


def parse_monkeys(text: str) -> list[Monkey]:
    monkeys = []
    for m in _MONKEY_RE.finditer(text):
        number, items, operator, operand, divisor, if_true, if_false = m.groups()
        if int(number) != len(monkeys):
            raise InputFormatError(f"expected monkey {len(monkeys)}, found monkey {number}")
        monkeys.append(Monkey(
            items=[int(i) for i in re.findall(r"\d+", items)],
            operator=operator,
            operand=operand,
            divisor=int(divisor),
            if_true=int(if_true),
            if_false=int(if_false),
        ))
    if not monkeys:
        raise InputFormatError("no monkey descriptions found")
    for i, monkey in enumerate(monkeys):
        for t in (monkey.if_true, monkey.if_false):
            if t >= len(monkeys) or t == i:
                raise InputFormatError(f"monkey {i} cannot throw to monkey {t}")
    return monkeys


def monkey_business(text: str, rounds: int, relief: bool) -> int:
    monkeys = parse_monkeys(text)
    modulus = prod(m.divisor for m in monkeys)

    for _ in range(rounds):
        for monkey in monkeys:
            for worry in monkey.items:
                worry = monkey.inspect(worry)
                worry = worry // 3 if relief else worry % modulus
                monkeys[monkey.target(worry)].items.append(worry)
            monkey.inspected += len(monkey.items)
            monkey.items = []

    top = sorted((m.inspected for m in monkeys), reverse=True)
    return top[0] * top[1] if len(top) > 1 else top[0]


def solve_a(text: str) -> int:
    return monkey_business(text, 20, relief=True)


def solve_b(text: str) -> int:
    return monkey_business(text, 10_000, relief=False)
