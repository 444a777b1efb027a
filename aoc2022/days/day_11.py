"""--- Day 11: Monkey in the Middle ---"""
from __future__ import annotations

import copy
import math
import operator
import re
from dataclasses import dataclass, field
from typing import Callable

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import from_text
from aoc2022.stream_utils import partition_by_element

MONKEY = re.compile(
    r"Monkey (?P<number>\d+):\s*"
    r"Starting items:(?P<items>[\d,\s]*?)\s*"
    r"Operation: new = old (?P<operator>[+*]) (?P<operand>\d+|old)\s*"
    r"Test: divisible by (?P<divisible_test>\d+)\s*"
    r"If true: throw to monkey (?P<on_true>\d+)\s*"
    r"If false: throw to monkey (?P<on_false>\d+)\s*$"
)

OPERATORS: dict[str, Callable[[int, int], int]] = {"+": operator.add, "*": operator.mul}


@dataclass(frozen=True)
class Operation:
    operator: str
    operand: int | None  # None stands for "old"

    def apply(self, worry_level: int) -> int:
        operand = worry_level if self.operand is None else self.operand
        return OPERATORS[self.operator](worry_level, operand)


@dataclass
class Monkey:
    number: int
    items: list[int]
    operation: Operation
    divisible_test: int
    on_true_monkey: int
    on_false_monkey: int
    inspections: int = field(default=0, compare=False)

    @classmethod
    def parse(cls, text: str) -> Monkey:
        if (match := MONKEY.match(text.strip())) is None:
            raise ValueError(f"Invalid monkey description: {text!r}")
        items = [int(item) for item in match["items"].replace(",", " ").split()]
        operand = None if match["operand"] == "old" else int(match["operand"])
        return cls(
            number=int(match["number"]),
            items=items,
            operation=Operation(match["operator"], operand),
            divisible_test=int(match["divisible_test"]),
            on_true_monkey=int(match["on_true"]),
            on_false_monkey=int(match["on_false"]),
        )

    def target(self, worry_level: int) -> int:
        if worry_level % self.divisible_test == 0:
            return self.on_true_monkey
        return self.on_false_monkey


def parse_monkeys(puzzle_input: str) -> list[Monkey]:
    monkeys = (from_text(puzzle_input) / partition_by_element("") / "\n".join / Monkey.parse).to_list()
    for index, monkey in enumerate(monkeys):
        if monkey.number != index:
            raise ValueError(f"Monkey {monkey.number} is listed in position {index}")
    return monkeys


def play_round(monkeys: list[Monkey], worry_level_reduction: bool) -> None:
    # Worry levels only matter modulo the tests' divisors, which keeps them small
    modulus = math.prod(monkey.divisible_test for monkey in monkeys)
    for monkey in monkeys:
        items, monkey.items = monkey.items, []
        monkey.inspections += len(items)
        for worry_level in items:
            new_worry_level = monkey.operation.apply(worry_level)
            if worry_level_reduction:
                new_worry_level //= 3
            else:
                new_worry_level %= modulus
            monkeys[monkey.target(new_worry_level)].items.append(new_worry_level)


def compute_monkey_business(monkeys: list[Monkey], rounds: int, worry_level_reduction: bool) -> int:
    """Product of the inspection counts of the two most active monkeys.

    The monkeys are copied, so the caller's list is left untouched.
    """
    monkeys = copy.deepcopy(monkeys)
    for _ in range(rounds):
        play_round(monkeys, worry_level_reduction)
    most_active = sorted((monkey.inspections for monkey in monkeys), reverse=True)[:2]
    return math.prod(most_active)


def part_1(puzzle_input: str) -> Answer:
    return Answer(
        "Level of monkey business after 20 rounds",
        compute_monkey_business(parse_monkeys(puzzle_input), 20, worry_level_reduction=True),
    )


def part_2(puzzle_input: str) -> Answer:
    return Answer(
        "Level of monkey business after 10 000 rounds",
        compute_monkey_business(parse_monkeys(puzzle_input), 10_000, worry_level_reduction=False),
    )
