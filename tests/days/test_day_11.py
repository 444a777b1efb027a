from __future__ import annotations

from typing import Callable

import pytest

from aoc2022.days.day_11 import (
    Monkey,
    Operation,
    compute_monkey_business,
    parse_monkeys,
    play_round,
)


@pytest.fixture
def monkeys(puzzle_example: Callable[..., str]) -> list[Monkey]:
    return parse_monkeys(puzzle_example(11))


def test_parse_monkeys(monkeys: list[Monkey]) -> None:
    assert len(monkeys) == 4
    assert monkeys[0] == Monkey(0, [79, 98], Operation("*", 19), 23, 2, 3)
    assert monkeys[2].operation == Operation("*", None)
    assert monkeys[3].items == [74]


def test_operation() -> None:
    assert Operation("+", 6).apply(79) == 85
    assert Operation("*", None).apply(7) == 49


def test_play_round_with_relief(monkeys: list[Monkey]) -> None:
    play_round(monkeys, worry_level_reduction=True)

    assert monkeys[0].items == [20, 23, 27, 26]
    assert monkeys[1].items == [2080, 25, 167, 207, 401, 1046]
    assert monkeys[2].items == []
    assert monkeys[3].items == []


def test_inspections_after_20_rounds(monkeys: list[Monkey]) -> None:
    for _ in range(20):
        play_round(monkeys, worry_level_reduction=True)

    assert [monkey.inspections for monkey in monkeys] == [101, 95, 7, 105]


def test_monkey_business_leaves_monkeys_untouched(monkeys: list[Monkey]) -> None:
    assert compute_monkey_business(monkeys, 20, worry_level_reduction=True) == 10605
    assert monkeys[0].items == [79, 98]
    assert monkeys[0].inspections == 0


def test_monkeys_out_of_order(puzzle_example: Callable[..., str]) -> None:
    with pytest.raises(ValueError):
        parse_monkeys(puzzle_example(11).replace("Monkey 1:", "Monkey 7:"))


def test_invalid_monkey() -> None:
    with pytest.raises(ValueError, match="Invalid monkey description"):
        parse_monkeys("Monkey 0:\n  Starting items: 1\n  Operation: new = old ** 2\n")
