from __future__ import annotations

from typing import Callable

import pytest

from aoc2022.days.day_14 import Cave, parse_rock, parse_rocks


def test_parse_rock() -> None:
    assert parse_rock("498,4 -> 498,6 -> 496,6") == {(498, 4), (498, 5), (498, 6), (497, 6), (496, 6)}
    assert parse_rock("500,3") == {(500, 3)}


@pytest.mark.parametrize("line", ("498,4 -> 499,5", "498,4 -> 498", "x,4 -> 498,6"))
def test_invalid_rock(line: str) -> None:
    with pytest.raises(ValueError):
        parse_rock(line)


def test_first_units_of_sand(puzzle_example: Callable[..., str]) -> None:
    cave = Cave(parse_rocks(puzzle_example(14)))

    assert cave.drop_sand()
    assert (500, 8) in cave.occupied
    assert cave.drop_sand()
    assert (499, 8) in cave.occupied
    assert cave.resting_sand == 2


def test_sand_stops_once_source_is_blocked(puzzle_example: Callable[..., str]) -> None:
    cave = Cave(parse_rocks(puzzle_example(14)), floor=True)

    assert cave.fill() == 93
    assert (500, 0) in cave.occupied
    assert not cave.drop_sand()
    assert cave.resting_sand == 93


def test_floor_under_single_rocks() -> None:
    assert Cave({(0, 0)}, floor=True).fill() == 4
    # A triangle three units high, minus the rock
    assert Cave({(500, 1)}, floor=True).fill() == 8


def test_empty_scan() -> None:
    with pytest.raises(ValueError):
        parse_rocks("\n")
