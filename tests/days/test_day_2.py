from __future__ import annotations

from typing import Callable

import pytest

from aoc2022.days.day_2 import (
    Outcome,
    Shape,
    parse_rounds,
    parse_strategy,
    play_game,
    round_scores,
    shape_for_outcome,
)


@pytest.mark.parametrize(
    ("opponent", "me", "expected"),
    (
        (Shape.ROCK, Shape.PAPER, (1, 8)),
        (Shape.PAPER, Shape.ROCK, (8, 1)),
        (Shape.SCISSORS, Shape.SCISSORS, (6, 6)),
    ),
)
def test_round_scores(opponent: Shape, me: Shape, expected: tuple[int, int]) -> None:
    assert round_scores(opponent, me) == expected


@pytest.mark.parametrize("opponent", list(Shape))
@pytest.mark.parametrize("outcome", list(Outcome))
def test_shape_for_outcome(opponent: Shape, outcome: Outcome) -> None:
    me = shape_for_outcome(opponent, outcome)

    _, my_score = round_scores(opponent, me)
    assert my_score - me == outcome


def test_both_players_scores(puzzle_example: Callable[..., str]) -> None:
    assert play_game(parse_rounds(puzzle_example(2))) == (15, 15)
    assert play_game(parse_strategy(puzzle_example(2))) == (15, 12)


@pytest.mark.parametrize("line", ("A", "D Y", "A W"))
def test_invalid_round(line: str) -> None:
    with pytest.raises(ValueError):
        parse_rounds(line)
