"""--- Day 2: Rock Paper Scissors ---

The first column of the strategy guide is what the opponent plays: A for Rock, B for Paper and C
for Scissors. Part 1 reads the second column as our own shape (X, Y, Z for Rock, Paper,
Scissors); part 2 reads it as how the round must end (X lose, Y draw, Z win).

A round scores the value of our shape (1 for Rock, 2 for Paper, 3 for Scissors) plus the outcome
(0 for a loss, 3 for a draw, 6 for a win).
"""
from __future__ import annotations

import enum

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import non_empty_lines


class Shape(enum.IntEnum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @classmethod
    def parse(cls, code: str) -> Shape:
        try:
            return _SHAPE_CODES[code]
        except KeyError:
            raise ValueError(f"Unknown shape: {code}") from None

    @property
    def defeats(self) -> Shape:
        return _DEFEATS[self]

    @property
    def defeated_by(self) -> Shape:
        return _DEFEATED_BY[self]


class Outcome(enum.IntEnum):
    LOSS = 0
    DRAW = 3
    WIN = 6

    @classmethod
    def parse(cls, code: str) -> Outcome:
        try:
            return _OUTCOME_CODES[code]
        except KeyError:
            raise ValueError(f"Unknown outcome: {code}") from None


_SHAPE_CODES = {
    "A": Shape.ROCK,
    "B": Shape.PAPER,
    "C": Shape.SCISSORS,
    "X": Shape.ROCK,
    "Y": Shape.PAPER,
    "Z": Shape.SCISSORS,
}
_OUTCOME_CODES = {"X": Outcome.LOSS, "Y": Outcome.DRAW, "Z": Outcome.WIN}
_DEFEATS = {Shape.ROCK: Shape.SCISSORS, Shape.PAPER: Shape.ROCK, Shape.SCISSORS: Shape.PAPER}
_DEFEATED_BY = {loser: winner for winner, loser in _DEFEATS.items()}


def _split_round(line: str) -> tuple[str, str]:
    first, sep, second = line.partition(" ")
    if not sep:
        raise ValueError(f"The line does not contain two columns: {line}")
    return first, second.strip()


def round_scores(opponent: Shape, me: Shape) -> tuple[int, int]:
    """Scores of both players for one round, opponent first."""
    if opponent.defeats is me:
        return Outcome.WIN + opponent, Outcome.LOSS + me
    if me.defeats is opponent:
        return Outcome.LOSS + opponent, Outcome.WIN + me
    return Outcome.DRAW + opponent, Outcome.DRAW + me


def shape_for_outcome(opponent: Shape, outcome: Outcome) -> Shape:
    """The shape to play against `opponent` so that the round ends with `outcome` for us."""
    if outcome is Outcome.LOSS:
        return opponent.defeats
    if outcome is Outcome.WIN:
        return opponent.defeated_by
    return opponent


def parse_rounds(puzzle_input: str) -> list[tuple[Shape, Shape]]:
    return [
        (Shape.parse(first), Shape.parse(second))
        for first, second in non_empty_lines(puzzle_input) / _split_round
    ]


def parse_strategy(puzzle_input: str) -> list[tuple[Shape, Shape]]:
    rounds = []
    for first, second in non_empty_lines(puzzle_input) / _split_round:
        opponent = Shape.parse(first)
        rounds.append((opponent, shape_for_outcome(opponent, Outcome.parse(second))))
    return rounds


def play_game(rounds: list[tuple[Shape, Shape]]) -> tuple[int, int]:
    """Total scores of both players, opponent first."""
    opponent_total, my_total = 0, 0
    for opponent, me in rounds:
        opponent_score, my_score = round_scores(opponent, me)
        opponent_total += opponent_score
        my_total += my_score
    return opponent_total, my_total


def part_1(puzzle_input: str) -> Answer:
    _, score = play_game(parse_rounds(puzzle_input))
    return Answer("My score after playing all rounds", score)


def part_2(puzzle_input: str) -> Answer:
    _, score = play_game(parse_strategy(puzzle_input))
    return Answer("My score after playing all rounds according to the Elf's strategy", score)
