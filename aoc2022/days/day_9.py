"""--- Day 9: Rope Bridge ---"""
from __future__ import annotations

from typing import Iterable, NamedTuple

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import non_empty_lines

Position = tuple[int, int]

DIRECTIONS: dict[str, Position] = {"U": (0, 1), "D": (0, -1), "R": (1, 0), "L": (-1, 0)}


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class Instruction(NamedTuple):
    direction: Position
    steps: int

    @classmethod
    def parse(cls, line: str) -> Instruction:
        direction, _, steps = line.partition(" ")
        if direction not in DIRECTIONS or not steps.isdigit():
            raise ValueError(f"Invalid instruction: {line}")
        return cls(DIRECTIONS[direction], int(steps))


class Rope:
    """A rope of `size` knots, all starting on the same position."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("A rope needs at least one knot")
        self.knots: list[Position] = [(0, 0)] * size

    @property
    def tail(self) -> Position:
        return self.knots[-1]

    def move_head(self, direction: Position) -> None:
        x, y = self.knots[0]
        self.knots[0] = (x + direction[0], y + direction[1])
        for i in range(1, len(self.knots)):
            (px, py), (kx, ky) = self.knots[i - 1], self.knots[i]
            if abs(px - kx) <= 1 and abs(py - ky) <= 1:
                break
            self.knots[i] = (kx + _sign(px - kx), ky + _sign(py - ky))

    def execute_all(self, instructions: Iterable[Instruction]) -> set[Position]:
        """Follow the instructions, returning every position the tail visited."""
        tail_positions = {self.tail}
        for direction, steps in instructions:
            for _ in range(steps):
                self.move_head(direction)
                tail_positions.add(self.tail)
        return tail_positions


def count_tail_positions(puzzle_input: str, knots: int) -> int:
    instructions = non_empty_lines(puzzle_input) / Instruction.parse
    return len(Rope(knots).execute_all(instructions))


def part_1(puzzle_input: str) -> Answer:
    return Answer(
        "Number of different positions of the two knots rope tail",
        count_tail_positions(puzzle_input, 2),
    )


def part_2(puzzle_input: str) -> Answer:
    return Answer(
        "Number of different positions of the 10 knots rope tail",
        count_tail_positions(puzzle_input, 10),
    )
