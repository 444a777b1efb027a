"""--- Day 8: Treetop Tree House ---"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import non_empty_lines

Position = tuple[int, int]

# (row, column) steps for north, east, south and west
DIRECTIONS: tuple[Position, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass(frozen=True)
class Trees:
    heights: tuple[tuple[int, ...], ...]

    @classmethod
    def parse(cls, puzzle_input: str) -> Trees:
        try:
            heights = tuple(non_empty_lines(puzzle_input) / (lambda row: tuple(map(int, row))))
        except ValueError as e:
            raise ValueError(f"Tree heights must be digits: {e}") from None
        if len({len(row) for row in heights}) > 1:
            raise ValueError("Rows of trees have different lengths")
        return cls(heights)

    @property
    def rows(self) -> int:
        return len(self.heights)

    @property
    def columns(self) -> int:
        return len(self.heights[0]) if self.heights else 0

    def line_of_sight(self, row: int, column: int, direction: Position) -> Iterator[int]:
        """Heights of the trees from (but excluding) a tree towards the edge of the grid."""
        d_row, d_column = direction
        row, column = row + d_row, column + d_column
        while 0 <= row < self.rows and 0 <= column < self.columns:
            yield self.heights[row][column]
            row, column = row + d_row, column + d_column

    def is_visible(self, row: int, column: int) -> bool:
        height = self.heights[row][column]
        return any(
            all(other < height for other in self.line_of_sight(row, column, direction))
            for direction in DIRECTIONS
        )

    def visible_trees(self) -> set[Position]:
        return {
            (row, column)
            for row in range(self.rows)
            for column in range(self.columns)
            if self.is_visible(row, column)
        }

    def viewing_distance(self, row: int, column: int, direction: Position) -> int:
        height = self.heights[row][column]
        distance = 0
        for other in self.line_of_sight(row, column, direction):
            distance += 1
            if other >= height:
                break
        return distance

    def scenic_score(self, row: int, column: int) -> int:
        return math.prod(self.viewing_distance(row, column, direction) for direction in DIRECTIONS)

    def highest_scenic_score(self) -> int:
        return max(
            (
                self.scenic_score(row, column)
                for row in range(self.rows)
                for column in range(self.columns)
            ),
            default=0,
        )


def part_1(puzzle_input: str) -> Answer:
    return Answer("Number of visible trees", len(Trees.parse(puzzle_input).visible_trees()))


def part_2(puzzle_input: str) -> Answer:
    return Answer("Highest scenic score", Trees.parse(puzzle_input).highest_scenic_score())
