"""--- Day 14: Regolith Reservoir ---"""
from __future__ import annotations

import re
from typing import Iterable, Iterator

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import non_empty_lines
from aoc2022.stream_utils import nwise

Coordinate = tuple[int, int]

SAND_SOURCE: Coordinate = (500, 0)

COORDINATE = re.compile(r"^(\d+),(\d+)$")

# Down, then down-left, then down-right
FALL_DIRECTIONS = (0, -1, 1)


def parse_coordinate(text: str) -> Coordinate:
    if (match := COORDINATE.match(text.strip())) is None:
        raise ValueError(f"Invalid coordinate: {text}")
    x, y = map(int, match.groups())
    return x, y


def _line_between(start: Coordinate, end: Coordinate) -> Iterator[Coordinate]:
    (x1, y1), (x2, y2) = start, end
    if x1 != x2 and y1 != y2:
        raise ValueError(f"Rock lines must be horizontal or vertical: {start} -> {end}")
    for x in range(min(x1, x2), max(x1, x2) + 1):
        for y in range(min(y1, y2), max(y1, y2) + 1):
            yield x, y


def parse_rock(line: str) -> set[Coordinate]:
    """All the coordinates covered by a rock path like `498,4 -> 498,6 -> 496,6`."""
    corners = [parse_coordinate(part) for part in line.split("->")]
    if len(corners) == 1:
        return set(corners)
    return {
        coordinate
        for start, end in corners / nwise(2)
        for coordinate in _line_between(start, end)
    }


def parse_rocks(puzzle_input: str) -> set[Coordinate]:
    rocks: set[Coordinate] = set()
    for rock in non_empty_lines(puzzle_input) / parse_rock:
        rocks |= rock
    if not rocks:
        raise ValueError("The scan doesn't contain any rock")
    return rocks


class Cave:
    """Sand falling from (500, 0) into a cave of rocks.

    Without a floor, sand falling below the lowest rock flows into the abyss forever. With a floor,
    the floor lies two units under the lowest rock and is infinitely wide.
    """

    def __init__(self, rocks: Iterable[Coordinate], floor: bool = False) -> None:
        self.occupied = set(rocks)
        self.lowest_rock = max(y for _, y in self.occupied)
        self.floor = self.lowest_rock + 2 if floor else None
        self.resting_sand = 0
        # Positions of the last falling unit; the next one follows the same path
        self._path: list[Coordinate] = [SAND_SOURCE]

    def _is_blocked(self, coordinate: Coordinate) -> bool:
        return coordinate in self.occupied or coordinate[1] == self.floor

    def _next_position(self, position: Coordinate) -> Coordinate | None:
        x, y = position
        for dx in FALL_DIRECTIONS:
            candidate = (x + dx, y + 1)
            if not self._is_blocked(candidate):
                return candidate
        return None

    def drop_sand(self) -> bool:
        """Drop one unit of sand, returning whether it came to rest."""
        if not self._path:
            return False
        while True:
            position = self._path[-1]
            if self.floor is None and position[1] > self.lowest_rock:
                return False
            next_position = self._next_position(position)
            if next_position is None:
                break
            self._path.append(next_position)

        self.occupied.add(self._path.pop())
        self.resting_sand += 1
        return True

    def fill(self) -> int:
        """Drop sand until it flows into the abyss or blocks the source; return the resting units."""
        while self.drop_sand():
            pass
        return self.resting_sand


def part_1(puzzle_input: str) -> Answer:
    return Answer(
        "Number of resting sand units in cave with abyss",
        Cave(parse_rocks(puzzle_input)).fill(),
    )


def part_2(puzzle_input: str) -> Answer:
    return Answer(
        "Number of resting sand units in cave with floor",
        Cave(parse_rocks(puzzle_input), floor=True).fill(),
    )
