"""--- Day 4: Camp Cleanup ---"""
from __future__ import annotations

from typing import NamedTuple

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import non_empty_lines


class Assignment(NamedTuple):
    """An inclusive range of section IDs."""

    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> Assignment:
        start, sep, end = text.partition("-")
        if not sep:
            raise ValueError(f"Invalid assignment: {text}")
        try:
            return cls(int(start), int(end))
        except ValueError:
            raise ValueError(f"Invalid assignment: {text}") from None

    def contains(self, other: Assignment) -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: Assignment) -> bool:
        return self.start <= other.end and other.start <= self.end


def parse_pair(line: str) -> tuple[Assignment, Assignment]:
    first, sep, second = line.partition(",")
    if not sep:
        raise ValueError(f"Invalid assignment pair: {line}")
    return Assignment.parse(first), Assignment.parse(second)


def parse_pairs(puzzle_input: str) -> list[tuple[Assignment, Assignment]]:
    return (non_empty_lines(puzzle_input) / parse_pair).to_list()


def count_pairs_with_complete_overlap(pairs: list[tuple[Assignment, Assignment]]) -> int:
    return sum(1 for first, second in pairs if first.contains(second) or second.contains(first))


def count_pairs_with_overlap(pairs: list[tuple[Assignment, Assignment]]) -> int:
    return sum(1 for first, second in pairs if first.overlaps(second))


def part_1(puzzle_input: str) -> Answer:
    return Answer(
        "Number of pairs with complete overlap",
        count_pairs_with_complete_overlap(parse_pairs(puzzle_input)),
    )


def part_2(puzzle_input: str) -> Answer:
    return Answer("Number of pairs with overlap", count_pairs_with_overlap(parse_pairs(puzzle_input)))
