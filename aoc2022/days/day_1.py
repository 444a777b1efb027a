"""--- Day 1: Calorie Counting ---

Each Elf's inventory is a block of calorie counts, one per line, blocks separated by blank lines.
"""
from __future__ import annotations

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import from_text
from aoc2022.stream import Stream
from aoc2022.stream_utils import partition_by_element, top_k


def elf_calories(puzzle_input: str) -> Stream[int]:
    """Total calories carried by each Elf, in input order."""
    return (
        from_text(puzzle_input)
        / partition_by_element("")
        / (lambda lines: sum(int(n) for n in lines))
    )


def max_calories(puzzle_input: str) -> int:
    return elf_calories(puzzle_input).reduce(max)


def top_three_calories(puzzle_input: str) -> int:
    calories = elf_calories(puzzle_input).transform(top_k(3)).last()
    return sum(calories)


def part_1(puzzle_input: str) -> Answer:
    return Answer("Maximum calories held by one Elf", max_calories(puzzle_input))


def part_2(puzzle_input: str) -> Answer:
    return Answer("Sum of top three calories held by Elves", top_three_calories(puzzle_input))
