"""--- Day 3: Rucksack Reorganization ---"""
from __future__ import annotations

import string
from dataclasses import dataclass

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import non_empty_lines
from aoc2022.stream_utils import chunked

PRIORITIES = {item: priority for priority, item in enumerate(string.ascii_letters, 1)}


def priority(item: str) -> int:
    """Lowercase items have priorities 1 through 26, uppercase ones 27 through 52."""
    try:
        return PRIORITIES[item]
    except KeyError:
        raise ValueError(f"Invalid item: {item!r}") from None


@dataclass(frozen=True)
class Rucksack:
    compartment_1: str
    compartment_2: str

    @classmethod
    def parse(cls, line: str) -> Rucksack:
        half = len(line) // 2
        return cls(line[:half], line[half:])

    @property
    def items(self) -> set[str]:
        return set(self.compartment_1) | set(self.compartment_2)

    def items_in_both_compartments(self) -> set[str]:
        return set(self.compartment_1) & set(self.compartment_2)


def parse_rucksacks(puzzle_input: str) -> list[Rucksack]:
    return (non_empty_lines(puzzle_input) / Rucksack.parse).to_list()


def find_badge(group: tuple[Rucksack, ...]) -> str | None:
    """The only item carried by every Elf of the group, if there is one."""
    first, *others = group
    common = first.items.intersection(*(rucksack.items for rucksack in others))
    return min(common) if common else None


def sum_priorities_of_items_in_both_compartments(rucksacks: list[Rucksack]) -> int:
    return sum(
        priority(item) for rucksack in rucksacks for item in rucksack.items_in_both_compartments()
    )


def sum_of_all_badges(rucksacks: list[Rucksack]) -> int:
    badges = rucksacks / chunked(3) / find_badge % (lambda badge: badge is not None)
    return sum(priority(badge) for badge in badges)


def part_1(puzzle_input: str) -> Answer:
    return Answer(
        "Sum of the priorities of item in both compartment of a rucksack",
        sum_priorities_of_items_in_both_compartments(parse_rucksacks(puzzle_input)),
    )


def part_2(puzzle_input: str) -> Answer:
    return Answer("Sum of all group badges", sum_of_all_badges(parse_rucksacks(puzzle_input)))
