"""--- Day 5: Supply Stacks ---

The input starts with a drawing of the crate stacks, e.g.::

        [D]
    [N] [C]
    [Z] [M] [P]
     1   2   3

followed by a blank line and one move instruction per line.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import from_text

MOVE_INSTRUCTION = re.compile(r"^move (\d+) from (\d+) to (\d+)$")

# Crate letters sit at columns 1, 5, 9... of the drawing
CRATE_COLUMN_WIDTH = 4


@dataclass(frozen=True)
class MoveInstruction:
    number: int
    from_: int
    to: int

    @classmethod
    def parse(cls, line: str) -> MoveInstruction:
        if (match := MOVE_INSTRUCTION.match(line)) is None:
            raise ValueError(f"Invalid instruction: {line}")
        number, from_, to = map(int, match.groups())
        # Stacks are numbered from 1 in the input
        return cls(number, from_ - 1, to - 1)


Stacks = list[list[str]]


def parse_stacks(drawing: Iterable[str]) -> Stacks:
    """Parse the drawing of the stacks, bottom crate first in each stack.

    The line of stack numbers under the drawing is optional, and trailing spaces may be missing.
    """
    lines = [line.rstrip() for line in drawing if line.strip()]
    width = max((len(line) for line in lines), default=0)
    stacks: Stacks = [[] for _ in range((width + 2) // CRATE_COLUMN_WIDTH)]
    for row in reversed([line for line in lines if "[" in line]):
        for index, column in enumerate(range(1, len(row), CRATE_COLUMN_WIDTH)):
            if (crate := row[column]) != " ":
                stacks[index].append(crate)
    return stacks


def parse_puzzle(puzzle_input: str) -> tuple[Stacks, list[MoveInstruction]]:
    lines = from_text(puzzle_input, strip=False).to_list()
    # Skip blank lines before the drawing, then split on the first blank line after it
    start = next((i for i, line in enumerate(lines) if line.strip()), len(lines))
    separator = next((i for i in range(start, len(lines)) if not lines[i].strip()), None)
    if separator is None:
        raise ValueError("The drawing of the stacks is not followed by a blank line")

    stacks = parse_stacks(lines[start:separator])
    instructions = [
        MoveInstruction.parse(line.strip()) for line in lines[separator + 1 :] if line.strip()
    ]
    return stacks, instructions


def move_with_crate_mover_9000(stacks: Stacks, instruction: MoveInstruction) -> None:
    """Move crates one at a time, reversing their order."""
    for _ in range(instruction.number):
        if stacks[instruction.from_]:
            stacks[instruction.to].append(stacks[instruction.from_].pop())


def move_with_crate_mover_9001(stacks: Stacks, instruction: MoveInstruction) -> None:
    """Move crates all at once, keeping their order."""
    origin = stacks[instruction.from_]
    split = max(0, len(origin) - instruction.number)
    stacks[instruction.to].extend(origin[split:])
    del origin[split:]


def top_crates(stacks: Stacks) -> str:
    return "".join(stack[-1] if stack else " " for stack in stacks)


def _rearranged_top_crates(
    puzzle_input: str,
    mover: Callable[[Stacks, MoveInstruction], None],
) -> str:
    stacks, instructions = parse_puzzle(puzzle_input)
    for instruction in instructions:
        mover(stacks, instruction)
    return top_crates(stacks)


def part_1(puzzle_input: str) -> Answer:
    return Answer(
        "Top crates after all moves with CrateMover 9000",
        _rearranged_top_crates(puzzle_input, move_with_crate_mover_9000),
    )


def part_2(puzzle_input: str) -> Answer:
    return Answer(
        "Top crates after all moves with CrateMover 9001",
        _rearranged_top_crates(puzzle_input, move_with_crate_mover_9001),
    )
