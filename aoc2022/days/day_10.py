"""--- Day 10: Cathode-Ray Tube ---

A CPU with a single register X (starting at 1) runs `noop` (one cycle) and `addx V` (two cycles,
after which X is increased by V). A CRT draws one pixel per cycle on a 40x6 screen; the pixel is
lit when the 3-pixel-wide sprite centered on X covers it.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import non_empty_lines
from aoc2022.stream import Stream
from aoc2022.stream_utils import chunked, take

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6
INTERESTING_CYCLES = (20, 60, 100, 140, 180, 220)

LIT_PIXEL = "#"
DARK_PIXEL = "."


def parse_instruction(line: str) -> int | None:
    """`None` for `noop`, the operand for `addx`."""
    if line == "noop":
        return None
    operation, _, operand = line.partition(" ")
    if operation == "addx":
        try:
            return int(operand)
        except ValueError:
            pass
    raise ValueError(f"Invalid instruction: {line}")


def register_values(instructions: Iterable[int | None]) -> Iterator[int]:
    """Value of the X register *during* each cycle, starting with cycle 1."""
    x_register = 1
    for operand in instructions:
        yield x_register
        if operand is not None:
            yield x_register
            x_register += operand


def signal_strengths(instructions: Iterable[int | None]) -> Iterator[tuple[int, int]]:
    """(cycle, signal strength) for every cycle."""
    for cycle, x_register in enumerate(register_values(instructions), 1):
        yield cycle, cycle * x_register


def sum_six_signal_strengths(instructions: Iterable[int | None]) -> int:
    return sum(
        strength for cycle, strength in signal_strengths(instructions) if cycle in INTERESTING_CYCLES
    )


def draw_picture(instructions: Iterable[int | None]) -> str:
    pixels = (
        LIT_PIXEL if abs(position % SCREEN_WIDTH - x_register) <= 1 else DARK_PIXEL
        for position, x_register in enumerate(register_values(instructions))
    )
    rows = Stream(pixels) / chunked(SCREEN_WIDTH) / "".join / take(SCREEN_HEIGHT)
    return "\n".join(rows)


def _instructions(puzzle_input: str) -> Stream[int | None]:
    return non_empty_lines(puzzle_input) / parse_instruction


def part_1(puzzle_input: str) -> Answer:
    return Answer("Sum of the six signal strengths", sum_six_signal_strengths(_instructions(puzzle_input)))


def part_2(puzzle_input: str) -> Answer:
    return Answer("Picture drawn on CRT", "\n" + draw_picture(_instructions(puzzle_input)))
