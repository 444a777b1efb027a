"""--- Day 6: Tuning Trouble ---"""
from __future__ import annotations

from aoc2022.protocols.type_aliases import Answer
from aoc2022.stream import Stream
from aoc2022.stream_utils import nwise

START_OF_PACKET_MARKER_SIZE = 4
START_OF_MESSAGE_MARKER_SIZE = 14


def find_marker_position(signal: str, marker_size: int) -> int | None:
    """Number of characters read once the first `marker_size` all-different characters are in.

    Examples:
        >>> find_marker_position("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 4)
        7
        >>> find_marker_position("aaaa", 2) is None
        True
    """
    windows = Stream(signal.strip()).transform(nwise(marker_size))
    for read, window in enumerate(windows, marker_size):
        if len(set(window)) == marker_size:
            return read
    return None


def find_start_of_packet_marker_position(signal: str) -> int | None:
    return find_marker_position(signal, START_OF_PACKET_MARKER_SIZE)


def find_start_of_message_marker_position(signal: str) -> int | None:
    return find_marker_position(signal, START_OF_MESSAGE_MARKER_SIZE)


def _require_marker(position: int | None, kind: str) -> int:
    if position is None:
        raise ValueError(f"The signal contains no {kind} marker")
    return position


def part_1(puzzle_input: str) -> Answer:
    return Answer(
        "Number of read characters to get start-of-packet marker",
        _require_marker(find_start_of_packet_marker_position(puzzle_input), "start-of-packet"),
    )


def part_2(puzzle_input: str) -> Answer:
    return Answer(
        "Number of read characters to get start-of-message marker",
        _require_marker(find_start_of_message_marker_position(puzzle_input), "start-of-message"),
    )
