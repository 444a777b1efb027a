"""--- Day 13: Distress Signal ---"""
from __future__ import annotations

import functools
import json
import math
from typing import Union

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import non_empty_lines
from aoc2022.stream_utils import chunked

Packet = Union[int, list["Packet"]]

DIVIDER_PACKETS: tuple[Packet, ...] = ([[2]], [[6]])


def parse_packet(line: str) -> Packet:
    """Packets are written with the same syntax as JSON lists of integers."""
    try:
        packet = json.loads(line)
    except json.JSONDecodeError:
        raise ValueError(f"Invalid packet data: {line}") from None
    if not _is_packet(packet):
        raise ValueError(f"Invalid packet data: {line}")
    return packet


def _is_packet(value: object) -> bool:
    if isinstance(value, list):
        return all(_is_packet(item) for item in value)
    return isinstance(value, int) and not isinstance(value, bool)


def compare(left: Packet, right: Packet) -> int:
    """Three-way comparison of packets: negative when `left` comes first, zero when equal."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for left_item, right_item in zip(left, right):
        if comparison := compare(left_item, right_item):
            return comparison
    return (len(left) > len(right)) - (len(left) < len(right))


def format_packet(packet: Packet) -> str:
    return json.dumps(packet, separators=(",", ":"))


def sort_packets(packets: list[Packet]) -> list[Packet]:
    return sorted(packets, key=functools.cmp_to_key(compare))


def sum_indices_of_correctly_ordered_pairs(packets: list[Packet]) -> int:
    pairs = packets / chunked(2, strict=True)
    return sum(index for index, (left, right) in enumerate(pairs, 1) if compare(left, right) <= 0)


def compute_decoder_key(packets: list[Packet]) -> int:
    ordered = sort_packets([*packets, *DIVIDER_PACKETS])
    return math.prod(
        index for index, packet in enumerate(ordered, 1) if any(packet == d for d in DIVIDER_PACKETS)
    )


def parse_packets(puzzle_input: str) -> list[Packet]:
    return (non_empty_lines(puzzle_input) / parse_packet).to_list()


def part_1(puzzle_input: str) -> Answer:
    return Answer(
        "Sum of indices of correctly ordered pairs",
        sum_indices_of_correctly_ordered_pairs(parse_packets(puzzle_input)),
    )


def part_2(puzzle_input: str) -> Answer:
    return Answer("Decoder key", compute_decoder_key(parse_packets(puzzle_input)))
