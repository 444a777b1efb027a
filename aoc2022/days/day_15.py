"""--- Day 15: Beacon Exclusion Zone ---"""
from __future__ import annotations

import itertools
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import non_empty_lines

Coordinate = tuple[int, int]
Range = tuple[int, int]

SENSOR = re.compile(
    r"^Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)$"
)

ROW = 2_000_000
SEARCH_MAX = 4_000_000
TUNING_MULTIPLIER = 4_000_000


def distance(a: Coordinate, b: Coordinate) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass(frozen=True)
class Sensor:
    position: Coordinate
    beacon: Coordinate

    @classmethod
    def parse(cls, line: str) -> Sensor:
        if (match := SENSOR.match(line)) is None:
            raise ValueError(f"Invalid sensor: {line}")
        sx, sy, bx, by = map(int, match.groups())
        return cls((sx, sy), (bx, by))

    @property
    def radius(self) -> int:
        return distance(self.position, self.beacon)

    def covers(self, coordinate: Coordinate) -> bool:
        return distance(self.position, coordinate) <= self.radius

    def range_on_row(self, row: int) -> Range | None:
        """The inclusive range of x coordinates this sensor covers on `row`, if any."""
        reach = self.radius - abs(self.position[1] - row)
        if reach < 0:
            return None
        x = self.position[0]
        return x - reach, x + reach


def parse_sensors(puzzle_input: str) -> list[Sensor]:
    return (non_empty_lines(puzzle_input) / Sensor.parse).to_list()


def merge_ranges(ranges: Iterable[Range]) -> list[Range]:
    """Merge overlapping or adjacent inclusive ranges.

    Examples:
        >>> merge_ranges([(5, 8), (0, 2), (3, 4), (10, 12)])
        [(0, 8), (10, 12)]
    """
    merged: list[Range] = []
    for start, end in sorted(ranges):
        if merged and start <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def ranges_on_row(sensors: Iterable[Sensor], row: int) -> list[Range]:
    return merge_ranges(r for sensor in sensors if (r := sensor.range_on_row(row)) is not None)


def count_positions_without_beacon(sensors: Sequence[Sensor], row: int) -> int:
    ranges = ranges_on_row(sensors, row)
    covered = sum(end - start + 1 for start, end in ranges)
    beacons_on_row = {
        x for x, y in (sensor.beacon for sensor in sensors)
        if y == row and any(start <= x <= end for start, end in ranges)
    }
    return covered - len(beacons_on_row)


def _boundary_intersections(sensors: Sequence[Sensor], search_max: int) -> Iterator[Coordinate]:
    """Crossings of the lines running just outside each sensor's range.

    Those lines are `y = x + a` and `y = -x + b`; two of them cross on integer coordinates when `a`
    and `b` have the same parity. Each line also meets the four edges of the search area.
    """
    ascending: set[int] = set()
    descending: set[int] = set()
    for sensor in sensors:
        (x, y), r = sensor.position, sensor.radius + 1
        ascending |= {y - x + r, y - x - r}
        descending |= {y + x + r, y + x - r}
    for a, b in itertools.product(ascending, descending):
        if (b - a) % 2 == 0:
            yield (b - a) // 2, (a + b) // 2
    for a in ascending:
        yield from [(0, a), (search_max, search_max + a), (-a, 0), (search_max - a, search_max)]
    for b in descending:
        yield from [(0, b), (search_max, b - search_max), (b, 0), (b - search_max, search_max)]


def find_distress_beacon(sensors: Sequence[Sensor], search_max: int) -> Coordinate | None:
    """The only position within 0..`search_max` on both axes that no sensor covers.

    A lone uncovered position away from the edges is surrounded by range boundaries, and so sits
    on a crossing of the lines just outside them. On an edge it sits where one of those lines meets
    the edge, and in a corner it may touch no line at all.
    """
    corners = [(0, 0), (0, search_max), (search_max, 0), (search_max, search_max)]
    for x, y in itertools.chain(_boundary_intersections(sensors, search_max), corners):
        if (
            0 <= x <= search_max
            and 0 <= y <= search_max
            and not any(s.covers((x, y)) for s in sensors)
        ):
            return x, y
    return None


def tuning_frequency(beacon: Coordinate) -> int:
    x, y = beacon
    return x * TUNING_MULTIPLIER + y


def part_1(puzzle_input: str, row: int = ROW) -> Answer:
    return Answer(
        "Number of coordinates without a beacon on row 2 000 000",
        count_positions_without_beacon(parse_sensors(puzzle_input), row),
    )


def part_2(puzzle_input: str, search_max: int = SEARCH_MAX) -> Answer:
    beacon = find_distress_beacon(parse_sensors(puzzle_input), search_max)
    if beacon is None:
        raise ValueError(f"No position within 0..{search_max} escapes every sensor")
    return Answer("Tuning frequency of distress beacon", tuning_frequency(beacon))
