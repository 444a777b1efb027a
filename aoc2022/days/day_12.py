"""--- Day 12: Hill Climbing Algorithm ---"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import non_empty_lines

Position = tuple[int, int]


@dataclass(frozen=True)
class HeightMap:
    start: Position
    end: Position
    heights: tuple[str, ...]

    @classmethod
    def parse(cls, puzzle_input: str) -> HeightMap:
        start = end = None
        rows = []
        for row, line in enumerate(non_empty_lines(puzzle_input)):
            if (column := line.find("S")) >= 0:
                start = (row, column)
            if (column := line.find("E")) >= 0:
                end = (row, column)
            rows.append(line.replace("S", "a").replace("E", "z"))
        if start is None or end is None:
            raise ValueError("The height map must contain a start (S) and an end (E)")
        return cls(start, end, tuple(rows))

    def height(self, position: Position) -> int:
        row, column = position
        return ord(self.heights[row][column])

    def neighbors(self, position: Position, forward: bool) -> Iterator[Position]:
        """Positions reachable in one step, climbing at most one level.

        Going backward, the constraint is reversed: the step can descend at most one level.
        """
        row, column = position
        for neighbor in ((row - 1, column), (row + 1, column), (row, column - 1), (row, column + 1)):
            n_row, n_column = neighbor
            if not (0 <= n_row < len(self.heights) and 0 <= n_column < len(self.heights[n_row])):
                continue
            climb = self.height(neighbor) - self.height(position)
            if (climb if forward else -climb) <= 1:
                yield neighbor

    def shortest_path(
        self,
        start: Position,
        end_condition: Callable[[Position], bool],
        forward: bool = True,
    ) -> int | None:
        """Number of steps from `start` to the closest position satisfying `end_condition`."""
        queue = deque([(start, 0)])
        visited = {start}
        while queue:
            position, steps = queue.popleft()
            if end_condition(position):
                return steps
            for neighbor in self.neighbors(position, forward):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append((neighbor, steps + 1))
        return None


def _require_path(steps: int | None) -> int:
    if steps is None:
        raise ValueError("No path leads to the destination")
    return steps


def part_1(puzzle_input: str) -> Answer:
    height_map = HeightMap.parse(puzzle_input)
    steps = height_map.shortest_path(height_map.start, lambda p: p == height_map.end)
    return Answer("Shortest path", _require_path(steps))


def part_2(puzzle_input: str) -> Answer:
    height_map = HeightMap.parse(puzzle_input)
    steps = height_map.shortest_path(
        height_map.end,
        lambda p: height_map.height(p) == ord("a"),
        forward=False,
    )
    return Answer("Shortest a to end", _require_path(steps))
