"""--- Day 7: No Space Left On Device ---

The input is a terminal session browsing a file system with `cd` and `ls`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator

from aoc2022.protocols.type_aliases import Answer
from aoc2022.sources import non_empty_lines

DEVICE_STORAGE = 70_000_000
UPDATE_SIZE = 30_000_000
SMALL_DIRECTORY_SIZE = 100_000

CD_COMMAND = re.compile(r"^\$ cd (.+)$")
LS_COMMAND = re.compile(r"^\$ ls$")
FILE = re.compile(r"^(\d+) (\S+)$")
DIRECTORY = re.compile(r"^dir (\S+)$")


@dataclass(eq=True)
class File:
    name: str
    size: int


@dataclass(eq=True)
class Directory:
    name: str
    items: list[File | Directory] = field(default_factory=list)

    @property
    def size(self) -> int:
        return sum(item.size for item in self.items)

    def subdirectory(self, name: str) -> Directory | None:
        for item in self.items:
            if isinstance(item, Directory) and item.name == name:
                return item
        return None

    def walk(self) -> Iterator[Directory]:
        """Every directory below this one, depth first."""
        to_visit = [self]
        while to_visit:
            directory = to_visit.pop()
            for item in directory.items:
                if isinstance(item, Directory):
                    yield item
                    to_visit.append(item)

    def find_directories(self, predicate: Callable[[Directory], bool]) -> list[Directory]:
        return [directory for directory in self.walk() if predicate(directory)]


def parse_file_system(lines: Iterable[str]) -> Directory:
    """Rebuild the directory tree explored by a terminal session.

    Raises:
        ValueError: On a line that is neither a command nor `ls` output.
    """
    root = Directory("/")
    path = [root]
    for line in lines:
        if match := CD_COMMAND.match(line):
            target = match.group(1)
            if target == "/":
                del path[1:]
            elif target == "..":
                if len(path) > 1:
                    path.pop()
            else:
                directory = path[-1].subdirectory(target)
                if directory is None:
                    directory = Directory(target)
                    path[-1].items.append(directory)
                path.append(directory)
        elif LS_COMMAND.match(line):
            continue
        elif match := FILE.match(line):
            path[-1].items.append(File(match.group(2), int(match.group(1))))
        elif match := DIRECTORY.match(line):
            if path[-1].subdirectory(match.group(1)) is None:
                path[-1].items.append(Directory(match.group(1)))
        else:
            raise ValueError(f"Unexpected terminal output: {line}")
    return root


def sum_of_small_directories(root: Directory, limit: int = SMALL_DIRECTORY_SIZE) -> int:
    return sum(directory.size for directory in root.find_directories(lambda d: d.size <= limit))


def smallest_directory_to_delete(root: Directory) -> int | None:
    """Size of the smallest directory whose deletion leaves room for the update."""
    to_free = root.size - (DEVICE_STORAGE - UPDATE_SIZE)
    sizes = [directory.size for directory in root.find_directories(lambda d: d.size >= to_free)]
    return min(sizes, default=None)


def part_1(puzzle_input: str) -> Answer:
    root = parse_file_system(non_empty_lines(puzzle_input))
    return Answer("Sum of the size of all directories under 100 000", sum_of_small_directories(root))


def part_2(puzzle_input: str) -> Answer:
    root = parse_file_system(non_empty_lines(puzzle_input))
    size = smallest_directory_to_delete(root)
    if size is None:
        raise ValueError("No directory is large enough to make room for the update")
    return Answer("Size of smallest directory to delete for update", size)
