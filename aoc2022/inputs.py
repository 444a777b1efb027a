from __future__ import annotations

from pathlib import Path
from typing import Mapping, Protocol, Sequence, runtime_checkable

from loguru import logger

from aoc2022.errors import InputNotFound
from aoc2022.protocols.type_aliases import Day

DEFAULT_INPUT_DIR = Path("inputs")

# Tried in order; the first existing file wins
FILE_NAME_PATTERNS: tuple[str, ...] = ("day_{day}_input", "day_{day}.txt", "day{day:02}.txt")


@runtime_checkable
class InputSource(Protocol):
    def load(self, day: Day) -> str:
        ...


class InputLoader:
    """Reads puzzle inputs from files in a directory.

    The file for a day is looked up with each of `patterns` in turn, e.g. `inputs/day_1_input`,
    `inputs/day_1.txt`, then `inputs/day01.txt` for day 1.
    """

    def __init__(
        self,
        directory: Path | str = DEFAULT_INPUT_DIR,
        patterns: Sequence[str] = FILE_NAME_PATTERNS,
    ) -> None:
        self.directory = Path(directory)
        self.patterns = tuple(patterns)

    def candidates(self, day: Day) -> list[Path]:
        return [self.directory / pattern.format(day=day) for pattern in self.patterns]

    def path_for(self, day: Day) -> Path | None:
        for path in self.candidates(day):
            if path.is_file():
                return path
        return None

    def load(self, day: Day) -> str:
        """Read the input of `day`.

        Raises:
            InputNotFound: If none of the candidate files exists.
        """
        path = self.path_for(day)
        if path is None:
            raise InputNotFound(day, self.candidates(day))

        logger.debug(f"Reading input for day {day} from {path}")
        return path.read_text(encoding="utf-8")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.directory)!r})"


class StaticInputLoader:
    """Serves puzzle inputs embedded in memory, keyed by day."""

    def __init__(self, inputs: Mapping[Day, str]) -> None:
        self._inputs = dict(inputs)

    def load(self, day: Day) -> str:
        try:
            return self._inputs[day]
        except KeyError:
            raise InputNotFound(day) from None


__all__ = (
    "DEFAULT_INPUT_DIR",
    "FILE_NAME_PATTERNS",
    "InputSource",
    "InputLoader",
    "StaticInputLoader",
)
