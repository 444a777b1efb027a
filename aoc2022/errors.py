from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Sequence

from aoc2022.protocols.type_aliases import Day, Part


class AdventError(Exception):
    """Base class for the errors a run can end with.

    Each subclass carries the process exit code the command line front-end uses for it.
    """

    exit_code: ClassVar[int] = 1


class InvalidDay(AdventError, ValueError):
    exit_code = 2

    def __init__(self, day: object) -> None:
        self.day = day
        super().__init__(f"Invalid day {day!r}: days go from 1 to 25")


class DuplicateDay(AdventError):
    exit_code = 70

    def __init__(self, day: Day) -> None:
        self.day = day
        super().__init__(f"A solution is already registered for day {day}")


class UnknownDay(AdventError, LookupError):
    exit_code = 3

    def __init__(self, day: Day) -> None:
        self.day = day
        super().__init__(f"No solution registered for day {day}")


class InputNotFound(AdventError):
    exit_code = 4

    def __init__(self, day: Day, tried: Sequence[Path | str] = ()) -> None:
        self.day = day
        self.tried = tuple(tried)
        message = f"No input found for day {day}"
        if self.tried:
            message += f" (tried {', '.join(str(path) for path in self.tried)})"
        super().__init__(message)


class SolverError(AdventError):
    exit_code = 5

    def __init__(self, day: Day, part: Part, cause: BaseException) -> None:
        self.day = day
        self.part = part
        self.cause = cause
        super().__init__(f"Day {day} part {part} failed: {type(cause).__name__}: {cause}")


__all__ = (
    "AdventError",
    "InvalidDay",
    "DuplicateDay",
    "UnknownDay",
    "InputNotFound",
    "SolverError",
)
