from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Callable

from loguru import logger

from aoc2022.errors import SolverError
from aoc2022.inputs import InputSource
from aoc2022.protocols.type_aliases import AnswerValue, Day, Part
from aoc2022.registry import SolverEntry, SolverRegistry
from aoc2022.utils import measure, milliseconds


@dataclass(frozen=True)
class SolverResult:
    day: Day
    part: Part
    label: str
    value: AnswerValue
    elapsed: timedelta

    def __str__(self) -> str:
        return f"{self.day}:{self.part} — {self.label}: {self.value}"


@dataclass(frozen=True)
class Report:
    """The outcome of a successful run: one result per part, and the time they took together."""

    day: Day
    results: tuple[SolverResult, ...]
    elapsed: timedelta

    @property
    def values(self) -> tuple[AnswerValue, ...]:
        return tuple(result.value for result in self.results)

    def lines(self) -> list[str]:
        return [*(str(result) for result in self.results), f"Done in {milliseconds(self.elapsed)}ms"]

    def __str__(self) -> str:
        return "\n".join(self.lines())


class Runner:
    """Resolves a day to its solvers, feeds them the day's input and times them.

    The runner itself never prints; a `Report` is only produced once every part has succeeded, so
    callers never have partial output to deal with.
    """

    def __init__(self, registry: SolverRegistry, loader: InputSource) -> None:
        self.registry = registry
        self.loader = loader

    def run(self, day: Day) -> Report:
        """Solve every registered part of `day`.

        Raises:
            UnknownDay: If no solver is registered for `day`.
            InputNotFound: If the loader has no input for `day`.
            SolverError: If a solver raised; later parts are not attempted.
        """
        entry = self.registry.lookup(day)
        puzzle_input = self.loader.load(day)

        timed = measure(self._solve_all, entry, puzzle_input)
        report = Report(day, timed.result, timed.elapsed)
        logger.debug(f"Day {day} done in {milliseconds(report.elapsed)}ms")
        return report

    def _solve_all(self, entry: SolverEntry, puzzle_input: str) -> tuple[SolverResult, ...]:
        part_1 = self._solve(entry.day, 1, entry.part_1, puzzle_input)
        if entry.part_2 is None:
            return (part_1,)

        if entry.part_2_uses_part_1:
            part_2 = self._solve(entry.day, 2, entry.part_2, puzzle_input, part_1.value)
        else:
            part_2 = self._solve(entry.day, 2, entry.part_2, puzzle_input)
        return part_1, part_2

    @staticmethod
    def _solve(
        day: Day,
        part: Part,
        solver: Callable[..., tuple[str, AnswerValue]],
        *args: object,
    ) -> SolverResult:
        try:
            timed = measure(solver, *args)
            label, value = timed.result
        except Exception as e:
            logger.debug(f"Day {day} part {part} raised {e!r}")
            raise SolverError(day, part, e) from e

        logger.debug(f"Day {day} part {part} solved in {milliseconds(timed.elapsed)}ms")
        return SolverResult(day, part, label, value, timed.elapsed)


__all__ = ("Report", "Runner", "SolverResult")
